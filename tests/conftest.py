"""Shared fixtures: in-memory SQLite database and a TestClient for the API."""

import os

# Must be set before the app (and its cached settings/engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from app.db.base import Base
from app.db.models import Produto
from app.db.session import SessionLocal, engine
from app.main import app


@pytest.fixture(autouse=True)
def database():
    """Create the schema for each test and drop it afterwards."""
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_produto(db_session):
    """Insert a product row directly through the ORM."""

    def _make(nome: str, id: int | None = None, **fields) -> Produto:
        produto = Produto(id=id, nome=nome, **fields)
        db_session.add(produto)
        db_session.commit()
        db_session.refresh(produto)
        return produto

    return _make
