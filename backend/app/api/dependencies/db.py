"""Database session and record store dependencies."""

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.product_store import ProductStore


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a managed SQLAlchemy session."""
    yield from get_db()


def get_product_store(db: Session = Depends(get_session)) -> ProductStore:
    return ProductStore(db)
