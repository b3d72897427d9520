"""SQLAlchemy model for bakery product records."""

from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String, Text, func
from sqlalchemy.types import DateTime

from app.db.base import Base


class Produto(Base):
    __tablename__ = "produtos"

    id = Column(Integer, primary_key=True)
    nome = Column(String(255), nullable=False, index=True)
    descricao = Column(Text)
    preco = Column(Numeric(10, 2), nullable=False, default=0)
    quantidade = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("preco >= 0", name="ck_produtos_preco_nonnegative"),
        CheckConstraint("quantidade >= 0", name="ck_produtos_quantidade_nonnegative"),
    )
