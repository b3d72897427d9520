"""Record store for bakery products backed by a SQLAlchemy session."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.schemas.product import ProdutoResumo
from app.core.errors import StoreError
from app.db.models.product import Produto

logger = logging.getLogger(__name__)


class ProductStore:
    """Query-by-id and delete-by-id over the ``produtos`` table.

    ``delete_by_id`` reports no affected-row count; callers look the record
    up first to know whether it exists.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, product_id: int) -> ProdutoResumo | None:
        """Return id and name of the matching product, or None when absent."""
        try:
            row = self._db.execute(
                select(Produto.id, Produto.nome).where(Produto.id == product_id)
            ).first()
        except SQLAlchemyError as e:
            logger.error(
                f"Database error looking up product {product_id}: {e}", exc_info=True
            )
            raise StoreError() from e

        if row is None:
            return None
        return ProdutoResumo(id=row.id, nome=row.nome)

    def delete_by_id(self, product_id: int) -> None:
        """Issue a delete for ``product_id`` and commit."""
        try:
            self._db.execute(delete(Produto).where(Produto.id == product_id))
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(
                f"Database error deleting product {product_id}: {e}", exc_info=True
            )
            raise StoreError() from e
