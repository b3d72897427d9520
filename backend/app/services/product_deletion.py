"""Check-then-delete flow for a single product."""

from __future__ import annotations

import logging

from app.api.schemas.product import ProdutoResumo
from app.core.errors import ProductNotFound
from app.services.product_store import ProductStore
from app.utils.identifiers import parse_product_id

logger = logging.getLogger(__name__)


def delete_product(store: ProductStore, raw_id: object) -> ProdutoResumo:
    """Validate ``raw_id``, confirm the product exists, then delete it.

    Raises:
        InvalidIdentifier: ``raw_id`` is not a positive integer; the store is
            never contacted.
        ProductNotFound: no product has that id; no delete is issued.
        StoreError: the lookup or the delete failed.

    Returns:
        The id and name of the removed product.
    """
    product_id = parse_product_id(raw_id)

    # The store's delete reports no affected rows, so existence is checked first
    produto = store.find_by_id(product_id)
    if produto is None:
        logger.info(f"Delete requested for missing product {product_id}")
        raise ProductNotFound()

    store.delete_by_id(product_id)

    logger.info(f"Deleted product {produto.id} ({produto.nome})")
    return produto
