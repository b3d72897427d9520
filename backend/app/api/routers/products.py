"""CRUD endpoints for the bakery product inventory."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.dependencies.db import get_product_store, get_session
from app.api.schemas.product import (
    ErrorResponse,
    ProdutoCreate,
    ProdutoDeleteResponse,
    ProdutoListResponse,
    ProdutoRead,
    ProdutoUpdate,
)
from app.core.errors import ProductError, ProductNotFound, StoreError, ValidationError
from app.db.models.product import Produto
from app.services.product_deletion import delete_product as delete_product_flow
from app.services.product_store import ProductStore
from app.utils.identifiers import parse_product_id

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _error_response(exc: ProductError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def _unexpected_error() -> JSONResponse:
    return _error_response(ProductError())


@router.get(
    "/",
    summary="List products with optional name filter and pagination",
    response_model=ProdutoListResponse,
)
async def list_products(
    nome: str | None = Query(None, description="Filter by name (partial match)"),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(50, ge=1, le=500, description="Items per page"),
    db: Session = Depends(get_session),
):
    """Return paginated product rows for the inventory list."""
    try:
        query = select(Produto)
        count_query = select(func.count(Produto.id))
        if nome:
            query = query.where(Produto.nome.ilike(f"%{nome}%"))
            count_query = count_query.where(Produto.nome.ilike(f"%{nome}%"))

        total = db.scalar(count_query) or 0

        offset = (page - 1) * page_size
        query = query.order_by(Produto.nome, Produto.id).offset(offset).limit(page_size)
        produtos = db.scalars(query).all()

        return ProdutoListResponse(
            items=[ProdutoRead.model_validate(p) for p in produtos],
            total=total,
            page=page,
            page_size=page_size,
        )
    except SQLAlchemyError as e:
        logger.error(f"Database error listing products: {e}", exc_info=True)
        return _error_response(StoreError())
    except Exception as e:
        logger.error(f"Unexpected error listing products: {e}", exc_info=True)
        return _unexpected_error()


@router.get(
    "/{produto_id}",
    summary="Fetch a single product",
    response_model=ProdutoRead,
    responses=ERROR_RESPONSES,
)
async def get_product(
    produto_id: str,
    db: Session = Depends(get_session),
):
    try:
        product_id = parse_product_id(produto_id)
        produto = db.get(Produto, product_id)
        if produto is None:
            raise ProductNotFound()
        return ProdutoRead.model_validate(produto)
    except ProductError as e:
        return _error_response(e)
    except SQLAlchemyError as e:
        logger.error(f"Database error reading product {produto_id}: {e}", exc_info=True)
        return _error_response(StoreError())
    except Exception as e:
        logger.error(
            f"Unexpected error reading product {produto_id}: {e}", exc_info=True
        )
        return _unexpected_error()


@router.post(
    "/",
    summary="Create a product manually",
    status_code=status.HTTP_201_CREATED,
    response_model=ProdutoRead,
    responses=ERROR_RESPONSES,
)
async def create_product(
    payload: ProdutoCreate,
    db: Session = Depends(get_session),
):
    """Persist a product record from UI form submissions."""
    try:
        if not payload.nome or not payload.nome.strip():
            raise ValidationError("Nome do produto é obrigatório")

        produto = Produto(
            nome=payload.nome.strip(),
            descricao=payload.descricao.strip() if payload.descricao else None,
            preco=payload.preco,
            quantidade=payload.quantidade,
        )
        db.add(produto)
        db.commit()
        db.refresh(produto)

        logger.info(f"Created product {produto.id} ({produto.nome})")
        return ProdutoRead.model_validate(produto)

    except ProductError as e:
        return _error_response(e)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error creating product: {e}", exc_info=True)
        return _error_response(StoreError())
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error creating product: {e}", exc_info=True)
        return _unexpected_error()


@router.put(
    "/{produto_id}",
    summary="Update existing product",
    response_model=ProdutoRead,
    responses=ERROR_RESPONSES,
)
async def update_product(
    produto_id: str,
    payload: ProdutoUpdate,
    db: Session = Depends(get_session),
):
    """Apply a partial update; only provided fields change."""
    try:
        product_id = parse_product_id(produto_id)
        produto = db.get(Produto, product_id)
        if produto is None:
            raise ProductNotFound()

        if payload.nome is not None:
            if not payload.nome.strip():
                raise ValidationError("Nome do produto não pode ser vazio")
            produto.nome = payload.nome.strip()

        if payload.descricao is not None:
            produto.descricao = payload.descricao.strip() or None

        if payload.preco is not None:
            produto.preco = payload.preco

        if payload.quantidade is not None:
            produto.quantidade = payload.quantidade

        db.commit()
        db.refresh(produto)

        logger.info(f"Updated product {product_id}")
        return ProdutoRead.model_validate(produto)

    except ProductError as e:
        return _error_response(e)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(
            f"Database error updating product {produto_id}: {e}", exc_info=True
        )
        return _error_response(StoreError())
    except Exception as e:
        db.rollback()
        logger.error(
            f"Unexpected error updating product {produto_id}: {e}", exc_info=True
        )
        return _unexpected_error()


@router.delete(
    "/{produto_id}",
    summary="Delete product",
    response_model=ProdutoDeleteResponse,
    responses=ERROR_RESPONSES,
)
async def delete_product(
    produto_id: str,
    store: ProductStore = Depends(get_product_store),
):
    """Hard delete a single product after confirming it exists.

    Responds with the removed product's id and name so the UI can confirm
    what was deleted.
    """
    try:
        produto = delete_product_flow(store, produto_id)
        return ProdutoDeleteResponse(produto=produto)
    except ProductError as e:
        if e.status_code >= 500:
            logger.error(f"Failed to delete product {produto_id}: {e.message}")
        return _error_response(e)
    except Exception as e:
        logger.error(
            f"Unexpected error deleting product {produto_id}: {e}", exc_info=True
        )
        return _unexpected_error()
