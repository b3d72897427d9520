"""Pydantic models describing Produto payloads."""

from pydantic import BaseModel, Field

# Largest value a Numeric(10, 2) column holds
MAX_PRECO = 99_999_999.99


class ProdutoBase(BaseModel):
    nome: str
    descricao: str | None = None
    preco: float = Field(0, ge=0, le=MAX_PRECO, description="Unit price")
    quantidade: int = Field(0, ge=0, description="Units in stock")


class ProdutoCreate(ProdutoBase):
    """Schema for UI-created product rows."""


class ProdutoUpdate(BaseModel):
    nome: str | None = None
    descricao: str | None = None
    preco: float | None = Field(None, ge=0, le=MAX_PRECO)
    quantidade: int | None = Field(None, ge=0)


class ProdutoRead(ProdutoBase):
    id: int

    model_config = {"from_attributes": True}


class ProdutoListResponse(BaseModel):
    items: list[ProdutoRead]
    total: int
    page: int
    page_size: int


class ProdutoResumo(BaseModel):
    """Identifier and name, as reported back after a delete."""

    id: int
    nome: str


class ProdutoDeleteResponse(BaseModel):
    success: bool = True
    produto: ProdutoResumo


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
