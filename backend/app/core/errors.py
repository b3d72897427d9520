"""Error kinds raised by the product endpoints, store and deletion client."""

from __future__ import annotations

from fastapi import status


class ProductError(Exception):
    """Base error carrying the HTTP status and a user-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Ocorreu um erro inesperado"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict[str, object]:
        return {"success": False, "message": self.message}


class InvalidIdentifier(ProductError):
    """Identifier is malformed or not a positive integer."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "ID deve ser um número válido"


class ProductNotFound(ProductError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Produto não encontrado"


class StoreError(ProductError):
    """Unexpected failure from the record store on lookup or write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Erro ao acessar o banco de dados"


class ValidationError(ProductError):
    """Create/update payload failed field checks."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Dados do produto inválidos"


class MissingAttribute(ProductError):
    """A delete control was rendered without its id or name attribute."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"Atributo obrigatório ausente: {attribute}")
