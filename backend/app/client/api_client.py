"""HTTP client for the product endpoints, used by the deletion trigger."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.api.schemas.product import ProdutoListResponse, ProdutoRead, ProdutoResumo
from app.core.config import Settings, get_settings
from app.core.errors import ProductError

logger = logging.getLogger(__name__)

PRODUTOS_PATH = "/api/produtos"
USER_AGENT = "Padaria-Inventory-Client/1.0"
INVALID_RESPONSE_MESSAGE = "Resposta inválida do servidor"


class ApiRequestError(ProductError):
    """Endpoint answered with an error, or could not be reached."""

    default_message = "Não foi possível comunicar com o servidor"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


def _error_message(response: httpx.Response) -> str | None:
    """Pull the ``message`` field out of an error envelope if there is one."""
    try:
        body: Any = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class ProdutosApiClient:
    """Thin wrapper over ``httpx.Client`` for ``/api/produtos``.

    Any ``httpx.Client`` works, including FastAPI's ``TestClient``.
    """

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ProdutosApiClient":
        settings = settings or get_settings()
        http = httpx.Client(
            base_url=settings.api_base_url,
            timeout=settings.api_timeout_seconds,
            headers={"User-Agent": USER_AGENT},
        )
        return cls(http)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ProdutosApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}", exc_info=True)
            raise ApiRequestError() from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"{method} {path} -> {response.status_code}: {message}")
            raise ApiRequestError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {path} returned a non-JSON body: {e}")
            raise ApiRequestError(INVALID_RESPONSE_MESSAGE) from e

    def delete_product(self, product_id: int) -> ProdutoResumo:
        """Delete ``product_id`` and return the id and name the server removed."""
        path = f"{PRODUTOS_PATH}/{product_id}"
        body = self._request("DELETE", path)
        try:
            if not body.get("success"):
                raise ApiRequestError(body.get("message"))
            return ProdutoResumo.model_validate(body["produto"])
        except (AttributeError, KeyError, ValueError) as e:
            logger.error(f"DELETE {path} returned an unexpected body: {body!r}")
            raise ApiRequestError(INVALID_RESPONSE_MESSAGE) from e

    def get_product(self, product_id: int) -> ProdutoRead:
        body = self._request("GET", f"{PRODUTOS_PATH}/{product_id}")
        try:
            return ProdutoRead.model_validate(body)
        except ValueError as e:
            raise ApiRequestError(INVALID_RESPONSE_MESSAGE) from e

    def list_products(
        self,
        nome: str | None = None,
        page: int = 1,
        page_size: int = 50,
    ) -> ProdutoListResponse:
        params: dict[str, Any] = {"page": page, "page_size": page_size}
        if nome:
            params["nome"] = nome
        body = self._request("GET", f"{PRODUTOS_PATH}/", params=params)
        try:
            return ProdutoListResponse.model_validate(body)
        except ValueError as e:
            raise ApiRequestError(INVALID_RESPONSE_MESSAGE) from e
