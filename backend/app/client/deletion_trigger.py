"""Client-side handling of a click on a product's delete control.

The delete control carries the product id and name as element attributes
(``data-id`` / ``data-nome``). A click is validated into a PendingDeletion
value, which is threaded explicitly into the confirm step rather than read
back from shared state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from app.api.schemas.product import ProdutoResumo
from app.client.api_client import ProdutosApiClient
from app.core.errors import MissingAttribute, ProductError
from app.utils.identifiers import parse_product_id

logger = logging.getLogger(__name__)

ID_ATTRIBUTE = "data-id"
NAME_ATTRIBUTE = "data-nome"


@dataclass(frozen=True)
class PendingDeletion:
    """Product selected for deletion, awaiting user confirmation."""

    product_id: int
    nome: str


class ProductListView(Protocol):
    """UI surface the trigger calls into: confirmation, list and toasts."""

    def confirm(self, pending: PendingDeletion) -> bool:
        """Ask the user to confirm; True means proceed."""

    def remove_item(self, product_id: int) -> None:
        """Drop the product's entry from the displayed list."""

    def notify(self, message: str, level: str = "info") -> None:
        """Show a notification; level is one of info, success, error."""


def read_pending_deletion(attributes: Mapping[str, str | None]) -> PendingDeletion:
    """Validate a delete control's attributes into a PendingDeletion.

    Raises MissingAttribute when ``data-id`` or ``data-nome`` is absent and
    InvalidIdentifier when the id is not a positive base-10 integer.
    """
    raw_id = attributes.get(ID_ATTRIBUTE)
    if raw_id is None or not str(raw_id).strip():
        raise MissingAttribute(ID_ATTRIBUTE)

    product_id = parse_product_id(raw_id)

    nome = attributes.get(NAME_ATTRIBUTE)
    if nome is None or not nome.strip():
        raise MissingAttribute(NAME_ATTRIBUTE)

    return PendingDeletion(product_id=product_id, nome=nome)


class DeletionTrigger:
    """Wires delete-control clicks to the delete endpoint."""

    def __init__(self, api: ProdutosApiClient, view: ProductListView) -> None:
        self._api = api
        self._view = view
        # Current selection, for the UI only; the flow never reads it back
        self.pending: PendingDeletion | None = None

    def handle_click(
        self, attributes: Mapping[str, str | None]
    ) -> PendingDeletion | None:
        """Validate the clicked control; report and return None when invalid."""
        try:
            pending = read_pending_deletion(attributes)
        except ProductError as e:
            logger.warning(f"Rejected delete click {dict(attributes)}: {e.message}")
            self._view.notify(e.message, "error")
            return None

        self.pending = pending
        return pending

    def clear_pending(self) -> None:
        self.pending = None

    def handle_cancel(self) -> None:
        self.clear_pending()

    def handle_confirm(self, pending: PendingDeletion) -> ProdutoResumo | None:
        """Delete the confirmed product and update the view.

        The id is copied out of ``pending`` before the selection is cleared.
        """
        product_id = pending.product_id
        self.clear_pending()

        try:
            removed = self._api.delete_product(product_id)
        except ProductError as e:
            logger.warning(f"Delete of product {product_id} failed: {e.message}")
            self._view.notify(e.message, "error")
            return None

        self._view.remove_item(removed.id)
        self._view.notify(f'Produto "{removed.nome}" excluído com sucesso', "success")
        return removed

    def on_delete_click(
        self, attributes: Mapping[str, str | None]
    ) -> ProdutoResumo | None:
        """Full flow for one click: validate, confirm, then delete or cancel."""
        pending = self.handle_click(attributes)
        if pending is None:
            return None

        if not self._view.confirm(pending):
            self.handle_cancel()
            return None

        return self.handle_confirm(pending)
