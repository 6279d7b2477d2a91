"""Create, update and delete actions for invoice form submissions.

Each action validates the submitted fields, issues a single storage
statement, marks the invoices list view as stale and, for create and update,
hands control to the list via the navigator. Framework specifics stay behind
the collaborator protocols below so the actions run without a request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, NoReturn, Protocol

from dashboard.services.invoice_schema import validate_invoice_fields

INVOICES_PATH = "/dashboard/invoices"

logger = logging.getLogger(__name__)


class InvoiceStore(Protocol):
    def insert(self, customer_id: str, amount: int, status: str, date: str) -> str:
        ...

    def update(
        self, invoice_id: str, customer_id: str, amount: int, status: str
    ) -> int:
        ...

    def delete(self, invoice_id: str) -> int:
        ...


class ViewInvalidator(Protocol):
    def invalidate(self, path: str) -> None:
        """Mark the cached data of ``path`` as stale."""
        ...


class Navigator(Protocol):
    def redirect(self, path: str) -> NoReturn:
        """Abort the current action and send the caller to ``path``."""
        ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InvoiceActionContext:
    store: InvoiceStore
    views: ViewInvalidator
    navigator: Navigator
    clock: Callable[[], datetime] = field(default=_utcnow)

    def today(self) -> str:
        """Return the current date as ``YYYY-MM-DD``."""
        now = self.clock()
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)
        return now.date().isoformat()


def create_invoice(ctx: InvoiceActionContext, form_data: Mapping[str, Any]) -> NoReturn:
    """Store a new invoice from ``form_data`` and redirect to the list.

    Raises :class:`~dashboard.services.invoice_schema.InvoiceValidationError`
    before touching storage when the fields are invalid.
    """
    fields = validate_invoice_fields(form_data)
    invoice_id = ctx.store.insert(
        customer_id=fields.customer_id,
        amount=fields.amount_in_cents,
        status=fields.status,
        date=ctx.today(),
    )
    logger.info("Created invoice %s", invoice_id)

    ctx.views.invalidate(INVOICES_PATH)
    ctx.navigator.redirect(INVOICES_PATH)


def update_invoice(
    ctx: InvoiceActionContext, invoice_id: str, form_data: Mapping[str, Any]
) -> NoReturn:
    """Replace the customer, amount and status of an invoice.

    The invoice date is left as it was. An unknown ``invoice_id`` changes
    nothing and is not reported as an error.
    """
    fields = validate_invoice_fields(form_data)
    updated = ctx.store.update(
        invoice_id,
        customer_id=fields.customer_id,
        amount=fields.amount_in_cents,
        status=fields.status,
    )
    if updated:
        logger.info("Updated invoice %s", invoice_id)
    else:
        logger.warning("Update matched no invoice with id %s", invoice_id)

    ctx.views.invalidate(INVOICES_PATH)
    ctx.navigator.redirect(INVOICES_PATH)


def delete_invoice(ctx: InvoiceActionContext, invoice_id: str) -> None:
    """Remove an invoice; deleting an unknown id is a no-op."""
    deleted = ctx.store.delete(invoice_id)
    if deleted:
        logger.info("Deleted invoice %s", invoice_id)
    else:
        logger.warning("Delete matched no invoice with id %s", invoice_id)

    ctx.views.invalidate(INVOICES_PATH)
