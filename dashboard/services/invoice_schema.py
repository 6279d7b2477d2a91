"""Validation of submitted invoice fields."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Mapping

from werkzeug.datastructures import MultiDict

from dashboard.forms import InvoiceForm
from dashboard.utils.money import to_minor_units


class InvoiceValidationError(ValueError):
    """Raised when submitted invoice fields fail validation.

    ``errors`` maps each submitted field name to its error messages.
    """

    def __init__(self, errors: Dict[str, List[str]]) -> None:
        self.errors = errors
        fields = ", ".join(sorted(errors)) or "form"
        super().__init__(f"Invalid invoice fields: {fields}")


@dataclass(frozen=True)
class InvoiceInput:
    customer_id: str
    amount: Decimal
    status: str

    @property
    def amount_in_cents(self) -> int:
        return to_minor_units(self.amount)


def _as_formdata(raw_fields: Mapping[str, Any]) -> MultiDict:
    if isinstance(raw_fields, MultiDict):
        return raw_fields
    data = MultiDict()
    for key, value in raw_fields.items():
        # Missing values are treated as absent rather than the text "None".
        if value is None:
            continue
        data.add(key, value)
    return data


def validate_invoice_fields(raw_fields: Mapping[str, Any]) -> InvoiceInput:
    """Return the validated ``customerId``, ``amount`` and ``status`` fields.

    ``raw_fields`` may be a plain mapping or a werkzeug ``MultiDict`` such as
    ``request.form``. Keys other than the three accepted fields are ignored,
    so callers cannot supply an ``id`` or ``date``.
    """

    form = InvoiceForm(formdata=_as_formdata(raw_fields))
    if not form.validate():
        errors = {
            form[name].name: list(messages)
            for name, messages in form.errors.items()
        }
        raise InvoiceValidationError(errors)
    return InvoiceInput(
        customer_id=form.customer_id.data,
        amount=form.amount.data,
        status=form.status.data,
    )
