"""SQL access for the ``invoices`` table."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update

from dashboard.models import Customer, Invoice


class SqlInvoiceStore:
    """Run invoice statements through a SQLAlchemy session.

    Every mutating method executes exactly one statement with bound
    parameters and commits it. On any failure, including driver errors that
    are not ``SQLAlchemyError`` subclasses, the session is rolled back and the
    original exception is re-raised.
    """

    def __init__(self, session) -> None:
        self.session = session

    def _execute(self, statement):
        try:
            result = self.session.execute(statement)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return result

    def insert(self, customer_id: str, amount: int, status: str, date: str) -> str:
        """Insert an invoice and return the id assigned to it."""

        result = self._execute(
            insert(Invoice).values(
                customer_id=customer_id, amount=amount, status=status, date=date
            )
        )
        return result.inserted_primary_key[0]

    def update(
        self, invoice_id: str, customer_id: str, amount: int, status: str
    ) -> int:
        """Update an invoice and return the number of rows affected."""

        result = self._execute(
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(customer_id=customer_id, amount=amount, status=status)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def delete(self, invoice_id: str) -> int:
        """Delete an invoice and return the number of rows affected."""

        result = self._execute(
            delete(Invoice)
            .where(Invoice.id == invoice_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    # ------------------------------------------------------------------
    def get(self, invoice_id: str) -> Optional[Invoice]:
        return self.session.get(Invoice, invoice_id)

    def list_rows(self) -> List[Dict[str, Any]]:
        """Return invoices newest first as plain dicts for the list view."""

        statement = (
            select(
                Invoice.id,
                Invoice.customer_id,
                Invoice.amount,
                Invoice.status,
                Invoice.date,
                Customer.name.label("customer_name"),
            )
            .outerjoin(Customer, Customer.id == Invoice.customer_id)
            .order_by(Invoice.date.desc(), Invoice.id)
        )
        return [dict(row._mapping) for row in self.session.execute(statement)]

    def customer_choices(self) -> List[tuple]:
        statement = select(Customer.id, Customer.name).order_by(Customer.name)
        return [(row.id, row.name) for row in self.session.execute(statement)]
