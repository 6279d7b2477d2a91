from uuid import uuid4

from dashboard import db

INVOICE_STATUSES = ("pending", "paid")


def _new_id() -> str:
    return str(uuid4())


class Customer(db.Model):
    __tablename__ = "customers"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True)


class Invoice(db.Model):
    __tablename__ = "invoices"

    # Assigned on insert; never changed afterwards.
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    # No foreign key: the mutation actions only require a non-empty string.
    customer_id = db.Column(db.String(36), nullable=False, index=True)
    # Minor currency units (cents).
    amount = db.Column(db.Integer, nullable=False)
    status = db.Column(
        db.Enum(*INVOICE_STATUSES, name="invoice_status", native_enum=False),
        nullable=False,
    )
    # ISO "YYYY-MM-DD", written once at creation.
    date = db.Column(db.String(10), nullable=False, index=True)
