from __future__ import annotations

import os
import sys

import pytest

from dashboard import create_app, db
from dashboard.models import Customer, Invoice

# Ensure the dashboard package is importable when tests change directories
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, BASE_DIR)


@pytest.fixture
def app(tmp_path):
    os.environ.setdefault("SECRET_KEY", "testsecret")

    # Ensure a clean database for each test within the temp directory
    db_path = tmp_path / "dashboard.db"
    app = create_app(
        {
            "TESTING": True,
            "WTF_CSRF_ENABLED": False,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}",
            "CACHE_TYPE": "SimpleCache",
        }
    )

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def customer_ids(app):
    """Create two customers and return their ids."""
    with app.app_context():
        first = Customer(name="Ada Customer", email="ada@example.com")
        second = Customer(name="Bob Customer", email="bob@example.com")
        db.session.add_all([first, second])
        db.session.commit()
        return first.id, second.id


@pytest.fixture
def make_invoice(app):
    """Return a helper that inserts an invoice row directly."""

    def _make(customer_id, amount=1000, status="pending", date="2023-01-15"):
        with app.app_context():
            record = Invoice(
                customer_id=customer_id, amount=amount, status=status, date=date
            )
            db.session.add(record)
            db.session.commit()
            return record.id

    return _make
