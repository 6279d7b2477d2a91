from decimal import Decimal

import pytest
from werkzeug.datastructures import MultiDict

from dashboard.services.invoice_schema import (
    InvoiceInput,
    InvoiceValidationError,
    validate_invoice_fields,
)


def test_valid_fields_are_parsed():
    fields = validate_invoice_fields(
        {"customerId": "cust_1", "amount": "45.00", "status": "pending"}
    )
    assert fields == InvoiceInput(
        customer_id="cust_1", amount=Decimal("45.00"), status="pending"
    )
    assert fields.amount_in_cents == 4500


def test_multidict_form_data_is_accepted():
    form = MultiDict(
        [("customerId", "cust_2"), ("amount", "10.50"), ("status", "paid")]
    )
    fields = validate_invoice_fields(form)
    assert fields.customer_id == "cust_2"
    assert fields.amount_in_cents == 1050
    assert fields.status == "paid"


def test_extra_fields_are_ignored():
    fields = validate_invoice_fields(
        {
            "id": "inv_99",
            "date": "1999-01-01",
            "customerId": "cust_1",
            "amount": "1",
            "status": "paid",
        }
    )
    assert not hasattr(fields, "id")
    assert not hasattr(fields, "date")


@pytest.mark.parametrize(
    "raw, expected_cents",
    [
        ("0.29", 29),
        ("10.505", 1051),
        (" 12.5 ", 1250),
        ("1e2", 10000),
        (0, 0),
        (7.25, 725),
        ("-5", -500),
        ("21474836.47", 2147483647),
        ("-21474836.47", -2147483647),
    ],
)
def test_amount_is_converted_to_cents(raw, expected_cents):
    fields = validate_invoice_fields(
        {"customerId": "cust_1", "amount": raw, "status": "pending"}
    )
    assert fields.amount_in_cents == expected_cents


@pytest.mark.parametrize(
    "raw, field",
    [
        ({"customerId": "cust_1", "amount": "45", "status": "foo"}, "status"),
        ({"customerId": "cust_1", "amount": "abc", "status": "paid"}, "amount"),
        ({"amount": "45", "status": "paid"}, "customerId"),
        ({"customerId": "", "amount": "45", "status": "paid"}, "customerId"),
        ({"customerId": "   ", "amount": "45", "status": "paid"}, "customerId"),
        ({"customerId": 42, "amount": "45", "status": "paid"}, "customerId"),
        ({"customerId": "cust_1", "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": "", "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": "NaN", "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": "inf", "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": {}, "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": ["1"], "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": "1e30", "status": "paid"}, "amount"),
        (
            {
                "customerId": "cust_1",
                "amount": "123456789012345678901234567890",
                "status": "paid",
            },
            "amount",
        ),
        ({"customerId": "cust_1", "amount": "1e20", "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": "21474836.48", "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": "-21474836.48", "status": "paid"}, "amount"),
        ({"customerId": "cust_1", "amount": "45"}, "status"),
        ({"customerId": "cust_1", "amount": "45", "status": None}, "status"),
    ],
)
def test_invalid_fields_raise(raw, field):
    with pytest.raises(InvoiceValidationError) as excinfo:
        validate_invoice_fields(raw)
    assert field in excinfo.value.errors
    assert excinfo.value.errors[field]


def test_error_lists_every_failing_field():
    with pytest.raises(InvoiceValidationError) as excinfo:
        validate_invoice_fields({"status": "unknown"})
    assert set(excinfo.value.errors) == {"customerId", "amount", "status"}
    assert isinstance(excinfo.value, ValueError)
    assert "customerId" in str(excinfo.value)
