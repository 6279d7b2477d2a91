from decimal import Decimal

from flask_wtf import FlaskForm
from wtforms import DecimalField as WTFormsDecimalField
from wtforms import Form, SelectField, StringField, SubmitField
from wtforms.validators import DataRequired, InputRequired, ValidationError

from dashboard.models import INVOICE_STATUSES
from dashboard.utils.money import MAX_AMOUNT


class AmountField(WTFormsDecimalField):
    """Decimal field that only accepts finite amounts the database can store.

    ``MAX_AMOUNT`` bounds the magnitude so the value in cents always fits the
    ``invoices.amount`` INTEGER column.
    """

    def __init__(self, *args, render_kw=None, **kwargs):
        render_kw = dict(render_kw or {})
        render_kw.setdefault("inputmode", "decimal")
        render_kw.setdefault("step", "0.01")
        super().__init__(*args, places=2, render_kw=render_kw, **kwargs)

    def process_formdata(self, valuelist):
        if valuelist and isinstance(valuelist[0], str):
            valuelist = [valuelist[0].strip()]
        try:
            super().process_formdata(valuelist)
        except TypeError as exc:
            # Decimal() rejects containers such as JSON objects or lists.
            self.data = None
            raise ValueError(self.gettext("Not a valid decimal value.")) from exc
        if not isinstance(self.data, Decimal):
            return
        if not self.data.is_finite():
            self.data = None
            raise ValueError(self.gettext("Not a valid decimal value."))
        if abs(self.data) > MAX_AMOUNT:
            self.data = None
            raise ValueError(f"Amount must be between -{MAX_AMOUNT} and {MAX_AMOUNT}.")


class ValuePresent(InputRequired):
    """Like ``InputRequired`` but lets non-text values such as ``0`` through."""

    def __call__(self, form, field):
        if field.raw_data and not isinstance(field.raw_data[0], str):
            return
        super().__call__(form, field)


def _text_only(form, field):
    if not isinstance(field.data, str):
        raise ValidationError("Must be text.")


class InvoiceForm(Form):
    """Fields accepted when creating or editing an invoice.

    This is a plain WTForms form so it can validate any mapping of raw fields
    without a request; CSRF is checked globally by ``CSRFProtect``. HTML names
    follow the submitted field names (``customerId``, ``amount``, ``status``).
    """

    customer_id = StringField(
        "Customer", validators=[DataRequired(), _text_only], name="customerId"
    )
    amount = AmountField("Amount", validators=[ValuePresent()])
    status = SelectField(
        "Status",
        choices=[(status, status.title()) for status in INVOICE_STATUSES],
        validators=[InputRequired()],
        validate_choice=True,
    )
    submit = SubmitField("Save Invoice")


class DeleteForm(FlaskForm):
    """Simple form used for CSRF protection on delete actions."""

    submit = SubmitField("Delete")
