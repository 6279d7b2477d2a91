from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    jsonify,
    render_template,
    request,
    url_for,
)

from dashboard import cache, db, limiter
from dashboard.forms import DeleteForm, InvoiceForm
from dashboard.services.invoice_actions import (
    INVOICES_PATH,
    InvoiceActionContext,
    create_invoice,
    delete_invoice,
    update_invoice,
)
from dashboard.services.invoice_schema import InvoiceValidationError
from dashboard.services.invoice_store import SqlInvoiceStore
from dashboard.utils.money import from_minor_units
from dashboard.utils.navigation import FlaskNavigator, JsonNavigator
from dashboard.utils.view_cache import ViewCache

invoice = Blueprint("invoice", __name__)


def _mutation_limit():
    return current_app.config["INVOICE_RATE_LIMIT"]


def _store():
    return SqlInvoiceStore(db.session)


def _views():
    return ViewCache(cache)


def _context(navigator=None):
    return InvoiceActionContext(
        store=_store(),
        views=_views(),
        navigator=navigator or FlaskNavigator(),
    )


def _log_rejection(exc):
    # Field names only; submitted values are never logged.
    current_app.logger.info(
        "Rejected invoice submission: %s", ", ".join(sorted(exc.errors))
    )


def _render_list():
    """Render the invoices list from cached data, fetching it when stale."""
    store = _store()
    invoices = _views().fetch(INVOICES_PATH, store.list_rows)
    return render_template(
        "invoices/view_invoices.html",
        invoices=invoices,
        delete_form=DeleteForm(),
    )


def _render_form(form, title, action, errors=None, invoice=None, status=200):
    return (
        render_template(
            "invoices/invoice_form.html",
            form=form,
            title=title,
            action=action,
            errors=errors or {},
            invoice=invoice,
            customers=_store().customer_choices(),
        ),
        status,
    )


@invoice.route(INVOICES_PATH)
def view_invoices():
    """List all invoices."""
    return _render_list()


@invoice.route(f"{INVOICES_PATH}/create", methods=["GET", "POST"])
@limiter.limit(_mutation_limit, methods=["POST"])
def create_invoice_view():
    """Show the invoice form or store a submitted invoice."""
    action = url_for("invoice.create_invoice_view")
    if request.method == "POST":
        try:
            create_invoice(_context(), request.form)
        except InvoiceValidationError as exc:
            _log_rejection(exc)
            return _render_form(
                InvoiceForm(formdata=request.form),
                "Create Invoice",
                action,
                errors=exc.errors,
                status=400,
            )
    return _render_form(InvoiceForm(), "Create Invoice", action)


@invoice.route(f"{INVOICES_PATH}/<invoice_id>/edit", methods=["GET", "POST"])
@limiter.limit(_mutation_limit, methods=["POST"])
def edit_invoice_view(invoice_id):
    """Edit the customer, amount and status of an invoice."""
    action = url_for("invoice.edit_invoice_view", invoice_id=invoice_id)
    if request.method == "POST":
        try:
            update_invoice(_context(), invoice_id, request.form)
        except InvoiceValidationError as exc:
            _log_rejection(exc)
            return _render_form(
                InvoiceForm(formdata=request.form),
                "Edit Invoice",
                action,
                errors=exc.errors,
                invoice=_store().get(invoice_id),
                status=400,
            )

    record = _store().get(invoice_id)
    if record is None:
        abort(404)
    form = InvoiceForm(
        data={
            "customer_id": record.customer_id,
            "amount": from_minor_units(record.amount),
            "status": record.status,
        }
    )
    return _render_form(form, "Edit Invoice", action, invoice=record)


@invoice.route(f"{INVOICES_PATH}/<invoice_id>/delete", methods=["POST"])
@limiter.limit(_mutation_limit)
def delete_invoice_view(invoice_id):
    """Delete an invoice and re-render the list in place."""
    form = DeleteForm()
    if not form.validate_on_submit():
        abort(400)
    delete_invoice(_context(), invoice_id)
    flash("Invoice deleted.", "success")
    return _render_list()


def _api_payload():
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise InvoiceValidationError({"form": ["Expected a JSON object."]})
        return payload
    return request.form


@invoice.route("/api/invoices", methods=["POST"])
@limiter.limit(_mutation_limit)
def create_invoice_api():
    """Create an invoice from JSON or form data."""
    try:
        create_invoice(_context(JsonNavigator()), _api_payload())
    except InvoiceValidationError as exc:
        _log_rejection(exc)
        return jsonify({"errors": exc.errors}), 400


@invoice.route("/api/invoices/<invoice_id>", methods=["PUT"])
@limiter.limit(_mutation_limit)
def update_invoice_api(invoice_id):
    """Update an invoice from JSON or form data."""
    try:
        update_invoice(_context(JsonNavigator()), invoice_id, _api_payload())
    except InvoiceValidationError as exc:
        _log_rejection(exc)
        return jsonify({"errors": exc.errors}), 400


@invoice.route("/api/invoices/<invoice_id>", methods=["DELETE"])
@limiter.limit(_mutation_limit)
def delete_invoice_api(invoice_id):
    """Delete an invoice."""
    delete_invoice(_context(), invoice_id)
    return jsonify({"deleted": invoice_id})
