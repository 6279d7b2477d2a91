from flask import Blueprint, redirect, url_for

main = Blueprint("main", __name__)


@main.route("/")
@main.route("/dashboard")
def home():
    """Send visitors to the invoices dashboard."""
    return redirect(url_for("invoice.view_invoices"))
