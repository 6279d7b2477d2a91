from dashboard import cache, create_app, db
from dashboard.models import Customer, Invoice
from dashboard.services.invoice_actions import INVOICES_PATH
from dashboard.utils.view_cache import ViewCache

CUSTOMERS = [
    ("Delba de Oliveira", "delba@example.com"),
    ("Lee Robinson", "lee@example.com"),
    ("Hector Simpson", "hector@example.com"),
    ("Steven Tey", "steven@example.com"),
]

INVOICES = [
    ("delba@example.com", 15795, "pending", "2022-12-06"),
    ("lee@example.com", 20348, "pending", "2022-11-14"),
    ("hector@example.com", 3040, "paid", "2022-10-29"),
    ("steven@example.com", 44800, "paid", "2023-09-10"),
    ("delba@example.com", 34577, "pending", "2023-08-05"),
]


def seed_initial_data() -> None:
    """Seed the database with demo customers and invoices."""
    app = create_app()
    with app.app_context():
        customers = {}
        for name, email in CUSTOMERS:
            customer = Customer.query.filter_by(email=email).first()
            if customer is None:
                customer = Customer(name=name, email=email)
                db.session.add(customer)
            customers[email] = customer
        db.session.flush()

        if Invoice.query.count() == 0:
            for email, amount, status, date in INVOICES:
                db.session.add(
                    Invoice(
                        customer_id=customers[email].id,
                        amount=amount,
                        status=status,
                        date=date,
                    )
                )
        db.session.commit()
        ViewCache(cache).invalidate(INVOICES_PATH)
        print("Demo customers and invoices created.")


if __name__ == "__main__":
    seed_initial_data()
