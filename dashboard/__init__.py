import logging
import os
import secrets

from dotenv import load_dotenv
from flask import Flask, Response, g, render_template, request
from flask_bootstrap import Bootstrap
from flask_caching import Cache
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_sqlalchemy import SQLAlchemy
from flask_wtf import CSRFProtect
from flask_wtf.csrf import CSRFError

load_dotenv()
db = SQLAlchemy()
cache = Cache()
csrf = CSRFProtect()
storage_uri = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
limiter = Limiter(key_func=get_remote_address, storage_uri=storage_uri)

DEFAULT_CSP_TEMPLATE = (
    "default-src 'self'; "
    "img-src 'self' data:; "
    "style-src 'self' 'unsafe-inline' https://cdn.jsdelivr.net; "
    "script-src 'self' https://cdn.jsdelivr.net 'nonce-{nonce}'; "
    "font-src 'self' data:; "
    "frame-ancestors 'self'; "
    "form-action 'self'; "
    "object-src 'none'; "
    "base-uri 'self'"
)


def _get_bool_env(var_name: str, default: bool = False) -> bool:
    """Return a boolean environment variable value."""

    value = os.getenv(var_name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _database_uri(base_dir: str) -> str:
    """Return the SQLAlchemy URL from ``DATABASE_URL`` or ``DATABASE_PATH``."""

    url = os.getenv("DATABASE_URL")
    if url:
        # Some hosting providers still hand out the deprecated scheme.
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        return url

    # If the provided path is a directory, store the SQLite file inside it.
    default_db_path = os.path.join(base_dir, "dashboard.db")
    db_path = os.getenv("DATABASE_PATH", default_db_path)
    if os.path.isdir(db_path):
        db_path = os.path.join(db_path, "dashboard.db")
    os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
    return f"sqlite:///{os.path.abspath(db_path)}"


def create_app(config=None):
    """Application factory used by Flask.

    ``config`` is applied after the environment so callers such as the test
    suite can override any setting, including the database URL.
    """
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY") or secrets.token_hex(32)
    app.config["ENFORCE_HTTPS"] = _get_bool_env("ENFORCE_HTTPS", default=False)
    app.config["SQLALCHEMY_DATABASE_URI"] = _database_uri(os.getcwd())
    app.config.update(
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
        CACHE_TYPE=os.getenv("CACHE_TYPE", "SimpleCache"),
        CACHE_DEFAULT_TIMEOUT=int(os.getenv("CACHE_DEFAULT_TIMEOUT", "300")),
        INVOICE_RATE_LIMIT=os.getenv("INVOICE_RATE_LIMIT", "60 per minute"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
    redis_url = os.getenv("CACHE_REDIS_URL")
    if redis_url:
        app.config["CACHE_REDIS_URL"] = redis_url
    if config:
        app.config.update(config)
    if app.config.get("TESTING"):
        app.config["RATELIMIT_ENABLED"] = False

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    db.init_app(app)
    cache.init_app(app)
    limiter.init_app(app)
    csrf.init_app(app)
    Bootstrap(app)

    from dashboard.utils.money import format_cents

    app.jinja_env.filters["cents"] = format_cents

    @app.before_request
    def set_csp_nonce():
        """Generate a nonce for inline scripts allowed by the CSP."""

        g.csp_nonce = secrets.token_urlsafe(16)

    @app.after_request
    def apply_security_headers(response):
        """Attach standard security headers to every response."""
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if request.is_secure or app.config.get("ENFORCE_HTTPS", False):
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        nonce = getattr(g, "csp_nonce", "") or secrets.token_urlsafe(16)
        csp_template = app.config.get(
            "CONTENT_SECURITY_POLICY", DEFAULT_CSP_TEMPLATE
        )
        response.headers.setdefault(
            "Content-Security-Policy", csp_template.replace("{nonce}", nonce)
        )
        return response

    @app.context_processor
    def inject_csp_nonce():
        """Expose the CSP nonce to templates for inline scripts."""

        return {"csp_nonce": getattr(g, "csp_nonce", "")}

    @app.before_request
    def block_http_options():
        """Return a 405 for HTTP OPTIONS requests to reduce information leakage."""
        if request.method == "OPTIONS":
            return Response(status=405)

    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        """Render a helpful page when CSRF validation fails."""
        return (
            render_template("errors/csrf_error.html", reason=error.description),
            400,
        )

    with app.app_context():
        # Ensure models are imported and the schema exists before the first
        # request; migrations are not managed by this application.
        from . import models  # noqa: F401

        db.create_all()

        from dashboard.routes.invoice_routes import invoice
        from dashboard.routes.main_routes import main

        app.register_blueprint(main)
        app.register_blueprint(invoice)

    return app
