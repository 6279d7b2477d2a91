import importlib
import runpy
from types import SimpleNamespace

from dashboard import _database_uri, create_app


def test_database_path_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path))
    assert _database_uri("/unused") == f"sqlite:///{tmp_path / 'dashboard.db'}"


def test_database_path_default(monkeypatch, tmp_path):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DATABASE_PATH", raising=False)
    assert _database_uri(str(tmp_path)) == f"sqlite:///{tmp_path / 'dashboard.db'}"


def test_database_url_overrides_path(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path))
    monkeypatch.setenv("DATABASE_URL", "postgres://user:pw@db/invoices")
    assert _database_uri(str(tmp_path)) == "postgresql://user:pw@db/invoices"


def test_environment_configuration(monkeypatch, tmp_path):
    monkeypatch.setenv("CACHE_DEFAULT_TIMEOUT", "42")
    monkeypatch.setenv("INVOICE_RATE_LIMIT", "5 per minute")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    app = create_app(
        {"TESTING": True, "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'x.db'}"}
    )
    assert app.config["CACHE_DEFAULT_TIMEOUT"] == 42
    assert app.config["INVOICE_RATE_LIMIT"] == "5 per minute"
    assert app.config["RATELIMIT_ENABLED"] is False
    assert app.logger.level == 30
    assert (tmp_path / "x.db").exists()


def test_options_requests_are_blocked(client):
    assert client.open("/dashboard/invoices", method="OPTIONS").status_code == 405


def test_run_import_sets_debug(monkeypatch):
    def fake_create_app():
        return SimpleNamespace(debug=False)

    monkeypatch.setattr("dashboard.create_app", fake_create_app)
    monkeypatch.setenv("DEBUG", "True")
    run = importlib.reload(importlib.import_module("run"))
    try:
        assert run.app.debug is True
    finally:
        monkeypatch.undo()


def test_run_main_executes_server(monkeypatch):
    class FakeApp:
        def __init__(self):
            self.debug = False
            self.called_with = None

        def run(self, host, port, debug):
            self.called_with = (host, port, debug)

    fake = FakeApp()
    monkeypatch.setattr("dashboard.create_app", lambda: fake)
    monkeypatch.setenv("PORT", "6000")
    monkeypatch.delenv("DEBUG", raising=False)
    runpy.run_module("run", run_name="__main__")
    assert fake.called_with == ("0.0.0.0", 6000, False)
