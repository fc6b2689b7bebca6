"""
Shared fixtures: a fresh app per test backed by a throwaway SQLite file,
with email written to the log instead of sent.
"""
import pytest

from app import create_app
from config import Config

ADMIN_USER = "frontdesk"
ADMIN_PASS = "s3cret-pass"


class HotelTestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    ADMIN_USER = ADMIN_USER
    ADMIN_PASS = ADMIN_PASS
    ADMIN_PASSWORD_HASH = None
    EMAIL_PROVIDER = "log"
    ADMIN_EMAIL = "admin@hotel.test"
    EMAIL_FROM = "bookings@hotel.test"
    DEFAULT_ROOMS = ["Room 1", "Room 2", "Room 3", "Room 4", "Room 5"]


@pytest.fixture
def make_app(tmp_path):
    """Builds an app; keyword arguments override config values."""
    def _make(**overrides):
        attrs = {"SQLALCHEMY_DATABASE_URI": "sqlite:///" + str(tmp_path / "hotel-test.db")}
        attrs.update(overrides)
        config = type("OverriddenConfig", (HotelTestConfig,), attrs)
        return create_app(config)
    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    resp = client.post("/admin/login", data={"username": ADMIN_USER, "password": ADMIN_PASS})
    assert resp.status_code == 302
    return client
