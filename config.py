import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _database_url():
    url = os.getenv("DATABASE_URL", "sqlite:///" + os.path.join(BASE_DIR, "hotel.db"))
    # Hosted Postgres providers still hand out the old scheme SQLAlchemy rejects
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def _room_names():
    raw = os.getenv("DEFAULT_ROOMS")
    if not raw:
        return ["Room 1", "Room 2", "Room 3", "Room 4", "Room 5"]
    return [name.strip() for name in raw.split(",") if name.strip()]


class Config:
    # Secrets
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # SQLite file next to the code unless DATABASE_URL points at Postgres
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Rooms created at startup (idempotent)
    DEFAULT_ROOMS = _room_names()

    # Admin console credentials; ADMIN_PASSWORD_HASH (bcrypt) wins over ADMIN_PASS
    ADMIN_USER = os.getenv("ADMIN_USER", "admin")
    ADMIN_PASS = os.getenv("ADMIN_PASS", "change-me")
    ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH")

    # Session cookie name for the admin token
    ADMIN_COOKIE_NAME = "hotel_admin_session"

    # 8 hours session lifetime
    SESSION_LIFETIME_SECONDS = 8 * 60 * 60

    # Idle timeout: 30 minutes
    IDLE_TIMEOUT_SECONDS = 30 * 60

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"

    # Public API is called from the hotel website
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Email: "smtp" or "log"
    EMAIL_PROVIDER = os.getenv("EMAIL_PROVIDER", "smtp").lower()
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
    EMAIL_FROM = os.getenv("EMAIL_FROM") or ADMIN_EMAIL
    HOTEL_NAME = os.getenv("HOTEL_NAME", "Minista of Enjoyment Hotel")

    SMTP_HOST = os.getenv("SMTP_HOST")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USERNAME = os.getenv("SMTP_USERNAME")
    SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
    SMTP_USE_TLS = os.getenv("SMTP_USE_TLS", "true").lower() == "true"
    SMTP_TIMEOUT_SECONDS = int(os.getenv("SMTP_TIMEOUT_SECONDS", "10"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Basic app settings
    DEBUG = False
