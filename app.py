from flask import Flask, request
from config import Config
from routes import health_bp, public_bp, rooms_bp, auth_bp, admin_bp

from models import db
from flask_migrate import Migrate
from services import seed_rooms
from utils.auth_context import load_current_admin


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Register routes
    app.register_blueprint(health_bp)
    app.register_blueprint(public_bp)
    app.register_blueprint(rooms_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)

    # Database init
    db.init_app(app)

    # Migrations
    Migrate(app, db)

    # Create tables and seed the default rooms at startup (safe & idempotent)
    with app.app_context():
        db.create_all()
        added = seed_rooms(app.config.get("DEFAULT_ROOMS", []))
        if added:
            app.logger.info("Seeded %s room(s)", added)

    @app.before_request
    def _load_admin():
        load_current_admin()

    @app.after_request
    def add_headers(resp):
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Referrer-Policy"] = "no-referrer"
        # Admin pages pull Bootstrap from the CDN and use inline confirm() handlers
        resp.headers["Content-Security-Policy"] = (
            "default-src 'none'; style-src 'unsafe-inline' https://cdn.jsdelivr.net; "
            "script-src 'unsafe-inline'; form-action 'self'; frame-ancestors 'none';"
        )

        # Public endpoints are called cross-origin by the hotel website
        if not request.path.startswith("/admin"):
            resp.headers["Access-Control-Allow-Origin"] = app.config.get("CORS_ORIGINS", "*")
            resp.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
            resp.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return resp

    register_cli(app)

    return app

#-------------------------
import click
from security.password import hash_password
from security.session import purge_sessions

def register_cli(app):
    @app.cli.command("seed-rooms")
    def seed_rooms_command():
        """Create any missing default rooms."""
        added = seed_rooms(app.config.get("DEFAULT_ROOMS", []))
        print(f"{added} room(s) added")

    @app.cli.command("hash-password")
    @click.argument("password")
    def hash_password_command(password):
        """Print a bcrypt hash to use as ADMIN_PASSWORD_HASH."""
        print(hash_password(password))

    @app.cli.command("purge-sessions")
    def purge_sessions_command():
        """Delete expired and revoked admin sessions."""
        print(f"{purge_sessions()} session(s) removed")

#-------------------------


if __name__ == "__main__":
    app = create_app()
    # Run locally
    app.run(host="127.0.0.1", port=3000)
