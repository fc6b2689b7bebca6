from datetime import datetime, timedelta

from models import db
from models.audit_log import AuditLog
from models.session import AdminSession
from security.password import hash_password
from tests.conftest import ADMIN_USER, ADMIN_PASS


def test_admin_pages_redirect_to_login_without_session(client):
    for path in ("/admin/bookings", "/admin/rooms", "/admin/contacts", "/admin/lounge"):
        resp = client.get(path)
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/admin/login")


def test_admin_actions_redirect_to_login_without_session(client):
    resp = client.post("/admin/bookings/toggle/1")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/admin/login")


def test_login_page_renders(client):
    resp = client.get("/admin/login")
    assert resp.status_code == 200
    assert b'name="username"' in resp.data


def test_wrong_password_is_rejected(app, client):
    resp = client.post("/admin/login", data={"username": ADMIN_USER, "password": "nope"})

    assert resp.status_code == 401
    assert b"Invalid credentials" in resp.data
    assert client.get("/admin/bookings").status_code == 302
    with app.app_context():
        assert AuditLog.query.filter_by(action="ADMIN_LOGIN_FAIL").count() == 1


def test_login_issues_hashed_session_token(app, client):
    resp = client.post("/admin/login", data={"username": ADMIN_USER, "password": ADMIN_PASS})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/admin/bookings")
    cookie = resp.headers["Set-Cookie"]
    assert "hotel_admin_session=" in cookie
    assert "HttpOnly" in cookie

    raw_token = cookie.split("hotel_admin_session=", 1)[1].split(";", 1)[0]
    with app.app_context():
        sess = AdminSession.query.one()
        assert sess.username == ADMIN_USER
        assert sess.token_hash != raw_token

    assert client.get("/admin/bookings").status_code == 200


def test_sessions_are_per_client(app, admin_client):
    # a second browser is not logged in just because someone else is
    other = app.test_client()
    assert other.get("/admin/bookings").status_code == 302
    assert admin_client.get("/admin/bookings").status_code == 200


def test_logged_in_admin_skips_login_page(admin_client):
    resp = admin_client.get("/admin/login")
    assert resp.status_code == 302


def test_logout_revokes_session(app, admin_client):
    resp = admin_client.get("/admin/logout")

    assert resp.status_code == 200
    assert b"Logged out" in resp.data
    assert admin_client.get("/admin/bookings").status_code == 302
    with app.app_context():
        assert AdminSession.query.one().revoked is True


def test_expired_session_is_ignored(app, admin_client):
    with app.app_context():
        sess = AdminSession.query.one()
        sess.expires_at = datetime.utcnow() - timedelta(seconds=1)
        db.session.commit()

    assert admin_client.get("/admin/bookings").status_code == 302


def test_idle_session_is_ignored(app, admin_client):
    with app.app_context():
        sess = AdminSession.query.one()
        sess.last_seen_at = datetime.utcnow() - timedelta(hours=2)
        db.session.commit()

    assert admin_client.get("/admin/bookings").status_code == 302


def test_bcrypt_hash_takes_precedence_over_plain_password(make_app):
    app = make_app(ADMIN_PASSWORD_HASH=hash_password("hashed-pass"))
    client = app.test_client()

    plain = client.post("/admin/login", data={"username": ADMIN_USER, "password": ADMIN_PASS})
    assert plain.status_code == 401

    hashed = client.post("/admin/login", data={"username": ADMIN_USER, "password": "hashed-pass"})
    assert hashed.status_code == 302


def test_purge_sessions_cli(app, admin_client):
    admin_client.get("/admin/logout")

    result = app.test_cli_runner().invoke(args=["purge-sessions"])

    assert "1 session(s) removed" in result.output
    with app.app_context():
        assert AdminSession.query.count() == 0


def test_hash_password_cli(app):
    result = app.test_cli_runner().invoke(args=["hash-password", "pa55"])
    assert result.output.strip().startswith("$2")


def test_login_with_non_string_json_is_rejected(app, client):
    resp = client.post("/admin/login", json={"username": 123, "password": 456})

    assert resp.status_code == 401
    assert b"Invalid credentials" in resp.data
    with app.app_context():
        assert AdminSession.query.count() == 0


def test_login_with_json_list_body_is_rejected(client):
    resp = client.post("/admin/login", json=["frontdesk", "s3cret-pass"])

    assert resp.status_code == 401
    assert b"Invalid credentials" in resp.data


def test_login_accepts_json_credentials(client):
    resp = client.post("/admin/login", json={"username": ADMIN_USER, "password": ADMIN_PASS})

    assert resp.status_code == 302
    assert client.get("/admin/bookings").status_code == 200


def test_activity_extends_idle_window(app, admin_client):
    with app.app_context():
        sess = AdminSession.query.one()
        sess.last_seen_at = datetime.utcnow() - timedelta(minutes=20)
        db.session.commit()

    assert admin_client.get("/admin/bookings").status_code == 200
    with app.app_context():
        seen = AdminSession.query.one().last_seen_at
        assert datetime.utcnow() - seen < timedelta(minutes=1)


def test_revoked_session_cookie_is_not_reusable(app, admin_client):
    token = admin_client.get_cookie("hotel_admin_session").value
    admin_client.get("/admin/logout")

    other = app.test_client()
    other.set_cookie("hotel_admin_session", token)
    assert other.get("/admin/bookings").status_code == 302


def test_admin_actions_are_audited_with_username(app, admin_client):
    admin_client.post("/admin/rooms/toggle/1")

    with app.app_context():
        row = AuditLog.query.filter_by(action="ROOM_STATUS_TOGGLE").one()
        assert row.actor == ADMIN_USER
