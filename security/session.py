"""
Per-browser admin sessions.

The browser holds a random token in an HttpOnly cookie; the database only
keeps its SHA-256 digest. A session is live until it is revoked, passes its
absolute expiry, or sits idle longer than IDLE_TIMEOUT_SECONDS.
"""
import hashlib
import secrets
from datetime import datetime, timedelta
from flask import request, current_app

from models import db
from models.session import AdminSession


def _digest(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _cookie_name() -> str:
    return current_app.config.get("ADMIN_COOKIE_NAME", "hotel_admin_session")


def _is_live(sess: AdminSession, now: datetime) -> bool:
    if sess.revoked or sess.expires_at <= now:
        return False
    idle = timedelta(seconds=current_app.config.get("IDLE_TIMEOUT_SECONDS", 1800))
    return (sess.last_seen_at or sess.created_at) + idle > now


def open_session(resp, username: str):
    """Stores a new session for ``username`` and sets its cookie on ``resp``."""
    token = secrets.token_urlsafe(32)
    lifetime = current_app.config.get("SESSION_LIFETIME_SECONDS", 8 * 60 * 60)

    db.session.add(AdminSession(
        username=username,
        token_hash=_digest(token),
        expires_at=datetime.utcnow() + timedelta(seconds=lifetime),
        ip=request.headers.get("X-Forwarded-For", request.remote_addr),
        user_agent=(request.headers.get("User-Agent") or "")[:255],
    ))
    db.session.commit()

    resp.set_cookie(
        _cookie_name(),
        token,
        httponly=True,
        secure=current_app.config.get("SESSION_COOKIE_SECURE", False),
        samesite=current_app.config.get("SESSION_COOKIE_SAMESITE", "Lax"),
        max_age=lifetime,
        path="/",
    )
    return resp


def current_admin():
    """Username behind the request's cookie, or None. Touches last_seen_at."""
    token = request.cookies.get(_cookie_name())
    if not token:
        return None

    sess = AdminSession.query.filter_by(token_hash=_digest(token)).first()
    now = datetime.utcnow()
    if sess is None or not _is_live(sess, now):
        return None

    sess.last_seen_at = now
    db.session.commit()
    return sess.username


def close_session(resp) -> bool:
    """Revokes the request's session (if any) and clears the cookie on ``resp``."""
    token = request.cookies.get(_cookie_name())
    revoked = False
    if token:
        sess = AdminSession.query.filter_by(token_hash=_digest(token), revoked=False).first()
        if sess is not None:
            sess.revoked = True
            db.session.commit()
            revoked = True
    resp.delete_cookie(_cookie_name(), path="/")
    return revoked


def purge_sessions() -> int:
    """Deletes revoked and expired sessions. Returns the number removed."""
    now = datetime.utcnow()
    count = (
        AdminSession.query
        .filter((AdminSession.revoked.is_(True)) | (AdminSession.expires_at <= now))
        .delete(synchronize_session=False)
    )
    db.session.commit()
    return count
