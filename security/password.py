import hmac

import bcrypt
from flask import current_app

def hash_password(plain_password: str) -> str:
    if not isinstance(plain_password, str) or len(plain_password) == 0:
        raise ValueError("Password must be a non-empty string")

    # bcrypt expects bytes
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")

def verify_password(plain_password: str, password_hash: str) -> bool:
    if not plain_password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            password_hash.encode("utf-8")
        )
    except ValueError:
        # malformed hash or password over bcrypt's 72 byte limit
        return False

def _same(a: str, b: str) -> bool:
    return hmac.compare_digest((a or "").encode("utf-8"), (b or "").encode("utf-8"))

def check_admin_credentials(username: str, password: str) -> bool:
    """
    Single admin account from config. ADMIN_PASSWORD_HASH (bcrypt) is used
    when set, otherwise the plaintext ADMIN_PASS.
    """
    expected_user = current_app.config.get("ADMIN_USER")
    if not username or not expected_user or not _same(username, expected_user):
        return False

    password_hash = current_app.config.get("ADMIN_PASSWORD_HASH")
    if password_hash:
        return verify_password(password, password_hash)

    expected_pass = current_app.config.get("ADMIN_PASS")
    if not password or not expected_pass:
        return False
    return _same(password, expected_pass)
