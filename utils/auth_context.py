from functools import wraps
from flask import g, redirect, url_for
from security.session import current_admin

def load_current_admin():
    g.admin = current_admin()

def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if getattr(g, "admin", None) is None:
            return redirect(url_for("auth.login_page"))
        return fn(*args, **kwargs)
    return wrapper
