from flask import Blueprint, request, current_app, g, redirect, url_for

from security.password import check_admin_credentials
from security.session import open_session, close_session
from utils.audit import log_event
from utils.pages import render_login, render_message


auth_bp = Blueprint("auth", __name__, url_prefix="/admin")


@auth_bp.get("/login")
def login_page():
    if getattr(g, "admin", None) is not None:
        return redirect(url_for("admin.bookings"))
    return render_login(), 200


@auth_bp.post("/login")
def login():
    # the login page posts a form; scripts may post JSON
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form
    username = str(data.get("username") or "").strip()
    password = str(data.get("password") or "")

    if not check_admin_credentials(username, password):
        log_event("ADMIN_LOGIN_FAIL", metadata={"username": username})
        current_app.logger.warning("Failed admin login for %r", username)
        return render_login(error="Invalid credentials. Try again."), 401

    resp = open_session(redirect(url_for("admin.bookings")), username)
    log_event("ADMIN_LOGIN_SUCCESS", actor=username)
    return resp


@auth_bp.route("/logout", methods=["GET", "POST"])
def logout():
    resp = current_app.make_response(
        (render_message("Logged out.", link=url_for("auth.login_page"), link_text="Login again"), 200)
    )
    if close_session(resp):
        log_event("ADMIN_LOGOUT")
    return resp
