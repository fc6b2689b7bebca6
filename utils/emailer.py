import smtplib
from email.message import EmailMessage

from flask import current_app


def _build_message(from_email, to_emails, subject, html_content, text_content):
    msg = EmailMessage()
    msg["From"] = from_email
    msg["To"] = ", ".join(to_emails)
    msg["Subject"] = subject
    if text_content:
        msg.set_content(text_content)
        if html_content:
            msg.add_alternative(html_content, subtype="html")
    else:
        msg.set_content(html_content or "", subtype="html")
    return msg


def _send_smtp(msg: EmailMessage):
    host = current_app.config.get("SMTP_HOST")
    port = current_app.config.get("SMTP_PORT", 587)
    username = current_app.config.get("SMTP_USERNAME")
    password = current_app.config.get("SMTP_PASSWORD")
    use_tls = current_app.config.get("SMTP_USE_TLS", True)
    timeout = current_app.config.get("SMTP_TIMEOUT_SECONDS", 10)

    if not host:
        return False, "Email not configured"

    try:
        with smtplib.SMTP(host, port, timeout=timeout) as server:
            if use_tls:
                server.starttls()
            if username and password:
                server.login(username, password)
            server.send_message(msg)
        return True, None
    except (smtplib.SMTPException, OSError) as exc:
        return False, str(exc)


def _send_log(msg: EmailMessage):
    current_app.logger.info("Email to %s: %s", msg["To"], msg["Subject"])
    return True, None


PROVIDERS = {
    "smtp": _send_smtp,
    "log": _send_log,
}


def send_transactional_email(from_email, to_emails, subject="", html_content="", text_content=""):
    """
    Sends one message through the provider named by EMAIL_PROVIDER.
    Returns (ok, error). Never raises: callers treat email as best-effort.
    """
    recipients = [e for e in (to_emails or []) if e]
    if not from_email or not recipients:
        return False, "Email not configured"

    provider = current_app.config.get("EMAIL_PROVIDER", "smtp")
    sender = PROVIDERS.get(provider)
    if sender is None:
        return False, f"Unknown email provider: {provider}"

    msg = _build_message(from_email, recipients, subject, html_content, text_content)
    return sender(msg)
