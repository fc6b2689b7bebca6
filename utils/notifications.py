"""
Admin notification and guest auto-reply for each public form.

Each helper returns True only if every message went out. Failures are
logged and audited, never raised.
"""
from flask import current_app
from markupsafe import escape

from utils.audit import log_event_quietly
from utils.emailer import send_transactional_email


def _addresses():
    admin = current_app.config.get("ADMIN_EMAIL")
    sender = current_app.config.get("EMAIL_FROM") or admin
    return sender, admin


def _hotel():
    return current_app.config.get("HOTEL_NAME") or "Minista of Enjoyment Hotel"


def _details_html(rows):
    return "".join(
        f"<p><strong>{escape(label)}:</strong> {escape(value)}</p>" for label, value in rows
    )


def _details_text(rows):
    return "\n".join(f"{label}: {value}" for label, value in rows)


def _send_all(kind, entity_id, messages):
    all_sent = True
    for message in messages:
        ok, error = send_transactional_email(**message)
        if ok:
            continue
        all_sent = False
        recipients = ", ".join(e for e in message["to_emails"] if e) or "-"
        current_app.logger.warning("%s email to %s failed: %s", kind, recipients, error)
        log_event_quietly("EMAIL_FAILED", entity=kind, entity_id=entity_id, metadata={"error": error})
    return all_sent


def send_booking_emails(booking) -> bool:
    sender, admin = _addresses()
    hotel = _hotel()
    rows = [
        ("Name", booking.name),
        ("Email", booking.email),
        ("Phone", booking.phone),
        ("Room", booking.room),
        ("Guests", booking.guests),
        ("Check-in", booking.check_in),
        ("Check-out", booking.check_out),
    ]
    stay = rows[3:]

    to_admin = {
        "from_email": sender,
        "to_emails": [admin],
        "subject": f"New Booking Received from {booking.name}",
        "text_content": "New booking details:\n" + _details_text(rows),
        "html_content": (
            '<div style="font-family:Arial,sans-serif">'
            "<h3>New Booking Received</h3>" + _details_html(rows) + "</div>"
        ),
    }
    to_guest = {
        "from_email": sender,
        "to_emails": [booking.email],
        "subject": f"Booking Confirmation - {hotel}",
        "text_content": (
            f"Hello {booking.name},\n\n"
            f"Thank you for booking with {hotel}.\n"
            "Here are your booking details:\n\n"
            f"{_details_text(stay)}\n\n"
            "We look forward to your stay!\n\n"
            f"{hotel}"
        ),
        "html_content": (
            '<div style="font-family:Arial,sans-serif">'
            f"<h3>Hello {escape(booking.name)},</h3>"
            f"<p>Thank you for booking with <strong>{escape(hotel)}</strong>.</p>"
            "<p>Here are your booking details:</p>"
            + _details_html(stay)
            + f"<p>We look forward to your stay!</p><p>{escape(hotel)}</p></div>"
        ),
    }
    return _send_all("booking", booking.id, [to_admin, to_guest])


def send_contact_emails(contact) -> bool:
    sender, admin = _addresses()
    hotel = _hotel()

    to_admin = {
        "from_email": sender,
        "to_emails": [admin],
        "subject": f"New Contact Message from {contact.name}",
        "html_content": (
            "<h3>New Contact Form Submission</h3>"
            + _details_html([("Name", contact.name), ("Email", contact.email)])
            + f"<p><strong>Message:</strong></p><p>{escape(contact.message)}</p>"
        ),
    }
    to_guest = {
        "from_email": sender,
        "to_emails": [contact.email],
        "subject": f"Thanks for contacting {hotel}",
        "html_content": (
            '<div style="font-family:Arial,sans-serif">'
            f"<h3>Hi {escape(contact.name)},</h3>"
            "<p>We've received your message and will respond as soon as possible.</p>"
            f"<p>{escape(hotel)}</p></div>"
        ),
    }
    return _send_all("contact", contact.id, [to_admin, to_guest])


def send_lounge_emails(lounge) -> bool:
    sender, admin = _addresses()
    hotel = _hotel()
    rows = [
        ("Name", lounge.name),
        ("Email", lounge.email),
        ("Phone", lounge.phone),
        ("Booking Type", lounge.table_type),
        ("Guest Number", lounge.guests),
        ("Date", lounge.date),
        ("Time", lounge.time),
        ("Message", lounge.message or "No message provided"),
    ]

    to_admin = {
        "from_email": sender,
        "to_emails": [admin],
        "subject": f"New Lounge Booking: {lounge.table_type}",
        "html_content": "<h2>New Lounge Booking</h2>" + _details_html(rows),
        "text_content": (
            f"Lounge booking: {lounge.table_type} - {lounge.name} - {lounge.email} - "
            f"{lounge.phone} - {lounge.guests} - {lounge.date} {lounge.time}"
        ),
    }
    to_guest = {
        "from_email": sender,
        "to_emails": [lounge.email],
        "subject": f"Lounge Booking Confirmation - {hotel}",
        "html_content": (
            f"<h3>Hi {escape(lounge.name)},</h3>"
            "<p>We've received your lounge booking request for "
            f"<strong>{escape(lounge.table_type)}</strong> on <strong>{escape(lounge.date)}</strong> "
            f"at <strong>{escape(lounge.time)}</strong>.</p>"
            "<p>Our team will contact you shortly to confirm your reservation.</p>"
            f"<p>{escape(hotel)}</p>"
        ),
        "text_content": (
            f"Hi {lounge.name}, we received your lounge booking for {lounge.table_type} "
            f"on {lounge.date} at {lounge.time}. We'll contact you to confirm."
        ),
    }
    return _send_all("lounge_booking", lounge.id, [to_admin, to_guest])
