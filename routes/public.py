from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError

from models import db
from models.contact import Contact
from models.lounge_booking import LoungeBooking
from services import create_booking
from utils.audit import log_event_quietly
from utils.notifications import send_booking_emails, send_contact_emails, send_lounge_emails

public_bp = Blueprint("public", __name__)

LOUNGE_REQUIRED = ("name", "email", "phone", "tableType", "LoungeGuest", "date", "time")


def _payload():
    # The website posts JSON; plain HTML forms post urlencoded
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


@public_bp.get("/")
def index():
    return "Hotel Booking API is running...", 200, {"Content-Type": "text/plain; charset=utf-8"}


@public_bp.get("/api/test")
def api_test():
    return jsonify(status="success", message="Test route is working!"), 200


@public_bp.post("/book")
def book():
    data = _payload()
    fields = {
        "name": data.get("name"),
        "email": data.get("email"),
        "phone": data.get("phone"),
        "room": data.get("room", "Not specified"),
        "guests": data.get("guests", 1),
        "check_in": data.get("checkIn", data.get("check_in")),
        "check_out": data.get("checkOut", data.get("check_out")),
    }

    try:
        booking = create_booking(fields)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Saving booking failed")
        return jsonify(success=False, message="Server error"), 500

    log_event_quietly("BOOKING_CREATE", entity="booking", entity_id=booking.id, metadata={"room": booking.room})
    current_app.logger.info("Booking %s saved for %s", booking.id, booking.name)

    # the booking stays saved even when email fails
    if send_booking_emails(booking):
        return jsonify(success=True, message="Booking saved & email sent"), 200
    return jsonify(success=True, message="Booking saved (email failed to send)"), 200


@public_bp.post("/contact")
def contact():
    data = _payload()
    row = Contact(
        name=str(data.get("name") or "").strip(),
        email=str(data.get("email") or "").strip(),
        message=str(data.get("message") or "").strip(),
    )

    try:
        db.session.add(row)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Saving contact failed")
        return jsonify(success=False, message="Server error"), 500

    log_event_quietly("CONTACT_CREATE", entity="contact", entity_id=row.id)
    send_contact_emails(row)
    return jsonify(success=True, message="Contact saved"), 200


@public_bp.post("/lounge")
def lounge():
    data = _payload()
    missing = [k for k in LOUNGE_REQUIRED if not str(data.get(k) or "").strip()]
    if missing:
        return jsonify(success=False, message="All required fields must be filled."), 400

    try:
        guests = int(data.get("LoungeGuest"))
    except (TypeError, ValueError):
        return jsonify(success=False, message="LoungeGuest must be a number."), 400

    row = LoungeBooking(
        name=str(data["name"]).strip(),
        email=str(data["email"]).strip(),
        phone=str(data["phone"]).strip(),
        table_type=str(data["tableType"]).strip(),
        guests=guests,
        date=str(data["date"]).strip(),
        time=str(data["time"]).strip(),
        message=str(data.get("message") or "").strip() or None,
    )

    try:
        db.session.add(row)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Saving lounge booking failed")
        return jsonify(success=False, message="Server error"), 500

    log_event_quietly("LOUNGE_CREATE", entity="lounge_booking", entity_id=row.id, metadata={"table_type": row.table_type})
    current_app.logger.info(
        "Lounge booking saved for %s (%s on %s %s)", row.name, row.table_type, row.date, row.time
    )
    send_lounge_emails(row)
    return jsonify(success=True), 200
