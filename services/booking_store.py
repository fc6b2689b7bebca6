"""
Booking Store: persistence for bookings and the fixed room inventory.

Every write commits its own transaction. Storage errors roll the session
back and propagate as ``SQLAlchemyError`` so the route can answer 500.
"""
from models import db, commit_or_rollback
from models.booking import Booking
from models.room import Room, STATUS_AVAILABLE

EDITABLE_FIELDS = ("name", "email", "phone", "room", "guests", "check_in", "check_out")


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _guests(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 1


def _apply_fields(booking: Booking, fields: dict) -> None:
    booking.name = _text(fields.get("name"))
    booking.email = _text(fields.get("email"))
    booking.phone = _text(fields.get("phone"))
    booking.room = _text(fields.get("room"))
    booking.guests = _guests(fields.get("guests"))
    booking.check_in = _text(fields.get("check_in"))
    booking.check_out = _text(fields.get("check_out"))


def create_booking(fields: dict) -> Booking:
    """
    Inserts a booking. New bookings always start as "available".
    Missing text fields become empty strings, missing guests becomes 1.
    """
    booking = Booking(status=STATUS_AVAILABLE)
    _apply_fields(booking, fields)
    db.session.add(booking)
    commit_or_rollback()
    return booking


def list_bookings():
    # newest first; id breaks ties between rows created in the same instant
    return Booking.query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()


def get_booking(booking_id: int):
    return db.session.get(Booking, booking_id)


def update_booking(booking_id: int, fields: dict):
    """Overwrites the editable fields. Status is left alone. Returns None if absent."""
    booking = get_booking(booking_id)
    if booking is None:
        return None
    _apply_fields(booking, fields)
    commit_or_rollback()
    return booking


def delete_booking(booking_id: int) -> bool:
    """Returns False when nothing was deleted; that is not an error."""
    deleted = Booking.query.filter_by(id=booking_id).delete()
    commit_or_rollback()
    return deleted > 0


def seed_rooms(names) -> int:
    existing = {r.name for r in Room.query.all()}
    added = 0
    for name in names:
        if name not in existing:
            db.session.add(Room(name=name, status=STATUS_AVAILABLE))
            existing.add(name)
            added += 1
    commit_or_rollback()
    return added
