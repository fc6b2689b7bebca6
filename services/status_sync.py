from models import db, commit_or_rollback
from models.booking import Booking
from models.room import Room, next_status


def toggle_booking_status(booking_id: int):
    """
    Flips a booking between "available" and "booked" and copies the new
    status onto every room whose name equals ``booking.room``.

    Both writes share one transaction. Returns the new status, or None
    when the booking does not exist.
    """
    booking = db.session.get(Booking, booking_id)
    if booking is None:
        return None

    new_status = next_status(booking.status)
    booking.status = new_status

    # zero matching rooms is fine (free-text room label)
    Room.query.filter_by(name=booking.room).update(
        {"status": new_status}, synchronize_session="fetch"
    )

    commit_or_rollback()
    return new_status
