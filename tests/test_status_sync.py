import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from models import db
from models.booking import Booking
from models.room import Room, next_status
from services import create_booking, toggle_booking_status


def _room(name):
    return Room.query.filter_by(name=name).one()


def _new_booking(room="Room 3", status=None):
    booking = create_booking({"name": "Guest", "room": room})
    if status is not None:
        booking.status = status
        db.session.commit()
    return booking


@pytest.mark.parametrize(
    "current, expected",
    [
        ("booked", "available"),
        ("available", "booked"),
        (None, "booked"),
        ("", "booked"),
        ("pending", "booked"),
        ("BOOKED", "booked"),
    ],
)
def test_next_status_only_special_cases_booked(current, expected):
    assert next_status(current) == expected


def test_toggle_scenario_room_follows_booking(app_ctx):
    booking = _new_booking("Room 3")

    assert toggle_booking_status(booking.id) == "booked"
    assert db.session.get(Booking, booking.id).status == "booked"
    assert _room("Room 3").status == "booked"

    assert toggle_booking_status(booking.id) == "available"
    assert db.session.get(Booking, booking.id).status == "available"
    assert _room("Room 3").status == "available"


def test_booked_booking_toggled_twice_is_booked_again(app_ctx):
    booking = _new_booking("Room 2", status="booked")

    assert toggle_booking_status(booking.id) == "available"
    assert _room("Room 2").status == "available"
    assert toggle_booking_status(booking.id) == "booked"
    assert _room("Room 2").status == "booked"


def test_null_status_toggles_to_booked(app_ctx):
    booking = _new_booking("Room 1")
    booking.status = None
    db.session.commit()

    assert toggle_booking_status(booking.id) == "booked"


def test_toggle_leaves_other_rooms_alone(app_ctx):
    booking = _new_booking("Room 4")

    toggle_booking_status(booking.id)

    others = Room.query.filter(Room.name != "Room 4").all()
    assert others
    assert all(r.status == "available" for r in others)


def test_toggle_with_unknown_room_label_still_updates_booking(app_ctx):
    booking = _new_booking("Garden Suite")

    assert toggle_booking_status(booking.id) == "booked"
    assert db.session.get(Booking, booking.id).status == "booked"
    assert all(r.status == "available" for r in Room.query.all())


def test_toggle_missing_booking_returns_none(app_ctx):
    assert toggle_booking_status(12345) is None


def test_failed_room_write_rolls_back_booking_write(app_ctx, monkeypatch):
    booking = _new_booking("Room 3")
    booking_id = booking.id

    def broken_commit(self):
        raise OperationalError("UPDATE rooms", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "commit", broken_commit)
    with pytest.raises(OperationalError):
        toggle_booking_status(booking_id)
    monkeypatch.undo()

    db.session.expire_all()
    assert db.session.get(Booking, booking_id).status == "available"
    assert _room("Room 3").status == "available"
