import pytest
import sqlalchemy as sa

from models import db
from models.booking import Booking
from models.contact import Contact
from models.lounge_booking import LoungeBooking
from models.room import Room
from services import (
    create_booking,
    list_bookings,
    get_booking,
    update_booking,
    delete_booking,
    seed_rooms,
)


def _booking(**overrides):
    fields = {
        "name": "Ada Obi",
        "email": "ada@example.com",
        "phone": "08030000000",
        "room": "Room 3",
        "guests": 2,
        "check_in": "2026-11-01",
        "check_out": "2026-11-04",
    }
    fields.update(overrides)
    return fields


def test_create_defaults_status_to_available(app_ctx):
    booking = create_booking(_booking())

    assert booking.id is not None
    assert booking.status == "available"
    assert booking.created_at is not None
    assert get_booking(booking.id).room == "Room 3"


def test_create_fills_missing_fields(app_ctx):
    booking = create_booking({"name": "Walk-in"})

    assert booking.email == ""
    assert booking.phone == ""
    assert booking.room == ""
    assert booking.guests == 1
    assert booking.check_in == ""


def test_create_falls_back_to_one_guest_for_garbage(app_ctx):
    assert create_booking(_booking(guests="two")).guests == 1
    assert create_booking(_booking(guests="3")).guests == 3


def test_list_is_newest_first(app_ctx):
    first = create_booking(_booking(name="First"))
    second = create_booking(_booking(name="Second"))
    third = create_booking(_booking(name="Third"))

    assert [b.id for b in list_bookings()] == [third.id, second.id, first.id]


def test_get_missing_returns_none(app_ctx):
    assert get_booking(9999) is None


def test_update_overwrites_fields_but_not_status(app_ctx):
    booking = create_booking(_booking())
    booking.status = "booked"
    db.session.commit()

    updated = update_booking(booking.id, _booking(name="Ada O.", room="Room 5", guests="4"))

    assert updated.name == "Ada O."
    assert updated.room == "Room 5"
    assert updated.guests == 4
    assert updated.status == "booked"


def test_update_missing_returns_none(app_ctx):
    assert update_booking(424242, _booking()) is None


def test_delete_removes_only_that_row(app_ctx):
    keep = create_booking(_booking(name="Keep"))
    drop = create_booking(_booking(name="Drop"))

    assert delete_booking(drop.id) is True

    ids = [b.id for b in list_bookings()]
    assert drop.id not in ids
    assert keep.id in ids


def test_delete_nonexistent_is_not_an_error(app_ctx):
    create_booking(_booking())

    assert delete_booking(31337) is False
    assert Booking.query.count() == 1


def test_seed_rooms_is_idempotent(app_ctx):
    # the app already seeded the defaults at startup
    assert seed_rooms(["Room 1", "Room 2"]) == 0
    assert seed_rooms(["Room 1", "Penthouse", "Penthouse"]) == 1

    names = [r.name for r in Room.query.order_by(Room.id).all()]
    assert names == ["Room 1", "Room 2", "Room 3", "Room 4", "Room 5", "Penthouse"]


@pytest.mark.parametrize("model, columns", [
    (Booking, ["name", "email", "phone", "room", "check_in", "check_out"]),
    (Contact, ["name", "email", "message"]),
    (LoungeBooking, ["name", "email", "phone", "table_type", "date", "time", "message"]),
])
def test_guest_text_columns_are_unbounded(model, columns):
    for column in columns:
        assert isinstance(model.__table__.c[column].type, sa.Text), column
