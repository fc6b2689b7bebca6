from models import db, commit_or_rollback
from models.room import Room, next_status


def list_room_statuses():
    return [{"name": r.name, "status": r.status} for r in list_rooms()]


def list_rooms():
    return Room.query.order_by(Room.id.asc()).all()


def get_room(room_id: int):
    return db.session.get(Room, room_id)


def toggle_room_status(room_id: int):
    """
    Flips a single room. Bookings are never touched, even one naming this
    room, so the two can drift apart until that booking is toggled again.
    """
    room = get_room(room_id)
    if room is None:
        return None

    room.status = next_status(room.status)
    commit_or_rollback()
    return room.status
