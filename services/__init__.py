from .booking_store import (
    create_booking,
    list_bookings,
    get_booking,
    update_booking,
    delete_booking,
    seed_rooms,
)
from .status_sync import toggle_booking_status
from .room_status import list_room_statuses, list_rooms, get_room, toggle_room_status
