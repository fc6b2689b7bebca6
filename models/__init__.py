from .db import db, commit_or_rollback
from .room import Room, STATUS_AVAILABLE, STATUS_BOOKED, next_status
from .booking import Booking
from .contact import Contact
from .lounge_booking import LoungeBooking
from .session import AdminSession
from .audit_log import AuditLog
