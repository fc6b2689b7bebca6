from models.db import db

STATUS_AVAILABLE = "available"
STATUS_BOOKED = "booked"


def next_status(current):
    """Two-state flip: only "booked" goes back to "available"."""
    return STATUS_AVAILABLE if current == STATUS_BOOKED else STATUS_BOOKED


class Room(db.Model):
    __tablename__ = "rooms"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), unique=True, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_AVAILABLE)
    # status values: available, booked
