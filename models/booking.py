from datetime import datetime
from models.db import db
from models.room import STATUS_AVAILABLE

class Booking(db.Model):
    __tablename__ = "bookings"

    id = db.Column(db.Integer, primary_key=True)

    name = db.Column(db.Text, nullable=False, default="")
    email = db.Column(db.Text, nullable=False, default="")
    phone = db.Column(db.Text, nullable=False, default="")

    # Matched against Room.name by the status toggle; not a foreign key
    room = db.Column(db.Text, nullable=False, default="", index=True)
    guests = db.Column(db.Integer, nullable=False, default=1)

    # Kept as the strings the website sends
    check_in = db.Column(db.Text, nullable=False, default="")
    check_out = db.Column(db.Text, nullable=False, default="")

    status = db.Column(db.String(20), nullable=True, default=STATUS_AVAILABLE)
    # status values: available, booked

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
