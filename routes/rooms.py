from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError

from services import list_room_statuses

rooms_bp = Blueprint("rooms", __name__, url_prefix="/api/rooms")


@rooms_bp.get("/status")
def room_status():
    try:
        rooms = list_room_statuses()
    except SQLAlchemyError:
        current_app.logger.exception("Fetching room status failed")
        return jsonify(success=False, message="Error fetching room status"), 500
    return jsonify(success=True, rooms=rooms), 200
