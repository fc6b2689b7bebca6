import json
from flask import request, g, current_app
from sqlalchemy.exc import SQLAlchemyError
from models import db
from models.audit_log import AuditLog

def log_event(action: str, actor=None, entity=None, entity_id=None, metadata=None):
    if actor is None:
        actor = getattr(g, "admin", None)

    ip = request.headers.get("X-Forwarded-For", request.remote_addr)
    user_agent = request.headers.get("User-Agent", "")

    row = AuditLog(
        actor=actor,
        action=action,
        entity=entity,
        entity_id=str(entity_id) if entity_id is not None else None,
        ip=ip,
        user_agent=user_agent[:255] if user_agent else None,
        metadata_json=json.dumps(metadata) if metadata else None
    )
    db.session.add(row)
    db.session.commit()


def log_event_quietly(action: str, **kwargs) -> bool:
    """
    log_event for writes that already committed: a failed audit row is
    logged and rolled back instead of turning the request into a 500.
    """
    try:
        log_event(action, **kwargs)
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Audit event %s could not be written", action)
        return False
    return True
