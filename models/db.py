from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

db = SQLAlchemy()


def commit_or_rollback():
    """Commit the current session; on failure roll back and re-raise."""
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
