from contextlib import contextmanager

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from isp_manager.errors import PersistenceError

db = SQLAlchemy()


@contextmanager
def atomic(operation):
    """
    Run a block of session writes as one unit of work.

    Commits when the block finishes, rolls back everything on any error.
    Store failures are re-raised as PersistenceError, anything else as-is.

    Usage:
        with atomic("create package"):
            db.session.add(pkg)
    """
    try:
        yield db.session
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"{operation} failed: {e}")
        raise PersistenceError(f"Failed to {operation}") from e
    except Exception:
        db.session.rollback()
        raise


@contextmanager
def reading(operation):
    """
    Run session queries, re-raising store failures as PersistenceError.

    Usage:
        with reading("list packages"):
            return Package.query.all()
    """
    try:
        yield db.session
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"{operation} failed: {e}")
        raise PersistenceError(f"Failed to {operation}") from e
