import logging
import uuid
from contextlib import contextmanager

from sqlalchemy import inspect
from sqlalchemy.orm import Session, make_transient

from .extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def session_scope(bind=None):
    # commits on success, rolls back on error; instances stay readable after close
    session = Session(bind=bind if bind is not None else db.engine,
                      expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def coerce_id(value):
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


def attach(session, entity):
    # absent rows are inserted now, stored rows are merged rather than inserted twice
    if entity in session:
        return entity
    model = type(entity)
    with session.no_autoflush:
        stored = session.get(model, entity.id) if entity.id is not None else None
    if stored is None:
        if inspect(entity).detached:
            # row was deleted since the instance was loaded
            make_transient(entity)
        logger.debug("Inserting %s %s", model.__name__, entity.id)
        session.add(entity)
        session.flush()
        return entity
    return session.merge(entity)
