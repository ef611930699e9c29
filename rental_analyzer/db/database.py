"""
Property store engine and sessions.

Records are stored as JSON on the property row, so the store only needs a
single table and works against any SQLAlchemy URL. SQLite is the default.
"""

from contextlib import contextmanager
from typing import Callable, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from rental_analyzer.config import get_settings
from rental_analyzer.db.models import Base


def create_store_engine(database_url: str, **engine_options) -> Engine:
    """
    Create an engine for the property store.

    SQLite connections are shared between the request threads FastAPI runs
    sync endpoints on.
    """
    if database_url.startswith("sqlite"):
        connect_args = dict(engine_options.get("connect_args") or {})
        connect_args.setdefault("check_same_thread", False)
        engine_options["connect_args"] = connect_args
    return create_engine(database_url, **engine_options)


engine = create_store_engine(get_settings().database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def init_db(bind: Optional[Engine] = None):
    """Create the property table if missing."""
    Base.metadata.create_all(bind=bind or engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def store_session(
    session_factory: Callable[[], Session] = SessionLocal,
) -> Generator[Session, None, None]:
    """Unit of work over the store: commits on success, rolls back on error."""
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
