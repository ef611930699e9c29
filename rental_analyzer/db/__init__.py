"""
Property store: engine, sessions and models.
"""

from rental_analyzer.db.database import (
    SessionLocal,
    create_store_engine,
    engine,
    get_db,
    init_db,
    store_session,
)
from rental_analyzer.db.models import Base, Property

__all__ = [
    "Base",
    "Property",
    "SessionLocal",
    "create_store_engine",
    "engine",
    "get_db",
    "init_db",
    "store_session",
]
