"""
Database boundary.

Async SQLAlchemy engine/session management, ORM models and CRUD singletons.
"""

from tutorbot.boundary.db.connection import (
    create_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)

__all__ = [
    "create_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
]
