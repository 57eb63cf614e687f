"""SQLite support for development and tests."""

# Standard library imports
from typing import Any

# Third-party imports
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine


def is_sqlite_url(url: str) -> bool:
    return url.startswith("sqlite")


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> AsyncEngine:
    """
    SQLite ignores foreign keys unless asked on every connection.
    Community notes and upvotes rely on them for referential integrity.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:  # noqa
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine
