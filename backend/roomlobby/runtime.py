"""Process-wide runtime state shared by request handlers."""

from __future__ import annotations

from roomlobby.core.config import Settings
from roomlobby.core.config import load_settings
from roomlobby.core.db import Database
from roomlobby.core.logging_config import configure_logging
from roomlobby.rooms.schema import init_rooms_schema

settings = load_settings()
database = Database(
    settings.lobby_sqlite_path,
    busy_timeout_seconds=settings.lobby_sqlite_busy_timeout_seconds,
)


def startup() -> None:
    """Reload settings, rebind the database and ensure the schema exists."""
    global settings, database
    settings = load_settings()
    configure_logging(settings)
    database = Database(
        settings.lobby_sqlite_path,
        busy_timeout_seconds=settings.lobby_sqlite_busy_timeout_seconds,
    )
    init_rooms_schema(database)


__all__ = [
    "Settings",
    "database",
    "settings",
    "startup",
]
