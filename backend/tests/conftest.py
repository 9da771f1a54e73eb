"""Shared fixtures for lobby tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from roomlobby.core.db import Database
from roomlobby.rooms.schema import init_rooms_schema


@pytest.fixture
def database(tmp_path: Path) -> Database:
    """File-backed database with the room schema in place."""
    db = Database(str(tmp_path / "lobby.sqlite3"))
    init_rooms_schema(db)
    return db
