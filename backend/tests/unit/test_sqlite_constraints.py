"""SQLite schema constraint tests for the room tables."""

from __future__ import annotations

import sqlite3

import pytest

from roomlobby.core.db import Database
from roomlobby.core.db import StorageError
from roomlobby.core.db import create_sqlite_connection
from roomlobby.rooms.schema import CREATE_ROOMS_SCHEMA_SQL


def _memory_conn() -> sqlite3.Connection:
    conn = create_sqlite_connection(":memory:")
    conn.executescript(CREATE_ROOMS_SCHEMA_SQL)
    return conn


def _insert_room(conn: sqlite3.Connection, join_code: str, mode: int = 4) -> int:
    cursor = conn.execute(
        """
        INSERT INTO rooms (join_code, mode, status, host_user_id, created_at)
        VALUES (?, ?, 'waiting', 'u1', '2026-01-01T00:00:00.000000Z')
        """,
        (join_code, mode),
    )
    return int(cursor.lastrowid)


def _insert_player(conn: sqlite3.Connection, room_id: int, user_id: str, is_host: bool) -> None:
    conn.execute(
        """
        INSERT INTO players (room_id, user_id, username, is_host, ready, joined_at)
        VALUES (?, ?, ?, ?, 0, '2026-01-01T00:00:00.000000Z')
        """,
        (room_id, user_id, user_id, int(is_host)),
    )


def test_foreign_keys_enabled() -> None:
    """Input: player row for missing room -> Output: FK integrity error."""
    conn = _memory_conn()
    with pytest.raises(sqlite3.IntegrityError):
        _insert_player(conn, 999, "ghost", False)


def test_join_code_is_unique() -> None:
    """Input: two rooms with the same code -> Output: integrity error."""
    conn = _memory_conn()
    _insert_room(conn, "ABCDEF")
    with pytest.raises(sqlite3.IntegrityError):
        _insert_room(conn, "ABCDEF")


@pytest.mark.parametrize("mode", [1, 17])
def test_mode_out_of_range_is_rejected(mode: int) -> None:
    conn = _memory_conn()
    with pytest.raises(sqlite3.IntegrityError):
        _insert_room(conn, "ABCDEF", mode=mode)


def test_second_host_in_room_is_rejected() -> None:
    """Input: two is_host=1 rows in one room -> Output: partial unique index violation."""
    conn = _memory_conn()
    room_id = _insert_room(conn, "ABCDEF")
    _insert_player(conn, room_id, "u1", True)
    _insert_player(conn, room_id, "u2", False)
    with pytest.raises(sqlite3.IntegrityError):
        _insert_player(conn, room_id, "u3", True)


def test_deleting_room_cascades_to_players(database: Database) -> None:
    """Input: delete room with members -> Output: membership rows removed too."""
    with database.transaction() as conn:
        room_id = _insert_room(conn, "ABCDEF")
        _insert_player(conn, room_id, "u1", True)
        conn.execute("DELETE FROM rooms WHERE id = ?", (room_id,))
        (remaining,) = conn.execute("SELECT COUNT(*) FROM players").fetchone()
    assert remaining == 0


def test_transaction_rolls_back_on_error(database: Database) -> None:
    """Input: exception inside transaction -> Output: earlier insert discarded."""
    with pytest.raises(RuntimeError):
        with database.transaction() as conn:
            _insert_room(conn, "ABCDEF")
            raise RuntimeError("boom")

    with database.connect() as conn:
        (count,) = conn.execute("SELECT COUNT(*) FROM rooms").fetchone()
    assert count == 0


def test_unexpected_constraint_failure_surfaces_as_storage_error(database: Database) -> None:
    """Input: second host row through a transaction -> Output: StorageError, nothing committed."""
    with database.transaction() as conn:
        room_id = _insert_room(conn, "ABCDEF")
        _insert_player(conn, room_id, "u1", True)

    with pytest.raises(StorageError):
        with database.transaction() as conn:
            _insert_player(conn, room_id, "u2", True)

    with database.connect() as conn:
        (count,) = conn.execute("SELECT COUNT(*) FROM players").fetchone()
    assert count == 1
