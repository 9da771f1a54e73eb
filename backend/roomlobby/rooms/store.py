"""Persistence helpers for the rooms table."""

from __future__ import annotations

import sqlite3

from roomlobby.rooms.codes import normalize_join_code
from roomlobby.rooms.errors import JoinCodeConflictError
from roomlobby.rooms.errors import RoomNotFoundError
from roomlobby.rooms.records import STATUS_PLAYING
from roomlobby.rooms.records import STATUS_WAITING
from roomlobby.rooms.records import Room

_ROOM_COLUMNS = "id, join_code, mode, status, host_user_id, created_at, started_at"


def _room_from_row(row: tuple) -> Room:
    room_id, join_code, mode, status, host_user_id, created_at, started_at = row
    return Room(
        room_id=int(room_id),
        join_code=str(join_code),
        mode=int(mode),
        status=str(status),
        host_user_id=str(host_user_id),
        created_at=str(created_at),
        started_at=None if started_at is None else str(started_at),
    )


def create_room(
    conn: sqlite3.Connection,
    *,
    join_code: str,
    mode: int,
    host_user_id: str,
    created_at: str,
) -> int:
    """Insert a waiting room and return its id."""
    try:
        cursor = conn.execute(
            """
            INSERT INTO rooms (join_code, mode, status, host_user_id, created_at)
            VALUES (?, ?, ?, ?, ?)
            """,
            (normalize_join_code(join_code), mode, STATUS_WAITING, host_user_id, created_at),
        )
    except sqlite3.IntegrityError as exc:
        if "join_code" not in str(exc):
            raise
        raise JoinCodeConflictError(f"join_code={join_code} already in use") from exc
    return int(cursor.lastrowid)


def get_room(conn: sqlite3.Connection, *, room_id: int) -> Room:
    """Fetch one room by id."""
    row = conn.execute(f"SELECT {_ROOM_COLUMNS} FROM rooms WHERE id = ?", (room_id,)).fetchone()
    if row is None:
        raise RoomNotFoundError(f"room_id={room_id} not found")
    return _room_from_row(row)


def find_room_by_code(conn: sqlite3.Connection, *, join_code: str) -> Room:
    """Fetch one room by its join code, ignoring case."""
    row = conn.execute(
        f"SELECT {_ROOM_COLUMNS} FROM rooms WHERE join_code = ?",
        (normalize_join_code(join_code),),
    ).fetchone()
    if row is None:
        raise RoomNotFoundError(f"join_code={join_code} not found")
    return _room_from_row(row)


def join_code_exists(conn: sqlite3.Connection, *, join_code: str) -> bool:
    row = conn.execute(
        "SELECT 1 FROM rooms WHERE join_code = ?",
        (normalize_join_code(join_code),),
    ).fetchone()
    return row is not None


def set_status_playing(conn: sqlite3.Connection, *, room_id: int, started_at: str) -> bool:
    """Move a waiting room to playing; return whether this call did it.

    Rooms already playing (or finished) are left untouched, so started_at is
    written at most once.
    """
    cursor = conn.execute(
        """
        UPDATE rooms
        SET status = ?, started_at = ?
        WHERE id = ? AND status = ?
        """,
        (STATUS_PLAYING, started_at, room_id, STATUS_WAITING),
    )
    return cursor.rowcount == 1


def set_host(conn: sqlite3.Connection, *, room_id: int, user_id: str) -> None:
    cursor = conn.execute(
        "UPDATE rooms SET host_user_id = ? WHERE id = ?",
        (user_id, room_id),
    )
    if cursor.rowcount == 0:
        raise RoomNotFoundError(f"room_id={room_id} not found")


def delete_room(conn: sqlite3.Connection, *, room_id: int) -> None:
    """Delete a room; players and game states go with it via ON DELETE CASCADE."""
    conn.execute("DELETE FROM rooms WHERE id = ?", (room_id,))
