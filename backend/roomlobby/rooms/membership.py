"""Persistence helpers for room membership (the players table)."""

from __future__ import annotations

import sqlite3

from roomlobby.rooms.errors import MembershipConflictError
from roomlobby.rooms.errors import PlayerNotFoundError
from roomlobby.rooms.errors import RoomFullError
from roomlobby.rooms.errors import RoomNotFoundError
from roomlobby.rooms.records import Player

_PLAYER_COLUMNS = "room_id, user_id, username, is_host, ready, joined_at, team, bet"
# Row ids follow the serialized insert order; joined_at is wall-clock and
# can step backwards, so it is display-only.
_JOIN_ORDER = "id ASC"


def _player_from_row(row: tuple) -> Player:
    room_id, user_id, username, is_host, ready, joined_at, team, bet = row
    return Player(
        room_id=int(room_id),
        user_id=str(user_id),
        username=str(username),
        is_host=bool(is_host),
        ready=bool(ready),
        joined_at=str(joined_at),
        team=None if team is None else str(team),
        bet=None if bet is None else int(bet),
    )


def add_player(
    conn: sqlite3.Connection,
    *,
    room_id: int,
    user_id: str,
    username: str,
    is_host: bool,
    joined_at: str,
) -> None:
    """Insert a member if the room still has a free slot.

    The capacity check and the insert are one statement, so two joiners
    racing for the last slot cannot both land even outside a transaction.
    """
    try:
        cursor = conn.execute(
            """
            INSERT INTO players (room_id, user_id, username, is_host, ready, joined_at)
            SELECT ?, ?, ?, ?, 0, ?
            FROM rooms
            WHERE rooms.id = ?
              AND (SELECT COUNT(*) FROM players WHERE room_id = ?) < rooms.mode
            """,
            (room_id, user_id, username, int(is_host), joined_at, room_id, room_id),
        )
    except sqlite3.IntegrityError as exc:
        if "players.user_id" not in str(exc):
            raise
        raise MembershipConflictError(f"user_id={user_id} already in room_id={room_id}") from exc

    if cursor.rowcount == 1:
        return

    mode_row = conn.execute("SELECT mode FROM rooms WHERE id = ?", (room_id,)).fetchone()
    if mode_row is None:
        raise RoomNotFoundError(f"room_id={room_id} not found")
    raise RoomFullError(f"room_id={room_id} is full")


def get_player(conn: sqlite3.Connection, *, room_id: int, user_id: str) -> Player | None:
    row = conn.execute(
        f"SELECT {_PLAYER_COLUMNS} FROM players WHERE room_id = ? AND user_id = ?",
        (room_id, user_id),
    ).fetchone()
    if row is None:
        return None
    return _player_from_row(row)


def remove_player(conn: sqlite3.Connection, *, room_id: int, user_id: str) -> bool:
    """Delete one membership row and return whether it held the host flag."""
    row = conn.execute(
        "SELECT id, is_host FROM players WHERE room_id = ? AND user_id = ?",
        (room_id, user_id),
    ).fetchone()
    if row is None:
        raise PlayerNotFoundError(f"user_id={user_id} not in room_id={room_id}")

    player_row_id, is_host = row
    conn.execute("DELETE FROM players WHERE id = ?", (player_row_id,))
    return bool(is_host)


def list_players(conn: sqlite3.Connection, *, room_id: int) -> list[Player]:
    """Return room members, earliest joiner first."""
    rows = conn.execute(
        f"SELECT {_PLAYER_COLUMNS} FROM players WHERE room_id = ? ORDER BY {_JOIN_ORDER}",
        (room_id,),
    ).fetchall()
    return [_player_from_row(row) for row in rows]


def set_ready(conn: sqlite3.Connection, *, room_id: int, user_id: str, ready: bool) -> None:
    cursor = conn.execute(
        "UPDATE players SET ready = ? WHERE room_id = ? AND user_id = ?",
        (int(ready), room_id, user_id),
    )
    if cursor.rowcount == 0:
        raise PlayerNotFoundError(f"user_id={user_id} not in room_id={room_id}")


def count_players(conn: sqlite3.Connection, *, room_id: int) -> int:
    (count,) = conn.execute(
        "SELECT COUNT(*) FROM players WHERE room_id = ?",
        (room_id,),
    ).fetchone()
    return int(count)


def earliest_member(conn: sqlite3.Connection, *, room_id: int) -> Player | None:
    """Return the remaining member who joined first, if any."""
    row = conn.execute(
        f"SELECT {_PLAYER_COLUMNS} FROM players WHERE room_id = ? ORDER BY {_JOIN_ORDER} LIMIT 1",
        (room_id,),
    ).fetchone()
    if row is None:
        return None
    return _player_from_row(row)
