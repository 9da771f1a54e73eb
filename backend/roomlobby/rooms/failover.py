"""Host reassignment when the current host leaves."""

from __future__ import annotations

import logging
import sqlite3

from roomlobby.rooms import membership
from roomlobby.rooms import store
from roomlobby.rooms.errors import PlayerNotFoundError

logger = logging.getLogger(__name__)


def reassign_host(conn: sqlite3.Connection, *, room_id: int) -> str:
    """Promote the earliest-joined remaining member and point the room at them.

    Must run inside the same transaction as the host's removal so the player
    flag and rooms.host_user_id change together.
    """
    successor = membership.earliest_member(conn, room_id=room_id)
    if successor is None:
        raise PlayerNotFoundError(f"room_id={room_id} has no members to promote")

    conn.execute(
        "UPDATE players SET is_host = 1 WHERE room_id = ? AND user_id = ?",
        (room_id, successor.user_id),
    )
    store.set_host(conn, room_id=room_id, user_id=successor.user_id)
    logger.info("room_id=%s host reassigned to user_id=%s", room_id, successor.user_id)
    return successor.user_id
