"""Read access to engine-owned game state generations."""

from __future__ import annotations

import json
import sqlite3

from roomlobby.core.db import StorageError
from roomlobby.rooms.records import GameState


def get_latest_game_state(conn: sqlite3.Connection, *, room_id: int) -> GameState | None:
    """Return the highest-generation snapshot, or None before the engine writes one."""
    row = conn.execute(
        """
        SELECT generation, state_data, winner
        FROM game_states
        WHERE room_id = ?
        ORDER BY generation DESC
        LIMIT 1
        """,
        (room_id,),
    ).fetchone()
    if row is None:
        return None
    generation, state_data, winner = row
    try:
        decoded = json.loads(state_data)
    except (TypeError, ValueError) as exc:
        raise StorageError(f"room_id={room_id} generation={generation} has unreadable state_data") from exc
    return GameState(
        room_id=room_id,
        generation=int(generation),
        state_data=decoded,
        winner=None if winner is None else str(winner),
    )
