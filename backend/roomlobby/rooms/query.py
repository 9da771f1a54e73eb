"""Room snapshots for polling clients."""

from __future__ import annotations

import logging

from roomlobby.core.db import Database
from roomlobby.rooms import membership
from roomlobby.rooms import store
from roomlobby.rooms.game_states import get_latest_game_state
from roomlobby.rooms.readiness import evaluate_and_maybe_start
from roomlobby.rooms.records import STATUS_PLAYING
from roomlobby.rooms.records import RoomView

logger = logging.getLogger(__name__)


def snapshot(database: Database, *, room_id: int, requesting_user_id: str) -> RoomView:
    """Build a consistent RoomView, starting the game if everyone is ready.

    This is not a pure read: polling is what moves a fully-ready room from
    waiting to playing, so the whole snapshot runs in a write transaction.
    """
    with database.transaction() as conn:
        readiness = evaluate_and_maybe_start(conn, room_id=room_id)
        room = store.get_room(conn, room_id=room_id)
        players = membership.list_players(conn, room_id=room_id)
        game_state = None
        if room.status == STATUS_PLAYING:
            game_state = get_latest_game_state(conn, room_id=room_id)

    logger.debug(
        "room_id=%s snapshot for user_id=%s status=%s players=%d",
        room_id,
        requesting_user_id,
        room.status,
        len(players),
    )
    return RoomView(
        room_id=room.room_id,
        join_code=room.join_code,
        mode=room.mode,
        status=room.status,
        host_user_id=room.host_user_id,
        started_at=room.started_at,
        players=players,
        game_state=game_state,
        all_ready=readiness.all_ready,
    )
