"""Ready-check aggregation that starts a waiting room."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence
from dataclasses import dataclass

from roomlobby.core.clock import to_utc_iso
from roomlobby.core.clock import utc_now
from roomlobby.rooms import membership
from roomlobby.rooms import store
from roomlobby.rooms.records import MIN_PLAYERS_TO_START
from roomlobby.rooms.records import STATUS_PLAYING
from roomlobby.rooms.records import STATUS_WAITING
from roomlobby.rooms.records import Player

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ReadinessResult:
    all_ready: bool
    status: str
    started: bool


def is_all_ready(players: Sequence[Player]) -> bool:
    return len(players) >= MIN_PLAYERS_TO_START and all(player.ready for player in players)


def evaluate_and_maybe_start(conn: sqlite3.Connection, *, room_id: int) -> ReadinessResult:
    """Start the room if every member (at least two) is ready.

    Run inside a write transaction. The status update only matches a waiting
    row, so exactly one caller observes ``started=True`` per room.
    """
    room = store.get_room(conn, room_id=room_id)
    all_ready = is_all_ready(membership.list_players(conn, room_id=room_id))

    if not all_ready or room.status != STATUS_WAITING:
        return ReadinessResult(all_ready=all_ready, status=room.status, started=False)

    started = store.set_status_playing(conn, room_id=room_id, started_at=to_utc_iso(utc_now()))
    if started:
        logger.info("room_id=%s all players ready, game started", room_id)
    return ReadinessResult(all_ready=all_ready, status=STATUS_PLAYING, started=started)
