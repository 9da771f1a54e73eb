"""Caller-facing room actions: create, join, leave, ready, state."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from contextlib import contextmanager

from roomlobby.core.clock import to_utc_iso
from roomlobby.core.clock import utc_now
from roomlobby.core.db import Database
from roomlobby.rooms import membership
from roomlobby.rooms import store
from roomlobby.rooms.codes import JoinCodeAllocator
from roomlobby.rooms.errors import GameEndedError
from roomlobby.rooms.errors import GameInProgressError
from roomlobby.rooms.errors import RoomError
from roomlobby.rooms.failover import reassign_host
from roomlobby.rooms.query import snapshot
from roomlobby.rooms.records import MAX_ROOM_MODE
from roomlobby.rooms.records import MIN_ROOM_MODE
from roomlobby.rooms.records import STATUS_FINISHED
from roomlobby.rooms.records import STATUS_PLAYING
from roomlobby.rooms.records import CreatedRoom
from roomlobby.rooms.records import JoinedRoom
from roomlobby.rooms.records import LeaveOutcome
from roomlobby.rooms.records import RoomView

logger = logging.getLogger(__name__)


@contextmanager
def _log_rejections(action: str, **context: object) -> Iterator[None]:
    """Log a domain rejection at WARNING before it propagates to the caller."""
    try:
        yield
    except RoomError as exc:
        details = " ".join(f"{key}={value}" for key, value in context.items())
        logger.warning("%s rejected %s: %s: %s", action, details, type(exc).__name__, exc)
        raise


def _code_exists_checker(database: Database):
    def code_exists(join_code: str) -> bool:
        with database.connect() as conn:
            return store.join_code_exists(conn, join_code=join_code)

    return code_exists


def create_room(
    *,
    database: Database,
    user_id: str,
    username: str,
    mode: int,
    max_code_attempts: int | None = None,
    rng: random.Random | None = None,
) -> CreatedRoom:
    """Create a waiting room with the caller as its only member and host."""
    if not MIN_ROOM_MODE <= mode <= MAX_ROOM_MODE:
        raise ValueError(f"mode must be {MIN_ROOM_MODE}-{MAX_ROOM_MODE}, got {mode}")

    allocator = JoinCodeAllocator(
        _code_exists_checker(database),
        rng=rng,
        max_attempts=max_code_attempts,
    )
    with _log_rejections("create_room", user_id=user_id):
        join_code = allocator.allocate()
        now_iso = to_utc_iso(utc_now())

        with database.transaction() as conn:
            room_id = store.create_room(
                conn,
                join_code=join_code,
                mode=mode,
                host_user_id=user_id,
                created_at=now_iso,
            )
            membership.add_player(
                conn,
                room_id=room_id,
                user_id=user_id,
                username=username,
                is_host=True,
                joined_at=now_iso,
            )

    logger.info("room_id=%s created by user_id=%s join_code=%s mode=%d", room_id, user_id, join_code, mode)
    return CreatedRoom(room_id=room_id, join_code=join_code, mode=mode)


def join_room(*, database: Database, user_id: str, username: str, join_code: str) -> JoinedRoom:
    """Join a waiting room by code; joining a room you are already in succeeds."""
    with _log_rejections("join_room", user_id=user_id, join_code=join_code), database.transaction() as conn:
        room = store.find_room_by_code(conn, join_code=join_code)
        if room.status == STATUS_PLAYING:
            raise GameInProgressError(f"room_id={room.room_id} game already in progress")
        if room.status == STATUS_FINISHED:
            raise GameEndedError(f"room_id={room.room_id} game has ended")

        if membership.get_player(conn, room_id=room.room_id, user_id=user_id) is not None:
            return JoinedRoom(room_id=room.room_id, mode=room.mode, already_member=True)

        membership.add_player(
            conn,
            room_id=room.room_id,
            user_id=user_id,
            username=username,
            is_host=False,
            joined_at=to_utc_iso(utc_now()),
        )

    logger.info("user_id=%s joined room_id=%s", user_id, room.room_id)
    return JoinedRoom(room_id=room.room_id, mode=room.mode, already_member=False)


def leave_room(*, database: Database, user_id: str, room_id: int) -> LeaveOutcome:
    """Remove the caller; delete the room if it empties, else hand off host."""
    with _log_rejections("leave_room", user_id=user_id, room_id=room_id), database.transaction() as conn:
        was_host = membership.remove_player(conn, room_id=room_id, user_id=user_id)
        if membership.count_players(conn, room_id=room_id) == 0:
            store.delete_room(conn, room_id=room_id)
            outcome = LeaveOutcome(room_deleted=True)
        elif was_host:
            outcome = LeaveOutcome(room_deleted=False, new_host_user_id=reassign_host(conn, room_id=room_id))
        else:
            outcome = LeaveOutcome(room_deleted=False)

    if outcome.room_deleted:
        logger.info("user_id=%s left room_id=%s, room deleted", user_id, room_id)
    else:
        logger.info("user_id=%s left room_id=%s", user_id, room_id)
    return outcome


def set_ready(*, database: Database, user_id: str, room_id: int, ready: bool) -> bool:
    """Update the caller's ready flag and return it."""
    with _log_rejections("set_ready", user_id=user_id, room_id=room_id), database.transaction() as conn:
        membership.set_ready(conn, room_id=room_id, user_id=user_id, ready=ready)
    logger.info("user_id=%s in room_id=%s ready=%s", user_id, room_id, ready)
    return ready


def get_room_state(*, database: Database, room_id: int, user_id: str) -> RoomView:
    """Return the room snapshot; may start the game as a side effect."""
    with _log_rejections("get_room_state", user_id=user_id, room_id=room_id):
        return snapshot(database, room_id=room_id, requesting_user_id=user_id)
