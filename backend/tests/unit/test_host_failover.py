"""Host reassignment tests."""

from __future__ import annotations

import pytest

from roomlobby.core.db import Database
from roomlobby.rooms import membership
from roomlobby.rooms import store
from roomlobby.rooms.errors import PlayerNotFoundError
from roomlobby.rooms.failover import reassign_host
from tests.room_helpers import host_flags


def _seed_room(database: Database, user_ids: list[str]) -> int:
    with database.transaction() as conn:
        room_id = store.create_room(
            conn,
            join_code="HST234",
            mode=4,
            host_user_id=user_ids[0],
            created_at="2026-01-01T00:00:00.000000Z",
        )
        for idx, user_id in enumerate(user_ids):
            membership.add_player(
                conn,
                room_id=room_id,
                user_id=user_id,
                username=user_id,
                is_host=idx == 0,
                joined_at=f"2026-01-01T00:00:{idx:02d}.000000Z",
            )
    return room_id


def test_reassign_picks_earliest_remaining_member(database: Database) -> None:
    """Input: host h leaves a,b,c room -> Output: a (earliest) becomes host on both records."""
    room_id = _seed_room(database, ["h", "a", "b", "c"])
    with database.transaction() as conn:
        membership.remove_player(conn, room_id=room_id, user_id="h")
        new_host = reassign_host(conn, room_id=room_id)
        room = store.get_room(conn, room_id=room_id)

    assert new_host == "a"
    assert room.host_user_id == "a"
    assert host_flags(database, room_id) == {"a": True, "b": False, "c": False}


def test_reassign_on_empty_room_raises(database: Database) -> None:
    room_id = _seed_room(database, ["h"])
    with database.transaction() as conn:
        membership.remove_player(conn, room_id=room_id, user_id="h")
        with pytest.raises(PlayerNotFoundError):
            reassign_host(conn, room_id=room_id)


def test_reassign_follows_insertion_order_not_clock(database: Database) -> None:
    """Input: clock stepped back before b joined -> Output: a (inserted first) still becomes host."""
    room_id = _seed_room(database, ["h", "a"])
    with database.transaction() as conn:
        membership.add_player(
            conn,
            room_id=room_id,
            user_id="b",
            username="b",
            is_host=False,
            joined_at="2025-12-31T23:59:59.000000Z",
        )
        membership.remove_player(conn, room_id=room_id, user_id="h")
        new_host = reassign_host(conn, room_id=room_id)
        players = membership.list_players(conn, room_id=room_id)

    assert new_host == "a"
    assert [player.user_id for player in players] == ["a", "b"]
