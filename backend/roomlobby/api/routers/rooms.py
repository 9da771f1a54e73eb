"""Room REST routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Query

import roomlobby.runtime as runtime
from roomlobby.api.errors import raise_room_error
from roomlobby.api.errors import raise_storage_error
from roomlobby.api.room_views import room_view_detail
from roomlobby.core.db import StorageError
from roomlobby.rooms import service
from roomlobby.rooms.errors import RoomError
from roomlobby.rooms.models import CreateRoomRequest
from roomlobby.rooms.models import JoinRoomRequest
from roomlobby.rooms.models import LeaveRoomRequest
from roomlobby.rooms.models import ReadyRequest

router = APIRouter()


@router.post("/api/rooms")
def create_room(payload: CreateRoomRequest) -> dict[str, object]:
    """Create a room with the caller as host."""
    try:
        created = service.create_room(
            database=runtime.database,
            user_id=payload.user_id,
            username=payload.username,
            mode=payload.mode,
            max_code_attempts=runtime.settings.lobby_join_code_max_attempts,
        )
    except RoomError as exc:
        raise_room_error(exc, detail={"user_id": payload.user_id})
    except StorageError as exc:
        raise_storage_error(exc)
    return {"roomId": created.room_id, "joinCode": created.join_code, "mode": created.mode}


@router.post("/api/rooms/join")
def join_room(payload: JoinRoomRequest) -> dict[str, object]:
    """Join a room by join code."""
    try:
        joined = service.join_room(
            database=runtime.database,
            user_id=payload.user_id,
            username=payload.username,
            join_code=payload.join_code,
        )
    except RoomError as exc:
        raise_room_error(exc, detail={"join_code": payload.join_code})
    except StorageError as exc:
        raise_storage_error(exc)
    return {"roomId": joined.room_id, "mode": joined.mode, "alreadyMember": joined.already_member}


@router.post("/api/rooms/{room_id}/leave")
def leave_room(room_id: int, payload: LeaveRoomRequest) -> dict[str, object]:
    """Leave one room."""
    try:
        outcome = service.leave_room(database=runtime.database, user_id=payload.user_id, room_id=room_id)
    except RoomError as exc:
        raise_room_error(exc, detail={"room_id": room_id, "user_id": payload.user_id})
    except StorageError as exc:
        raise_storage_error(exc)
    return {
        "success": True,
        "roomDeleted": outcome.room_deleted,
        "hostUserId": outcome.new_host_user_id,
    }


@router.post("/api/rooms/{room_id}/ready")
def set_room_ready(room_id: int, payload: ReadyRequest) -> dict[str, object]:
    """Update the caller's ready flag."""
    try:
        ready = service.set_ready(
            database=runtime.database,
            user_id=payload.user_id,
            room_id=room_id,
            ready=payload.ready,
        )
    except RoomError as exc:
        raise_room_error(exc, detail={"room_id": room_id, "user_id": payload.user_id})
    except StorageError as exc:
        raise_storage_error(exc)
    return {"success": True, "ready": ready}


@router.get("/api/rooms/{room_id}")
def get_room_state(
    room_id: int,
    user_id: str = Query(alias="userId", min_length=1),
) -> dict[str, object]:
    """Return the room snapshot; a fully-ready waiting room starts here."""
    try:
        view = service.get_room_state(database=runtime.database, room_id=room_id, user_id=user_id)
    except RoomError as exc:
        raise_room_error(exc, detail={"room_id": room_id})
    except StorageError as exc:
        raise_storage_error(exc)
    return room_view_detail(view)
