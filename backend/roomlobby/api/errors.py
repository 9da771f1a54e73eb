"""HTTP error mapping helpers for API routes."""

from __future__ import annotations

import logging
from typing import Any
from typing import NoReturn

from fastapi import HTTPException
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from roomlobby.core.db import StorageError
from roomlobby.rooms.errors import GameEndedError
from roomlobby.rooms.errors import GameInProgressError
from roomlobby.rooms.errors import JoinCodeConflictError
from roomlobby.rooms.errors import MembershipConflictError
from roomlobby.rooms.errors import PlayerNotFoundError
from roomlobby.rooms.errors import RoomError
from roomlobby.rooms.errors import RoomFullError
from roomlobby.rooms.errors import RoomNotFoundError

logger = logging.getLogger(__name__)

_ROOM_ERROR_RESPONSES: dict[type[RoomError], tuple[int, str, str]] = {
    RoomNotFoundError: (404, "ROOM_NOT_FOUND", "room not found"),
    PlayerNotFoundError: (404, "PLAYER_NOT_FOUND", "player not found in room"),
    MembershipConflictError: (409, "MEMBERSHIP_CONFLICT", "player already in room"),
    RoomFullError: (409, "ROOM_FULL", "room is full"),
    GameInProgressError: (409, "GAME_IN_PROGRESS", "game already in progress"),
    GameEndedError: (409, "GAME_ENDED", "game has ended"),
    JoinCodeConflictError: (409, "JOIN_CODE_CONFLICT", "could not allocate a unique join code"),
}


def api_error(*, code: str, message: str, detail: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a unified API error payload."""
    return {"code": code, "message": message, "detail": detail or {}}


def raise_room_error(exc: RoomError, *, detail: dict[str, Any]) -> NoReturn:
    """Translate a room-domain error into its HTTP response."""
    status_code, code, message = _ROOM_ERROR_RESPONSES[type(exc)]
    raise HTTPException(
        status_code=status_code,
        detail=api_error(code=code, message=message, detail=detail),
    ) from exc


def raise_storage_error(exc: StorageError) -> NoReturn:
    logger.exception("storage failure while handling request", exc_info=exc)
    raise HTTPException(
        status_code=500,
        detail=api_error(code="INTERNAL_ERROR", message="internal server error", detail={}),
    ) from exc


async def handle_http_exception(_: Request, exc: HTTPException) -> JSONResponse:
    """Unify HTTP errors to {code,message,detail} payload."""
    if isinstance(exc.detail, dict) and {"code", "message", "detail"} <= set(exc.detail):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=exc.headers,
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=api_error(
            code="HTTP_ERROR",
            message=str(exc.detail),
            detail={},
        ),
        headers=exc.headers,
    )


async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 VALIDATION_ERROR."""
    return JSONResponse(
        status_code=400,
        content=api_error(
            code="VALIDATION_ERROR",
            message="invalid request",
            detail={
                "errors": [
                    {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
                    for error in exc.errors()
                ]
            },
        ),
    )
