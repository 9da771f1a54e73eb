"""Room-domain error hierarchy."""

from __future__ import annotations


class RoomError(Exception):
    """Base class for room-domain errors."""


class RoomNotFoundError(RoomError):
    """Raised when a room id or join code matches no live room."""


class PlayerNotFoundError(RoomError):
    """Raised when an operation requires existing room membership."""


class MembershipConflictError(RoomError):
    """Raised when inserting a (room, user) pair that already exists."""


class RoomFullError(RoomError):
    """Raised when trying to join a room already holding `mode` players."""


class GameInProgressError(RoomError):
    """Raised when joining a room whose game has started."""


class GameEndedError(RoomError):
    """Raised when joining a room whose game has finished."""


class JoinCodeConflictError(RoomError):
    """Raised when a join code collides with a live room at insert time."""


__all__ = [
    "GameEndedError",
    "GameInProgressError",
    "JoinCodeConflictError",
    "MembershipConflictError",
    "PlayerNotFoundError",
    "RoomError",
    "RoomFullError",
    "RoomNotFoundError",
]
