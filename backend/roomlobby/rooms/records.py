"""Room, player and game-state records read from storage."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Any

MIN_ROOM_MODE = 2
MAX_ROOM_MODE = 16
MIN_PLAYERS_TO_START = 2

STATUS_WAITING = "waiting"
STATUS_PLAYING = "playing"
STATUS_FINISHED = "finished"


@dataclass(slots=True, frozen=True)
class Room:
    """One row of the rooms table."""

    room_id: int
    join_code: str
    mode: int
    status: str
    host_user_id: str
    created_at: str
    started_at: str | None = None


@dataclass(slots=True, frozen=True)
class Player:
    """One membership row; team and bet belong to the game engine."""

    room_id: int
    user_id: str
    username: str
    is_host: bool
    ready: bool
    joined_at: str
    team: str | None = None
    bet: int | None = None


@dataclass(slots=True, frozen=True)
class GameState:
    """Latest engine-produced snapshot for a playing room."""

    room_id: int
    generation: int
    state_data: Any
    winner: str | None = None


@dataclass(slots=True, frozen=True)
class RoomView:
    """Read-only room snapshot returned to a polling client."""

    room_id: int
    join_code: str
    mode: int
    status: str
    host_user_id: str
    started_at: str | None
    players: list[Player] = field(default_factory=list)
    game_state: GameState | None = None
    all_ready: bool = False


@dataclass(slots=True, frozen=True)
class CreatedRoom:
    room_id: int
    join_code: str
    mode: int


@dataclass(slots=True, frozen=True)
class JoinedRoom:
    room_id: int
    mode: int
    already_member: bool


@dataclass(slots=True, frozen=True)
class LeaveOutcome:
    room_deleted: bool
    new_host_user_id: str | None = None
