"""Room lifecycle and membership domain."""

from roomlobby.rooms.errors import GameEndedError
from roomlobby.rooms.errors import GameInProgressError
from roomlobby.rooms.errors import JoinCodeConflictError
from roomlobby.rooms.errors import MembershipConflictError
from roomlobby.rooms.errors import PlayerNotFoundError
from roomlobby.rooms.errors import RoomError
from roomlobby.rooms.errors import RoomFullError
from roomlobby.rooms.errors import RoomNotFoundError
from roomlobby.rooms.records import Player
from roomlobby.rooms.records import Room
from roomlobby.rooms.records import RoomView
from roomlobby.rooms.service import create_room
from roomlobby.rooms.service import get_room_state
from roomlobby.rooms.service import join_room
from roomlobby.rooms.service import leave_room
from roomlobby.rooms.service import set_ready

__all__ = [
    "GameEndedError",
    "GameInProgressError",
    "JoinCodeConflictError",
    "MembershipConflictError",
    "Player",
    "PlayerNotFoundError",
    "Room",
    "RoomError",
    "RoomFullError",
    "RoomNotFoundError",
    "RoomView",
    "create_room",
    "get_room_state",
    "join_room",
    "leave_room",
    "set_ready",
]
