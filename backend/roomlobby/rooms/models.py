"""Pydantic models for room API request bodies."""

from __future__ import annotations

import unicodedata

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from roomlobby.rooms.records import MAX_ROOM_MODE
from roomlobby.rooms.records import MIN_ROOM_MODE


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class _NamedPlayerRequest(_CamelModel):
    user_id: str = Field(alias="userId", min_length=1)
    username: str = Field(min_length=1)

    @field_validator("username")
    @classmethod
    def normalize_username(cls, value: str) -> str:
        """Trim and NFC-normalize; a name that is only whitespace is rejected."""
        normalized = unicodedata.normalize("NFC", value.strip())
        if not normalized:
            raise ValueError("username must not be blank")
        return normalized


class CreateRoomRequest(_NamedPlayerRequest):
    """POST /api/rooms request body."""

    mode: int = Field(ge=MIN_ROOM_MODE, le=MAX_ROOM_MODE)


class JoinRoomRequest(_NamedPlayerRequest):
    """POST /api/rooms/join request body."""

    join_code: str = Field(alias="joinCode", min_length=1)


class LeaveRoomRequest(_CamelModel):
    """POST /api/rooms/{room_id}/leave request body."""

    user_id: str = Field(alias="userId", min_length=1)


class ReadyRequest(_CamelModel):
    """POST /api/rooms/{room_id}/ready request body."""

    user_id: str = Field(alias="userId", min_length=1)
    ready: bool
