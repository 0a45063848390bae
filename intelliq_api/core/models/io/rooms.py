"""
Room I/O models for API requests and responses.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from intelliq_api.core.models.domain.enums import RoomSetting, SupportedLanguage

from .base import CamelModel

ROOM_CODE_MIN_LENGTH = 4
ROOM_CODE_MAX_LENGTH = 16

# Inclusive bounds per changeable setting.
SETTING_BOUNDS = {
    RoomSetting.max_players: (2, 10),
    RoomSetting.num_questions: (1, 10),
    RoomSetting.time_limit: (5, 300),
}


class RoomCapacityRead(CamelModel):
    """Response of ``GET /rooms/{roomCode}``."""

    max_players: int


class RoomRead(CamelModel):
    """Full room record."""

    id: uuid.UUID
    quiz_id: Optional[uuid.UUID] = None
    host_id: uuid.UUID
    max_players: int
    num_questions: int
    time_limit: int
    language: str
    code: str
    created_at: datetime
    ended_at: Optional[datetime] = None


class RoomCreate(CamelModel):
    """Body of ``POST /rooms``. The host is always the caller."""

    code: Optional[str] = Field(
        default=None,
        min_length=ROOM_CODE_MIN_LENGTH,
        max_length=ROOM_CODE_MAX_LENGTH,
        description="Invite code; generated when omitted",
    )
    max_players: int = Field(default=5, ge=2, le=10)
    num_questions: int = Field(default=5, ge=1, le=10)
    time_limit: int = Field(default=30, ge=5, le=300, description="Seconds per question")
    language: SupportedLanguage = Field(default=SupportedLanguage.en)


class RoomSettingsUpdate(CamelModel):
    """Body of ``PATCH /rooms/{roomCode}/settings``."""

    type: RoomSetting
    value: int

    @model_validator(mode="after")
    def check_bounds(self) -> "RoomSettingsUpdate":
        low, high = SETTING_BOUNDS[self.type]
        if not low <= self.value <= high:
            raise ValueError(f"{self.type.value} must be between {low} and {high}")
        return self
