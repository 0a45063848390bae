"""
Room entity models.

A room is a multiplayer quiz session. Players join it with a short invite
code; presence inside the room is handled by the realtime channel, not here.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class Room(Base, table=True):
    """Multiplayer quiz session.

    Table: rooms
    """

    __tablename__ = "rooms"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    quiz_id: Optional[uuid.UUID] = Field(default=None, index=True)
    host_id: uuid.UUID = Field(index=True)

    max_players: int = Field(default=4)
    num_questions: int = Field()
    time_limit: int = Field(default=30)
    language: str = Field(default="en", max_length=8)

    code: str = Field(unique=True, index=True, max_length=16)

    created_at: datetime = Field(default_factory=utc_now)
    ended_at: Optional[datetime] = Field(default=None)

    def __repr__(self) -> str:
        return f"Room(id={self.id}, code={self.code}, host_id={self.host_id})"
