"""
Room repository.

Data access for multiplayer rooms. Rooms are addressed by their invite code
everywhere outside this module.
"""

from __future__ import annotations

import uuid
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from intelliq_api.core.models.domain.enums import RoomSetting

from ..base import utc_now
from ..entities.rooms import Room
from .base import AsyncBaseRepository


class RoomRepository(AsyncBaseRepository[Room]):
    """Repository for room data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Room)

    async def get_by_code(self, code: str) -> Optional[Room]:
        """Get a room by its invite code.

        Args:
            code: Invite code

        Returns:
            Room instance or None
        """
        stmt = select(Room).where(Room.code == code).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def code_exists(self, code: str) -> bool:
        """Whether a room already uses the invite code."""
        return await self.get_by_code(code) is not None

    async def update_setting(self, code: str, setting: RoomSetting, value: Any) -> Optional[Room]:
        """Change a single room setting.

        Args:
            code: Invite code of the room
            setting: Which setting to change
            value: New value

        Returns:
            The updated room, or None when no room has the code
        """
        room = await self.get_by_code(code)
        if room is None:
            return None
        setattr(room, setting.column, value)
        self.session.add(room)
        await self.session.commit()
        await self.session.refresh(room)
        return room

    async def end(self, code: str, quiz_id: Optional[uuid.UUID] = None) -> Optional[Room]:
        """Mark a room as ended.

        Already ended rooms keep their timestamp.

        Args:
            code: Invite code of the room
            quiz_id: Quiz played in the room; linked to the room when given

        Returns:
            The ended room, or None when no room has the code
        """
        room = await self.get_by_code(code)
        if room is None:
            return None
        if quiz_id is not None:
            room.quiz_id = quiz_id
        if room.ended_at is None:
            room.ended_at = utc_now()
        self.session.add(room)
        await self.session.commit()
        await self.session.refresh(room)
        return room
