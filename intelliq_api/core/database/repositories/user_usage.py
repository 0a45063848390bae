"""
Usage row repository.

Append-only access to the token usage recorded per quiz generation, plus the
per-user aggregation served by the usage endpoint.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.user_usage import UserUsageData
from .base import AsyncBaseRepository


class UserUsageRepository(AsyncBaseRepository[UserUsageData]):
    """Repository for usage rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserUsageData)

    @staticmethod
    def _in_range(stmt, from_date: Optional[datetime], to_date: Optional[datetime]):
        if from_date is not None:
            stmt = stmt.where(UserUsageData.created_at >= from_date)
        if to_date is not None:
            stmt = stmt.where(UserUsageData.created_at <= to_date)
        return stmt

    async def list_for_user(
        self,
        user_id: uuid.UUID,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> List[UserUsageData]:
        """List usage rows of a user, newest first.

        Args:
            user_id: Owner of the rows
            from_date: Inclusive lower bound on ``created_at``
            to_date: Inclusive upper bound on ``created_at``
        """
        stmt = select(UserUsageData).where(UserUsageData.user_id == user_id)
        stmt = self._in_range(stmt, from_date, to_date).order_by(UserUsageData.created_at.desc())  # type: ignore
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def totals_for_user(
        self,
        user_id: uuid.UUID,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> Dict[str, int]:
        """Sum token usage of a user.

        Returns:
            Dictionary with prompt_tokens, completion_tokens, total_tokens and
            requests; all zero when the user has no rows in range
        """
        stmt = select(
            func.coalesce(func.sum(UserUsageData.prompt_tokens), 0),
            func.coalesce(func.sum(UserUsageData.completion_tokens), 0),
            func.coalesce(func.sum(UserUsageData.total_tokens), 0),
            func.count(UserUsageData.id),
        ).where(UserUsageData.user_id == user_id)
        stmt = self._in_range(stmt, from_date, to_date)
        result = await self.session.execute(stmt)
        prompt_tokens, completion_tokens, total_tokens, requests = result.one()
        return {
            "prompt_tokens": int(prompt_tokens),
            "completion_tokens": int(completion_tokens),
            "total_tokens": int(total_tokens),
            "requests": int(requests),
        }
