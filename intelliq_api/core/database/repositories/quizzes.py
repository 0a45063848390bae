"""
Quiz repository.

Backs the history page: a user's played quizzes, filtered and paginated.
"""

from __future__ import annotations

import uuid
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from intelliq_api.core.models.domain.enums import QuizType

from ..entities.quizzes import Quiz
from .base import AsyncBaseRepository, QueryBuilder


class QuizRepository(AsyncBaseRepository[Quiz]):
    """Repository for played quizzes."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Quiz)

    async def list_history(
        self,
        user_id: uuid.UUID,
        *,
        quiz_type: Optional[QuizType] = None,
        passed: Optional[bool] = None,
        tags: Optional[Sequence[str]] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Quiz], int]:
        """List a user's quizzes, newest first.

        Args:
            user_id: Owner of the quizzes
            quiz_type: Only quizzes of this type
            passed: Only passed (True) or failed (False) quizzes
            tags: Only quizzes sharing at least one of these tags
            limit: Page size
            offset: Number of matching quizzes to skip

        Returns:
            The requested page and the total number of matching quizzes
        """
        filters = {"user_id": user_id, "type": quiz_type, "passed": passed}
        stmt = QueryBuilder.apply_filters(select(Quiz), Quiz, filters)
        stmt = stmt.order_by(Quiz.created_at.desc())  # type: ignore

        if tags:
            # Tags live in a JSON column, so the overlap test runs here instead of in SQL.
            wanted = set(tags)
            result = await self.session.execute(stmt)
            matching = [quiz for quiz in result.scalars().all() if wanted.intersection(quiz.tags or [])]
            return matching[offset : offset + limit], len(matching)

        count_stmt = QueryBuilder.apply_filters(select(func.count()).select_from(Quiz), Quiz, filters)
        total = (await self.session.execute(count_stmt)).scalar_one()

        result = await self.session.execute(QueryBuilder.apply_pagination(stmt, limit, offset))
        return list(result.scalars().all()), int(total)
