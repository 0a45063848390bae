"""
Quiz history I/O models.

History rows are display-ready: the date is formatted ``dd.MM.yyyy`` and the
total time as ``m:ss min``.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from .base import CamelModel

if TYPE_CHECKING:
    from intelliq_api.core.database.entities import Quiz


def format_total_time(seconds: Optional[int]) -> str:
    """Format a duration in seconds as ``m:ss min`` (``h:mm:ss min`` from one hour)."""
    hours, rest = divmod(int(seconds or 0), 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d} min"
    return f"{minutes}:{secs:02d} min"


def format_date(value: datetime) -> str:
    return value.strftime("%d.%m.%Y")


class QuizHistoryItem(CamelModel):
    """One row of the history page."""

    id: str
    title: str
    score: Optional[int] = None
    total_time: str
    date: str
    correct: Optional[int] = None
    incorrect: Optional[int] = None

    @classmethod
    def from_entity(cls, quiz: "Quiz") -> "QuizHistoryItem":
        incorrect = None
        if quiz.correct_answers_count is not None:
            incorrect = quiz.questions_count - quiz.correct_answers_count
        return cls(
            id=str(quiz.id),
            title=quiz.title,
            score=quiz.user_score,
            total_time=format_total_time(quiz.total_time_taken),
            date=format_date(quiz.created_at),
            correct=quiz.correct_answers_count,
            incorrect=incorrect,
        )


class Pagination(CamelModel):
    """Page metadata of a paginated listing."""

    page: int
    limit: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def build(cls, *, page: int, limit: int, total_items: int) -> "Pagination":
        return cls(
            page=page,
            limit=limit,
            total_items=total_items,
            total_pages=math.ceil(total_items / limit),
            has_next_page=page * limit < total_items,
            has_previous_page=page > 1,
        )


class QuizHistoryResponse(CamelModel):
    """Response of ``GET /history``."""

    data: List[QuizHistoryItem]
    pagination: Pagination
