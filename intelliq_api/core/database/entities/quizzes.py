"""
Quiz entity models.

Completed quizzes of a user, as listed on the history page.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field

from intelliq_api.core.models.domain.enums import QuizType

from ..base import Base, quiz_type_enum, utc_now


class Quiz(Base, table=True):
    """A quiz played by a user together with its result.

    Table: quizzes
    """

    __tablename__ = "quizzes"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(index=True)

    title: str = Field()
    description: str = Field(default="")
    topic: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    passing_score: int = Field(default=50)
    type: QuizType = Field(
        default=QuizType.singleplayer,
        sa_column=Column(quiz_type_enum, nullable=False),
    )

    questions_count: int = Field(default=0)
    correct_answers_count: Optional[int] = Field(default=None)
    user_score: Optional[int] = Field(default=None)
    passed: Optional[bool] = Field(default=None)
    total_time_taken: Optional[int] = Field(default=None, description="Seconds spent on the quiz")

    created_at: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"Quiz(id={self.id}, title={self.title!r}, type={self.type})"
