"""
Usage row entity models.

Every quiz generation request appends one row recording the tokens the LLM
call consumed, which model answered and how long it took.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Column
from sqlmodel import Field

from intelliq_api.core.models.domain.enums import QuizType

from ..base import Base, quiz_type_enum, utc_now


class UserUsageData(Base, table=True):
    """Token consumption of a single quiz generation.

    Table: user_usage_data
    """

    __tablename__ = "user_usage_data"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(index=True)

    prompt_tokens: int = Field()
    completion_tokens: int = Field()
    total_tokens: int = Field()

    used_model: str = Field(max_length=128)
    count_questions: int = Field()
    response_time_taken: float = Field(description="Seconds the LLM call took")
    prompt: str = Field(description="Quiz topic the generation was requested for")
    language: str = Field(max_length=8)
    quiz_type: QuizType = Field(
        default=QuizType.singleplayer,
        sa_column=Column(quiz_type_enum, nullable=False),
    )

    created_at: datetime = Field(default_factory=utc_now, index=True)

    def __repr__(self) -> str:
        return f"UserUsageData(id={self.id}, user_id={self.user_id}, total_tokens={self.total_tokens})"
