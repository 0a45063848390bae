"""
Usage statistics I/O models.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from intelliq_api.core.models.domain.enums import QuizType

from .base import CamelModel


class UsagePeriod(CamelModel):
    from_date: Optional[datetime] = Field(default=None, alias="from")
    to_date: Optional[datetime] = Field(default=None, alias="to")


class UsageSummary(CamelModel):
    """Aggregated token usage of the caller."""

    user_id: uuid.UUID
    period: UsagePeriod
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    requests: int


class UsageRecord(CamelModel):
    """One quiz generation as recorded in the usage table."""

    id: uuid.UUID
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    used_model: str
    count_questions: int
    response_time_taken: float
    prompt: str
    language: str
    quiz_type: QuizType
    created_at: datetime
