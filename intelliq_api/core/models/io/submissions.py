"""
Quiz submission I/O models.

A submission is a finished quiz as the client played it: the questions with
their options, the correct answer and what the player picked. Submissions
are what fill the history page.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional, Sequence

from pydantic import Field

from intelliq_api.core.models.domain.enums import SupportedLanguage

from .base import CamelModel


class SubmittedQuestion(CamelModel):
    text: str = Field(min_length=1)
    options: List[str] = Field(default_factory=list)
    correct_answer: str
    user_answer: Optional[str] = Field(default=None, description="Option picked by the player; null when skipped")

    @property
    def is_correct(self) -> bool:
        return self.user_answer is not None and self.user_answer == self.correct_answer


class QuizSubmissionBase(CamelModel):
    quiz_title: str = Field(min_length=1)
    description: str = Field(default="")
    topic: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    passing_score: int = Field(default=50, ge=0, le=100, description="Percentage needed to pass")
    language: SupportedLanguage = Field(default=SupportedLanguage.en)
    questions: List[SubmittedQuestion] = Field(min_length=1)


class SingleplayerSubmission(QuizSubmissionBase):
    """Body of ``POST /quiz-submissions/singleplayer``."""

    user_score: int = Field(ge=0, description="Number of correctly answered questions")
    time_taken: int = Field(ge=0, description="Seconds spent on the quiz")


class MultiplayerSubmission(QuizSubmissionBase):
    """Body of ``POST /quiz-submissions/multiplayer/{roomCode}``.

    Sent once by the host when the room's quiz is over. The host's own result
    is optional.
    """

    user_score: Optional[int] = Field(default=None, ge=0)
    time_taken: Optional[int] = Field(default=None, ge=0)


def count_correct_answers(questions: Sequence[SubmittedQuestion]) -> int:
    return sum(1 for question in questions if question.is_correct)


def has_passed(user_score: int, questions_count: int, passing_score: int) -> bool:
    """Whether ``user_score`` correct answers out of ``questions_count`` reach ``passing_score`` percent."""
    return 100 * user_score >= passing_score * questions_count


class AnsweredQuestion(CamelModel):
    text: str
    correct_answer: str
    user_answer: Optional[str] = None


class QuizSubmissionResult(CamelModel):
    """Response of ``POST /quiz-submissions/singleplayer``."""

    quiz_id: uuid.UUID
    quiz_title: str
    quiz_score: Optional[int] = None
    total_time: Optional[int] = None
    correct_answers_count: int
    total_questions: int
    passing_score: int
    passed: Optional[bool] = None
    questions: List[AnsweredQuestion]


class MultiplayerSubmissionResult(QuizSubmissionResult):
    """Response of ``POST /quiz-submissions/multiplayer/{roomCode}``."""

    room_code: str
    ended_at: datetime
