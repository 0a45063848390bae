"""
Quiz generation I/O models.

``GeneratedQuiz`` doubles as the structured-output schema handed to the LLM,
so its field descriptions are part of the prompt.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import Field, field_validator

from intelliq_api.core.models.domain.enums import QuizType, SupportedLanguage

from .base import CamelModel

DEFAULT_NUMBER_OF_QUESTIONS = 4
MAX_NUMBER_OF_QUESTIONS = 10


class GeneratedQuestion(CamelModel):
    """A single multiple-choice question."""

    question_title: str = Field(description="Short, creative and unique title of the question")
    text: str = Field(description="The question itself")
    options: List[str] = Field(description="Exactly four answers labelled a), b), c) and d)")
    correct_answer: str = Field(description="The correct option, copied verbatim from options")


class GeneratedQuiz(CamelModel):
    """A quiz."""

    quiz_title: str = Field(description="Title of the whole quiz")
    questions: List[GeneratedQuestion]


class QuizGenerationRequest(CamelModel):
    """Validated query of ``GET /quizzes/generate``."""

    quiz_topic: str = Field(min_length=1, description="Quiz topic is required")
    quiz_description: str = Field(min_length=1, description="Quiz description is required")
    number_of_questions: int = Field(
        default=DEFAULT_NUMBER_OF_QUESTIONS,
        ge=1,
        le=MAX_NUMBER_OF_QUESTIONS,
        description="How many questions to generate",
    )
    quiz_tags: List[str] = Field(default_factory=list, description="Tags the questions should touch on")
    language: SupportedLanguage = Field(default=SupportedLanguage.en)
    quiz_type: QuizType = Field(default=QuizType.singleplayer)

    @field_validator("quiz_tags", mode="before")
    @classmethod
    def split_tags(cls, value: Any) -> Any:
        """Accept a comma separated string; blank entries are dropped."""
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [str(tag).strip() for tag in value if str(tag).strip()]
        return value

    @field_validator("language", mode="before")
    @classmethod
    def lowercase_language(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class QuizGenerationResponse(CamelModel):
    """Response of ``GET /quizzes/generate``."""

    quiz: GeneratedQuiz
