"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlalchemy import Enum as SAEnum
from sqlmodel import SQLModel

from intelliq_api.core.models.domain.enums import QuizType


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Current UTC time, timezone-aware."""
    return datetime.now(timezone.utc)


# Shared so both tables reference the same Postgres enum type.
quiz_type_enum = SAEnum(QuizType, name="quiz_type")
