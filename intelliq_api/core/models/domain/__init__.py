"""Domain-level types."""

from __future__ import annotations

from .enums import QuizType, RoomSetting, SupportedLanguage

__all__ = ["QuizType", "RoomSetting", "SupportedLanguage"]
