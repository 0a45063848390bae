"""Error types raised by the service layer.

Routers translate these into HTTP responses through the exception handlers in
``intelliq_api.server.exception_handlers``; services never build responses.
"""

from __future__ import annotations

from typing import Any, Optional


class IntelliQServiceError(Exception):
    """Base error for failures of an external service call."""


class QuizGenerationError(IntelliQServiceError):
    """Raised when the LLM call fails or returns an unusable quiz."""


class TranslationError(IntelliQServiceError):
    """Raised when AWS Translate rejects or fails a request.

    Args:
        message: Human-readable error description.
        target_language: Language code the text was being translated to.
    """

    def __init__(self, message: str, *, target_language: Optional[str] = None) -> None:
        super().__init__(message)
        self.target_language = target_language


class TranslationConfigError(TranslationError):
    """Raised when the AWS credentials or region are not configured."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"AWS Translate is not configured, missing: {', '.join(missing)}")
        self.missing = missing


class RoomCodeExhaustedError(IntelliQServiceError):
    """Raised when no free invite code was found within the attempt budget."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"Could not generate a unique room code after {attempts} attempts")
        self.attempts = attempts


class MailerError(IntelliQServiceError):
    """Raised when Resend refuses a contact or an email batch.

    Args:
        message: Human-readable error description.
        details: Optional payload returned by Resend.
    """

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.details = details
