"""
Feedback I/O models.

Submitted from the marketing site's testimonial form.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from .base import CamelModel


class FeedbackCreate(CamelModel):
    """Body of ``POST /feedback``."""

    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=320)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    social_media: str = Field(default="", max_length=200)
    message: str = Field(min_length=1, max_length=5000)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class FeedbackReceipt(CamelModel):
    """Ids of the emails Resend accepted."""

    email_ids: List[str]
