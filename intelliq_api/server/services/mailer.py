"""Feedback mail delivery through Resend.

A feedback submission adds the sender to the marketing audience and sends
two emails in one batch: a thank-you note to the sender and a notification
to the support inbox (reply-to set to the sender).
"""

from __future__ import annotations

import asyncio
from html import escape
from typing import Any

import resend
from resend.exceptions import ResendError

from intelliq_api.core.logging_config import get_logger
from intelliq_api.core.models.io.feedback import FeedbackCreate
from intelliq_api.server.core.config import ResendConfig

from .errors import MailerError

logger = get_logger(__name__)

THANK_YOU_SUBJECT = "We Appreciate Your Feedback - IntelliQ"


def _thank_you_html(name: str) -> str:
    return (
        f"<p>Hi {escape(name)},</p>"
        "<p>Thank you for taking the time to share your feedback about IntelliQ. "
        "We read every message and use it to make the product better.</p>"
        "<p>The IntelliQ team</p>"
    )


def _support_html(feedback: FeedbackCreate) -> str:
    return (
        f"<p><strong>Name:</strong> {escape(feedback.full_name)}</p>"
        f"<p><strong>Email:</strong> {escape(feedback.email)}</p>"
        f"<p><strong>Social media:</strong> {escape(feedback.social_media)}</p>"
        f"<p><strong>Message:</strong></p><p>{escape(feedback.message)}</p>"
        "<p>Ask the sender for a profile picture before publishing the testimonial.</p>"
    )


def build_feedback_batch(feedback: FeedbackCreate, config: ResendConfig) -> list[dict[str, Any]]:
    """Return the two Resend email payloads for a feedback submission."""
    return [
        {
            "from": config.sender,
            "to": [feedback.email],
            "subject": THANK_YOU_SUBJECT,
            "html": _thank_you_html(feedback.full_name),
        },
        {
            "from": config.sender,
            "to": [config.support_address],
            "reply_to": [feedback.email],
            "subject": f"New Testimonial: {feedback.social_media}",
            "html": _support_html(feedback),
        },
    ]


class FeedbackMailer:
    """Send feedback emails with the Resend SDK."""

    def __init__(self, config: ResendConfig) -> None:
        if not config.api_key:
            raise MailerError("RESEND_API_KEY environment variable is not set")
        self._config = config
        resend.api_key = config.api_key

    def _send(self, feedback: FeedbackCreate) -> list[str]:
        try:
            if self._config.audience_id:
                resend.Contacts.create(
                    {
                        "audience_id": self._config.audience_id,
                        "email": feedback.email,
                        "first_name": feedback.first_name,
                        "last_name": feedback.last_name,
                        "unsubscribed": False,
                    }
                )
            response = resend.Batch.send(build_feedback_batch(feedback, self._config))
        except ResendError as e:
            logger.error(f"Resend rejected feedback mail for {feedback.email}: {e}")
            raise MailerError(f"Failed to send feedback email: {e}") from e

        data = response.get("data") or []
        return [item["id"] for item in data if item.get("id")]

    async def send_feedback(self, feedback: FeedbackCreate) -> list[str]:
        """
        Add the sender as a contact and send the feedback emails.

        Returns:
            Ids of the emails Resend accepted

        Raises:
            MailerError: Resend refused the contact or the batch
        """
        email_ids = await asyncio.to_thread(self._send, feedback)
        logger.info(f"Feedback from {feedback.email} sent ({len(email_ids)} emails)")
        return email_ids
