"""
Feedback Endpoints.

Receives testimonials from the marketing site and relays them by email.
"""

from fastapi import APIRouter

from intelliq_api.core.models.io.feedback import FeedbackCreate, FeedbackReceipt
from intelliq_api.server.services.deps import MailerDep

router = APIRouter()


@router.post(
    "",
    response_model=FeedbackReceipt,
    summary="Send Feedback",
    description="Add the sender as a contact and email a thank-you note plus a notification to support.",
    responses={500: {"description": "Email delivery failed"}},
)
async def send_feedback(feedback: FeedbackCreate, mailer: MailerDep):
    email_ids = await mailer.send_feedback(feedback)
    return FeedbackReceipt(email_ids=email_ids)
