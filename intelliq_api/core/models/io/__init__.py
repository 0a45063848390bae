"""
I/O models for API requests and responses.

These models define the JSON contract of the API (camelCase field names) and
are kept separate from the database entities.

Modules:
- quizzes: Quiz generation request, LLM output schema and response
- rooms: Room reads, creation and settings updates
- history: Paginated quiz history
- usage: Aggregated token usage
- feedback: Testimonial/feedback submissions
- submissions: Finished quizzes sent back by the client
"""

from .feedback import FeedbackCreate, FeedbackReceipt
from .history import Pagination, QuizHistoryItem, QuizHistoryResponse
from .quizzes import (
    GeneratedQuestion,
    GeneratedQuiz,
    QuizGenerationRequest,
    QuizGenerationResponse,
)
from .rooms import RoomCapacityRead, RoomCreate, RoomRead, RoomSettingsUpdate
from .submissions import (
    MultiplayerSubmission,
    MultiplayerSubmissionResult,
    QuizSubmissionResult,
    SingleplayerSubmission,
)
from .usage import UsagePeriod, UsageRecord, UsageSummary

__all__ = [
    "FeedbackCreate",
    "FeedbackReceipt",
    "GeneratedQuestion",
    "GeneratedQuiz",
    "MultiplayerSubmission",
    "MultiplayerSubmissionResult",
    "Pagination",
    "QuizGenerationRequest",
    "QuizGenerationResponse",
    "QuizHistoryItem",
    "QuizHistoryResponse",
    "QuizSubmissionResult",
    "RoomCapacityRead",
    "RoomCreate",
    "RoomRead",
    "RoomSettingsUpdate",
    "SingleplayerSubmission",
    "UsagePeriod",
    "UsageRecord",
    "UsageSummary",
]
