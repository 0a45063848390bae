"""
Repositories for the IntelliQ database layer.

Each repository wraps an ``AsyncSession`` and exposes the queries the API
needs for one table.
"""

from .base import AsyncBaseRepository, QueryBuilder
from .quizzes import QuizRepository
from .rooms import RoomRepository
from .user_usage import UserUsageRepository

__all__ = [
    "AsyncBaseRepository",
    "QueryBuilder",
    "QuizRepository",
    "RoomRepository",
    "UserUsageRepository",
]
