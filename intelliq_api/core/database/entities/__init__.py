"""
Database entity models.

Modules:
- rooms: Multiplayer rooms identified by an invite code
- quizzes: Played quizzes and their results
- user_usage: Token usage rows written per quiz generation
"""

from .quizzes import Quiz
from .rooms import Room
from .user_usage import UserUsageData

__all__ = ["Quiz", "Room", "UserUsageData"]
