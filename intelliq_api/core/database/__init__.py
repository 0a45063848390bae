"""
Database layer for IntelliQ.

Structure:
- entities/: SQLModel table definitions (rooms, quizzes, usage rows)
- repositories/: async data access per table
- session.py: Global engine and session factory management
- utils.py: Engine and session factory helpers
"""

from .base import Base
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
]
