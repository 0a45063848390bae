from typing import Any, AsyncGenerator, Dict

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from intelliq_api.core.database import create_all, create_sessionmaker

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory database with all tables per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest.fixture
def quiz_payload() -> Dict[str, Any]:
    """A quiz as the LLM returns it (camelCase keys)."""
    return {
        "quizTitle": "The Solar System",
        "questions": [
            {
                "questionTitle": "Red Neighbour",
                "text": "Which planet is known as the Red Planet?",
                "options": ["a) Venus", "b) Mars", "c) Jupiter", "d) Saturn"],
                "correctAnswer": "b) Mars",
            },
            {
                "questionTitle": "Giant of Gas",
                "text": "Which planet is the largest?",
                "options": ["a) Jupiter", "b) Earth", "c) Neptune", "d) Mercury"],
                "correctAnswer": "a) Jupiter",
            },
        ],
    }
