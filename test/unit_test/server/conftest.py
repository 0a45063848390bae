import uuid
from typing import AsyncGenerator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pydantic_ai.messages import ModelMessage, ModelResponse, ToolCallPart
from pydantic_ai.models.function import AgentInfo, FunctionModel
from sqlalchemy.ext.asyncio import AsyncSession

from intelliq_api.server.core.config import OpenAIConfig
from intelliq_api.server.services.auth import CurrentUser
from intelliq_api.server.services.quiz_generator import QuizGenerator
from intelliq_api.server.services.translator import TranslatorClient


class StubTranslateClient:
    def translate_text(self, Text, SourceLanguageCode, TargetLanguageCode):
        return {"TranslatedText": f"[{TargetLanguageCode}] {Text}"}


@pytest.fixture
def current_user() -> CurrentUser:
    return CurrentUser(id=uuid.uuid4(), email="host@example.com")


@pytest.fixture
def quiz_generator(quiz_payload) -> QuizGenerator:
    def respond(messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        return ModelResponse(parts=[ToolCallPart(info.output_tools[0].name, quiz_payload)])

    return QuizGenerator(OpenAIConfig(), model=FunctionModel(respond, model_name="gpt-test"))


@pytest.fixture
def translator() -> TranslatorClient:
    return TranslatorClient(StubTranslateClient())


@pytest.fixture
def mailer() -> AsyncMock:
    mock_mailer = AsyncMock()
    mock_mailer.send_feedback.return_value = ["m1", "m2"]
    return mock_mailer


@pytest_asyncio.fixture(name="client")
async def client_fixture(
    session: AsyncSession,
    current_user: CurrentUser,
    quiz_generator: QuizGenerator,
    translator: TranslatorClient,
    mailer: AsyncMock,
) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client with mocked lifespan and every external service overridden."""
    from intelliq_api.core.database import get_session
    from intelliq_api.server.main import app
    from intelliq_api.server.services import deps

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[deps.get_current_user] = lambda: current_user
    app.dependency_overrides[deps.get_rate_limiter] = lambda: None
    app.dependency_overrides[deps.get_quiz_generator] = lambda: quiz_generator
    app.dependency_overrides[deps.get_translator] = lambda: translator
    app.dependency_overrides[deps.get_mailer] = lambda: mailer

    # Mock the lifespan to prevent database initialization during tests
    async def mock_lifespan(app):
        yield

    with patch("intelliq_api.server.main.lifespan", mock_lifespan):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            yield client

    app.dependency_overrides.clear()
