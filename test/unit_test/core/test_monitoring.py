"""
Unit tests for Logfire monitoring helpers.
"""

from unittest.mock import MagicMock, patch

from intelliq_api.core import monitoring
from intelliq_api.server.core.config import LogfireConfig


def patched_settings(**kwargs):
    mock_settings = MagicMock()
    mock_settings.logfire = LogfireConfig(**kwargs)
    return patch.object(monitoring, "settings", mock_settings)


class TestInitializeLogfire:
    def test_disabled(self):
        with patched_settings(enabled=False), patch.object(monitoring, "logfire") as mock_logfire:
            assert monitoring.initialize_logfire() is False

        mock_logfire.configure.assert_not_called()

    def test_enabled_without_token(self):
        with patched_settings(enabled=True), patch.object(monitoring, "logfire") as mock_logfire:
            assert monitoring.initialize_logfire() is False

        mock_logfire.configure.assert_not_called()

    def test_enabled(self):
        app = MagicMock()
        with patched_settings(enabled=True, token="tok", environment="production"), patch.object(
            monitoring, "logfire"
        ) as mock_logfire:
            assert monitoring.initialize_logfire(app) is True

        mock_logfire.configure.assert_called_once_with(
            token="tok",
            service_name="intelliq-api",
            service_version="0.1.0",
            environment="production",
        )
        mock_logfire.instrument_pydantic_ai.assert_called_once()
        mock_logfire.instrument_sqlalchemy.assert_called_once()
        mock_logfire.instrument_httpx.assert_called_once()
        mock_logfire.instrument_fastapi.assert_called_once_with(app)


class TestLogHelpers:
    def test_log_quiz_generation(self):
        with patch.object(monitoring, "logfire") as mock_logfire:
            monitoring.log_quiz_generation("gpt-4o-mini", 321, 1.5, "de")

        kwargs = mock_logfire.info.call_args[1]
        assert kwargs == {"model": "gpt-4o-mini", "total_tokens": 321, "duration_seconds": 1.5, "language": "de"}

    def test_log_error_with_context(self):
        with patch.object(monitoring, "logfire") as mock_logfire:
            monitoring.log_error("TranslationError", "throttled", {"path": "/api/v1/quizzes/generate"})

        kwargs = mock_logfire.error.call_args[1]
        assert kwargs["error_type"] == "TranslationError"
        assert kwargs["path"] == "/api/v1/quizzes/generate"
