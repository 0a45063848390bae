"""
Unit tests for the request timing middleware.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from intelliq_api.server.middleware import RequestTimingMiddleware

MIDDLEWARE_MODULE = "intelliq_api.server.middleware.request_timing"


@pytest.fixture
def mock_request():
    request = AsyncMock(spec=Request)
    request.method = "GET"
    request.url = MagicMock()
    request.url.path = "/api/v1/history"
    return request


class TestRequestTimingMiddleware:
    async def test_logs_successful_request(self, mock_request):
        middleware = RequestTimingMiddleware(app=AsyncMock())

        async def call_next(request):
            return Response(content="ok", status_code=200)

        with patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log:
            response = await middleware.dispatch(mock_request, call_next)

        assert response.status_code == 200
        assert "X-Process-Time" in response.headers
        kwargs = mock_log.call_args[1]
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/api/v1/history"
        assert kwargs["status_code"] == 200
        assert kwargs["duration_ms"] >= 0

    async def test_warns_on_slow_request(self, mock_request):
        middleware = RequestTimingMiddleware(app=AsyncMock(), slow_request_ms=-1)

        async def call_next(request):
            return Response(status_code=201)

        with patch(f"{MIDDLEWARE_MODULE}.log_api_request"), patch(f"{MIDDLEWARE_MODULE}.logger") as mock_logger:
            await middleware.dispatch(mock_request, call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]

    async def test_failed_request_is_logged_and_reraised(self, mock_request):
        middleware = RequestTimingMiddleware(app=AsyncMock())

        async def call_next(request):
            raise RuntimeError("boom")

        with patch(f"{MIDDLEWARE_MODULE}.log_api_request") as mock_log, patch(f"{MIDDLEWARE_MODULE}.logger"):
            with pytest.raises(RuntimeError):
                await middleware.dispatch(mock_request, call_next)

        assert mock_log.call_args[1]["status_code"] == 500
