"""
Request timing middleware.

Logs every request with its duration through :func:`log_api_request`, adds
an ``X-Process-Time`` header and warns about slow requests. Quiz generation
routinely takes several seconds, so the slow threshold is configurable.
"""

import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from intelliq_api.core.logging_config import get_logger
from intelliq_api.core.monitoring import log_api_request

logger = get_logger(__name__)

DEFAULT_SLOW_REQUEST_MS = 5000.0


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Measure and log the duration of each request."""

    def __init__(self, app: ASGIApp, slow_request_ms: float = DEFAULT_SLOW_REQUEST_MS) -> None:
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"API request failed: {method} {path}",
                exc_info=True,
                extra={"method": method, "path": path, "duration_ms": duration_ms},
            )
            log_api_request(method=method, path=path, status_code=500, duration_ms=duration_ms)
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_api_request(method=method, path=path, status_code=response.status_code, duration_ms=duration_ms)
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"

        if duration_ms > self.slow_request_ms:
            logger.warning(
                f"Slow API request: {method} {path} took {duration_ms:.2f}ms",
                extra={"method": method, "path": path, "duration_ms": duration_ms, "status_code": response.status_code},
            )
        else:
            logger.debug(f"{method} {path} -> {response.status_code} ({duration_ms:.2f}ms)")

        return response
