"""
Exception Handlers for the FastAPI Application.

Maps every error the API can produce onto its JSON error body:
- request/schema validation failures -> 400 with per-field messages
- ``HTTPException`` -> ``{"error": detail}`` with the exception's status
- service errors (LLM, translation, mail) -> 500 with the error message
- anything else -> 500 with an error id that is logged with full context
"""

import traceback
import uuid
from collections import defaultdict
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from intelliq_api.core.logging_config import get_logger
from intelliq_api.core.monitoring import log_error
from intelliq_api.server.services.errors import IntelliQServiceError

logger = get_logger(__name__)

_REQUEST_SOURCES = {"body", "query", "path", "header", "cookie"}
ROOT_ERROR_KEY = "_root"


def flatten_validation_errors(errors: Iterable[dict[str, Any]]) -> dict[str, list[str]]:
    """Group validation messages by field name.

    The request part (``body``, ``query`` ...) is dropped from the location,
    nested locations are joined with dots.
    """
    details: dict[str, list[str]] = defaultdict(list)
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_SOURCES:
            loc = loc[1:]
        field = ".".join(loc) or ROOT_ERROR_KEY
        details[field].append(error.get("msg", "Invalid value"))
    return dict(details)


def _validation_response(errors: Iterable[dict[str, Any]]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "details": flatten_validation_errors(errors)},
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer FastAPI request validation failures with 400 instead of 422."""
    logger.debug(f"Request validation failed for {request.method} {request.url.path}: {exc.errors()}")
    return _validation_response(exc.errors())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render ``HTTPException`` as ``{"error": ...}``."""
    content = exc.detail if isinstance(exc.detail, dict) else {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def service_exception_handler(request: Request, exc: IntelliQServiceError) -> JSONResponse:
    """Answer failures of an external service call with 500 and the error message."""
    logger.error(
        f"Service error in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
    )
    log_error(type(exc).__name__, str(exc), {"path": request.url.path})
    return JSONResponse(
        status_code=500,
        content={"message": "An unexpected error occurred", "error": str(exc)},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = uuid.uuid4().hex

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": "".join(traceback.format_exception(exc)),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IntelliQServiceError, service_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
