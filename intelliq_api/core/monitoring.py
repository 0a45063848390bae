"""
Monitoring and Tracing Configuration Module.

This module provides integration with Pydantic Logfire for tracing of the
IntelliQ API, including:
- pydantic-ai quiz generation calls
- SQLAlchemy database operations
- HTTPX requests (Supabase auth)
- FastAPI endpoints

Instrumentation is only switched on when ``LOGFIRE_ENABLED`` is set and a
token is configured. The ``log_*`` helpers are safe to call either way:
Logfire drops events when it has not been configured.
"""

import logging
from typing import Optional

import logfire
from fastapi import FastAPI

from intelliq_api.server.core.config import settings

logger = logging.getLogger(__name__)


def initialize_logfire(app: FastAPI | None = None) -> bool:
    """
    Initialize Logfire for monitoring and tracing.

    Args:
        app: FastAPI application instance for FastAPI instrumentation (optional).

    Returns:
        True when Logfire was configured, False when it stays disabled.
    """
    config = settings.logfire
    if not config.enabled:
        logger.info("Logfire monitoring is disabled. Set LOGFIRE_ENABLED=true to enable.")
        return False

    if not config.token:
        logger.warning(
            "Logfire is enabled but LOGFIRE_TOKEN is not set. "
            "Monitoring will not work. Set LOGFIRE_TOKEN to enable Logfire."
        )
        return False

    logfire.configure(
        token=config.token,
        service_name=config.service_name,
        service_version=config.service_version,
        environment=config.environment,
    )
    logfire.instrument_pydantic_ai()
    logfire.instrument_sqlalchemy()
    logfire.instrument_httpx()
    if app is not None:
        logfire.instrument_fastapi(app)

    logger.info(
        f"Logfire monitoring initialized: environment={config.environment}, service={config.service_name}"
    )
    return True


def log_quiz_generation(model: str, total_tokens: int, duration_seconds: float, language: str) -> None:
    """
    Log a completed quiz generation with usage metrics.

    Args:
        model: The model name
        total_tokens: Total tokens used in the call
        duration_seconds: Wall-clock duration of the LLM call
        language: Requested quiz language
    """
    logfire.info(
        "Quiz generated",
        model=model,
        total_tokens=total_tokens,
        duration_seconds=duration_seconds,
        language=language,
    )


def log_api_request(method: str, path: str, status_code: int, duration_ms: float) -> None:
    """
    Log an API request with performance metrics.

    Args:
        method: HTTP method
        path: Request path
        status_code: HTTP status code
        duration_ms: Request duration in milliseconds
    """
    logfire.info(
        "API request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )


def log_error(error_type: str, error_message: str, context: Optional[dict] = None) -> None:
    """
    Log an error with context for debugging.

    Args:
        error_type: Type of error
        error_message: Error message
        context: Additional context dictionary
    """
    logfire.error(
        "{error_type}: {error_message}",
        error_type=error_type,
        error_message=error_message,
        **(context or {}),
    )
