"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request timing), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from intelliq_api.core.database import init_db
from intelliq_api.core.logging_config import get_logger, setup_logging
from intelliq_api.core.monitoring import initialize_logfire

from .api.v1 import (
    feedback,
    health,
    history,
    index,
    quiz_submissions,
    quizzes,
    rooms,
    usage,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestTimingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates the tables in development and switches on Logfire when configured.
    """
    logger.info("Starting up IntelliQ API...")
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    initialize_logfire(app)

    yield

    logger.info("Shutting down IntelliQ API...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    IntelliQ API

    Generates multiple-choice quizzes with an LLM, translates them, tracks token
    usage and manages multiplayer quiz rooms.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

setup_exception_handlers(app)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestTimingMiddleware)


app.include_router(health.router, tags=["health"])
app.include_router(index.router, prefix=constant.API_V1_STR, tags=["index"])
app.include_router(quizzes.router, prefix=f"{constant.API_V1_STR}/quizzes", tags=["quizzes"])
app.include_router(rooms.router, prefix=f"{constant.API_V1_STR}/rooms", tags=["rooms"])
app.include_router(
    quiz_submissions.router,
    prefix=f"{constant.API_V1_STR}/quiz-submissions",
    tags=["quiz-submissions"],
)
app.include_router(history.router, prefix=f"{constant.API_V1_STR}/history", tags=["history"])
app.include_router(usage.router, prefix=f"{constant.API_V1_STR}/usage", tags=["usage"])
app.include_router(feedback.router, prefix=f"{constant.API_V1_STR}/feedback", tags=["feedback"])
