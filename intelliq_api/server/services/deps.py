"""
API Dependencies.

Provides the ``Annotated`` dependencies shared by the routers: database
session and repositories, the authenticated user, rate limiting and the
external service clients. Service clients are created once per process.
"""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from intelliq_api.core.database import get_session
from intelliq_api.core.database.repositories import (
    QuizRepository,
    RoomRepository,
    UserUsageRepository,
)
from intelliq_api.core.logging_config import get_logger
from intelliq_api.server.core.config import settings

from .auth import CurrentUser, SupabaseAuthService
from .errors import TranslationConfigError
from .mailer import FeedbackMailer
from .quiz_generator import QuizGenerator
from .rate_limiter import RateLimiter
from .translator import TranslatorClient, create_translate_client

logger = get_logger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_room_repository(session: SessionDep) -> RoomRepository:
    return RoomRepository(session)


def get_quiz_repository(session: SessionDep) -> QuizRepository:
    return QuizRepository(session)


def get_usage_repository(session: SessionDep) -> UserUsageRepository:
    return UserUsageRepository(session)


RoomRepositoryDep = Annotated[RoomRepository, Depends(get_room_repository)]
QuizRepositoryDep = Annotated[QuizRepository, Depends(get_quiz_repository)]
UsageRepositoryDep = Annotated[UserUsageRepository, Depends(get_usage_repository)]


# =====================================================================
# Authentication
# =====================================================================

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_auth_service() -> SupabaseAuthService:
    return SupabaseAuthService(settings.supabase)


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    auth_service: Annotated[SupabaseAuthService, Depends(get_auth_service)],
) -> CurrentUser:
    """Resolve the bearer token to a user, or answer 401."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    user = await auth_service.get_user(credentials.credentials)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]


# =====================================================================
# Rate limiting
# =====================================================================


@lru_cache
def get_redis() -> Redis:
    return Redis.from_url(settings.redis_url, decode_responses=True)


def get_rate_limiter() -> Optional[RateLimiter]:
    """The configured limiter, or None when rate limiting is switched off."""
    config = settings.rate_limit
    if not config.enabled:
        return None
    return RateLimiter(get_redis(), config)


async def enforce_rate_limit(
    user: CurrentUserDep,
    limiter: Annotated[Optional[RateLimiter], Depends(get_rate_limiter)],
) -> None:
    """Reject the request with 429 once the caller used up the current window."""
    if limiter is None:
        return
    result = await limiter.hit(str(user.id))
    if not result.allowed:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too many requests",
            headers={"Retry-After": str(result.retry_after)},
        )


RateLimitDep = Annotated[None, Depends(enforce_rate_limit)]


# =====================================================================
# External services
# =====================================================================


@lru_cache
def get_quiz_generator() -> QuizGenerator:
    return QuizGenerator(settings.openai)


@lru_cache
def get_translator() -> Optional[TranslatorClient]:
    """AWS Translate client, or None when no credentials are configured."""
    try:
        return create_translate_client(settings.aws_translate)
    except TranslationConfigError as e:
        logger.warning(f"Quiz translation unavailable: {e}")
        return None


@lru_cache
def get_mailer() -> FeedbackMailer:
    return FeedbackMailer(settings.resend)


QuizGeneratorDep = Annotated[QuizGenerator, Depends(get_quiz_generator)]
TranslatorDep = Annotated[Optional[TranslatorClient], Depends(get_translator)]
MailerDep = Annotated[FeedbackMailer, Depends(get_mailer)]
