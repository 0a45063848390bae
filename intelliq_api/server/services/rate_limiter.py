"""Fixed-window rate limiting on Redis.

Each caller gets a counter key that lives for one window. The first hit
creates the key and starts its TTL; every hit beyond the configured number
of requests is rejected until the key expires.
"""

from __future__ import annotations

from dataclasses import dataclass

from redis.asyncio import Redis

from intelliq_api.core.logging_config import get_logger
from intelliq_api.server.core.config import RateLimitConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    retry_after: int


class RateLimiter:
    """Per-identifier request counter.

    Args:
        redis: Async Redis client.
        config: Number of requests allowed per window and window length.
        prefix: Namespace of the counter keys.
    """

    def __init__(self, redis: Redis, config: RateLimitConfig, prefix: str = "ratelimit") -> None:
        self._redis = redis
        self.limit = config.requests
        self.window_seconds = config.window_seconds
        self.prefix = prefix

    def key_for(self, identifier: str) -> str:
        return f"{self.prefix}:{identifier}"

    async def hit(self, identifier: str) -> RateLimitResult:
        """Count one request of ``identifier`` and report whether it may proceed."""
        key = self.key_for(identifier)
        pipe = self._redis.pipeline()
        pipe.incr(key, 1)
        pipe.ttl(key)
        count, ttl = await pipe.execute()

        # A key without TTL was just created by INCR.
        if ttl is None or ttl < 0:
            await self._redis.expire(key, self.window_seconds)
            ttl = self.window_seconds

        count = int(count)
        if count > self.limit:
            logger.warning(f"Rate limit exceeded for {identifier}: {count}/{self.limit}")
            return RateLimitResult(allowed=False, remaining=0, retry_after=int(ttl))
        return RateLimitResult(allowed=True, remaining=self.limit - count, retry_after=0)
