"""Bearer-token authentication against Supabase Auth.

The browser clients sign in with Supabase directly and send the access token
as ``Authorization: Bearer <jwt>``. The API resolves the token to a user by
asking Supabase, so no JWT secret is configured here.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from supabase import AsyncClient, AuthError, acreate_client

from intelliq_api.core.logging_config import get_logger
from intelliq_api.server.core.config import SupabaseConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller."""

    id: uuid.UUID
    email: Optional[str] = None


class SupabaseAuthService:
    """Resolve access tokens to users.

    Args:
        config: Supabase project settings.
        client: Optional pre-built async Supabase client.
    """

    def __init__(self, config: SupabaseConfig, client: Optional[AsyncClient] = None) -> None:
        self._config = config
        self._client = client

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            if not self._config.url or not self._config.anon_key:
                raise RuntimeError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
            self._client = await acreate_client(self._config.url, self._config.anon_key)
        return self._client

    async def get_user(self, access_token: str) -> Optional[CurrentUser]:
        """
        Look up the user owning ``access_token``.

        Returns:
            The user, or None when Supabase rejects the token
        """
        client = await self._get_client()
        try:
            response = await client.auth.get_user(access_token)
        except AuthError as e:
            logger.info(f"Rejected access token: {e}")
            return None
        if response is None or response.user is None:
            return None
        return CurrentUser(id=uuid.UUID(str(response.user.id)), email=response.user.email)
