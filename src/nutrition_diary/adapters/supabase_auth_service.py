"""Supabase Auth token verification."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_diary.domain.errors import UnauthorizedError
from nutrition_diary.services.auth import AuthService

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthService(AuthService):
    """Verifies access tokens against Supabase Auth."""

    client: Client

    def verify(self, token: str) -> UUID:
        """Return the user id behind a Supabase access token."""
        try:
            response = self.client.auth.get_user(token)
        except Exception as exc:
            _logger.warning("Token verification failed: %s", exc)
            raise UnauthorizedError("Not authorized") from exc
        if response is None or response.user is None:
            raise UnauthorizedError("Not authorized")
        return UUID(str(response.user.id))
