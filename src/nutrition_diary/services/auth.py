"""Authentication collaborator interface."""

from typing import Protocol
from uuid import UUID


class AuthService(Protocol):
    """Verifies bearer tokens issued by the identity provider."""

    def verify(self, token: str) -> UUID:
        """Return the user id for a valid token or raise UnauthorizedError."""
