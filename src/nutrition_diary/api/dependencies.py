"""Request dependencies shared by API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Depends, Header, Request

from nutrition_diary.domain.errors import UnauthorizedError
from nutrition_diary.services.auth import AuthService  # noqa: TC001

if TYPE_CHECKING:
    from nutrition_diary.containers import AppContainer

_BEARER_PREFIX = "Bearer "


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def _get_auth_service(request: Request) -> AuthService:
    return get_container(request).auth_service


async def require_user(
    authorization: str | None = Header(default=None),
    auth_service: AuthService = Depends(_get_auth_service),
) -> UUID:
    """Resolve the bearer token into a verified user id."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise UnauthorizedError("Not authorized")
    token = authorization.removeprefix(_BEARER_PREFIX).strip()
    if not token:
        raise UnauthorizedError("Not authorized")
    return auth_service.verify(token)
