"""
Admin guard for the `/api/admin` surface.

Bearer tokens are issued by an external identity provider; we only ask it
who the token belongs to, then check the `app_admins` table.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import Depends, Request

from .config import Settings, get_settings
from .errors import AuthenticationError, ChairsError, PermissionDeniedError
from ..db.store import ChainStore, get_store

logger = logging.getLogger(__name__)


@dataclass
class AuthedUser:
    id: str
    email: Optional[str] = None


def _bearer_token(request: Request) -> Optional[str]:
    header = request.headers.get("authorization", "")
    if header.startswith("Bearer "):
        return header[7:].strip() or None
    return None


def fetch_identity(token: str, settings: Settings) -> Optional[AuthedUser]:
    """Resolve a bearer token to a user via the identity provider."""
    if not settings.auth_url:
        raise ChairsError("Identity provider is not configured", code="AUTH_NOT_CONFIGURED")

    headers = {"Authorization": f"Bearer {token}"}
    if settings.auth_service_key:
        headers["apikey"] = settings.auth_service_key

    url = settings.auth_url.rstrip("/") + "/auth/v1/user"
    try:
        resp = httpx.get(url, headers=headers, timeout=settings.auth_timeout_seconds)
    except httpx.HTTPError as e:
        logger.error("Identity provider unreachable: %s", e)
        raise ChairsError("Auth middleware failed", code="AUTH_FAILED", detail=str(e))

    if resp.status_code != 200:
        return None
    data = resp.json() or {}
    if not data.get("id"):
        return None
    return AuthedUser(id=str(data["id"]), email=data.get("email"))


def require_auth(request: Request, settings: Settings = Depends(get_settings)) -> AuthedUser:
    token = _bearer_token(request)
    if not token:
        raise AuthenticationError("Missing Bearer token")

    user = fetch_identity(token, settings)
    if user is None:
        raise AuthenticationError("Invalid token")
    request.state.user = user
    return user


def require_admin(
    user: AuthedUser = Depends(require_auth),
    store: ChainStore = Depends(get_store),
) -> AuthedUser:
    if not store.is_admin(user.id):
        logger.warning("Non-admin user %s refused on admin route", user.id)
        raise PermissionDeniedError()
    return user
