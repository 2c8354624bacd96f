"""API authentication: ``X-API-Key`` header checked against configured keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader

if TYPE_CHECKING:
    from ckd_appeals.core.config import AuthConfig

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def require_auth(
    request: Request,
    api_key: str | None = Security(_api_key_header),
) -> None:
    """Reject the request unless auth is disabled or the key is known."""
    config: AuthConfig = request.app.state.settings.auth

    if not config.enabled:
        return None

    if api_key and api_key in config.api_keys:
        return None

    raise HTTPException(
        status_code=401,
        detail="Authentication required. Provide X-API-Key header.",
        headers={"WWW-Authenticate": "APIKey"},
    )
