"""API key checks for the caseintel HTTP API."""

from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from caseintel.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Dependency provider returning the cached settings."""

    return get_settings()


def require_api_key(
    x_api_key: Optional[str] = Header(None),
    settings: Settings = Depends(get_api_settings),
) -> None:
    """Validate the ``X-API-KEY`` header against ``settings.api.key``.

    Raises:
        HTTPException: 401 if the header is missing, 403 if it does not match.
    """

    if not settings.api.require_key:
        return
    if not x_api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing X-API-KEY")
    if x_api_key != settings.api.key:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid API key")
