"""Security helpers for API authentication."""

from __future__ import annotations

import secrets

from fastapi import Header, HTTPException, Query, status

from roundcaddy.config import get_settings


def require_api_key(
    x_api_key: str | None = Header(default=None, alias="x-api-key"),
    api_key_query: str | None = Query(default=None, alias="apiKey"),
) -> str | None:
    """Require a matching API key when ``REQUIRE_API_KEY`` is enabled.

    The key may come from the ``x-api-key`` header or the ``apiKey`` query
    parameter. Returns the resolved key so downstream dependencies can use it.
    """

    candidate = x_api_key or api_key_query
    settings = get_settings()
    if not settings.require_api_key:
        return candidate

    expected = settings.api_key
    if not expected or not candidate or not secrets.compare_digest(candidate, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid api key",
        )
    return candidate


__all__ = ["require_api_key"]
