"""
Auth dependencies for protected FastAPI routes.

A request authenticates with `Authorization: Bearer <token>` or, for browser
form posts, the `access_token` cookie set at login.
"""

from __future__ import annotations

from fastapi import Cookie, Depends, Header, HTTPException, status

from . import service

ACCESS_TOKEN_COOKIE = "access_token"


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header.",
        )

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format.",
        )

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


async def get_access_token(
    authorization: str | None = Header(default=None),
    access_token: str | None = Cookie(default=None),
) -> str:
    if (authorization or "").strip():
        return _extract_bearer_token(authorization)

    cookie_token = (access_token or "").strip()
    if cookie_token:
        return cookie_token

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not signed in.",
    )


async def get_current_user(access_token: str = Depends(get_access_token)) -> dict:
    return await service.get_user_from_access_token(access_token)
