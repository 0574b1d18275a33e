"""
Auth business logic.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, status

from . import provider, repository, schemas, security

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_REDIRECT = "/dashboard"


@dataclass(frozen=True)
class AuthOutcome:
    session: schemas.Session | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.session is not None and self.error is None


async def authenticate(prev_state: Any, form: Mapping[str, Any]) -> AuthOutcome:
    """
    Sign in with the credentials provider.

    Classified auth failures come back as a user-facing `error`. Any other
    exception propagates to the caller.
    """
    try:
        session = await provider.sign_in(provider.CREDENTIALS_PROVIDER, form)
    except provider.AuthError as exc:
        logger.info("sign_in_failed type=%s", exc.type)
        if exc.type == provider.CREDENTIALS_SIGNIN:
            return AuthOutcome(error="Invalid credentials.")
        return AuthOutcome(error="Something went wrong.")
    return AuthOutcome(session=session)


def login_redirect_target(raw: Any) -> str:
    """
    Where to send the user after sign-in. Only local paths are honored.
    """
    target = raw.strip() if isinstance(raw, str) else ""
    if not target.startswith("/") or target.startswith("//"):
        return DEFAULT_LOGIN_REDIRECT
    return target


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=int(user_row["id"]),
        email=str(user_row["email"]),
        is_active=bool(user_row["is_active"]),
        created_at=user_row["created_at"],
    )


async def get_user_from_access_token(access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    subject = str(payload.get("sub") or "").strip()
    if not subject.isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access token subject.",
        )

    user_row = await repository.get_user_by_id(int(subject))
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
        )
    if not bool(user_row.get("is_active", False)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is inactive.",
        )
    return user_row


async def me(access_token: str) -> schemas.UserResponse:
    user_row = await get_user_from_access_token(access_token)
    return _to_user_response(user_row)
