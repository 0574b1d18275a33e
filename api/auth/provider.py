"""
Sign-in provider.

`sign_in()` either returns a `Session` or raises `AuthError` carrying a
classified `type`. Anything else it raises (e.g. a database outage) is not
an auth decision and is left to propagate.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from core import forms

from . import repository, schemas, security

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"

CREDENTIALS_SIGNIN = "CredentialsSignin"
ACCESS_DENIED = "AccessDenied"
CONFIGURATION = "Configuration"


class AuthError(Exception):
    def __init__(self, error_type: str, message: str = "") -> None:
        super().__init__(message or error_type)
        self.type = error_type


async def _authorize_credentials(credentials: Mapping[str, Any]) -> schemas.Session:
    parsed = forms.safe_parse(schemas.LoginCredentials, credentials)
    if not parsed.success:
        raise AuthError(CREDENTIALS_SIGNIN, "Credentials failed validation.")

    login = parsed.value
    user_row = await repository.get_user_by_email(login.email)
    if user_row is None:
        raise AuthError(CREDENTIALS_SIGNIN, "Invalid email or password.")

    if not security.verify_password(login.password, str(user_row.get("password_hash") or "")):
        raise AuthError(CREDENTIALS_SIGNIN, "Invalid email or password.")

    if not bool(user_row.get("is_active", False)):
        raise AuthError(ACCESS_DENIED, "User is inactive.")

    user_id = int(user_row["id"])
    email = str(user_row["email"])
    return schemas.Session(
        user_id=user_id,
        email=email,
        access_token=security.build_access_token(user_id=user_id, email=email),
    )


async def sign_in(provider_id: str, credentials: Mapping[str, Any]) -> schemas.Session:
    if provider_id != CREDENTIALS_PROVIDER:
        raise AuthError(CONFIGURATION, f"Unknown sign-in provider: {provider_id!r}.")

    session = await _authorize_credentials(credentials)
    logger.info("sign_in_succeeded user_id=%s provider=%s", session.user_id, provider_id)
    return session
