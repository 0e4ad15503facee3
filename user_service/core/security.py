"""Security helpers (password hashing, access tokens, request identity)."""

from __future__ import annotations

import logging
from typing import Any

from argon2 import PasswordHasher, exceptions as argon_exc
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from common.auth import TokenError, bearer_scheme, create_access_token, decode_access_token

from .config import get_settings

logger = logging.getLogger(__name__)

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    return f"{_PREFIX}{_ph.hash(password)}"


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if not stored.startswith(_PREFIX):
        return False
    try:
        return _ph.verify(stored[len(_PREFIX) :], password)
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False


def issue_access_token(email: str, user_id: str) -> str:
    settings = get_settings()
    return create_access_token(
        email,
        user_id,
        key=settings.jwt_key,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expires_minutes=settings.jwt_expire_minutes,
    )


def read_access_token(token: str) -> dict[str, Any]:
    settings = get_settings()
    return decode_access_token(
        token,
        key=settings.jwt_key,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


def optional_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """Raw bearer credential of the request, if any."""
    if credentials is None:
        return None
    return credentials.credentials or None


def require_claims(token: str | None = Depends(optional_bearer_token)) -> dict[str, Any]:
    """Reject the request with 401 unless it carries a valid access token."""
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return read_access_token(token)
    except TokenError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
