"""Resolve the calling user from the bearer JWT."""
from __future__ import annotations

import logging
import uuid

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from common.auth import TokenError, bearer_scheme, decode_access_token, identity_from_claims

from .config import get_settings

logger = logging.getLogger(__name__)


def parse_user_id(value: str | None) -> uuid.UUID | None:
    if not value:
        return None
    try:
        return uuid.UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None


def caller_id_from_token(token: str | None) -> uuid.UUID | None:
    """Return the caller's user id, or None when the token is missing, invalid or has no usable identity."""
    if not token:
        return None
    settings = get_settings()
    try:
        claims = decode_access_token(
            token,
            key=settings.jwt_key,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )
    except TokenError as exc:
        logger.info("Rejected bearer token: %s", exc)
        return None
    return parse_user_id(identity_from_claims(claims))


def optional_caller_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> uuid.UUID | None:
    return caller_id_from_token(credentials.credentials if credentials else None)


def require_caller_id(caller_id: uuid.UUID | None = Depends(optional_caller_id)) -> uuid.UUID:
    if caller_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return caller_id
