"""Bearer token helpers shared by both services (issue, decode, identity claim)."""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from fastapi.security import HTTPBearer
from jose import JWTError, jwt

ALGORITHM = "HS256"
# Claim carrying the user id; "sub" holds the e-mail address.
IDENTITY_CLAIM = "nameid"

bearer_scheme = HTTPBearer(auto_error=False)


class TokenError(Exception):
    """Raised when a bearer token cannot be decoded or fails validation."""


def create_access_token(
    email: str,
    user_id: str,
    *,
    key: str,
    issuer: str,
    audience: str,
    expires_minutes: int,
) -> str:
    now = datetime.now(timezone.utc)
    claims = {
        "sub": email,
        IDENTITY_CLAIM: user_id,
        "jti": str(uuid.uuid4()),
        "iss": issuer,
        "aud": audience,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(claims, key, algorithm=ALGORITHM)


def decode_access_token(token: str, *, key: str, issuer: str, audience: str) -> dict[str, Any]:
    """Validate signature, expiry, issuer and audience; return the claims."""
    try:
        return jwt.decode(token, key, algorithms=[ALGORITHM], audience=audience, issuer=issuer)
    except JWTError as exc:
        raise TokenError(str(exc)) from exc


def identity_from_claims(claims: Mapping[str, Any] | None) -> str | None:
    if not claims:
        return None
    value = claims.get(IDENTITY_CLAIM)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()
