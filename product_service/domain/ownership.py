"""Ownership rule for products: only the creating user may touch a product."""
from __future__ import annotations

import enum
import uuid


class Access(enum.Enum):
    ALLOWED = "allowed"
    FORBIDDEN = "forbidden"
    UNAUTHENTICATED = "unauthenticated"


def check_ownership(owner_id: uuid.UUID | None, caller_id: uuid.UUID | None) -> Access:
    """Compare the recorded owner with the caller identity.

    A caller without a resolvable identity is UNAUTHENTICATED; any other
    mismatch (including a product with no owner) is FORBIDDEN.
    """
    if caller_id is None:
        return Access.UNAUTHENTICATED
    if owner_id is not None and owner_id == caller_id:
        return Access.ALLOWED
    return Access.FORBIDDEN
