"""SQLAlchemy model for the products table."""
from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Numeric, String, Text, Uuid

from .session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(18, 2), nullable=False, default=0)
    is_available = Column(Boolean, nullable=False, default=False)
    # Owner lives in the user service database; no foreign key, no index.
    created_by_user_id = Column(Uuid, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    is_deleted = Column(Boolean, nullable=False, default=False)
