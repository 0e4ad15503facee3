"""Request/response bodies of the product API."""
from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, PlainSerializer, field_validator

from common.schemas import ApiModel

# Matches the products.price column, Numeric(18, 2).
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2

# Prices travel as JSON numbers, not strings. The float conversion is exact up to
# 15 significant digits; prices near the 18-digit column limit lose their last digits.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductResponse(ApiModel):
    id: uuid.UUID
    name: str
    description: str
    price: Money
    is_available: bool
    created_by_user_id: uuid.UUID
    created_at: datetime
    is_deleted: bool


class CreateProductRequest(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=4000)
    price: Decimal = Field(ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES)
    is_available: bool = False

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Product name is required.")
        return value.strip()


class UpdateProductRequest(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=4000)
    price: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    is_available: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("Product name is required.")
        return value.strip() if value is not None else None
