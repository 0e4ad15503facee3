"""Request/response bodies of the user API."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from common.schemas import ApiModel


class UserResponse(ApiModel):
    id: str
    email: str
    name: str
    address: str
    is_activated: bool
    email_confirmed: bool
    created_at: datetime


class RegisterRequest(ApiModel):
    email: EmailStr
    password: str = Field(min_length=3)
    name: str = Field(min_length=1, max_length=200)
    address: Optional[str] = Field(default=None, max_length=100)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required.")
        return value


class LoginRequest(ApiModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(ApiModel):
    token: str


class ForgotPasswordRequest(ApiModel):
    email: EmailStr


class ResetPasswordRequest(ApiModel):
    user_id: str = Field(min_length=1)
    token: str = Field(min_length=1)
    new_password: str = Field(min_length=3)
    confirm_password: str


class UpdateUserRequest(ApiModel):
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(default=None, max_length=200)
    address: Optional[str] = Field(default=None, max_length=100)

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
