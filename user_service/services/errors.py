"""Exceptions raised by the user service use cases."""
from __future__ import annotations

from typing import Iterable


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class InvalidCredentialsError(AuthError):
    pass


class TokenInvalidError(AuthError):
    pass


class MissingCredentialError(AuthError):
    pass


class PasswordMismatchError(AuthError):
    pass


class UserNotFoundError(LookupError):
    def __init__(self, user_id: str, message: str | None = None):
        super().__init__(message or f"User with id '{user_id}' not found.")
        self.user_id = user_id


class IdentityError(Exception):
    """A write on an account was rejected; carries one message per failure."""

    def __init__(self, errors: Iterable[str]):
        self.errors = [str(error) for error in errors]
        super().__init__("; ".join(self.errors))
