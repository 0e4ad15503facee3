"""
Authentication use cases: login and e-mail confirmation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from user_service.core.security import issue_access_token, verify_password
from user_service.services.errors import InvalidCredentialsError, TokenInvalidError, UserNotFoundError
from user_service.services.user_service import UserService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


@dataclass
class LoginSuccess:
    user_id: str
    email: str
    token: str


@dataclass
class AuthService:
    users: UserService = field(default_factory=UserService)

    def login(self, email: str, password: str) -> LoginSuccess:
        user = self.users.find_by_email(email)
        if not user or not verify_password(password or "", user.password_hash):
            logger.info("Failed login attempt for %s", (email or "").strip())
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
        token = issue_access_token(user.email, user.id)
        return LoginSuccess(user_id=user.id, email=user.email, token=token)

    def confirm_email(self, user_id: str, token: str) -> None:
        user = self.users.get_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id, f"User with ID '{user_id}' not found.")
        if not self.users.confirm_email(user, token):
            raise TokenInvalidError("Error confirming your email.")
        logger.info("E-mail confirmed for user %s", user.id)
