"""Write-side commands for accounts and their handlers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from common.mediator import Mediator
from user_service.core import notifier
from user_service.db.models import User
from user_service.services.errors import PasswordMismatchError, TokenInvalidError, UserNotFoundError
from user_service.services.user_service import UserService

logger = logging.getLogger(__name__)

REGISTRATION_MESSAGE = "Registration successful. Please check your email to confirm your account."
FORGOT_PASSWORD_MESSAGE = "If an account with that email exists, a password reset link has been sent."
RESET_PASSWORD_MESSAGE = "Password has been reset successfully."


@dataclass(frozen=True)
class RegisterUser:
    email: str
    password: str
    name: str
    address: Optional[str] = None


@dataclass(frozen=True)
class UpdateUser:
    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None


@dataclass(frozen=True)
class ForgotPassword:
    email: str


@dataclass(frozen=True)
class ResetPassword:
    user_id: str
    token: str
    new_password: str
    confirm_password: str


class RegisterUserHandler:
    def __init__(self, users: UserService):
        self.users = users

    def handle(self, command: RegisterUser) -> str:
        user = User(email=command.email, name=command.name.strip(), address=(command.address or "").strip())
        created = self.users.register_user(user, command.password)
        token = self.users.generate_email_confirmation_token(created)
        link = notifier.client_link("/confirmemail", userId=created.id, token=token)
        notifier.send_link(created.email, "Confirm your email", link)
        return REGISTRATION_MESSAGE


class UpdateUserHandler:
    """Blank or missing fields keep their current value."""

    def __init__(self, users: UserService):
        self.users = users

    def handle(self, command: UpdateUser) -> User:
        user = self.users.get_by_id(command.id)
        if user is None:
            raise UserNotFoundError(command.id)
        if command.email and command.email.strip():
            user.email = command.email
        if command.name and command.name.strip():
            user.name = command.name.strip()
        if command.address and command.address.strip():
            user.address = command.address.strip()
        return self.users.update_user(user)


class ForgotPasswordHandler:
    def __init__(self, users: UserService):
        self.users = users

    def handle(self, command: ForgotPassword) -> str:
        user = self.users.find_by_email(command.email)
        if user is None:
            logger.info("Password reset requested for unknown e-mail")
            return FORGOT_PASSWORD_MESSAGE
        token = self.users.generate_password_reset_token(user)
        link = notifier.client_link("/resetpassword", userId=user.id, token=token)
        notifier.send_link(user.email, "Reset your password", link)
        return FORGOT_PASSWORD_MESSAGE


class ResetPasswordHandler:
    def __init__(self, users: UserService):
        self.users = users

    def handle(self, command: ResetPassword) -> str:
        if command.new_password != command.confirm_password:
            raise PasswordMismatchError("Passwords do not match.")
        user = self.users.get_by_id(command.user_id)
        if user is None:
            raise UserNotFoundError(command.user_id, "User not found.")
        if not self.users.reset_password(user, command.token, command.new_password):
            raise TokenInvalidError("Invalid token.")
        logger.info("Password reset for user %s", user.id)
        return RESET_PASSWORD_MESSAGE


def build_mediator(users: UserService) -> Mediator:
    mediator = Mediator()
    mediator.register(RegisterUser, RegisterUserHandler(users).handle)
    mediator.register(UpdateUser, UpdateUserHandler(users).handle)
    mediator.register(ForgotPassword, ForgotPasswordHandler(users).handle)
    mediator.register(ResetPassword, ResetPasswordHandler(users).handle)
    return mediator
