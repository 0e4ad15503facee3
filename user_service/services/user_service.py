"""Account use cases on top of UserRepository."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError

from user_service.core.config import get_settings
from user_service.core.security import hash_password
from user_service.db.models import User
from user_service.repositories.user_repository import UserRepository
from user_service.services.errors import IdentityError, UserNotFoundError

logger = logging.getLogger(__name__)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def email_taken_message(email: str) -> str:
    return f"Email '{email}' is already taken."


@dataclass
class UserService:
    """Registration, profile updates and one-time tokens for accounts."""

    repository: UserRepository = field(default_factory=UserRepository)

    def __post_init__(self):
        self.settings = get_settings()

    # -------------------------------------- helpers --------------------------------------
    def _now(self) -> int:
        return int(time.time())

    def _token_expired(self, created_at: datetime | int | None, now: int, *, ttl_seconds: int) -> bool:
        if ttl_seconds <= 0:
            return False
        if isinstance(created_at, datetime):
            # SQLite hands back naive datetimes; they were written in UTC.
            normalized = created_at.astimezone(timezone.utc) if created_at.tzinfo else created_at.replace(tzinfo=timezone.utc)
            created_ts = int(normalized.timestamp())
        else:
            created_ts = int(created_at or 0)
        if not created_ts:
            return True
        return (created_ts + ttl_seconds) < now

    def _ensure_email_available(self, email: str, *, exclude_user_id: str | None = None) -> None:
        existing = self.repository.get_user_by_email(email)
        if existing and existing.id != exclude_user_id:
            raise IdentityError([email_taken_message(email)])

    # -------------------------------------- queries --------------------------------------
    def get_all(self) -> list[User]:
        return self.repository.list_users()

    def get_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None
        return self.repository.get_user(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        normalized = normalize_email(email)
        if not normalized:
            return None
        return self.repository.get_user_by_email(normalized)

    # -------------------------------------- writes --------------------------------------
    def register_user(self, user: User, password: str) -> User:
        user.email = normalize_email(user.email)
        self._ensure_email_available(user.email)
        user.password_hash = hash_password(password)
        try:
            created = self.repository.add_user(user)
        except IntegrityError as exc:
            raise IdentityError([email_taken_message(user.email)]) from exc
        logger.info("Registered user %s", created.id)
        return created

    def update_user(self, user: User) -> User:
        user.email = normalize_email(user.email)
        self._ensure_email_available(user.email, exclude_user_id=user.id)
        try:
            return self.repository.save_user(user)
        except IntegrityError as exc:
            raise IdentityError([f"Unable to update user '{user.id}': {exc.orig}"]) from exc

    def set_password(self, user: User, password: str) -> User:
        user.password_hash = hash_password(password)
        return self.repository.save_user(user)

    def delete_user(self, user_id: str) -> None:
        if not self.repository.delete_user(user_id):
            raise UserNotFoundError(user_id)
        logger.info("Deleted user %s", user_id)

    # -------------------------------------- e-mail confirmation --------------------------------------
    def generate_email_confirmation_token(self, user: User) -> str:
        self.repository.delete_confirmation_tokens_for_user(user.id)
        return self.repository.create_confirmation_token(user.id)

    def confirm_email(self, user: User, token: str) -> bool:
        entity = self.repository.get_confirmation_token((token or "").strip())
        if not entity or entity.user_id != user.id:
            return False
        if self._token_expired(entity.created_at, self._now(), ttl_seconds=self.settings.email_confirmation_ttl_seconds):
            self.repository.delete_confirmation_tokens_for_user(user.id)
            return False
        user.email_confirmed = True
        self.repository.save_user(user)
        self.repository.delete_confirmation_tokens_for_user(user.id)
        return True

    # -------------------------------------- password reset --------------------------------------
    def generate_password_reset_token(self, user: User) -> str:
        self.repository.delete_reset_tokens_for_user(user.id)
        return self.repository.create_reset_token(user.id)

    def reset_password(self, user: User, token: str, new_password: str) -> bool:
        token = (token or "").strip()
        entity = self.repository.get_reset_token(token) if token else None
        if not entity or entity.user_id != user.id:
            return False
        if self._token_expired(entity.created_at, self._now(), ttl_seconds=self.settings.password_reset_ttl):
            self.repository.delete_reset_token(token)
            return False
        self.set_password(user, new_password)
        self.repository.delete_reset_tokens_for_user(user.id)
        return True
