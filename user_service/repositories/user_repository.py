"""Data access for users and their one-time tokens, backed by SQLAlchemy."""
from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select

from user_service.db.models import EmailConfirmationToken, PasswordResetToken, User
from user_service.db.session import get_session


class UserRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    # -------------------------- users --------------------------
    def list_users(self) -> list[User]:
        with get_session() as session:
            return list(session.execute(select(User).order_by(User.created_at)).scalars().all())

    def get_user(self, user_id: str) -> Optional[User]:
        with get_session() as session:
            return session.get(User, user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with get_session() as session:
            stmt = select(User).where(User.email == email)
            return session.execute(stmt).scalar_one_or_none()

    def add_user(self, user: User) -> User:
        with get_session() as session:
            session.add(user)
            session.commit()
            session.refresh(user)
            return user

    def save_user(self, user: User) -> User:
        with get_session() as session:
            merged = session.merge(user)
            merged.updated_at = datetime.now(timezone.utc)
            session.commit()
            session.refresh(merged)
            return merged

    def delete_user(self, user_id: str) -> bool:
        with get_session() as session:
            session.execute(delete(EmailConfirmationToken).where(EmailConfirmationToken.user_id == user_id))
            session.execute(delete(PasswordResetToken).where(PasswordResetToken.user_id == user_id))
            result = session.execute(delete(User).where(User.id == user_id))
            session.commit()
            return bool(result.rowcount)

    # -------------------------- tokens --------------------------
    def create_confirmation_token(self, user_id: str, token: Optional[str] = None) -> str:
        token_value = token or secrets.token_urlsafe(24)
        entity = EmailConfirmationToken(token=token_value, user_id=user_id, created_at=datetime.now(timezone.utc))
        with get_session() as session:
            session.add(entity)
            session.commit()
        return token_value

    def get_confirmation_token(self, token: str) -> Optional[EmailConfirmationToken]:
        with get_session() as session:
            return session.get(EmailConfirmationToken, token)

    def delete_confirmation_tokens_for_user(self, user_id: str) -> None:
        with get_session() as session:
            session.execute(delete(EmailConfirmationToken).where(EmailConfirmationToken.user_id == user_id))
            session.commit()

    def create_reset_token(self, user_id: str, token: Optional[str] = None) -> str:
        token_value = token or secrets.token_urlsafe(24)
        entity = PasswordResetToken(token=token_value, user_id=user_id, created_at=datetime.now(timezone.utc))
        with get_session() as session:
            session.add(entity)
            session.commit()
        return token_value

    def get_reset_token(self, token: str) -> Optional[PasswordResetToken]:
        with get_session() as session:
            return session.get(PasswordResetToken, token)

    def delete_reset_token(self, token: str) -> None:
        with get_session() as session:
            session.execute(delete(PasswordResetToken).where(PasswordResetToken.token == token))
            session.commit()

    def delete_reset_tokens_for_user(self, user_id: str) -> None:
        with get_session() as session:
            session.execute(delete(PasswordResetToken).where(PasswordResetToken.user_id == user_id))
            session.commit()
