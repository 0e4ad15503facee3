"""
Account activation with propagation to the product service.

The local flag is committed before the product service is called. A failed
downstream call is not rolled back; the exception reaches the generic 500
handler and the account stays in its new state.

The routers already reject requests without a token; the token check here
guards callers that use the service directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from user_service.clients.product_client import ProductServiceClient
from user_service.services.errors import IdentityError, MissingCredentialError, UserNotFoundError
from user_service.services.user_service import UserService

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "No JWT token found."


@dataclass
class AccountActivationService:
    users: UserService
    products: ProductServiceClient

    def deactivate(self, user_id: str, token: Optional[str]) -> None:
        self._set_activation(user_id, token, False)
        self.products.deactivate_products(user_id, token)

    def activate(self, user_id: str, token: Optional[str]) -> None:
        self._set_activation(user_id, token, True)
        self.products.activate_products(user_id, token)

    def _set_activation(self, user_id: str, token: Optional[str], active: bool) -> None:
        if not token:
            raise MissingCredentialError(MISSING_TOKEN_MESSAGE)
        user = self.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        user.is_activated = active
        try:
            self.users.update_user(user)
        except SQLAlchemyError as exc:
            raise IdentityError([str(exc)]) from exc
        logger.info("User %s %s", user_id, "activated" if active else "deactivated")
