from __future__ import annotations

from typing import Iterator, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from common.mediator import Mediator
from user_service.clients.product_client import ProductServiceClient
from user_service.core.config import get_settings
from user_service.core.security import optional_bearer_token, require_claims
from user_service.routers.auth import get_mediator, get_user_service
from user_service.schemas import UpdateUserRequest, UserResponse
from user_service.services.activation import AccountActivationService
from user_service.services.commands import UpdateUser
from user_service.services.errors import IdentityError, MissingCredentialError, UserNotFoundError
from user_service.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"], dependencies=[Depends(require_claims)])


def get_product_client() -> Iterator[ProductServiceClient]:
    settings = get_settings()
    client = ProductServiceClient(settings.product_service_url, timeout=settings.product_service_timeout)
    try:
        yield client
    finally:
        client.close()


def get_activation_service(
    users: UserService = Depends(get_user_service),
    products: ProductServiceClient = Depends(get_product_client),
) -> AccountActivationService:
    return AccountActivationService(users=users, products=products)


@router.get("", response_model=list[UserResponse])
def list_users(users: UserService = Depends(get_user_service)):
    return users.get_all()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, users: UserService = Depends(get_user_service)):
    user = users.get_by_id(user_id)
    if user is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, f"User with id '{user_id}' not found.")
    return user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: str, payload: UpdateUserRequest, mediator: Mediator = Depends(get_mediator)):
    try:
        return mediator.send(
            UpdateUser(
                id=user_id,
                email=str(payload.email) if payload.email else None,
                name=payload.name,
                address=payload.address,
            )
        )
    except UserNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))
    except IdentityError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, exc.errors)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, users: UserService = Depends(get_user_service)):
    try:
        users.delete_user(user_id)
    except UserNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# require_claims rejects requests without a token before this runs; the
# MissingCredentialError branch maps the service-level check for completeness.
def _change_activation(action, user_id: str, token: Optional[str]) -> None:
    try:
        action(user_id, token)
    except MissingCredentialError as exc:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, str(exc))
    except UserNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))
    except IdentityError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, exc.errors)


@router.put("/{user_id}/deactivate")
def deactivate_user(
    user_id: str,
    token: Optional[str] = Depends(optional_bearer_token),
    activation: AccountActivationService = Depends(get_activation_service),
) -> str:
    _change_activation(activation.deactivate, user_id, token)
    return "User deactivated."


@router.put("/{user_id}/activate")
def activate_user(
    user_id: str,
    token: Optional[str] = Depends(optional_bearer_token),
    activation: AccountActivationService = Depends(get_activation_service),
) -> str:
    _change_activation(activation.activate, user_id, token)
    return "User activated."
