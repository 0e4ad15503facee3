from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from common.mediator import Mediator
from user_service.schemas import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    TokenResponse,
)
from user_service.services.auth_service import AuthService
from user_service.services.commands import ForgotPassword, RegisterUser, ResetPassword, build_mediator
from user_service.services.errors import (
    IdentityError,
    InvalidCredentialsError,
    PasswordMismatchError,
    TokenInvalidError,
    UserNotFoundError,
)
from user_service.services.user_service import UserService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_user_service() -> UserService:
    return UserService()


def get_auth_service(users: UserService = Depends(get_user_service)) -> AuthService:
    return AuthService(users=users)


def get_mediator(users: UserService = Depends(get_user_service)) -> Mediator:
    return build_mediator(users)


@router.post("/register")
def register(payload: RegisterRequest, mediator: Mediator = Depends(get_mediator)) -> str:
    try:
        return mediator.send(
            RegisterUser(
                email=str(payload.email),
                password=payload.password,
                name=payload.name,
                address=payload.address,
            )
        )
    except IdentityError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, exc.errors)


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    try:
        result = auth.login(payload.email, payload.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, str(exc))
    return TokenResponse(token=result.token)


@router.get("/confirmemail")
def confirm_email(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    token: Optional[str] = Query(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    if not (user_id or "").strip() or not (token or "").strip():
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "User Id and token are required.")
    try:
        auth.confirm_email(user_id.strip(), token)
    except UserNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))
    except TokenInvalidError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(exc))
    return "Email confirmed successfully."


@router.post("/forgotpassword")
def forgot_password(payload: ForgotPasswordRequest, mediator: Mediator = Depends(get_mediator)) -> str:
    return mediator.send(ForgotPassword(email=str(payload.email)))


@router.post("/resetpassword")
def reset_password(payload: ResetPasswordRequest, mediator: Mediator = Depends(get_mediator)) -> str:
    try:
        return mediator.send(
            ResetPassword(
                user_id=payload.user_id,
                token=payload.token,
                new_password=payload.new_password,
                confirm_password=payload.confirm_password,
            )
        )
    except UserNotFoundError as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))
    except (PasswordMismatchError, TokenInvalidError) as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(exc))
