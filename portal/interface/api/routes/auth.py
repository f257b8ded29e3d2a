"""Authentication and account routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Response, status
from pydantic import BaseModel

from portal.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
)
from portal.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
)
from portal.application.usecase.auth.login import LoginRequest, LoginResponse
from portal.application.usecase.auth.register import RegisterRequest, RegisterResponse
from portal.application.usecase.auth.request_password_reset import (
    RequestPasswordResetRequest,
    RequestPasswordResetResponse,
)
from portal.application.usecase.auth.reset_password import (
    ResetPasswordRequest,
    ResetPasswordResponse,
)
from portal.application.usecase.user import UpdateProfileUseCase
from portal.application.usecase.user.update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
)
from portal.interface.api.security import RequestSession

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Register a new account.

    The account starts as a pending student and cannot log in until an
    administrator approves it. Role and approval fields in the body are
    ignored.

    Example:
        POST /register
        {
            "email": "ada@example.edu",
            "password": "correct horse",
            "first_name": "Ada",
            "last_name": "Obi",
            "matric_number": "SOC/2021/001"
        }
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    session: FromDishka[RequestSession],
) -> LoginResponse:
    """Log in with email and password.

    On success the session token is returned in the body and set as an
    http-only cookie.
    """
    result = await login_use_case.execute(request)
    session.set_cookie(response, result.token)
    logger.info(f"Session cookie set: secure={session.secure}")
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    session: FromDishka[RequestSession],
) -> LogoutResponse:
    """Clear the session cookie.

    Tokens are stateless: a copy of the token kept elsewhere stays valid
    until it expires.
    """
    session.clear_cookie(response)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/user", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    session: FromDishka[RequestSession],
) -> GetCurrentUserResponse:
    """Get the authenticated user."""
    actor = await session.principal()
    return await get_current_user_use_case.execute(GetCurrentUserRequest(actor=actor))


@router.put("/profile", response_model=UpdateProfileResponse)
async def update_profile(
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    session: FromDishka[RequestSession],
    changes: dict = Body(...),
) -> UpdateProfileResponse:
    """Update the caller's own profile.

    Only profile fields are applied. Keys such as ``role``,
    ``approval_status``, ``email`` or ``matric_number`` are dropped.
    """
    actor = await session.principal()
    return await update_profile_use_case.execute(
        UpdateProfileRequest(actor=actor, changes=changes)
    )


@router.post("/forgot-password", response_model=RequestPasswordResetResponse)
async def forgot_password(
    request: RequestPasswordResetRequest,
    request_password_reset_use_case: FromDishka[RequestPasswordResetUseCase],
) -> RequestPasswordResetResponse:
    """Start a password reset.

    The response is the same whether or not the email is registered.
    """
    return await request_password_reset_use_case.execute(request)


@router.post("/reset-password", response_model=ResetPasswordResponse)
async def reset_password(
    request: ResetPasswordRequest,
    reset_password_use_case: FromDishka[ResetPasswordUseCase],
) -> ResetPasswordResponse:
    """Redeem a password-reset token and set a new password."""
    return await reset_password_use_case.execute(request)
