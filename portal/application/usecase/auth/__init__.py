"""Authentication use cases."""

from .get_current_user import GetCurrentUserUseCase
from .login import LoginUseCase
from .register import RegisterUseCase
from .request_password_reset import RequestPasswordResetUseCase
from .reset_password import ResetPasswordUseCase

__all__ = [
    "GetCurrentUserUseCase",
    "LoginUseCase",
    "RegisterUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
]
