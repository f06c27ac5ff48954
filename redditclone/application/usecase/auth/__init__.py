"""Authentication use cases."""

from .login import LoginRequest, LoginUseCase
from .logout import LogoutRequest, LogoutUseCase
from .register import RegisterRequest, RegisterUseCase, TokenResponse

__all__ = [
    "LoginRequest",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "TokenResponse",
]
