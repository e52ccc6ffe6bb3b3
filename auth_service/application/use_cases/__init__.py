from .auth import (
    CreateUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)

__all__ = [
    "CreateUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
]
