from .create_user import CreateUserUseCase
from .create_user_errors import ValuePropsError, EmailAlreadyExist
from .login_user import LoginUserUseCase
from .get_current_user import GetCurrentUserUseCase

__all__ = [
    "CreateUserUseCase",
    "ValuePropsError",
    "EmailAlreadyExist",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
]
