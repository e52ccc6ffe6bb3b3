from .auth_dto import CreateUserRequest, CreateUserResponse, UserLoginRequest, TokenResponse
from .user_dto import UserResponse

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
]
