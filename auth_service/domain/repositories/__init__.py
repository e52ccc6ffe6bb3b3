from .auth_repository import AuthRepository

__all__ = ["AuthRepository"]
