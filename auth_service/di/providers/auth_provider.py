from typing import TYPE_CHECKING
from ...domain.repositories.auth_repository import AuthRepository
from ...domain.services.auth_service import AuthService
from ...application.use_cases.auth.create_user import CreateUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                auth_repository=container.get(AuthRepository),
                auth_service=container.get(AuthService),
            )
        )
        
        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                auth_repository=container.get(AuthRepository),
                auth_service=container.get(AuthService),
            )
        )
        
        container.register_factory(
            GetCurrentUserUseCase,
            lambda: GetCurrentUserUseCase(
                auth_repository=container.get(AuthRepository),
                auth_service=container.get(AuthService),
            )
        )
