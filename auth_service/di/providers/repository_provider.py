from typing import TYPE_CHECKING
from ...domain.repositories.auth_repository import AuthRepository
from ...domain.services.auth_service import AuthService
from ...infrastructure.db.mongo_auth_repository import MongoAuthRepository
from ...infrastructure.security.jwt_auth_service import JwtAuthService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Wires domain interfaces (repository, token service) to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository and service implementations.
        Gets collections from database provider and creates repository instances.
        """
        user_collection = container.get("user_collection")
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            AuthRepository,
            MongoAuthRepository(user_collection=user_collection)
        )
        
        container.register_singleton(AuthService, JwtAuthService())
