# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.auth_repository import AuthRepository
from ....domain.services.auth_service import AuthService
from ....domain.constants import TokenClaims
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""
    
    def __init__(self, auth_repository: AuthRepository, auth_service: AuthService) -> None:
        self.auth_repository = auth_repository
        self.auth_service = auth_service
    
    async def execute(self, token: str) -> UserResponse:
        """
        Get current user from JWT token
        
        Args:
            token: JWT access token
            
        Returns:
            UserResponse with user information
            
        Raises:
            ValueError: If token is invalid or user not found
        """
        try:
            claims = await self.auth_service.decode_jwt(token)
        except Exception as exception:
            raise ValueError(f"Invalid or expired token: {str(exception)}")
        
        user_id: Optional[str] = claims.get(TokenClaims.USER_ID)
        if not user_id:
            raise ValueError("Invalid authentication payload: missing user ID")
        
        user = await self.auth_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")
        
        profile = user.profile
        return UserResponse(
            id=user.id,
            email=user.email.value,
            first_name=profile.first_name.value if profile else None,
            last_name=profile.last_name.value if profile else None,
            location=profile.location if profile else None,
        )
