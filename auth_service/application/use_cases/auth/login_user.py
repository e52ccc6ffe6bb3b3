# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.auth_repository import AuthRepository
from ....domain.services.auth_service import AuthService
from ....domain.constants import TokenClaims
from ....core.security import verify_password
from ...dto.auth_dto import UserLoginRequest, TokenResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""
    
    def __init__(self, auth_repository: AuthRepository, auth_service: AuthService) -> None:
        self.auth_repository = auth_repository
        self.auth_service = auth_service
    
    async def execute(self, request: UserLoginRequest) -> Optional[TokenResponse]:
        """
        Authenticate user and generate access token
        
        Args:
            request: Login request with email and password
            
        Returns:
            TokenResponse if authentication successful, None otherwise
        """
        user = await self.auth_repository.find_by_email(request.email)
        if user is None:
            return None
        
        # Stored passwords are always hashed
        if not user.password.hashed or not verify_password(request.password, user.password.value):
            logger.info(f"Failed login attempt for user {user.id}")
            return None
        
        token = await self.auth_service.sign_jwt({
            TokenClaims.EMAIL: user.email.value,
            TokenClaims.USER_ID: user.id,
        })
        return TokenResponse(access_token=token)
