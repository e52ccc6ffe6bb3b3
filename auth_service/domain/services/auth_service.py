from abc import ABC, abstractmethod
from typing import Any, Dict


class AuthService(ABC):
    """Service interface - issues and verifies signed access tokens"""
    
    @abstractmethod
    async def sign_jwt(self, claims: Dict[str, Any]) -> str:
        """Sign the given claims (email, userId) into a token"""
        pass
    
    @abstractmethod
    async def decode_jwt(self, token: str) -> Dict[str, Any]:
        """
        Verify a token and return its claims
        
        Raises:
            ValueError: If the token is invalid or expired
        """
        pass
