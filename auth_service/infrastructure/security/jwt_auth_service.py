# Standard library imports
from typing import Any, Dict

# Local application imports
from ...domain.services.auth_service import AuthService
from ...core.security import create_jwt_token, decode_jwt_token


class JwtAuthService(AuthService):
    """PyJWT implementation of AuthService using the configured secret and algorithm"""
    
    async def sign_jwt(self, claims: Dict[str, Any]) -> str:
        return create_jwt_token(claims)
    
    async def decode_jwt(self, token: str) -> Dict[str, Any]:
        return decode_jwt_token(token)
