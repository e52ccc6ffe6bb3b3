from .jwt_auth_service import JwtAuthService

__all__ = ["JwtAuthService"]
