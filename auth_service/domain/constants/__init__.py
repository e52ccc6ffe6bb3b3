"""Constants for domain model field names"""

from .user_fields import UserFields, ProfileFields, TokenClaims

__all__ = [
    "UserFields",
    "ProfileFields",
    "TokenClaims",
]
