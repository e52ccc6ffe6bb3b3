from .value_objects import (
    UserEmail,
    UserPassword,
    UserName,
    UserPhoneNumber,
    UserNationalId,
)
from .user_profile import UserProfile
from .product_user import ProductUser

__all__ = [
    "UserEmail",
    "UserPassword",
    "UserName",
    "UserPhoneNumber",
    "UserNationalId",
    "UserProfile",
    "ProductUser",
]
