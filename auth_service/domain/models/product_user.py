# Standard library imports
import uuid
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..result import Result
from .value_objects import UserEmail, UserPassword
from .user_profile import UserProfile


@dataclass
class ProductUser:
    """
    Identity aggregate for a user of the product.
    
    Holds the credentials (email and password) and, once registration has
    completed, the linked profile.
    """
    id: str
    email: UserEmail
    password: UserPassword
    profile: Optional[UserProfile] = None

    @property
    def has_profile(self) -> bool:
        return self.profile is not None

    def user_created(self, profile: UserProfile) -> None:
        """Link the profile to this user"""
        if profile.email != self.email:
            raise ValueError("Profile email does not match user email")
        self.profile = profile

    @classmethod
    def create(
        cls,
        email: Result,
        password: Result,
        user_id: Optional[str] = None,
    ) -> Result:
        """
        Build a user from value object results
        
        Args:
            email: Result of UserEmail.create
            password: Result of UserPassword.create
            user_id: Existing identifier; a new one is generated when omitted
            
        Returns:
            Ok result holding the user, or the first failing value object result
        """
        combined = Result.combine(email, password)
        if combined.is_failure:
            return combined
        
        return Result.ok(cls(
            id=user_id or uuid.uuid4().hex,
            email=email.get_value(),
            password=password.get_value(),
        ))
