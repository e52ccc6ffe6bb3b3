# Standard library imports
from dataclasses import dataclass

# Local application imports
from ..result import Result
from .value_objects import UserEmail, UserName, UserNationalId, UserPhoneNumber


@dataclass
class UserProfile:
    """Descriptive half of a registered user - names, contact and location"""
    email: UserEmail
    first_name: UserName
    last_name: UserName
    phone: UserPhoneNumber
    national_id: UserNationalId
    location: str = ""
    avatar: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name.value} {self.last_name.value}"

    @classmethod
    def create(
        cls,
        email: Result,
        first_name: Result,
        last_name: Result,
        phone: Result,
        national_id: Result,
        location: str = "",
        avatar: str = "",
    ) -> Result:
        """
        Build a profile from value object results
        
        Returns:
            Ok result holding the profile, or the first failing value object result
        """
        combined = Result.combine(email, first_name, last_name, phone, national_id)
        if combined.is_failure:
            return combined
        
        return Result.ok(cls(
            email=email.get_value(),
            first_name=first_name.get_value(),
            last_name=last_name.get_value(),
            phone=phone.get_value(),
            national_id=national_id.get_value(),
            location=location or "",
            avatar=avatar or "",
        ))
