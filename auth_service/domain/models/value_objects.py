"""
Immutable, self-validating value objects for user registration.

Each value object validates itself in ``__post_init__`` and raises ``ValueError``
on bad input. Callers outside the domain use ``create(...)``, which turns that
into a failing ``Result`` instead of an exception.
"""
# Standard library imports
import re
from dataclasses import dataclass, field
from typing import Any

# Local application imports
from ..result import Result

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,}$")
PHONE_PATTERN = re.compile(r"^\+?\d{7,15}$")
NATIONAL_ID_PATTERN = re.compile(r"^[A-Za-z0-9\-]+$")

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
NAME_MAX_LENGTH = 50
NATIONAL_ID_MAX_LENGTH = 32


class ValueObject:
    """Base class providing the non-throwing ``create`` constructor"""

    @classmethod
    def create(cls, *args: Any, **kwargs: Any) -> Result:
        try:
            return Result.ok(cls(*args, **kwargs))
        except ValueError as exception:
            return Result.fail(str(exception))


@dataclass(frozen=True)
class UserEmail(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Email is required")
        normalized = self.value.strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserPassword(ValueObject):
    """
    Password in either plain or hashed form.
    
    Only plain passwords are checked against the strength rules; a hashed
    password is whatever the hasher produced and just has to be present.
    """
    value: str
    hashed: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Password is required")
        if self.hashed:
            return
        if len(self.value) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        if len(self.value) > PASSWORD_MAX_LENGTH:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_LENGTH} characters")
        if not any(char.isalpha() for char in self.value):
            raise ValueError("Password must contain at least one letter")
        if not any(char.isdigit() for char in self.value):
            raise ValueError("Password must contain at least one digit")

    def __repr__(self) -> str:
        return f"UserPassword(hashed={self.hashed})"


@dataclass(frozen=True)
class UserName(ValueObject):
    """Person name; label names the field in validation messages"""
    value: str
    label: str = field(default="Name", compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError(f"{self.label} is required")
        stripped = self.value.strip()
        if len(stripped) > NAME_MAX_LENGTH:
            raise ValueError(f"{self.label} must be at most {NAME_MAX_LENGTH} characters")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserPhoneNumber(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Phone number is required")
        # Spaces, dashes and parentheses are formatting only
        compact = re.sub(r"[\s\-()]", "", self.value)
        if not PHONE_PATTERN.match(compact):
            raise ValueError(f"Invalid phone number: {self.value}")
        object.__setattr__(self, "value", compact)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserNationalId(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("National ID is required")
        stripped = self.value.strip()
        if len(stripped) > NATIONAL_ID_MAX_LENGTH:
            raise ValueError(f"National ID must be at most {NATIONAL_ID_MAX_LENGTH} characters")
        if not NATIONAL_ID_PATTERN.match(stripped):
            raise ValueError("National ID may only contain letters, digits and dashes")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value
