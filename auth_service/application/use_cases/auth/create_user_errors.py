# Standard library imports
from dataclasses import dataclass

# Local application imports
from ....domain.result import Result
from ...errors import UseCaseError


@dataclass(frozen=True)
class ValuePropsError(UseCaseError):
    """A request field failed value object validation"""
    failure: Result

    @property
    def message(self) -> str:
        return self.failure.error or "Invalid user properties"


@dataclass(frozen=True)
class EmailAlreadyExist(UseCaseError):
    """The requested email is already registered"""
    email: str

    @property
    def message(self) -> str:
        return f"The email {self.email} associated for this account already exists"
