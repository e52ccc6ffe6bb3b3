"""Errors returned, not raised, by use cases"""
# Standard library imports
from dataclasses import dataclass


class UseCaseError:
    """Base class for failures a use case hands back as a value"""

    @property
    def message(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class UnexpectedError(UseCaseError):
    """Any fault outside the business rules, with the exception that caused it"""
    cause: BaseException

    @property
    def message(self) -> str:
        return "An unexpected error occurred."
