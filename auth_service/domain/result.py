"""
Result and Either types used across the domain and application layers.

``Result`` is what value objects and entities return from ``create``: either a
valid instance or a validation message, never an exception. ``Left`` / ``Right``
form the discriminated union returned by use cases.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")
L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a validating operation"""
    is_success: bool
    value: Optional[T] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.is_success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.is_success and not self.error:
            raise ValueError("A failing result needs an error message")

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def get_value(self) -> T:
        """
        Return the wrapped value
        
        Raises:
            ValueError: If called on a failing result
        """
        if not self.is_success:
            raise ValueError(f"Can't get the value of a failed result: {self.error}")
        return self.value  # type: ignore[return-value]

    @staticmethod
    def ok(value: Optional[T] = None) -> "Result[T]":
        return Result(is_success=True, value=value)

    @staticmethod
    def fail(error: str) -> "Result[T]":
        return Result(is_success=False, error=error)

    @staticmethod
    def combine(*results: "Result") -> "Result[None]":
        """Return the first failing result, or an empty ok result"""
        for result in results:
            if result.is_failure:
                return result
        return Result.ok()


@dataclass(frozen=True)
class Left(Generic[L]):
    """Error branch of a use case response"""
    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False


@dataclass(frozen=True)
class Right(Generic[R]):
    """Success branch of a use case response"""
    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True


Either = Union[Left[L], Right[R]]
