"""
Tagged result types returned by user service operations.

Every service operation returns either ``Ok`` carrying the value or
``Err`` carrying a typed failure. Callers branch on the tag instead of
catching exceptions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


class FailureKind(Enum):
    """Category of a failed service operation."""

    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ServiceFailure:
    """A failed service operation.

    Attributes:
        kind: Failure category used to choose the HTTP status.
        message: Human-readable cause, rendered verbatim to clients.
    """

    kind: FailureKind
    message: str

    @classmethod
    def unexpected(cls, message: str) -> "ServiceFailure":
        return cls(kind=FailureKind.UNEXPECTED, message=message)

    @classmethod
    def not_found(cls, message: str) -> "ServiceFailure":
        return cls(kind=FailureKind.NOT_FOUND, message=message)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying an error."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
ServiceResult = Union[Ok[T], Err[ServiceFailure]]
