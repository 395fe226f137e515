"""
Tagged result type for session exchanges.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from chess_uci.errors import UciError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of one exchange with the engine.

    Exactly one of ``value`` / ``error`` is meaningful: a failed outcome
    carries the error, a successful one carries the value (which may itself
    be None for fire-and-forget writes).

    Attributes:
        value: Result of the exchange on success
        error: Error describing why the exchange failed
    """

    value: Optional[T] = None
    error: Optional[UciError] = None

    @property
    def ok(self) -> bool:
        """Check if the exchange succeeded."""
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """
        Return the value, raising the carried error on failure.

        Raises:
            UciError: The error of a failed outcome
        """
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: UciError) -> "Outcome[T]":
        return cls(error=error)
