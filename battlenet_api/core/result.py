"""
Result type

Two-case result returned at every component boundary instead of raising.
"""

from typing import Any, Callable, Generic, Optional, TypeVar

from .exceptions import HTTPError

T = TypeVar('T')
U = TypeVar('U')

_MISSING: Any = object()


class Result(Generic[T]):
    """Either ``success(value)`` or ``failure(error)``, never both."""

    __slots__ = ("_value", "_error")

    def __init__(self, value: Any = _MISSING, error: Optional[HTTPError] = None):
        if (value is _MISSING) == (error is None):
            raise ValueError("Result needs exactly one of value or error")
        self._value = value
        self._error = error

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: HTTPError) -> "Result[T]":
        if not isinstance(error, HTTPError):
            raise TypeError(f"failure requires an HTTPError, got {type(error).__name__}")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        """The success value; raises the carried error on failure."""
        return self.unwrap()

    @property
    def error(self) -> Optional[HTTPError]:
        return self._error

    def unwrap(self) -> T:
        if self._error is not None:
            raise self._error
        return self._value

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Transform the success value, propagating a failure unchanged."""
        if self._error is not None:
            return Result.failure(self._error)
        return Result.success(fn(self._value))

    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        if self._error is not None:
            return Result.failure(self._error)
        return fn(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        if self.is_success and other.is_success:
            return self._value == other._value
        return self._error is other._error

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Result.failure({self._error!r})"
        return f"Result.success({self._value!r})"
