"""Option pattern for explicit absence.

Provides Just and Nothing variants to replace None checks at call sites.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from fallible.domain.exceptions import EmptyValueError

if TYPE_CHECKING:
    from fallible.domain.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)


class Option(ABC, Generic[T]):
    """A value of type T, or nothing.

    Instances are immutable. Every transformation returns a new Option and
    leaves the receiver untouched.

    Example:
        >>> Option.from_nullable({"name": "alice"}).map(lambda d: d["name"]).get_or_default("Guest")
        'alice'
        >>> Option.from_nullable(None).map(lambda d: d["name"]).get_or_default("Guest")
        'Guest'
    """

    __slots__ = ()

    # =========================================================================
    # Construction
    # =========================================================================
    @staticmethod
    def just(value: T) -> Just[T]:
        """Wrap a present value."""
        return Just(value)

    @staticmethod
    def none() -> Nothing[Any]:
        """Create an empty Option."""
        return Nothing()

    @staticmethod
    def from_nullable(value: T | None) -> Option[T]:
        """Create an Option from a value that may be None.

        Args:
            value: Any value; None is treated as absence

        Returns:
            Nothing if value is None, otherwise Just(value)
        """
        if value is None:
            return Nothing()
        return Just(value)

    # =========================================================================
    # Inspection and retrieval
    # =========================================================================
    @abstractmethod
    def is_just(self) -> bool:
        """Check if a value is present."""

    @abstractmethod
    def is_nothing(self) -> bool:
        """Check if the Option is empty."""

    @abstractmethod
    def get(self) -> T:
        """Get the value, raising EmptyValueError when empty."""

    @abstractmethod
    def get_or_default(self, default: T) -> T:
        """Get the value or the given default."""

    @abstractmethod
    def get_or_else(self, supplier: Callable[[], T]) -> T:
        """Get the value or the result of calling supplier."""

    @abstractmethod
    def get_or_none(self) -> T | None:
        """Get the value or None."""

    # =========================================================================
    # Transformation
    # =========================================================================
    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Option[U]:
        """Apply func to the held value."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        """Apply an Option-returning func without nesting the result."""

    @abstractmethod
    def flatten(self) -> Option[Any]:
        """Remove one level of Option nesting."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if predicate holds for it."""

    @abstractmethod
    def to_result(self, error: E) -> Result[T, E]:
        """Convert to a Result, using error for the empty case."""

    @abstractmethod
    def to_result_lazy(self, error_factory: Callable[[], E]) -> Result[T, E]:
        """Convert to a Result, building the error only when empty."""


@dataclass(frozen=True, slots=True)
class Just(Option[T]):
    """Option holding a value."""

    value: T

    def is_just(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def get(self) -> T:
        return self.value

    def get_or_default(self, default: T) -> T:
        return self.value

    def get_or_else(self, supplier: Callable[[], T]) -> T:
        return self.value

    def get_or_none(self) -> T | None:
        return self.value

    def map(self, func: Callable[[T], U]) -> Option[U]:
        return Just(func(self.value))

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return self.map(func).flatten()

    def flatten(self) -> Option[Any]:
        if not isinstance(self.value, Option):
            raise TypeError(
                f"flatten() requires a nested Option, got {type(self.value).__name__}"
            )
        return self.value

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if predicate(self.value):
            return self
        return Nothing()

    def to_result(self, error: E) -> Result[T, E]:
        from fallible.domain.result import Success

        return Success(self.value)

    def to_result_lazy(self, error_factory: Callable[[], E]) -> Result[T, E]:
        from fallible.domain.result import Success

        return Success(self.value)

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing(Option[T]):
    """Empty Option."""

    def is_just(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def get(self) -> NoReturn:
        raise EmptyValueError()

    def get_or_default(self, default: T) -> T:
        return default

    def get_or_else(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def get_or_none(self) -> None:
        return None

    def map(self, func: Callable[[T], U]) -> Option[U]:
        return Nothing()

    def flat_map(self, func: Callable[[T], Option[U]]) -> Option[U]:
        return Nothing()

    def flatten(self) -> Option[Any]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self

    def to_result(self, error: E) -> Result[T, E]:
        from fallible.domain.result import Error

        return Error(error)

    def to_result_lazy(self, error_factory: Callable[[], E]) -> Result[T, E]:
        from fallible.domain.result import Error

        return Error(error_factory())

    def __repr__(self) -> str:
        return "Nothing()"


def just(value: T) -> Just[T]:
    """Create a Just option.

    Args:
        value: The value to hold

    Returns:
        Just wrapping the value
    """
    return Just(value)


def nothing() -> Nothing[Any]:
    """Create an empty option."""
    return Nothing()


def from_nullable(value: T | None) -> Option[T]:
    """Create an option from a nullable value.

    Args:
        value: Value that may be None

    Returns:
        Nothing for None, Just(value) otherwise
    """
    return Option.from_nullable(value)
