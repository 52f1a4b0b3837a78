"""Result pattern for explicit error handling.

Provides Success and Error types to replace exception-based control flow.
Exceptions are turned into data at the ``try_`` boundary and turned back
into exceptions only by ``get()``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import wraps
from types import TracebackType
from typing import TYPE_CHECKING, Any, Generic, NoReturn, ParamSpec, TypeVar

from fallible.domain.exceptions import NotAnErrorError
from fallible.shared.config import get_settings
from fallible.shared.logging import get_logger

if TYPE_CHECKING:
    from fallible.domain.option import Option

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)
F = TypeVar("F", bound=BaseException)
P = ParamSpec("P")

CatchSpec = type[BaseException] | tuple[type[BaseException], ...]

# Exceptions absorbed by try_, map and flat_map unless told otherwise.
# KeyboardInterrupt, SystemExit and GeneratorExit are never absorbed.
DEFAULT_CATCH: tuple[type[BaseException], ...] = (Exception,)


def _absorb(operation: str, exc: BaseException) -> Error[BaseException]:
    if get_settings().log_absorbed_failures:
        logger.debug(
            "failure_absorbed",
            operation=operation,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    return Error(exc)


class Result(ABC, Generic[T, E]):
    """A value of type T, or a failure carrying an exception of type E.

    Chains of ``map``/``flat_map`` stop at the first failure: once a step
    yields Error, later functions are not called and the error is passed
    through unchanged.

    Example:
        >>> Result.try_(lambda: int("42")).map(lambda n: n * 2).get()
        84
        >>> Result.try_(lambda: int("x")).map(lambda n: n * 2).get_or_default(0)
        0
    """

    __slots__ = ()

    # =========================================================================
    # Construction
    # =========================================================================
    @staticmethod
    def success(value: T) -> Success[T]:
        """Wrap a successful value."""
        return Success(value)

    @staticmethod
    def error(cause: E) -> Error[E]:
        """Wrap a failure."""
        return Error(cause)

    @staticmethod
    def try_(func: Callable[[], T], catch: CatchSpec = DEFAULT_CATCH) -> Result[T, Any]:
        """Call func and capture its outcome.

        Only exceptions matching ``catch`` are turned into Error; anything
        else propagates to the caller.

        Args:
            func: Zero-argument callable to run
            catch: Exception type or tuple of types to absorb

        Returns:
            Success with the return value, or Error with the raised exception
        """
        try:
            value = func()
        except catch as exc:
            return _absorb("try", exc)
        return Success(value)

    # =========================================================================
    # Inspection and retrieval
    # =========================================================================
    @abstractmethod
    def is_success(self) -> bool:
        """Check if result is success."""

    @abstractmethod
    def is_error(self) -> bool:
        """Check if result is an error."""

    @abstractmethod
    def get(self) -> T:
        """Get the value, re-raising the held exception on Error."""

    @abstractmethod
    def get_error(self) -> E:
        """Get the held exception, raising NotAnErrorError on Success."""

    @abstractmethod
    def get_or_default(self, default: T) -> T:
        """Get the value or the given default."""

    @abstractmethod
    def get_or_else(self, handler: Callable[[E], T]) -> T:
        """Get the value or the result of calling handler with the error."""

    @abstractmethod
    def get_or_none(self) -> T | None:
        """Get the value or None."""

    # =========================================================================
    # Transformation
    # =========================================================================
    @abstractmethod
    def map(self, func: Callable[[T], U]) -> Result[U, Any]:
        """Apply func to the value, absorbing exceptions it raises."""

    @abstractmethod
    def flat_map(self, func: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """Apply a Result-returning func without nesting the result."""

    @abstractmethod
    def flatten(self) -> Result[Any, Any]:
        """Remove one level of Result nesting."""

    @abstractmethod
    def map_error(self, func: Callable[[E], F]) -> Result[T, F]:
        """Translate the held exception."""

    @abstractmethod
    def to_option(self) -> Option[T]:
        """Convert to an Option, discarding any error."""


@dataclass(frozen=True, slots=True)
class Success(Result[T, Any]):
    """Successful result."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def get(self) -> T:
        return self.value

    def get_error(self) -> NoReturn:
        raise NotAnErrorError(self.value)

    def get_or_default(self, default: T) -> T:
        return self.value

    def get_or_else(self, handler: Callable[[Any], T]) -> T:
        return self.value

    def get_or_none(self) -> T | None:
        return self.value

    def map(self, func: Callable[[T], U]) -> Result[U, Any]:
        try:
            mapped = func(self.value)
        except DEFAULT_CATCH as exc:
            return _absorb("map", exc)
        return Success(mapped)

    def flat_map(self, func: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        try:
            outcome = func(self.value)
        except DEFAULT_CATCH as exc:
            return _absorb("flat_map", exc)
        if not isinstance(outcome, Result):
            return _absorb(
                "flat_map",
                TypeError(f"flat_map() function must return a Result, got {type(outcome).__name__}"),
            )
        return outcome

    def flatten(self) -> Result[Any, Any]:
        if not isinstance(self.value, Result):
            raise TypeError(
                f"flatten() requires a nested Result, got {type(self.value).__name__}"
            )
        return self.value

    def map_error(self, func: Callable[[Any], F]) -> Result[T, F]:
        return self

    def to_option(self) -> Option[T]:
        from fallible.domain.option import Just

        return Just(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Error(Result[Any, E]):
    """Failed result.

    Two errors are equal when they hold the same exception object, or
    exceptions of the same type with equal ``args`` and instance attributes.
    ``get()`` re-raises the cause starting from the traceback it had when
    the Error was built, so repeated calls do not grow it.
    """

    cause: E
    _traceback: TracebackType | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate that the cause can be raised."""
        if not isinstance(self.cause, BaseException):
            raise TypeError(
                f"Error cause must be an exception instance, got {type(self.cause).__name__}"
            )
        object.__setattr__(self, "_traceback", self.cause.__traceback__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        if self.cause is other.cause:
            return True
        return (
            type(self.cause) is type(other.cause)
            and self.cause.args == other.cause.args
            and getattr(self.cause, "__dict__", {}) == getattr(other.cause, "__dict__", {})
        )

    def __hash__(self) -> int:
        # args and attributes may be unhashable
        return hash((Error, type(self.cause)))

    def is_success(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def get(self) -> NoReturn:
        raise self.cause.with_traceback(self._traceback)

    def get_error(self) -> E:
        return self.cause

    def get_or_default(self, default: T) -> T:
        return default

    def get_or_else(self, handler: Callable[[E], T]) -> T:
        return handler(self.cause)

    def get_or_none(self) -> None:
        return None

    def map(self, func: Callable[[Any], U]) -> Result[U, E]:
        return self

    def flat_map(self, func: Callable[[Any], Result[U, Any]]) -> Result[U, E]:
        return self

    def flatten(self) -> Result[Any, E]:
        return self

    def map_error(self, func: Callable[[E], F]) -> Result[Any, F]:
        return Error(func(self.cause))

    def to_option(self) -> Option[Any]:
        from fallible.domain.option import Nothing

        return Nothing()

    def __repr__(self) -> str:
        return f"Error({self.cause!r})"


def success(value: T) -> Success[T]:
    """Create a Success result.

    Args:
        value: The success value

    Returns:
        Success wrapping the value
    """
    return Success(value)


def error(cause: E) -> Error[E]:
    """Create an Error result.

    Args:
        cause: The exception describing the failure

    Returns:
        Error wrapping the exception
    """
    return Error(cause)


def try_(func: Callable[[], T], catch: CatchSpec = DEFAULT_CATCH) -> Result[T, Any]:
    """Run func and capture its outcome as a Result."""
    return Result.try_(func, catch)


def safe(
    func: Callable[P, T] | None = None,
    *,
    catch: CatchSpec = DEFAULT_CATCH,
) -> Any:
    """Decorate a raising function so it returns a Result instead.

    Usable bare (``@safe``) or with arguments (``@safe(catch=KeyError)``).

    Args:
        func: Function to wrap
        catch: Exception type or tuple of types to absorb

    Returns:
        Wrapped function returning Success or Error

    Example:
        >>> @safe(catch=ZeroDivisionError)
        ... def divide(a: int, b: int) -> float:
        ...     return a / b
        >>> divide(4, 2)
        Success(2.0)
    """

    def decorator(fn: Callable[P, T]) -> Callable[P, Result[T, Any]]:
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Any]:
            return Result.try_(lambda: fn(*args, **kwargs), catch)

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
