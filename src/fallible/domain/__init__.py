"""Domain Layer.

The two containers, Option and Result, and the errors raised when they
are misused.
"""
from __future__ import annotations

from fallible.domain.exceptions import (
    EmptyValueError,
    FallibleError,
    NotAnErrorError,
)
from fallible.domain.option import (
    Just,
    Nothing,
    Option,
    from_nullable,
    just,
    nothing,
)
from fallible.domain.result import (
    DEFAULT_CATCH,
    Error,
    Result,
    Success,
    error,
    safe,
    success,
    try_,
)

__all__ = [
    # Exceptions
    "FallibleError",
    "EmptyValueError",
    "NotAnErrorError",
    # Option
    "Option",
    "Just",
    "Nothing",
    "just",
    "nothing",
    "from_nullable",
    # Result
    "Result",
    "Success",
    "Error",
    "DEFAULT_CATCH",
    "success",
    "error",
    "try_",
    "safe",
]
