"""fallible.

Option and Result containers for composing computations that may be
absent or may fail, without None checks or try/except at every call site.
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "fallible Team"

from fallible.domain import (
    DEFAULT_CATCH,
    EmptyValueError,
    Error,
    FallibleError,
    Just,
    NotAnErrorError,
    Nothing,
    Option,
    Result,
    Success,
    error,
    from_nullable,
    just,
    nothing,
    safe,
    success,
    try_,
)

__all__ = [
    "__version__",
    "DEFAULT_CATCH",
    "EmptyValueError",
    "Error",
    "FallibleError",
    "Just",
    "NotAnErrorError",
    "Nothing",
    "Option",
    "Result",
    "Success",
    "error",
    "from_nullable",
    "just",
    "nothing",
    "safe",
    "success",
    "try_",
]
