"""Domain layer exceptions.

All errors raised by the containers themselves inherit from FallibleError.
They signal API misuse and are never used to carry a wrapped failure.
"""
from __future__ import annotations

from typing import Any


class FallibleError(Exception):
    """Base exception for container misuse."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class EmptyValueError(FallibleError):
    def __init__(self) -> None:
        super().__init__("Cannot get the value of an empty Option")


class NotAnErrorError(FallibleError):
    def __init__(self, value: Any) -> None:
        super().__init__("Cannot get the error of a successful Result", {"value": value})
        self.value = value
