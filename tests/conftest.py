"""Pytest configuration and fixtures."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from fallible.shared.config import Settings


class CallCounter:
    """Callable that records how often it was invoked."""

    def __init__(self, func: Callable[..., Any] = lambda *args: None) -> None:
        self.func = func
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.func(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


class RecordingLogger:
    """Stand-in for a structlog logger that keeps emitted events."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def debug(self, event: str, **kw: Any) -> None:
        self.events.append((event, kw))


class MyError(Exception):
    """Domain failure used across the tests."""


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with absorption logging enabled."""
    return Settings(
        log_level="DEBUG",
        log_absorbed_failures=True,
        _env_file=None,
    )


@pytest.fixture
def counter() -> Callable[..., CallCounter]:
    """Factory for call-counting wrappers."""
    return CallCounter


@pytest.fixture
def recording_logger(monkeypatch: pytest.MonkeyPatch, test_settings: Settings) -> RecordingLogger:
    """Capture absorption events emitted by the result module."""
    recorder = RecordingLogger()
    monkeypatch.setattr("fallible.domain.result.logger", recorder)
    monkeypatch.setattr("fallible.domain.result.get_settings", lambda: test_settings)
    return recorder
