"""Shared module.

Cross-cutting concerns: configuration, logging.
"""
from fallible.shared.config import Settings, get_settings
from fallible.shared.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
]
