"""Structured logging for the library.

Loggers are structlog wrappers around stdlib loggers under the ``fallible``
namespace. They carry their own processor chain, so the global structlog
configuration of the host application is never read or changed. Output
stays silent until the application enables the ``fallible`` logger, either
through its own stdlib setup or with ``configure_logging``.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

PACKAGE_LOGGER = "fallible"

_processors: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]

_configured = False


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Attach rendering handlers to the ``fallible`` logger.

    Opt-in; importing the library never calls this. Arguments left as None
    are taken from the library settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path
    """
    global _configured
    if _configured:
        return

    from fallible.shared.config import get_settings

    settings = get_settings()
    level = level or settings.effective_log_level
    log_format = log_format or settings.log_format
    log_file = log_file or settings.log_file

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()
    formatter = structlog.stdlib.ProcessorFormatter(processor=renderer)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str = PACKAGE_LOGGER) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to a stdlib logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structured logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
