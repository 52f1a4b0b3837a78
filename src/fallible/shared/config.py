"""Library configuration.

Uses pydantic-settings for environment variable support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support.

    All settings can be overridden via environment variables prefixed
    with ``FALLIBLE_``.
    Example: FALLIBLE_LOG_LEVEL, FALLIBLE_LOG_ABSORBED_FAILURES
    """

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = Field(default="fallible", description="Library name")
    debug: bool = Field(default=False, description="Debug mode")

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )
    log_absorbed_failures: bool = Field(
        default=True,
        description="Emit a debug event when an exception is turned into an Error",
    )

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """Get the log level, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
