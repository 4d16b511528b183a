# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""
Logging settings, read from ``BASHMAQAWA_LOGGING_*`` environment variables.

When no level is set, the active environment chooses it: DEBUG while
developing, WARNING under test, INFO in production.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bashmaqawa.config.environment import Environment


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        return logging.getLevelNamesMapping()[self.value]

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Parse a level name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If ``value`` names no level
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid log level: {value}") from None


def _environment_level() -> str:
    return Environment.get_current().defaults.log_level


class LoggingSettings(BaseSettings):
    """Where log records go and how they are rendered."""

    model_config = SettingsConfigDict(
        env_prefix="BASHMAQAWA_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default_factory=_environment_level)
    json_format: bool = False
    include_timestamp: bool = True
    include_level: bool = True
    console_enabled: bool = True
    file_enabled: bool = False
    file_path: str | None = None
    # The package root logger stops propagation unless this is set.
    propagate: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        if isinstance(v, LogLevel):
            return v.value
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.from_string(v).value

    @property
    def log_level(self) -> LogLevel:
        return LogLevel(self.level)

    @classmethod
    def load(cls) -> LoggingSettings:
        return cls()
