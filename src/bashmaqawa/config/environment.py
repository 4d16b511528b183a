# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""
Deployment environments and the defaults each one implies.

The active environment comes from ``BASHMAQAWA_ENV``. It picks the ``.env``
file settings are read from, the default log level, and how long startup
waits for the user-count lookup before falling back to the login screen.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from bashmaqawa.errors.base import ConfigError

ENV_VAR = "BASHMAQAWA_ENV"


@dataclass(frozen=True)
class EnvironmentDefaults:
    """Values used when neither the process environment nor a .env file sets them."""

    env_file: str
    log_level: str
    startup_timeout_seconds: float


class Environment(str, Enum):
    """Where the app is running."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

    @property
    def defaults(self) -> EnvironmentDefaults:
        return _DEFAULTS[self]

    @classmethod
    def from_string(cls, value: str | None) -> Environment:
        """
        Parse an environment name or its short alias (dev, test, prod).

        None means DEVELOPMENT.

        Raises:
            ConfigError: If ``value`` names no known environment
        """
        if value is None:
            return cls.DEVELOPMENT
        try:
            return _ALIASES[value.strip().lower()]
        except KeyError:
            raise ConfigError(
                f"Invalid environment: {value}",
                provided_value=value,
                allowed=sorted(_ALIASES),
            ) from None

    @classmethod
    def get_current(cls) -> Environment:
        return cls.from_string(os.environ.get(ENV_VAR))


_ALIASES: dict[str, Environment] = {
    "dev": Environment.DEVELOPMENT,
    "development": Environment.DEVELOPMENT,
    "test": Environment.TESTING,
    "testing": Environment.TESTING,
    "prod": Environment.PRODUCTION,
    "production": Environment.PRODUCTION,
}

_DEFAULTS: dict[Environment, EnvironmentDefaults] = {
    Environment.DEVELOPMENT: EnvironmentDefaults(".env_dev", "DEBUG", 3.0),
    Environment.TESTING: EnvironmentDefaults(".env_test", "WARNING", 0.5),
    Environment.PRODUCTION: EnvironmentDefaults(".env", "INFO", 3.0),
}
