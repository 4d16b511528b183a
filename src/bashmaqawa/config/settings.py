# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
"""Application settings loading and caching.

Settings are read from ``BASHMAQAWA_*`` environment variables and from the
``.env`` file of the active environment. Values left unset fall back to
that environment's defaults.
"""

from typing import Any, TypeVar, cast

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bashmaqawa.config.environment import Environment

T = TypeVar("T", bound=BaseSettings)

CONFIG_CACHE: dict[type, Any] = {}


class AppSettings(BaseSettings):
    """Core application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BASHMAQAWA_",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Bashmaqawa"
    env: Environment = Field(default_factory=Environment.get_current)
    locale: str = "ar"
    startup_timeout_seconds: float | None = Field(default=None, gt=0)

    @field_validator("env", mode="before")
    @classmethod
    def parse_env(cls, v: Any) -> Environment:
        if isinstance(v, Environment):
            return v
        return Environment.from_string(v)

    @model_validator(mode="after")
    def apply_environment_defaults(self) -> "AppSettings":
        if self.startup_timeout_seconds is None:
            self.startup_timeout_seconds = self.env.defaults.startup_timeout_seconds
        return self


def load_settings(settings_class: type[T], env: Environment | None = None) -> T:
    """Load settings for the specified class.

    Args:
        settings_class: The settings class to load
        env: Environment whose .env file and defaults apply (default: current)

    Returns:
        The settings instance
    """
    env = env or Environment.get_current()
    overrides: dict[str, Any] = {}
    if "env" in settings_class.model_fields:
        overrides["env"] = env
    return settings_class(_env_file=env.defaults.env_file, **overrides)  # type: ignore[call-arg]


def get_settings(settings_class: type[T] = AppSettings) -> T:  # type: ignore[assignment]
    """Get settings for a component, instantiating each class only once.

    Args:
        settings_class: The settings class to load

    Returns:
        The cached settings instance
    """
    if settings_class not in CONFIG_CACHE:
        CONFIG_CACHE[settings_class] = load_settings(settings_class)
    return cast(T, CONFIG_CACHE[settings_class])


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Used by tests after changing the environment.
    """
    CONFIG_CACHE.clear()
