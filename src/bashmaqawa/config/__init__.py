"""Configuration management for Bashmaqawa.

Settings are loaded from environment variables and per-environment
.env files.
"""

from bashmaqawa.config.environment import Environment
from bashmaqawa.config.settings import (
    AppSettings,
    clear_settings_cache,
    get_settings,
    load_settings,
)

__all__ = [
    "AppSettings",
    "Environment",
    "clear_settings_cache",
    "get_settings",
    "load_settings",
]
