# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT

"""
Public API for Bashmaqawa logging.
"""

from __future__ import annotations

from bashmaqawa.logging.config import LoggingSettings, LogLevel
from bashmaqawa.logging.logger import (
    ROOT_LOGGER_NAME,
    StructuredFormatter,
    configure_logging,
    get_log_context,
    get_logger,
    log_context,
)

__all__ = [
    "ROOT_LOGGER_NAME",
    "LogLevel",
    "LoggingSettings",
    "StructuredFormatter",
    "configure_logging",
    "get_log_context",
    "get_logger",
    "log_context",
]
