# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Error handling for Bashmaqawa.

Failure classification codes, their catalog, and the exception types
raised where data-represented failures meet raise-based control flow.
"""

from bashmaqawa.errors.base import (
    BashmaqawaError,
    ConfigError,
    ErrorContext,
    InvalidDateRangeError,
    ResourceFailureError,
    ResourcePendingError,
    add_error_context,
    get_error_context,
    with_error_context,
)
from bashmaqawa.errors.codes import (
    ErrorCategory,
    ErrorCode,
    ErrorInfo,
    get_all_error_info,
    get_error_info,
)

__all__ = [
    "BashmaqawaError",
    "ConfigError",
    "ErrorCategory",
    "ErrorCode",
    "ErrorContext",
    "ErrorInfo",
    "InvalidDateRangeError",
    "ResourceFailureError",
    "ResourcePendingError",
    "add_error_context",
    "get_all_error_info",
    "get_error_context",
    "get_error_info",
    "with_error_context",
]
