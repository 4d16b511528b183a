# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Bashmaqawa data-layer core.

Result handling, failure codes, bounded waits and date ranges shared by
the workforce, payroll and project repositories.
"""

from bashmaqawa.core import (
    PENDING,
    DateRange,
    Failure,
    Pending,
    Resource,
    Success,
    combine,
    error,
    from_awaitable,
    from_exception,
    pending,
    race_with_deadline,
    safe_call,
    success,
)
from bashmaqawa.errors import (
    BashmaqawaError,
    ErrorCategory,
    ErrorCode,
    ResourceFailureError,
    ResourcePendingError,
)

__version__ = "0.1.0"

__all__ = [
    "PENDING",
    "BashmaqawaError",
    "DateRange",
    "ErrorCategory",
    "ErrorCode",
    "Failure",
    "Pending",
    "Resource",
    "ResourceFailureError",
    "ResourcePendingError",
    "Success",
    "combine",
    "error",
    "from_awaitable",
    "from_exception",
    "pending",
    "race_with_deadline",
    "safe_call",
    "success",
]
