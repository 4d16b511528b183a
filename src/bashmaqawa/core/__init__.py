# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Core value types for the Bashmaqawa data layer.
"""

from bashmaqawa.core.date_range import DateRange
from bashmaqawa.core.deadline import race_with_deadline
from bashmaqawa.core.resource import (
    PENDING,
    Failure,
    Pending,
    Resource,
    Success,
    combine,
    error,
    failure_from_exception,
    from_awaitable,
    from_exception,
    pending,
    safe_call,
    success,
)

__all__ = [
    "PENDING",
    "DateRange",
    "Failure",
    "Pending",
    "Resource",
    "Success",
    "combine",
    "error",
    "failure_from_exception",
    "from_awaitable",
    "from_exception",
    "pending",
    "race_with_deadline",
    "safe_call",
    "success",
]
