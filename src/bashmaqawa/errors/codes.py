# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Failure classification codes and their catalog.

Every ``Failure`` produced by the data layer carries one of these codes so
that the presentation layer can pick localized text without parsing
messages.
"""

from dataclasses import dataclass
from enum import Enum, auto


class ErrorCategory(Enum):
    """
    Broad classes of failure, used for grouping codes.
    """

    INTERNAL = auto()  # Unexpected or unclassified errors
    VALIDATION = auto()  # Input rejected before any work was done
    NOT_FOUND = auto()  # Referenced entity does not exist
    CONFLICT = auto()  # Entity is in a state that forbids the operation
    DATABASE = auto()  # Storage layer errors
    CANCELLED = auto()  # Operation stopped before completion


class ErrorCode(str, Enum):
    """Domain failure codes for the financial and workforce data layer."""

    UNKNOWN = "UNKNOWN"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    WORKER_NOT_FOUND = "WORKER_NOT_FOUND"
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    OPERATION_CANCELLED = "OPERATION_CANCELLED"
    DATABASE_ERROR = "DATABASE_ERROR"
    PAYROLL_ALREADY_PAID = "PAYROLL_ALREADY_PAID"
    ADVANCE_ALREADY_SETTLED = "ADVANCE_ALREADY_SETTLED"
    TRANSACTION_ALREADY_VOID = "TRANSACTION_ALREADY_VOID"

    @property
    def info(self) -> "ErrorInfo":
        return get_error_info(self)

    @property
    def category(self) -> ErrorCategory:
        return get_error_info(self).category

    @property
    def description(self) -> str:
        return get_error_info(self).description

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ErrorInfo:
    """
    Information about an error code.

    Stores the metadata the presentation layer needs to render a failure
    consistently.
    """

    code: ErrorCode
    category: ErrorCategory
    description: str
    retry_allowed: bool = False


_ERROR_CATALOG: dict[ErrorCode, ErrorInfo] = {}


def register_error(
    code: ErrorCode,
    category: ErrorCategory,
    description: str,
    retry_allowed: bool = False,
) -> None:
    """
    Register an error code in the catalog.

    Args:
        code: The error code
        category: The error category
        description: A short human-readable description
        retry_allowed: Whether retrying the operation may succeed

    Raises:
        ValueError: If the code is already registered
    """
    if code in _ERROR_CATALOG:
        raise ValueError(f"Error code {code} is already registered")

    _ERROR_CATALOG[code] = ErrorInfo(
        code=code,
        category=category,
        description=description,
        retry_allowed=retry_allowed,
    )


def get_error_info(code: ErrorCode) -> ErrorInfo:
    """
    Get information about an error code.

    Args:
        code: The error code

    Returns:
        ErrorInfo for the code
    """
    return _ERROR_CATALOG[code]


def get_all_error_info() -> list[ErrorInfo]:
    """Get all registered error codes, in declaration order."""
    return [_ERROR_CATALOG[code] for code in ErrorCode]


register_error(
    ErrorCode.UNKNOWN,
    ErrorCategory.INTERNAL,
    "An unexpected error occurred",
    retry_allowed=True,
)
register_error(
    ErrorCode.VALIDATION_FAILED,
    ErrorCategory.VALIDATION,
    "Input validation failed",
)
register_error(
    ErrorCode.INSUFFICIENT_BALANCE,
    ErrorCategory.VALIDATION,
    "The source account balance does not cover the amount",
)
register_error(
    ErrorCode.ACCOUNT_NOT_FOUND,
    ErrorCategory.NOT_FOUND,
    "The account could not be found",
)
register_error(
    ErrorCode.TRANSACTION_NOT_FOUND,
    ErrorCategory.NOT_FOUND,
    "The transaction could not be found",
)
register_error(
    ErrorCode.WORKER_NOT_FOUND,
    ErrorCategory.NOT_FOUND,
    "The worker could not be found",
)
register_error(
    ErrorCode.PROJECT_NOT_FOUND,
    ErrorCategory.NOT_FOUND,
    "The project could not be found",
)
register_error(
    ErrorCode.INVALID_AMOUNT,
    ErrorCategory.VALIDATION,
    "The amount is missing or not greater than zero",
)
register_error(
    ErrorCode.INVALID_DATE_RANGE,
    ErrorCategory.VALIDATION,
    "The start date is after the end date",
)
register_error(
    ErrorCode.OPERATION_CANCELLED,
    ErrorCategory.CANCELLED,
    "The operation was cancelled",
    retry_allowed=True,
)
register_error(
    ErrorCode.DATABASE_ERROR,
    ErrorCategory.DATABASE,
    "The storage layer reported an error",
    retry_allowed=True,
)
register_error(
    ErrorCode.PAYROLL_ALREADY_PAID,
    ErrorCategory.CONFLICT,
    "The payroll entry has already been paid",
)
register_error(
    ErrorCode.ADVANCE_ALREADY_SETTLED,
    ErrorCategory.CONFLICT,
    "The worker advance has already been settled",
)
register_error(
    ErrorCode.TRANSACTION_ALREADY_VOID,
    ErrorCategory.CONFLICT,
    "The transaction has already been voided",
)
