# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Base error classes and error context for Bashmaqawa.

Expected failures travel as ``Failure`` values. The classes here are raised
only at explicit escalation points, such as ``Resource.value_or_raise`` or
invalid value-object construction.
"""

import contextvars
import functools
import inspect
from typing import Any

from bashmaqawa.errors.codes import ErrorCategory, ErrorCode

# Type for error context dict
ErrorContext = dict[str, Any]

_error_context = contextvars.ContextVar[ErrorContext]("error_context", default={})


def get_error_context() -> ErrorContext:
    """
    Get the current error context.

    Returns:
        A copy of the current error context dictionary
    """
    return _error_context.get().copy()


def add_error_context(**context: Any) -> None:
    """
    Add key-value pairs to the current error context.

    Args:
        **context: Key-value pairs to add to the context
    """
    current = _error_context.get().copy()
    current.update(context)
    _error_context.set(current)


class _ErrorContextManager:
    """Context manager for error context."""

    def __init__(self, **context_kwargs: Any):
        self.context_kwargs = context_kwargs
        self.token: contextvars.Token[ErrorContext] | None = None

    def __enter__(self):
        new_context = _error_context.get().copy()
        new_context.update(self.context_kwargs)
        self.token = _error_context.set(new_context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            _error_context.reset(self.token)
            self.token = None


def with_error_context(*args, **kwargs) -> Any:
    """
    Decorator or context manager for adding context to errors.

    Can be used as:
    1. Decorator: @with_error_context
    2. Context manager: with with_error_context(worker_id=7):

    As a decorator the bound call arguments become the context.
    """
    if kwargs == {} and len(args) == 1 and callable(args[0]):
        func = args[0]
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*f_args: Any, **f_kwargs: Any) -> Any:
            bound = sig.bind(*f_args, **f_kwargs)
            bound.apply_defaults()
            with _ErrorContextManager(**bound.arguments):
                return func(*f_args, **f_kwargs)

        return wrapper

    return _ErrorContextManager(**kwargs)


class BashmaqawaError(Exception):
    """
    Base class for all Bashmaqawa errors.

    Carries a failure classification code and the error context that was
    active when the error was created.
    """

    default_code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        **context: Any,
    ):
        super().__init__(message)
        self.message: str = message
        self.code: ErrorCode = code if code is not None else self.default_code
        self.context: ErrorContext = get_error_context()
        self.context.update(context)

    @property
    def category(self) -> ErrorCategory:
        return self.code.category

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "error_code": self.code.value,
            "category": self.category.name,
            "context": self.context,
        }

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ResourceFailureError(BashmaqawaError):
    """Raised when a ``Failure`` is forced into a value."""

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        cause: BaseException | None = None,
        **context: Any,
    ):
        super().__init__(message, code, **context)
        self.cause = cause


class ResourcePendingError(BashmaqawaError):
    """Raised when a ``Pending`` resource is forced into a value."""

    def __init__(self, message: str = "Resource is still loading", **context: Any):
        super().__init__(message, ErrorCode.UNKNOWN, **context)


class InvalidDateRangeError(BashmaqawaError, ValueError):
    """Raised when a date range starts after it ends."""

    default_code = ErrorCode.INVALID_DATE_RANGE


class ConfigError(BashmaqawaError):
    """Raised when configuration values cannot be resolved."""

    default_code = ErrorCode.VALIDATION_FAILED
