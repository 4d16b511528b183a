# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Resource objects for uniform outcome handling in Bashmaqawa.

A ``Resource`` is the outcome of a fallible or in-progress operation: a
``Success`` holding a value, a ``Failure`` holding a message, optional cause
and classification code, or the ``Pending`` marker. Repositories return
resources instead of raising for expected failure modes; callers consume
them with ``fold``, ``map`` and ``combine``. ``value_or_raise`` is the one
place where a resource turns back into an exception.
"""

import functools
import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from bashmaqawa.errors.base import (
    BashmaqawaError,
    ResourceFailureError,
    ResourcePendingError,
)
from bashmaqawa.errors.codes import ErrorCode

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


@runtime_checkable
class HasToDict(Protocol):
    """
    Protocol for objects that can be converted to dictionaries.
    """

    def to_dict(self) -> dict[str, Any]: ...


class Resource(Generic[T], ABC):
    """Abstract base for the three resource variants."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    @abstractmethod
    def is_failure(self) -> bool: ...

    @property
    @abstractmethod
    def is_pending(self) -> bool: ...

    @abstractmethod
    def value_or_none(self) -> T | None: ...

    @abstractmethod
    def value_or_default(self, fallback: T) -> T: ...

    @abstractmethod
    def value_or_raise(self) -> T: ...

    @abstractmethod
    def map(self, transform: Callable[[T], U]) -> "Resource[U]": ...

    @abstractmethod
    def fold(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[["Failure"], R],
        on_pending: Callable[[], R],
    ) -> R: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    def on_success(self, action: Callable[[T], Any]) -> "Resource[T]":
        """
        Run ``action`` with the value if this is a success.

        Returns:
            This resource, unchanged
        """
        return self

    def on_failure(self, action: Callable[["Failure"], Any]) -> "Resource[T]":
        """
        Run ``action`` with the failure if this is a failure.

        Returns:
            This resource, unchanged
        """
        return self


@dataclass(frozen=True, slots=True)
class Success(Resource[T]):
    """
    A completed operation and its value.

    Attributes:
        value: The result of the operation
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def is_pending(self) -> bool:
        return False

    def value_or_none(self) -> T:
        return self.value

    def value_or_default(self, fallback: T) -> T:
        return self.value

    def value_or_raise(self) -> T:
        return self.value

    def map(self, transform: Callable[[T], U]) -> "Success[U]":
        """
        Apply ``transform`` to the value.

        Args:
            transform: Infallible function applied to the value

        Returns:
            A new Success holding the transformed value
        """
        return Success(transform(self.value))

    def fold(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[["Failure"], R],
        on_pending: Callable[[], R],
    ) -> R:
        return on_success(self.value)

    def on_success(self, action: Callable[[T], Any]) -> "Success[T]":
        action(self.value)
        return self

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.value, HasToDict):
            return {"status": "success", "data": self.value.to_dict()}
        return {"status": "success", "data": self.value}

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Resource[Any]):
    """
    A failed operation.

    Attributes:
        message: Human-readable description of the failure
        cause: The underlying exception, if any
        code: Failure classification, ``UNKNOWN`` when not specified
    """

    message: str
    cause: BaseException | None = None
    code: ErrorCode = ErrorCode.UNKNOWN

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def is_pending(self) -> bool:
        return False

    def value_or_none(self) -> None:
        return None

    def value_or_default(self, fallback: T) -> T:
        return fallback

    def value_or_raise(self) -> Any:
        """
        Raise the failure as an exception.

        Raises:
            ResourceFailureError: Always, chained to ``cause`` when present
        """
        raise ResourceFailureError(
            self.message, self.code, cause=self.cause
        ) from self.cause

    def map(self, transform: Callable[[Any], U]) -> "Failure":
        return self

    def fold(
        self,
        on_success: Callable[[Any], R],
        on_failure: Callable[["Failure"], R],
        on_pending: Callable[[], R],
    ) -> R:
        return on_failure(self)

    def on_failure(self, action: Callable[["Failure"], Any]) -> "Failure":
        action(self)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "error",
            "error": {
                "message": self.message,
                "error_code": self.code.value,
                "category": self.code.category.name,
            },
        }

    def __repr__(self) -> str:
        if self.cause is None:
            return f"Failure({self.message!r}, code={self.code.value})"
        return f"Failure({self.message!r}, cause={self.cause!r}, code={self.code.value})"


class Pending(Resource[Any]):
    """
    An operation that has not completed yet.

    Stateless; there is exactly one instance, returned by ``pending()``.
    """

    __slots__ = ()
    _instance: "Pending | None" = None

    def __new__(cls) -> "Pending":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def is_pending(self) -> bool:
        return True

    def value_or_none(self) -> None:
        return None

    def value_or_default(self, fallback: T) -> T:
        return fallback

    def value_or_raise(self) -> Any:
        """
        Raises:
            ResourcePendingError: Always
        """
        raise ResourcePendingError()

    def map(self, transform: Callable[[Any], U]) -> "Pending":
        return self

    def fold(
        self,
        on_success: Callable[[Any], R],
        on_failure: Callable[[Failure], R],
        on_pending: Callable[[], R],
    ) -> R:
        return on_pending()

    def to_dict(self) -> dict[str, Any]:
        return {"status": "pending"}

    def __repr__(self) -> str:
        return "Pending"


PENDING = Pending()


def success(value: T) -> Success[T]:
    """
    Create a successful resource.

    Args:
        value: The value

    Returns:
        A Success holding ``value``
    """
    return Success(value)


def error(
    message: str,
    cause: BaseException | None = None,
    code: ErrorCode = ErrorCode.UNKNOWN,
) -> Failure:
    """
    Create a failed resource.

    Args:
        message: Human-readable description, passed through as given
        cause: The underlying exception, if any
        code: Failure classification

    Returns:
        A Failure
    """
    return Failure(message, cause, code)


def pending() -> Pending:
    """Return the shared Pending marker."""
    return PENDING


def combine(
    first: Resource[U],
    second: Resource[V],
    transform: Callable[[U, V], R],
) -> Resource[R]:
    """
    Combine two independent resources into one.

    Failure takes precedence over Pending, which takes precedence over
    Success. When both are failures the first one wins. ``transform`` is
    called only when both resources are successes.

    Args:
        first: The first resource
        second: The second resource
        transform: Function combining the two values

    Returns:
        The combined resource
    """
    match first, second:
        case Failure(), _:
            return first
        case _, Failure():
            return second
        case Success(value=left), Success(value=right):
            return Success(transform(left, right))
        case _:
            return PENDING


def failure_from_exception(exc: BaseException) -> Failure:
    """
    Build a Failure describing ``exc``.

    A ``BashmaqawaError`` keeps its own message and code; anything else is
    classified as ``UNKNOWN`` with ``str(exc)`` as the message.
    """
    if isinstance(exc, BashmaqawaError):
        return Failure(exc.message or UNKNOWN_ERROR_MESSAGE, exc, exc.code)
    return Failure(str(exc) or UNKNOWN_ERROR_MESSAGE, exc, ErrorCode.UNKNOWN)


async def safe_call(
    block: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any
) -> Resource[T]:
    """
    Await ``block(*args, **kwargs)`` and wrap the outcome in a resource.

    Args:
        block: Coroutine function to run
        *args: Positional arguments for ``block``
        **kwargs: Keyword arguments for ``block``

    Returns:
        Success with the awaited value, or a Failure for any ``Exception``
    """
    try:
        return Success(await block(*args, **kwargs))
    except Exception as e:
        return failure_from_exception(e)


async def from_awaitable(awaitable: Awaitable[T]) -> Resource[T]:
    """
    Convert an awaitable that might raise exceptions to a resource.

    Args:
        awaitable: The awaitable

    Returns:
        A resource
    """
    try:
        return Success(await awaitable)
    except Exception as e:
        return failure_from_exception(e)


def from_exception(func: Callable[..., T]) -> Callable[..., Resource[T]]:
    """
    Decorator to convert a function that might raise exceptions to one that
    returns a resource.

    Coroutine functions are rejected; wrap those calls with ``safe_call``
    instead.

    Args:
        func: The function to decorate

    Returns:
        A function that returns a resource
    """
    if inspect.iscoroutinefunction(func):
        raise TypeError(
            f"from_exception cannot wrap coroutine function {func.__qualname__}; "
            "use safe_call"
        )

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Resource[T]:
        try:
            return Success(func(*args, **kwargs))
        except Exception as e:
            return failure_from_exception(e)

    return wrapper
