# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Bounded waits with a deterministic fallback.

``race_with_deadline`` races a lookup against a timer. When the timer wins,
the caller gets the fallback value and the lookup is abandoned: it is left
to finish on its own and whatever it produces is discarded.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from bashmaqawa.core.resource import (
    Failure,
    Resource,
    Success,
    failure_from_exception,
)
from bashmaqawa.errors.codes import ErrorCode
from bashmaqawa.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

# Strong references to abandoned lookups until they finish.
_abandoned: set[asyncio.Future[Any]] = set()


def abandoned_count() -> int:
    """Number of abandoned lookups that have not finished yet."""
    return len(_abandoned)


def _discard_abandoned(task: asyncio.Future[Any]) -> None:
    _abandoned.discard(task)
    if task.cancelled():
        logger.debug("Abandoned lookup was cancelled")
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Discarding late failure of abandoned lookup", exc_info=exc)
    else:
        logger.debug("Discarding late result of abandoned lookup")


def _abandon(task: asyncio.Future[Any]) -> None:
    _abandoned.add(task)
    task.add_done_callback(_discard_abandoned)


async def race_with_deadline(
    lookup: Awaitable[T],
    timeout: float,
    fallback: Callable[[], T],
) -> Resource[T]:
    """
    Wait for ``lookup`` for at most ``timeout`` seconds.

    Args:
        lookup: The awaitable to wait for
        timeout: Deadline in seconds; zero or less means already elapsed
        fallback: Produces the value used when the deadline elapses first

    Returns:
        Success with the lookup's value, a Failure if the lookup raised, or
        Success with ``fallback()`` if the deadline elapsed first
    """
    task = asyncio.ensure_future(lookup)
    try:
        done, _ = await asyncio.wait({task}, timeout=max(timeout, 0))
    except asyncio.CancelledError:
        task.cancel()
        raise

    if task in done:
        if task.cancelled():
            return Failure("Lookup was cancelled", code=ErrorCode.OPERATION_CANCELLED)
        exc = task.exception()
        if exc is not None:
            return failure_from_exception(exc)
        return Success(task.result())

    _abandon(task)
    logger.warning(
        "Lookup did not finish in time; using fallback", extra={"timeout": timeout}
    )
    return Success(fallback())
