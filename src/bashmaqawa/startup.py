# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Choice of the first screen shown at launch.

The login screen is shown when at least one user exists and the setup
screen otherwise. The user count lookup is bounded by
``AppSettings.startup_timeout_seconds``; a slow lookup falls back to login
and a failing lookup falls back to setup.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Protocol, runtime_checkable

from bashmaqawa.config import get_settings
from bashmaqawa.core.deadline import race_with_deadline
from bashmaqawa.core.resource import Failure
from bashmaqawa.logging import get_logger

logger = get_logger(__name__)


class Screen(str, Enum):
    """Navigation routes that can open the application."""

    LOGIN = "login"
    SETUP = "setup"


@runtime_checkable
class UserCountSource(Protocol):
    """Anything that can count registered users, usually the auth repository."""

    async def get_user_count(self) -> int: ...


class StartDestinationResolver:
    """
    Decides the start screen once and remembers the decision.

    Usage:
        resolver = StartDestinationResolver(auth_repository)
        screen = await resolver.resolve()
    """

    def __init__(self, users: UserCountSource, timeout: float | None = None) -> None:
        self._users = users
        self._timeout = (
            timeout if timeout is not None else get_settings().startup_timeout_seconds
        )
        self._lock = asyncio.Lock()
        self.start_destination: Screen | None = None

    @property
    def timeout(self) -> float:
        return self._timeout

    async def resolve(self) -> Screen:
        """
        Return the start screen, looking up the user count on first call.
        """
        async with self._lock:
            if self.start_destination is None:
                self.start_destination = await self._determine()
            return self.start_destination

    async def _determine(self) -> Screen:
        outcome = await race_with_deadline(
            self._lookup(), self._timeout, lambda: Screen.LOGIN
        )
        screen = outcome.fold(
            on_success=lambda chosen: chosen,
            on_failure=self._on_lookup_failure,
            on_pending=lambda: Screen.LOGIN,
        )
        logger.info("Start destination chosen", extra={"screen": screen.value})
        return screen

    async def _lookup(self) -> Screen:
        count = await self._users.get_user_count()
        return Screen.LOGIN if count > 0 else Screen.SETUP

    def _on_lookup_failure(self, failure: Failure) -> Screen:
        logger.warning(
            "User count lookup failed: %s",
            failure.message,
            exc_info=failure.cause,
        )
        return Screen.SETUP
