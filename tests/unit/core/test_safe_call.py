# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# bashmaqawa: tests for exception-to-Resource adapters
import asyncio

import pytest

from bashmaqawa.core.resource import (
    UNKNOWN_ERROR_MESSAGE,
    Failure,
    Success,
    failure_from_exception,
    from_awaitable,
    from_exception,
    safe_call,
)
from bashmaqawa.errors import BashmaqawaError, ErrorCode


async def count_users(n: int) -> int:
    await asyncio.sleep(0)
    return n


async def broken_lookup() -> int:
    await asyncio.sleep(0)
    raise RuntimeError("disk I/O error")


@pytest.mark.asyncio
async def test_safe_call_success():
    r = await safe_call(count_users, 3)
    assert r == Success(3)


@pytest.mark.asyncio
async def test_safe_call_kwargs():
    r = await safe_call(count_users, n=4)
    assert r.value_or_raise() == 4


@pytest.mark.asyncio
async def test_safe_call_failure_keeps_cause():
    r = await safe_call(broken_lookup)
    assert isinstance(r, Failure)
    assert r.message == "disk I/O error"
    assert isinstance(r.cause, RuntimeError)
    assert r.code is ErrorCode.UNKNOWN


@pytest.mark.asyncio
async def test_safe_call_empty_message_uses_default():
    async def bad():
        raise ValueError()

    r = await safe_call(bad)
    assert r.message == UNKNOWN_ERROR_MESSAGE


@pytest.mark.asyncio
async def test_safe_call_keeps_domain_error_code():
    async def settle():
        raise BashmaqawaError(
            "Advance already settled", ErrorCode.ADVANCE_ALREADY_SETTLED
        )

    r = await safe_call(settle)
    assert r.code is ErrorCode.ADVANCE_ALREADY_SETTLED
    assert r.message == "Advance already settled"


@pytest.mark.asyncio
async def test_safe_call_does_not_swallow_cancellation():
    async def cancelled():
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await safe_call(cancelled)


@pytest.mark.asyncio
async def test_from_awaitable():
    assert await from_awaitable(count_users(7)) == Success(7)
    r = await from_awaitable(broken_lookup())
    assert r.is_failure
    assert r.message == "disk I/O error"


def test_from_exception_decorator():
    @from_exception
    def parse_amount(text: str) -> float:
        return float(text)

    assert parse_amount("12.5") == Success(12.5)
    r = parse_amount("twelve")
    assert r.is_failure
    assert isinstance(r.cause, ValueError)
    assert parse_amount.__name__ == "parse_amount"


def test_from_exception_rejects_coroutine_functions():
    with pytest.raises(TypeError, match="safe_call"):

        @from_exception
        async def load_workers() -> list[str]:
            return []


def test_failure_from_exception():
    exc = KeyError("x")
    f = failure_from_exception(exc)
    assert f.cause is exc
    assert f.message == str(exc)
