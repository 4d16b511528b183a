# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# bashmaqawa: tests for Resource construction, inspection and combinators
from __future__ import annotations

import pytest

from bashmaqawa.core.resource import (
    PENDING,
    Failure,
    Pending,
    Success,
    combine,
    error,
    pending,
    success,
)
from bashmaqawa.errors import ErrorCode, ResourceFailureError, ResourcePendingError


class TestConstruction:
    """Building Success, Failure and Pending."""

    def test_success_holds_value(self) -> None:
        r = success(42)
        assert r.is_success
        assert r.value_or_none() == 42
        assert r == Success(42)

    def test_error_defaults(self) -> None:
        r = error("boom")
        assert r.is_failure
        assert r.message == "boom"
        assert r.cause is None
        assert r.code is ErrorCode.UNKNOWN

    def test_error_accepts_empty_message(self) -> None:
        r = error("")
        assert r.is_failure
        assert r.message == ""

    def test_error_with_cause_and_code(self) -> None:
        cause = KeyError("worker 7")
        r = error("Worker missing", cause, ErrorCode.WORKER_NOT_FOUND)
        assert r.cause is cause
        assert r.code is ErrorCode.WORKER_NOT_FOUND

    def test_pending_is_single_value(self) -> None:
        assert pending() is pending()
        assert pending() is PENDING
        assert Pending() is PENDING
        assert pending() == pending()
        assert pending().is_pending

    def test_variants_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            success(1).value = 2  # type: ignore[misc]
        with pytest.raises(AttributeError):
            error("x").message = "y"  # type: ignore[misc]


class TestInspection:
    """State checks and value extraction."""

    @pytest.mark.parametrize(
        "resource,expected",
        [
            (success(0), (True, False, False)),
            (success(None), (True, False, False)),
            (error("x"), (False, True, False)),
            (pending(), (False, False, True)),
        ],
    )
    def test_exactly_one_predicate(self, resource, expected) -> None:
        for _ in range(3):
            flags = (resource.is_success, resource.is_failure, resource.is_pending)
            assert flags == expected
            assert sum(flags) == 1

    def test_value_or_none(self) -> None:
        assert success("a").value_or_none() == "a"
        assert error("x").value_or_none() is None
        assert pending().value_or_none() is None

    def test_value_or_default(self) -> None:
        assert error("x").value_or_default(9) == 9
        assert success(9).value_or_default(0) == 9
        assert pending().value_or_default(3) == 3

    def test_value_or_raise_success(self) -> None:
        assert success([1, 2]).value_or_raise() == [1, 2]

    def test_value_or_raise_failure_with_cause(self) -> None:
        cause = ValueError("negative amount")
        r = error("Amount must be positive", cause, ErrorCode.INVALID_AMOUNT)
        with pytest.raises(ResourceFailureError) as exc_info:
            r.value_or_raise()
        raised = exc_info.value
        assert raised.message == "Amount must be positive"
        assert raised.code is ErrorCode.INVALID_AMOUNT
        assert raised.cause is cause
        assert raised.__cause__ is cause

    def test_value_or_raise_failure_without_cause(self) -> None:
        with pytest.raises(ResourceFailureError) as exc_info:
            error("Account missing", code=ErrorCode.ACCOUNT_NOT_FOUND).value_or_raise()
        assert exc_info.value.message == "Account missing"
        assert exc_info.value.cause is None
        assert str(exc_info.value) == "ACCOUNT_NOT_FOUND: Account missing"

    def test_value_or_raise_pending_is_distinct(self) -> None:
        with pytest.raises(ResourcePendingError) as exc_info:
            pending().value_or_raise()
        assert not isinstance(exc_info.value, ResourceFailureError)
        assert exc_info.value.message == "Resource is still loading"


class TestMap:
    """Transforming a success payload."""

    def test_identity(self) -> None:
        assert success(5).map(lambda v: v) == success(5)

    def test_transforms_value(self) -> None:
        assert success(5).map(lambda v: v * 2) == success(10)

    def test_failure_short_circuits(self) -> None:
        calls = []
        cause = RuntimeError("db")
        original = error("Storage failed", cause, ErrorCode.DATABASE_ERROR)
        mapped = original.map(lambda v: calls.append(v))
        assert mapped is original
        assert mapped.message == "Storage failed"
        assert mapped.cause is cause
        assert mapped.code is ErrorCode.DATABASE_ERROR
        assert calls == []

    def test_pending_short_circuits(self) -> None:
        calls = []
        assert pending().map(lambda v: calls.append(v)) is PENDING
        assert calls == []

    def test_transform_exception_propagates(self) -> None:
        with pytest.raises(ZeroDivisionError):
            success(1).map(lambda v: v / 0)


class TestFold:
    """Collapsing a resource to a single value."""

    @staticmethod
    def _handlers(calls: list[str]):
        return dict(
            on_success=lambda v: calls.append("success") or f"value {v}",
            on_failure=lambda f: calls.append("failure") or f"failed {f.message}",
            on_pending=lambda: calls.append("pending") or "waiting",
        )

    def test_success(self) -> None:
        calls: list[str] = []
        assert success(3).fold(**self._handlers(calls)) == "value 3"
        assert calls == ["success"]

    def test_failure_receives_failure(self) -> None:
        calls: list[str] = []
        assert error("nope").fold(**self._handlers(calls)) == "failed nope"
        assert calls == ["failure"]

    def test_pending(self) -> None:
        calls: list[str] = []
        assert pending().fold(**self._handlers(calls)) == "waiting"
        assert calls == ["pending"]


class TestEffects:
    """Side-effect hooks that return the resource unchanged."""

    def test_on_success_runs_for_success_only(self) -> None:
        seen = []
        r = success(1)
        assert r.on_success(seen.append) is r
        assert error("x").on_success(seen.append).is_failure
        assert pending().on_success(seen.append) is PENDING
        assert seen == [1]

    def test_on_failure_runs_for_failure_only(self) -> None:
        seen = []
        f = error("x")
        assert f.on_failure(seen.append) is f
        assert success(1).on_failure(seen.append) == success(1)
        assert pending().on_failure(seen.append) is PENDING
        assert seen == [f]

    def test_chaining(self) -> None:
        seen = []
        r = success(2).on_success(seen.append).on_failure(seen.append).map(str)
        assert r == success("2")
        assert seen == [2]


class TestCombine:
    """Failure over Pending over Success when merging two resources."""

    @staticmethod
    def _add(a: int, b: int) -> int:
        return a + b

    def test_both_failures_left_biased(self) -> None:
        r = combine(error("A"), error("B"), self._add)
        assert isinstance(r, Failure)
        assert r.message == "A"

    def test_failure_beats_pending(self) -> None:
        assert combine(error("A"), pending(), self._add).message == "A"
        assert combine(pending(), error("B"), self._add).message == "B"

    def test_failure_beats_success(self) -> None:
        assert combine(success(1), error("B"), self._add).message == "B"
        assert combine(error("A"), success(1), self._add).message == "A"

    def test_pending_beats_success(self) -> None:
        assert combine(pending(), success(5), self._add) is PENDING
        assert combine(success(5), pending(), self._add) is PENDING
        assert combine(pending(), pending(), self._add) is PENDING

    def test_both_success(self) -> None:
        assert combine(success(2), success(3), self._add) == success(5)

    def test_transform_not_called_unless_both_succeed(self) -> None:
        calls = []

        def record(a, b):
            calls.append((a, b))
            return a

        combine(error("A"), success(1), record)
        combine(pending(), success(1), record)
        assert calls == []


class TestToDict:
    """Dictionary form of each variant."""

    def test_success(self) -> None:
        assert success({"id": 1}).to_dict() == {"status": "success", "data": {"id": 1}}

    def test_success_uses_value_to_dict(self) -> None:
        class Worker:
            def to_dict(self):
                return {"name": "Ahmed"}

        assert success(Worker()).to_dict()["data"] == {"name": "Ahmed"}

    def test_failure(self) -> None:
        r = error("Already paid", code=ErrorCode.PAYROLL_ALREADY_PAID)
        assert r.to_dict() == {
            "status": "error",
            "error": {
                "message": "Already paid",
                "error_code": "PAYROLL_ALREADY_PAID",
                "category": "CONFLICT",
            },
        }

    def test_pending(self) -> None:
        assert pending().to_dict() == {"status": "pending"}
