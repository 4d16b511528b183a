# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Inclusive date ranges for payroll periods and report queries.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from bashmaqawa.errors.base import InvalidDateRangeError

DATE_FORMAT = "%Y-%m-%d"


def _parse(value: str) -> datetime.date:
    parsed = datetime.datetime.strptime(value, DATE_FORMAT).date()
    if parsed.strftime(DATE_FORMAT) != value:
        raise ValueError(f"Date {value!r} is not zero-padded YYYY-MM-DD")
    return parsed


@dataclass(frozen=True, slots=True)
class DateRange:
    """
    An immutable, inclusive range of calendar days.

    Attributes:
        start: First day of the range
        end: Last day of the range, never before ``start``
    """

    start: datetime.date
    end: datetime.date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidDateRangeError(
                f"Start date ({self.start}) must be before or equal to end date ({self.end})",
                start=self.start.isoformat(),
                end=self.end.isoformat(),
            )

    @property
    def start_string(self) -> str:
        return self.start.strftime(DATE_FORMAT)

    @property
    def end_string(self) -> str:
        return self.end.strftime(DATE_FORMAT)

    @property
    def day_count(self) -> int:
        """Number of days in the range, counting both ends."""
        return (self.end - self.start).days + 1

    def contains(self, day: datetime.date | str) -> bool:
        """
        Check whether ``day`` falls within the range.

        Strings are parsed as zero-padded ``YYYY-MM-DD``; unparseable
        strings are never contained. A datetime is compared by its date.
        """
        if isinstance(day, datetime.datetime):
            day = day.date()
        elif isinstance(day, str):
            try:
                day = _parse(day)
            except ValueError:
                return False
        return self.start <= day <= self.end

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, datetime.date | str):
            return False
        return self.contains(day)

    def overlaps(self, other: DateRange) -> bool:
        return self.start <= other.end and self.end >= other.start

    def intersect(self, other: DateRange) -> DateRange | None:
        """Return the days shared with ``other``, or None if they don't overlap."""
        if not self.overlaps(other):
            return None
        return DateRange(max(self.start, other.start), min(self.end, other.end))

    def extend(self, days_before: int = 0, days_after: int = 0) -> DateRange:
        return DateRange(
            self.start - datetime.timedelta(days=days_before),
            self.end + datetime.timedelta(days=days_after),
        )

    def dates(self) -> list[datetime.date]:
        return [
            self.start + datetime.timedelta(days=offset)
            for offset in range(self.day_count)
        ]

    def date_strings(self) -> list[str]:
        return [day.strftime(DATE_FORMAT) for day in self.dates()]

    def __str__(self) -> str:
        return f"{self.start_string} to {self.end_string}"

    @classmethod
    def current_week(cls, today: datetime.date | None = None) -> DateRange:
        """Monday to Sunday of the week containing ``today``."""
        today = today or datetime.date.today()
        monday = today - datetime.timedelta(days=today.weekday())
        return cls(monday, monday + datetime.timedelta(days=6))

    @classmethod
    def current_month(cls, today: datetime.date | None = None) -> DateRange:
        today = today or datetime.date.today()
        first = today.replace(day=1)
        next_month = (first + datetime.timedelta(days=32)).replace(day=1)
        return cls(first, next_month - datetime.timedelta(days=1))

    @classmethod
    def last_days(cls, days: int, today: datetime.date | None = None) -> DateRange:
        """The ``days`` days ending with ``today``."""
        today = today or datetime.date.today()
        return cls(today - datetime.timedelta(days=days - 1), today)

    @classmethod
    def from_strings(cls, start: str, end: str) -> DateRange:
        """
        Build a range from ``YYYY-MM-DD`` strings.

        Raises:
            ValueError: If either string is not a valid date
            InvalidDateRangeError: If ``start`` is after ``end``
        """
        return cls(_parse(start), _parse(end))

    @classmethod
    def single_day(cls, day: datetime.date | str) -> DateRange:
        if isinstance(day, str):
            day = _parse(day)
        return cls(day, day)
