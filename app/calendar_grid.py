"""Month grid calculations for the calendar screen. No UI dependencies."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

# Sunday-first, matching first_weekday()
WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class InvalidMonth(ValueError):
    """Raised for a month number outside 1-12 or a year date() cannot hold."""


@dataclass(frozen=True, order=True)
class Month:
    year: int
    month: int

    @classmethod
    def of(cls, d: date) -> "Month":
        return cls(d.year, d.month)

    def previous(self) -> "Month":
        """Return the month one earlier."""
        if self.month == 1:
            return Month(self.year - 1, 12)
        return Month(self.year, self.month - 1)

    def next(self) -> "Month":
        """Return the month one later."""
        if self.month == 12:
            return Month(self.year + 1, 1)
        return Month(self.year, self.month + 1)

    def first_day(self) -> date:
        _check(self)
        return date(self.year, self.month, 1)

    def label(self) -> str:
        _check(self)
        return f"{calendar.month_name[self.month]} {self.year}"


@dataclass(frozen=True)
class CalendarDay:
    date: date
    is_today: bool = False


@dataclass(frozen=True)
class Blank:
    """Empty slot padding the first week."""


@dataclass(frozen=True)
class Day:
    day: CalendarDay

    @property
    def date(self) -> date:
        return self.day.date

    @property
    def is_today(self) -> bool:
        return self.day.is_today


GridCell = Union[Blank, Day]


def _check(month: Month) -> None:
    if not 1 <= month.month <= 12:
        raise InvalidMonth(f"month must be in 1..12, got {month.month}")
    if not date.min.year <= month.year <= date.max.year:
        raise InvalidMonth(
            f"year must be in {date.min.year}..{date.max.year}, got {month.year}"
        )


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(month: Month) -> int:
    """Return the number of days (28-31) in the given month."""
    _check(month)
    return calendar.monthrange(month.year, month.month)[1]


def first_weekday(month: Month) -> int:
    """Return the weekday of the 1st on a Sunday=0 .. Saturday=6 scale."""
    _check(month)
    return date(month.year, month.month, 1).isoweekday() % 7


def build_grid(month: Month, today: date) -> list[GridCell]:
    """Return the cells of a Sunday-first month view.

    Leading Blank cells pad the first week, then one Day cell per day of
    the month. The final row is not padded. The Day matching ``today`` (by
    calendar date, any time component is ignored) is flagged ``is_today``.
    """
    _check(month)
    if isinstance(today, datetime):
        today = today.date()

    cells: list[GridCell] = [Blank() for _ in range(first_weekday(month))]
    for n in range(1, days_in_month(month) + 1):
        d = date(month.year, month.month, n)
        cells.append(Day(CalendarDay(d, is_today=(d == today))))
    return cells


def weeks(cells: list[GridCell]) -> list[list[GridCell]]:
    """Chunk a grid into rows of 7. The last row may be shorter."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
