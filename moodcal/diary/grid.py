#!/usr/bin/env python3
"""
grid.py
-------
Month calendar grid: date keys, month navigation and cell layout.

A month grid is a flat sequence of cells read left to right, seven per row:
leading blank cells up to the weekday of the 1st, then one cell per day.
Everything here is pure and recomputed on demand; a grid never exceeds
42 cells, so nothing is cached.

Usage:
    from moodcal.diary.grid import CalendarMonth, cells_for, navigate

    feb = CalendarMonth(2024, 2)
    cells = cells_for(feb)              # 4 blanks + 29 days (Sunday first)
    navigate(feb, +1)                   # CalendarMonth(year=2024, month=3)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from typing import List, Union

# --- Local imports ---
from moodcal.configs.vocabulary import FIRST_WEEKDAY
from moodcal.core.validators import DataValidator

DateLike = Union[date, datetime]


def date_key(value: DateLike) -> str:
    """
    Canonical ``YYYY-MM-DD`` key for a calendar day.

    Any time-of-day component is dropped, so every moment of one day maps
    to the same key.

    Examples:
        >>> date_key(datetime(2024, 3, 10, 23, 59))
        '2024-03-10'
    """
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


@dataclass(frozen=True, order=True)
class CalendarMonth:
    """
    A year and month pair; the day of month never takes part.

    Attributes:
        year: Gregorian year
        month: Month number, 1-12
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be 1-12, got {self.month}")
        if not MINYEAR <= self.year <= MAXYEAR:
            raise ValueError(f"year out of range: {self.year}")

    @classmethod
    def from_date(cls, value: DateLike) -> "CalendarMonth":
        """Month containing ``value``."""
        return cls(value.year, value.month)

    @classmethod
    def parse(cls, text: str) -> "CalendarMonth":
        """
        Parse ``YYYY-MM`` text.

        Raises:
            ValidationError: If the text is not a valid month
        """
        year, month = DataValidator.parse_month(text)
        return cls(year, month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    def contains(self, value: DateLike) -> bool:
        """True when ``value`` falls inside this month."""
        return value.year == self.year and value.month == self.month

    def day(self, number: int) -> date:
        """
        Date of day ``number`` in this month.

        Raises:
            ValueError: If the month has no such day
        """
        if not 1 <= number <= self.days_in_month:
            raise ValueError(f"Day {number} is not in {self}")
        return date(self.year, self.month, number)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class BlankCell:
    """Filler before the 1st of the month; ``index`` counts from 0."""

    index: int


@dataclass(frozen=True)
class DayCell:
    """One calendar day with its lookup key."""

    date: date
    key: str

    @property
    def day(self) -> int:
        return self.date.day


Cell = Union[BlankCell, DayCell]


def leading_blanks(month: CalendarMonth, first_weekday: int = FIRST_WEEKDAY) -> int:
    """
    Number of empty cells before the 1st of ``month``.

    Args:
        month: Month to lay out
        first_weekday: First grid column in calendar numbering
            (calendar.MONDAY=0 ... calendar.SUNDAY=6)

    Returns:
        Column index of the 1st, 0-6
    """
    return (month.first_day.weekday() - first_weekday) % 7


def days(month: CalendarMonth) -> List[date]:
    """Every date of ``month``, 1st to last, in order."""
    first = month.first_day
    return [first + timedelta(days=offset) for offset in range(month.days_in_month)]


def cells_for(month: CalendarMonth, first_weekday: int = FIRST_WEEKDAY) -> List[Cell]:
    """
    Ordered grid cells for ``month``.

    Args:
        month: Month to lay out
        first_weekday: First grid column (default: Sunday)

    Returns:
        ``leading_blanks`` BlankCells followed by one DayCell per day

    Examples:
        >>> cells = cells_for(CalendarMonth(2024, 2))
        >>> sum(isinstance(c, BlankCell) for c in cells), len(cells)
        (4, 33)
    """
    cells: List[Cell] = [
        BlankCell(index) for index in range(leading_blanks(month, first_weekday))
    ]
    cells.extend(DayCell(day, date_key(day)) for day in days(month))
    return cells


def navigate(month: CalendarMonth, delta: int) -> CalendarMonth:
    """
    Month ``delta`` steps away from ``month`` (-1 previous, +1 next).

    Built from year and month arithmetic only, so no day-of-month can push
    the result into a neighbouring month.

    Examples:
        >>> navigate(CalendarMonth(2024, 12), 1)
        CalendarMonth(year=2025, month=1)
        >>> navigate(CalendarMonth(2024, 1), -1)
        CalendarMonth(year=2023, month=12)

    Raises:
        ValueError: If the result falls outside years 1-9999
    """
    index = month.year * 12 + (month.month - 1) + delta
    return CalendarMonth(index // 12, index % 12 + 1)
