#!/usr/bin/env python3
"""
text.py
-------
Plain-text rendering of the diary views for terminal front ends.

Functions:
    weekday_header: Column labels rotated to the first weekday
    render_grid: Month grid with mood badges
    render_day: Day detail with mood and tag palettes and the note
    render_summary: Month records, newest first, or a "no records" line

Every function returns a list of lines; callers decide how to print them.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import calendar
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

# --- Local imports ---
from moodcal.configs.vocabulary import FIRST_WEEKDAY, WEEKDAY_LABELS
from moodcal.diary.grid import BlankCell, Cell, CalendarMonth
from moodcal.diary.store import MoodRecord

CELL_WIDTH = 6
NO_RECORDS = "No records for this month."


def weekday_header(first_weekday: int = FIRST_WEEKDAY) -> List[str]:
    """
    Weekday labels starting at ``first_weekday``.

    WEEKDAY_LABELS is Sunday-first while calendar numbers Monday as 0.
    """
    start = (first_weekday - calendar.SUNDAY) % 7
    return WEEKDAY_LABELS[start:] + WEEKDAY_LABELS[:start]


def _pad(text: str) -> str:
    return text.center(CELL_WIDTH)


def render_grid(
    month: CalendarMonth,
    cells: Sequence[Cell],
    badges: Optional[Dict[str, str]] = None,
    first_weekday: int = FIRST_WEEKDAY,
) -> List[str]:
    """
    Render a month grid seven cells per row.

    Args:
        month: Month shown in the title line
        cells: Output of ``cells_for``
        badges: Key -> mood shown next to the day number
        first_weekday: First column, must match the one used for ``cells``
    """
    badges = badges or {}
    lines = [str(month).center(CELL_WIDTH * 7).rstrip()]
    lines.append("".join(_pad(label) for label in weekday_header(first_weekday)).rstrip())

    row: List[str] = []
    for cell in cells:
        if isinstance(cell, BlankCell):
            row.append(_pad(""))
        else:
            badge = badges.get(cell.key, "")
            row.append(_pad(f"{cell.day}{badge}"))
        if len(row) == 7:
            lines.append("".join(row).rstrip())
            row = []
    if row:
        lines.append("".join(row).rstrip())
    return lines


def render_day(
    day: date,
    record: Optional[MoodRecord],
    moods: Sequence[str],
    tags: Sequence[str],
) -> List[str]:
    """
    Render the day-detail view.

    The selected mood and tags are wrapped in brackets. Stored values that are
    not in the palettes are still listed, after the palette entries.
    """
    record = record or MoodRecord()

    mood_tokens = list(moods)
    if record.mood is not None and record.mood not in mood_tokens:
        mood_tokens.append(record.mood)
    tag_tokens = list(tags) + [t for t in record.tags if t not in tags]

    def mark(token: str, chosen: bool) -> str:
        return f"[{token}]" if chosen else token

    return [
        day.isoformat(),
        "Mood: " + " ".join(mark(m, m == record.mood) for m in mood_tokens),
        "Tags: " + " ".join(mark(t, record.has_tag(t)) for t in tag_tokens),
        "Note: " + (record.note or ""),
    ]


def render_summary(records: Sequence[Tuple[date, MoodRecord]]) -> List[str]:
    """Render summary blocks, one line per record, or the empty-month line."""
    if not records:
        return [NO_RECORDS]

    lines = []
    for day, record in records:
        parts = [f"{day.day:>2}", record.mood or "-"]
        if record.tags:
            parts.append(", ".join(record.tags))
        if record.note:
            parts.append(f"| {record.note}")
        lines.append("  ".join(parts))
    return lines
