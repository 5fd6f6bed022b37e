#!/usr/bin/env python3
"""
vocabulary.py
-------------
Default vocabulary definitions for the mood diary.

This module defines:
- MOODS: the five mood tokens, in palette display order
- TAGS: the fifteen descriptive tags offered for each day
- WEEKDAY_LABELS: column headers, Sunday first
- FIRST_WEEKDAY: the default first column of the grid

Vocabularies are palette suggestions only. The record store keeps whatever
token it is given, so values outside these lists survive round trips.

These definitions are used by:
- moodcal/core/config.py as defaults for YAML overrides
- moodcal/render/text.py for palettes and the grid header
"""
from __future__ import annotations

import calendar
from typing import Dict, List


# =============================================================================
# MOODS (happiest first)
# =============================================================================

MOODS: List[str] = ["😄", "🙂", "😐", "😣", "😢"]


# =============================================================================
# TAGS
# =============================================================================

TAGS: List[str] = [
    # Feelings
    "신나는",
    "편안한",
    "화나는",
    "슬픔",
    "불안한",
    # Weather
    "추움",
    "더움",
    # Activities
    "운동",
    "독서",
    "게임",
    "식사",
    "여행",
    "학교",
    "청소",
    "휴식",
]


# =============================================================================
# CALENDAR CONVENTIONS
# =============================================================================

# Python's calendar numbering (MONDAY=0 ... SUNDAY=6)
FIRST_WEEKDAY: int = calendar.SUNDAY

# Sunday-first headers; rotated by the renderer for other first weekdays
WEEKDAY_LABELS: List[str] = ["일", "월", "화", "수", "목", "금", "토"]

WEEKDAY_NAMES: Dict[str, int] = {
    "monday": calendar.MONDAY,
    "tuesday": calendar.TUESDAY,
    "wednesday": calendar.WEDNESDAY,
    "thursday": calendar.THURSDAY,
    "friday": calendar.FRIDAY,
    "saturday": calendar.SATURDAY,
    "sunday": calendar.SUNDAY,
}
