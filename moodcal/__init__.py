"""
Mood Calendar Package
=====================

A daily mood diary organised around a month calendar.

Each calendar day can hold one mood, a set of descriptive tags and a free-text
note. Days are browsed month by month, either as a calendar grid or as a
summary list of the month's records, newest first.

Main Components:
    - diary: Calendar grid, record store and the view-mode session
    - render: Plain-text rendering of grids, day details and summaries
    - cli: Click command-line front end (``moodcal``)
    - core: Logging, exceptions, validation, configuration and paths
    - configs: Default mood and tag vocabularies

Example Usage:
    >>> from datetime import date
    >>> from moodcal import MoodCalendarSession
    >>> session = MoodCalendarSession(today=date(2024, 3, 1))
    >>> session.select(date(2024, 3, 10))
    >>> session.set_mood("😄")
    True
    >>> session.confirm()
    >>> session.view_summary()
    >>> [d.isoformat() for d, _ in session.summary()]
    ['2024-03-10']

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Mood Calendar Project"

from moodcal.diary.grid import CalendarMonth, cells_for, date_key, navigate
from moodcal.diary.store import MoodRecord, RecordStore
from moodcal.diary.session import MoodCalendarSession, SessionState, ViewMode

__all__ = [
    "CalendarMonth",
    "MoodCalendarSession",
    "MoodRecord",
    "RecordStore",
    "SessionState",
    "ViewMode",
    "cells_for",
    "date_key",
    "navigate",
]
