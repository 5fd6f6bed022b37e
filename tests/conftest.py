"""
conftest.py
-----------
Shared pytest fixtures for Mood Calendar tests.

Provides fixtures for:
- Calendar months around the edge cases (leap February, year ends)
- Record stores with sample data
- Sessions and YAML config files
"""
import pytest
from pathlib import Path
from datetime import date
from tempfile import TemporaryDirectory

from moodcal.core.config import DiaryConfig
from moodcal.diary.grid import CalendarMonth
from moodcal.diary.session import MoodCalendarSession
from moodcal.diary.store import RecordStore


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Month Fixtures -----

@pytest.fixture
def leap_february():
    """February 2024: 29 days, starts on a Thursday."""
    return CalendarMonth(2024, 2)


@pytest.fixture
def march_2024():
    """March 2024: 31 days, starts on a Friday."""
    return CalendarMonth(2024, 3)


# ----- Store Fixtures -----

@pytest.fixture
def empty_store():
    """Store as it is at session start."""
    return RecordStore()


@pytest.fixture
def march_store():
    """Store with two March 2024 records and one in April."""
    return (
        RecordStore()
        .set_mood("2024-03-05", "😐")
        .toggle_tag("2024-03-05", "학교")
        .set_mood("2024-03-20", "😄")
        .set_note("2024-03-20", "picnic")
        .set_mood("2024-04-01", "🙂")
    )


@pytest.fixture
def serialized_records():
    """Flat mapping as an integrator would hand it back."""
    return {
        "2024-03-10": {"mood": "😄", "tags": ["운동", "독서"], "note": "good day"},
        "2024-03-11": {"tags": ["휴식"]},
        "2024-03-12": {"mood": "🦄"},
    }


# ----- Session Fixtures -----

@pytest.fixture
def session():
    """Fresh session opened on March 2024."""
    return MoodCalendarSession(today=date(2024, 3, 15))


@pytest.fixture
def monday_config():
    """Config with weeks starting on Monday."""
    return DiaryConfig(first_weekday=0)


@pytest.fixture
def config_file(tmp_dir):
    """YAML config overriding every known key."""
    path = tmp_dir / "config.yaml"
    path.write_text(
        "moods: ['😄', '😢']\n"
        "tags: [work, family]\n"
        "first_weekday: monday\n",
        encoding="utf-8",
    )
    return path
