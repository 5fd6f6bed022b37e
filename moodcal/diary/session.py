#!/usr/bin/env python3
"""
session.py
----------
View-mode controller for one calendar session.

The session owns the only mutable state of the diary: the visible month,
the selected date (if any), the view mode and the current RecordStore
snapshot. Every change goes through a method here and is published to
subscribers as a fresh SessionState.

States:
    CALENDAR, no selection   month grid; prev/next, select, view_summary
    CALENDAR, date selected  day detail; mood/tag/note edits, confirm
    SUMMARY                  month record list; prev/next, back

Commands the current state does not allow raise TransitionError. Edits made
without a selected date are ignored.

Usage:
    from moodcal.diary.session import MoodCalendarSession

    session = MoodCalendarSession()
    session.subscribe(lambda state: redraw(state))
    session.select(date(2024, 3, 10))
    session.set_mood("😄")
    session.confirm()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

# --- Local imports ---
from moodcal.core.cli import SessionStats
from moodcal.core.config import DiaryConfig
from moodcal.core.exceptions import TransitionError, ValidationError
from moodcal.core.logging_manager import MoodCalLogger, safe_logger
from moodcal.core.validators import DataValidator
from moodcal.diary.grid import (
    CalendarMonth,
    Cell,
    DateLike,
    cells_for,
    date_key,
    navigate,
)
from moodcal.diary.store import MoodRecord, RecordStore


class ViewMode(Enum):
    CALENDAR = "calendar"
    SUMMARY = "summary"


@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of a session after one transition.

    Attributes:
        month: Visible month
        selected_date: Date open in day detail, or None
        view_mode: Calendar or summary
        store: Record store at this point
    """

    month: CalendarMonth
    selected_date: Optional[date]
    view_mode: ViewMode
    store: RecordStore

    @property
    def in_day_detail(self) -> bool:
        return self.view_mode is ViewMode.CALENDAR and self.selected_date is not None

    @property
    def can_navigate(self) -> bool:
        return self.selected_date is None


Subscriber = Callable[[SessionState], None]


class MoodCalendarSession:
    """
    State container and transition rules for the diary views.

    Attributes:
        config: Vocabulary and first weekday
        stats: Edit and navigation counters
        logger: Optional logger; also handed to the record store
    """

    def __init__(
        self,
        today: Optional[DateLike] = None,
        store: Optional[RecordStore] = None,
        config: Optional[DiaryConfig] = None,
        logger: Optional[MoodCalLogger] = None,
    ) -> None:
        self.config = config or DiaryConfig()
        self.logger = logger
        self.stats = SessionStats()
        if store is None:
            store = RecordStore(logger=logger)
        self._state = SessionState(
            month=CalendarMonth.from_date(today or date.today()),
            selected_date=None,
            view_mode=ViewMode.CALENDAR,
            store=store,
        )
        self._subscribers: List[Subscriber] = []

    # ----- State access -----

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def month(self) -> CalendarMonth:
        return self._state.month

    @property
    def selected_date(self) -> Optional[date]:
        return self._state.selected_date

    @property
    def view_mode(self) -> ViewMode:
        return self._state.view_mode

    @property
    def store(self) -> RecordStore:
        return self._state.store

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Call ``callback`` with the new state after every change.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _commit(self, operation: str, **changes) -> None:
        self._state = replace(self._state, **changes)
        safe_logger(self.logger).log_debug(
            f"Transition {operation}",
            {
                "month": str(self._state.month),
                "selected": self._state.selected_date,
                "mode": self._state.view_mode.value,
            },
        )
        for callback in list(self._subscribers):
            callback(self._state)

    def _reject(self, message: str) -> TransitionError:
        self.stats.rejected += 1
        safe_logger(self.logger).log_debug("Rejected command", {"reason": message})
        return TransitionError(message)

    # ----- Month navigation -----

    def _navigate(self, delta: int) -> None:
        if not self._state.can_navigate:
            raise self._reject("Month navigation is locked while a date is selected")
        try:
            month = navigate(self._state.month, delta)
        except ValueError as e:
            raise self._reject(f"No month beyond {self._state.month}") from e
        self.stats.navigations += 1
        self._commit("navigate", month=month)

    def prev_month(self) -> None:
        self._navigate(-1)

    def next_month(self) -> None:
        self._navigate(+1)

    # ----- View transitions -----

    def select(self, value: DateLike) -> None:
        """
        Open ``value`` in day detail.

        The visible month follows the selected date.

        Args:
            value: date, datetime or ``YYYY-MM-DD`` key

        Raises:
            TransitionError: From the summary view or while a date is already open
            ValidationError: If ``value`` is not a date
        """
        if self._state.view_mode is ViewMode.SUMMARY:
            raise self._reject("Cannot select a date from the summary view")
        if self._state.selected_date is not None:
            raise self._reject("Confirm the open date before selecting another")
        day = DataValidator.normalize_date(value)
        if day is None:
            raise ValidationError(f"Cannot select {value!r}: not a date")
        self._commit("select", selected_date=day, month=CalendarMonth.from_date(day))

    def select_day(self, number: int) -> None:
        """
        Select day ``number`` of the visible month.

        Raises:
            ValidationError: If the month has no such day
        """
        try:
            day = self._state.month.day(number)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        self.select(day)

    def confirm(self) -> None:
        """
        Close day detail and return to the month grid.

        Raises:
            TransitionError: If no date is open
        """
        if self._state.selected_date is None:
            raise self._reject("No date is open")
        self._commit("confirm", selected_date=None)

    def view_summary(self) -> None:
        """
        Switch to the summary list of the visible month.

        Raises:
            TransitionError: From day detail or when already in the summary
        """
        if self._state.view_mode is ViewMode.SUMMARY:
            raise self._reject("Already showing the summary")
        if self._state.selected_date is not None:
            raise self._reject("Confirm the open date before viewing the summary")
        self._commit("view_summary", view_mode=ViewMode.SUMMARY)

    def back(self) -> None:
        """
        Leave the summary for the month grid.

        Raises:
            TransitionError: If the summary is not showing
        """
        if self._state.view_mode is not ViewMode.SUMMARY:
            raise self._reject("Not in the summary view")
        self._commit("back", view_mode=ViewMode.CALENDAR)

    # ----- Edits on the selected date -----

    def _edit(self, operation: str, apply: Callable[[RecordStore, str], RecordStore]) -> bool:
        selected = self._state.selected_date
        if selected is None:
            self.stats.ignored_edits += 1
            safe_logger(self.logger).log_debug("Ignored edit without selection", {"op": operation})
            return False
        self.stats.edits += 1
        self._commit(operation, store=apply(self._state.store, date_key(selected)))
        return True

    def set_mood(self, mood: Optional[str]) -> bool:
        """Set the mood of the selected date. Returns False when nothing is selected."""
        return self._edit("set_mood", lambda store, key: store.set_mood(key, mood))

    def toggle_tag(self, tag: str) -> bool:
        """Toggle a tag on the selected date. Returns False when nothing is selected."""
        return self._edit("toggle_tag", lambda store, key: store.toggle_tag(key, tag))

    def set_note(self, note: Optional[str]) -> bool:
        """Replace the note of the selected date. Returns False when nothing is selected."""
        return self._edit("set_note", lambda store, key: store.set_note(key, note))

    # ----- Outputs for the presentation layer -----

    def cells(self) -> List[Cell]:
        return cells_for(self._state.month, self.config.first_weekday)

    def selected_record(self) -> Optional[MoodRecord]:
        if self._state.selected_date is None:
            return None
        return self._state.store.get(self._state.selected_date)

    def badges(self) -> Dict[str, str]:
        return self._state.store.moods_in_month(self._state.month)

    def summary(self) -> List[Tuple[date, MoodRecord]]:
        return self._state.store.records_in_month(self._state.month)

    def month_label(self) -> str:
        return str(self._state.month)
