#!/usr/bin/env python3
"""
store.py
--------
Date-keyed mood records with merge-on-edit semantics.

The store maps a ``YYYY-MM-DD`` key to a MoodRecord holding an optional mood,
an ordered set of tags and an optional note. It is immutable: every write
returns a new store that differs from the old one in exactly one key, so
earlier snapshots stay valid for whoever still holds them.

Key Design:
- Writes are merges: read the record (or an empty one), change one field,
  write it back
- A record whose fields are all absent is pruned; "empty" and "missing"
  read the same
- Tokens are opaque: moods and tags outside the configured vocabulary are
  stored and returned unchanged
- Month queries derive keys from real calendar days, so a malformed key
  handed in through ``from_dict`` is kept but never surfaces in a month

Usage:
    from moodcal.diary.store import RecordStore

    store = RecordStore()
    store = store.set_mood("2024-03-10", "😄").toggle_tag("2024-03-10", "운동")
    store.get("2024-03-10")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

# --- Local imports ---
from moodcal.core.exceptions import ValidationError
from moodcal.core.logging_manager import MoodCalLogger, safe_logger
from moodcal.core.validators import DataValidator
from moodcal.diary.grid import CalendarMonth, DayCell, cells_for, date_key

KeyLike = Union[str, date]


def _key(value: KeyLike) -> str:
    return value if isinstance(value, str) else date_key(value)


@dataclass(frozen=True, eq=False)
class MoodRecord:
    """
    One day's entry; every field is optional.

    Tags keep the order they were added in for display, but two records with
    the same tags in a different order are equal.

    Attributes:
        mood: Mood token (usually an emoji)
        tags: Tags in the order they were added, without duplicates
        note: Free-text note
    """

    mood: Optional[str] = None
    tags: Tuple[str, ...] = ()
    note: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(DataValidator.normalize_tags(self.tags)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoodRecord):
            return NotImplemented
        return (
            self.mood == other.mood
            and frozenset(self.tags) == frozenset(other.tags)
            and self.note == other.note
        )

    def __hash__(self) -> int:
        return hash((self.mood, frozenset(self.tags), self.note))

    @property
    def is_empty(self) -> bool:
        return self.mood is None and not self.tags and self.note is None

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def with_mood(self, mood: Optional[str]) -> "MoodRecord":
        return replace(self, mood=DataValidator.normalize_string(mood))

    def with_note(self, note: Optional[str]) -> "MoodRecord":
        return replace(self, note=DataValidator.normalize_string(note))

    def with_tag_toggled(self, tag: str) -> "MoodRecord":
        """Remove ``tag`` if present (exact match), otherwise append it."""
        if tag in self.tags:
            return replace(self, tags=tuple(t for t in self.tags if t != tag))
        return replace(self, tags=self.tags + (tag,))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with absent fields omitted."""
        data: Dict[str, Any] = {}
        if self.mood is not None:
            data["mood"] = self.mood
        if self.tags:
            data["tags"] = list(self.tags)
        if self.note is not None:
            data["note"] = self.note
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "MoodRecord":
        """
        Build a record from a ``{"mood"?, "tags"?, "note"?}`` mapping.

        Raises:
            ValidationError: If ``data`` is not a mapping or tags are not a list
        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Record must be a mapping, got {type(data).__name__}"
            )
        return cls(
            mood=DataValidator.normalize_string(data.get("mood")),
            tags=tuple(DataValidator.normalize_tags(data.get("tags"))),
            note=DataValidator.normalize_string(data.get("note")),
        )


class RecordStore:
    """
    Immutable mapping of date key to MoodRecord.

    Attributes:
        logger: Optional logger shared with every store derived from this one
    """

    def __init__(
        self,
        records: Optional[Mapping[str, MoodRecord]] = None,
        logger: Optional[MoodCalLogger] = None,
    ) -> None:
        self._records: Dict[str, MoodRecord] = {
            key: record for key, record in (records or {}).items() if not record.is_empty
        }
        self.logger = logger

    # ----- Lookup -----

    def get(self, key: KeyLike) -> Optional[MoodRecord]:
        """Record stored for ``key``, or None."""
        return self._records.get(_key(key))

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (str, date)):
            return _key(key) in self._records
        return False

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._records))

    def items(self) -> List[Tuple[str, MoodRecord]]:
        """(key, record) pairs in key order."""
        return [(key, self._records[key]) for key in sorted(self._records)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordStore):
            return NotImplemented
        return self._records == other._records

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RecordStore({len(self._records)} records)"

    # ----- Writes -----

    def _write(self, key: str, record: MoodRecord, operation: str, value: Any) -> "RecordStore":
        records = dict(self._records)
        if record.is_empty:
            records.pop(key, None)
        else:
            records[key] = record
        safe_logger(self.logger).log_operation(
            operation, {"key": key, "value": value, "pruned": record.is_empty}
        )
        return RecordStore(records, logger=self.logger)

    def _current(self, key: str) -> MoodRecord:
        return self._records.get(key) or MoodRecord()

    def set_mood(self, key: KeyLike, mood: Optional[str]) -> "RecordStore":
        """New store with the mood at ``key`` replaced; tags and note kept."""
        key = _key(key)
        return self._write(key, self._current(key).with_mood(mood), "set_mood", mood)

    def toggle_tag(self, key: KeyLike, tag: str) -> "RecordStore":
        """New store with ``tag`` added to or removed from the record at ``key``."""
        key = _key(key)
        return self._write(key, self._current(key).with_tag_toggled(tag), "toggle_tag", tag)

    def set_note(self, key: KeyLike, note: Optional[str]) -> "RecordStore":
        """New store with the note at ``key`` replaced; mood and tags kept."""
        key = _key(key)
        return self._write(key, self._current(key).with_note(note), "set_note", note)

    # ----- Month queries -----

    def records_in_month(self, month: CalendarMonth) -> List[Tuple[date, MoodRecord]]:
        """
        Records of ``month``, most recent day first.

        Keys are derived from the month's day cells, never read back from
        storage, so only real dates of this month can appear.

        Returns:
            List of (date, record) pairs; empty when nothing was recorded
        """
        found = [
            (cell.date, self._records[cell.key])
            for cell in cells_for(month)
            if isinstance(cell, DayCell) and cell.key in self._records
        ]
        return sorted(found, key=lambda pair: pair[0], reverse=True)

    def moods_in_month(self, month: CalendarMonth) -> Dict[str, str]:
        """Key -> mood for every day of ``month`` that has a mood (grid badges)."""
        return {
            day.isoformat(): record.mood
            for day, record in self.records_in_month(month)
            if record.mood is not None
        }

    # ----- Serialization boundary -----

    def malformed_keys(self) -> List[str]:
        """Stored keys that do not parse as real ``YYYY-MM-DD`` dates."""
        return sorted(k for k in self._records if not DataValidator.is_date_key(k))

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Flat ``{key: {"mood"?, "tags"?, "note"?}}`` mapping."""
        return {key: record.to_dict() for key, record in self.items()}

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        logger: Optional[MoodCalLogger] = None,
    ) -> "RecordStore":
        """
        Build a store from the flat mapping produced by ``to_dict``.

        Entries whose value is not a record mapping are skipped with a
        warning. Keys are kept verbatim, including ones that are not dates.

        Args:
            data: Mapping of key to record payload
            logger: Optional logger for warnings; kept by the new store
        """
        log = safe_logger(logger)
        records: Dict[str, MoodRecord] = {}
        for key, payload in data.items():
            try:
                records[str(key)] = MoodRecord.from_dict(payload)
            except ValidationError as e:
                log.log_warning("Skipping unreadable record", {"key": key, "reason": str(e)})
                continue
            if not DataValidator.is_date_key(str(key)):
                log.log_warning("Keeping record with malformed date key", {"key": key})

        store = cls(records, logger=logger)
        log.log_info("Loaded records", {"count": len(store)})
        return store
