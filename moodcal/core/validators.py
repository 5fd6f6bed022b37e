#!/usr/bin/env python3
"""
validators.py
--------------------
Parsing and normalization helpers for values handed in from outside the core.

Covers month and date-key text from the CLI or a serialization boundary,
and the optional string / tag-list fields of a mood record.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, List, Optional, Tuple

from .exceptions import DateKeyError, ValidationError

_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")
_DATE_KEY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


class DataValidator:
    """Centralized parsing for month text, date keys and record fields."""

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize various date inputs to a date object.

        Args:
            date_value: Date string (YYYY-MM-DD), date object, or datetime

        Returns:
            Normalized date object or None

        Raises:
            DateKeyError: If a string does not name a real calendar day
        """
        # datetime is a subclass of date; check it first to drop the time
        if isinstance(date_value, datetime):
            return date_value.date()
        elif isinstance(date_value, date):
            return date_value
        elif isinstance(date_value, str):
            return DataValidator.parse_date_key(date_value)
        return None

    @staticmethod
    def parse_date_key(key: str) -> date:
        """
        Parse a canonical ``YYYY-MM-DD`` key.

        Raises:
            DateKeyError: If the text is not zero-padded ISO or not a real day
        """
        match = _DATE_KEY_RE.match(key.strip()) if isinstance(key, str) else None
        if not match:
            raise DateKeyError(f"Invalid date key: {key!r} (expected YYYY-MM-DD)")
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError as e:
            raise DateKeyError(f"Invalid date key: {key!r} ({e})") from e

    @staticmethod
    def is_date_key(key: Any) -> bool:
        """Return True when ``key`` parses as a real calendar day."""
        try:
            DataValidator.parse_date_key(key)
        except DateKeyError:
            return False
        return True

    @staticmethod
    def parse_month(value: str) -> Tuple[int, int]:
        """
        Parse ``YYYY-MM`` month text.

        Returns:
            (year, month) tuple

        Raises:
            ValidationError: If the text is malformed or the month is out of range
        """
        match = _MONTH_RE.match(value.strip()) if isinstance(value, str) else None
        if not match:
            raise ValidationError(f"Invalid month: {value!r} (expected YYYY-MM)")
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12 or year < 1:
            raise ValidationError(f"Invalid month: {value!r} (out of range)")
        return year, month

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize an optional text field.

        Empty strings collapse to None so a cleared field reads as absent.
        Non-string values are stored as their string form.
        """
        if value is None:
            return None
        text = value if isinstance(value, str) else str(value)
        return text if text != "" else None

    @staticmethod
    def normalize_tags(value: Any) -> List[str]:
        """
        Normalize a tag collection to a de-duplicated list in first-seen order.

        Args:
            value: None, a single tag string, or an iterable of tags

        Raises:
            ValidationError: If value is neither a string nor an iterable
        """
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        try:
            items = list(value)
        except TypeError as e:
            raise ValidationError(f"Tags must be a list, got {type(value).__name__}") from e

        seen: List[str] = []
        for item in items:
            tag = item if isinstance(item, str) else str(item)
            if tag not in seen:
                seen.append(tag)
        return seen
