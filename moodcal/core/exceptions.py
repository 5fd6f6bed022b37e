#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Mood Calendar project.

Record-store operations are total and never raise; these exceptions cover
parsing user or configuration input and driving the view-mode session.

Exception Hierarchy:
    Exception (built-in)
    └── MoodCalError - Base for all project errors
        ├── ValidationError - Bad month/date text or record payload
        │   └── DateKeyError - Text that is not a real YYYY-MM-DD date
        ├── ConfigError - Unreadable or malformed YAML configuration
        └── TransitionError - View-mode command not allowed in current state

Usage:
    from moodcal.core.exceptions import TransitionError

    try:
        session.prev_month()
    except TransitionError as e:
        click.echo(f"Not now: {e}")
"""


class MoodCalError(Exception):
    """
    Base exception for Mood Calendar errors.

    Catch this to handle any project error, or catch specific subclasses
    for more granular handling.
    """

    pass


class ValidationError(MoodCalError):
    """
    Exception for input validation failures.

    Raised when text handed in from the outside cannot be interpreted:
    - Month text that is not YYYY-MM
    - Day numbers outside the visible month
    - Record payloads of the wrong shape

    Examples:
        >>> raise ValidationError("Invalid month: expected YYYY-MM, got '2024/3'")
        >>> raise ValidationError("Day 31 is not in 2024-02")
    """

    pass


class DateKeyError(ValidationError):
    """
    Exception for date keys that do not name a real calendar day.

    Examples:
        >>> raise DateKeyError("Invalid date key: '2024-02-30'")
    """

    pass


class ConfigError(MoodCalError):
    """
    Exception for configuration loading failures.

    Raised when the YAML configuration file:
    - Cannot be read or parsed
    - Is not a mapping at the top level
    - Holds a vocabulary that is not a list of strings
    - Names an unknown first day of the week

    Examples:
        >>> raise ConfigError("Config 'moods' must be a list of strings")
        >>> raise ConfigError("Unknown first_weekday: 'someday'")
    """

    pass


class TransitionError(MoodCalError):
    """
    Exception for view-mode commands the current state does not allow.

    Examples:
        >>> raise TransitionError("Month navigation is locked while a date is selected")
        >>> raise TransitionError("Cannot select a date from the summary view")
    """

    pass
