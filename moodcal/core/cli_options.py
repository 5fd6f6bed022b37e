#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click options and parameter types for the ``moodcal`` commands.

Usage:
    from moodcal.core.cli_options import verbose_option, month_option

    @cli.command()
    @month_option()
    @verbose_option
    def my_command(month, verbose):
        pass
"""
from __future__ import annotations

from typing import Any, Optional

import click

from moodcal.core.exceptions import ValidationError
from moodcal.core.paths import CONFIG_PATH, LOG_DIR
from moodcal.diary.grid import CalendarMonth


# ═══════════════════════════════════════════════════════════════════════════
# PARAMETER TYPES
# ═══════════════════════════════════════════════════════════════════════════

class MonthParamType(click.ParamType):
    """Click type turning ``YYYY-MM`` text into a CalendarMonth."""

    name = "YYYY-MM"

    def convert(
        self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]
    ) -> CalendarMonth:
        if isinstance(value, CalendarMonth):
            return value
        try:
            return CalendarMonth.parse(value)
        except ValidationError as e:
            self.fail(str(e), param, ctx)


MONTH = MonthParamType()


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# CONFIGURATION OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

config_option = click.option(
    "-c", "--config",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_PATH),
    help="YAML file overriding moods, tags and first_weekday"
)


# ═══════════════════════════════════════════════════════════════════════════
# CALENDAR OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

def month_option(help_text: str = "Month to open (YYYY-MM, default: current month)"):
    """
    Factory for the ``--month`` option.

    Args:
        help_text: Custom help text

    Returns:
        Click option decorator
    """
    return click.option(
        "-m", "--month",
        type=MONTH,
        default=None,
        help=help_text,
    )
