"""
Calendar View Commands
----------------------

Read-only commands that print calendar layout and vocabulary.

Commands:
    - grid: Print the month grid
    - vocab: Print the mood and tag palettes
"""
from __future__ import annotations

import click
from datetime import date
from typing import Optional

from moodcal.core.cli_options import MONTH
from moodcal.core.config import DiaryConfig
from moodcal.core.logging_manager import MoodCalLogger
from moodcal.diary.grid import CalendarMonth, cells_for
from moodcal.render.text import render_grid, weekday_header


@click.command()
@click.argument("month", type=MONTH, required=False)
@click.pass_context
def grid(ctx: click.Context, month: Optional[CalendarMonth]) -> None:
    """Print the calendar grid of MONTH (YYYY-MM, default: current month)."""
    logger: MoodCalLogger = ctx.obj["logger"]
    config: DiaryConfig = ctx.obj["config"]

    month = month or CalendarMonth.from_date(date.today())
    cells = cells_for(month, config.first_weekday)
    logger.log_operation("grid", {"month": str(month), "cells": len(cells)})

    for line in render_grid(month, cells, first_weekday=config.first_weekday):
        click.echo(line)


@click.command()
@click.pass_context
def vocab(ctx: click.Context) -> None:
    """Print the configured moods, tags and week layout."""
    config: DiaryConfig = ctx.obj["config"]

    click.echo(f"Moods: {' '.join(config.moods)}")
    click.echo(f"Tags:  {', '.join(config.tags)}")
    click.echo(f"Week:  {' '.join(weekday_header(config.first_weekday))}")
    if config.source is not None:
        click.echo(f"(from {config.source})")
