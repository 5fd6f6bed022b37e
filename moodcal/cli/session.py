"""
Interactive Session Command
---------------------------

Line-driven diary session. Each input line is one command; the current view
is redrawn after every change of state.

Commands:
    prev | next          Change month (grid and summary only)
    select DAY           Open a day of the visible month
    mood TOKEN           Set the mood of the open day
    tag TOKEN            Toggle a tag on the open day
    note [TEXT]          Replace the note of the open day (empty clears it)
    done                 Close the open day
    summary | back       Switch between the grid and the month summary
    show                 Redraw the current view
    help                 List commands
    quit                 End the session

Records are kept in memory and discarded when the session ends.
"""
from __future__ import annotations

import click
from datetime import date
from typing import Callable, Dict, List, Optional

from moodcal.core.cli_options import month_option
from moodcal.core.config import DiaryConfig
from moodcal.core.exceptions import MoodCalError, TransitionError, ValidationError
from moodcal.core.logging_manager import MoodCalLogger, handle_cli_error
from moodcal.diary.grid import CalendarMonth
from moodcal.diary.session import MoodCalendarSession, SessionState, ViewMode
from moodcal.render.text import render_day, render_grid, render_summary

HELP_TEXT = [
    "prev | next       change month",
    "select DAY        open a day",
    "mood TOKEN        set mood",
    "tag TOKEN         toggle tag",
    "note [TEXT]       replace note",
    "done              close the day",
    "summary | back    month summary / grid",
    "show | help | quit",
]


def render_view(session: MoodCalendarSession) -> List[str]:
    """Lines for whichever view the session is in."""
    config = session.config
    if session.view_mode is ViewMode.SUMMARY:
        return [f"Summary {session.month_label()}"] + render_summary(session.summary())
    if session.selected_date is not None:
        return render_day(
            session.selected_date, session.selected_record(), config.moods, config.tags
        )
    return render_grid(
        session.month, session.cells(), session.badges(), config.first_weekday
    )


def _require(argument: str, usage: str) -> str:
    if not argument:
        raise ValidationError(f"Usage: {usage}")
    return argument


def _parse_day(argument: str) -> int:
    try:
        return int(_require(argument, "select DAY"))
    except ValueError as e:
        raise ValidationError(f"Day must be a number, got {argument!r}") from e


def build_dispatch(session: MoodCalendarSession) -> Dict[str, Callable[[str], None]]:
    """Map command words to session calls taking the rest of the line."""

    def edit(apply: Callable[[], bool]) -> None:
        if not apply():
            click.echo("No date is open; select a day first.")

    return {
        "prev": lambda arg: session.prev_month(),
        "next": lambda arg: session.next_month(),
        "select": lambda arg: session.select_day(_parse_day(arg)),
        "mood": lambda arg: edit(lambda: session.set_mood(_require(arg, "mood TOKEN"))),
        "tag": lambda arg: edit(lambda: session.toggle_tag(_require(arg, "tag TOKEN"))),
        "note": lambda arg: edit(lambda: session.set_note(arg or None)),
        "done": lambda arg: session.confirm(),
        "summary": lambda arg: session.view_summary(),
        "back": lambda arg: session.back(),
    }


def run_session(session: MoodCalendarSession, logger: MoodCalLogger) -> None:
    """Read commands until ``quit`` or end of input."""
    dispatch = build_dispatch(session)

    def redraw(state: SessionState) -> None:
        for line in render_view(session):
            click.echo(line)

    unsubscribe = session.subscribe(redraw)
    redraw(session.state)

    try:
        while True:
            try:
                line = click.prompt("moodcal", default="", show_default=False, prompt_suffix="> ")
            except click.Abort:
                break

            word, _, argument = line.strip().partition(" ")
            word = word.lower()
            argument = argument.strip()

            if not word:
                continue
            if word in ("quit", "exit"):
                break
            if word == "help":
                for help_line in HELP_TEXT:
                    click.echo(help_line)
                continue
            if word == "show":
                redraw(session.state)
                continue

            action = dispatch.get(word)
            if action is None:
                click.echo(f"Unknown command: {word} (try 'help')")
                continue

            try:
                action(argument)
            except (TransitionError, ValidationError) as e:
                logger.log_debug("Command refused", {"command": word, "reason": str(e)})
                click.echo(f"⚠️  {e}")
    finally:
        unsubscribe()


@click.command()
@month_option()
@click.pass_context
def session(ctx: click.Context, month: Optional[CalendarMonth]) -> None:
    """Start an interactive diary session (records are not saved)."""
    logger: MoodCalLogger = ctx.obj["logger"]
    config: DiaryConfig = ctx.obj["config"]

    today = month.first_day if month is not None else date.today()
    diary = MoodCalendarSession(today=today, config=config, logger=logger)
    logger.log_operation("session_start", {"month": diary.month_label()})

    try:
        run_session(diary, logger)
    except MoodCalError as e:
        handle_cli_error(ctx, e, "session", {"month": diary.month_label()})

    logger.log_operation(
        "session_end", {**diary.stats.to_dict(), "records": len(diary.store)}
    )
    click.echo(f"Session ended: {diary.stats.summary()}, {len(diary.store)} days recorded")
