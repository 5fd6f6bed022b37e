#!/usr/bin/env python3
"""
Mood Calendar CLI
-----------------

Command-line front end for the mood diary.

Commands:
    - grid: Print the calendar grid of a month
    - vocab: Print the configured moods and tags
    - session: Interactive diary session on stdin

Usage:
    moodcal grid 2024-02
    moodcal vocab
    moodcal session --month 2024-03

Records live only as long as the session; nothing is written to disk
except the logs.
"""
from __future__ import annotations

import click
from pathlib import Path

from moodcal.core.cli import setup_logger
from moodcal.core.cli_options import config_option, log_dir_option, verbose_option
from moodcal.core.config import load_config
from moodcal.core.exceptions import ConfigError
from moodcal.core.logging_manager import handle_cli_error


@click.group()
@log_dir_option
@verbose_option
@config_option
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool, config: str) -> None:
    """Mood Calendar: daily mood, tags and notes by month"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "cli")

    try:
        ctx.obj["config"] = load_config(Path(config), ctx.obj["logger"])
    except ConfigError as e:
        handle_cli_error(ctx, e, "load_config", {"config": config})


# Import and register commands from submodules
from .views import grid, vocab
from .session import session

cli.add_command(grid)
cli.add_command(vocab)
cli.add_command(session)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
