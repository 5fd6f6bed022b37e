#!/usr/bin/env python3
"""
logging_manager.py
------------------
Log files for Mood Calendar commands and sessions.

Each component (``cli``, ``session``...) writes one rotating log of
transitions, edits and store loads. Errors from every component also land
in a shared ``errors.log`` next to it. Warnings are echoed to the console.

Line format:
    <time> - <logger> - <LEVEL> - <TAG> - <message>: <json details>

Store and session code take an optional logger; ``safe_logger`` turns a
missing one into a no-op so call sites never branch on it.

Usage:
    from moodcal.core.logging_manager import MoodCalLogger, safe_logger

    logger = MoodCalLogger(LOG_DIR / "operations", "session")
    logger.log_operation("set_mood", {"key": "2024-03-10", "mood": "😄"})
    safe_logger(None).log_debug("dropped")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

Details = Optional[Dict[str, Any]]

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _format(tag: str, message: str, details: Details) -> str:
    # Details are JSON so that emoji and Korean tags stay readable
    if not details:
        return f"{tag} - {message}"
    return f"{tag} - {message}: {json.dumps(details, default=str, ensure_ascii=False)}"


def format_cli_error(error: Exception) -> str:
    """One-line console form of ``error``."""
    return f"❌ {type(error).__name__}: {error}"


class MoodCalLogger:
    """
    Operations and error logs for one component.

    Attributes:
        log_dir: Directory holding ``<component>.log`` and ``errors.log``
        component_name: Component the log file is named after
        main_logger: Receives every level; DEBUG and up reach the file
        error_logger: ERROR records only, shared file across components
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "moodcal",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        rotation = {"maxBytes": max_bytes, "backupCount": backup_count}
        self.main_logger = self._build(
            "operations", self.log_dir / f"{component_name}.log", logging.DEBUG, rotation
        )
        self.error_logger = self._build(
            "errors", self.log_dir / "errors.log", logging.ERROR, rotation
        )

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self.main_logger.addHandler(console)

    def _build(
        self, stream: str, path: Path, level: int, rotation: Dict[str, int]
    ) -> logging.Logger:
        logger = logging.getLogger(f"moodcal.{self.component_name}.{stream}")
        logger.setLevel(level)
        logger.propagate = False
        # Loggers are process-wide; a second instance replaces the handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        handler = RotatingFileHandler(path, encoding="utf-8", **rotation)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Flush and detach all handlers (releases the log files)."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def _emit(self, level: int, tag: str, message: str, details: Details) -> None:
        self.main_logger.log(level, _format(tag, message, details))

    def log_operation(self, operation: str, details: Details = None) -> None:
        """Record a store write or other state change."""
        self._emit(logging.INFO, "OPERATION", operation, details)

    def log_debug(self, message: str, details: Details = None) -> None:
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Details = None) -> None:
        self._emit(logging.INFO, "INFO", message, details)

    def log_warning(self, message: str, details: Details = None) -> None:
        self._emit(logging.WARNING, "WARNING", message, details)

    def log_error(self, error: Exception, context: Details = None) -> None:
        """
        Write ``error`` to the errors log as one record.

        The context is appended as ``key=value`` pairs. A traceback follows
        only while an exception is being handled.
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        if sys.exc_info()[0] is not None:
            lines.append(traceback.format_exc().rstrip())
        self.error_logger.error("\n".join(lines))

    def log_cli_error(
        self,
        error: Exception,
        context: Details = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log ``error`` and return the message to show on the console.

        Args:
            error: Exception to report
            context: Where it happened; defaults to ``{"source": "cli"}``
            show_traceback: Append the active traceback (``--verbose``)
        """
        self.log_error(error, context or {"source": "cli"})
        message = format_cli_error(error)
        if show_traceback and sys.exc_info()[0] is not None:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


class NullLogger:
    """No-op stand-in for MoodCalLogger, handed out by ``safe_logger``."""

    def log_operation(self, operation: str, details: Details = None) -> None:
        pass

    def log_debug(self, message: str, details: Details = None) -> None:
        pass

    def log_info(self, message: str, details: Details = None) -> None:
        pass

    def log_warning(self, message: str, details: Details = None) -> None:
        pass

    def log_error(self, error: Exception, context: Details = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Details = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error)


_null_logger = NullLogger()


def safe_logger(logger: Optional[MoodCalLogger]) -> MoodCalLogger:
    """Return ``logger``, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def handle_cli_error(
    ctx: click.Context,
    error: Exception,
    operation: str,
    additional_context: Details = None,
    exit_code: int = 1,
) -> None:
    """
    Log a failed command, print its message to stderr and exit.

    Uses the logger and ``verbose`` flag stored in ``ctx.obj`` by the
    ``cli`` group; works without either.

    Args:
        ctx: Click context of the failing command
        error: Exception that stopped the command
        operation: Name of the failing step (e.g. 'load_config', 'session')
        additional_context: Extra values for the errors log
        exit_code: Process exit status (default: 1)
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)
