#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the Mood Calendar runtime.

Runtime files live under a single home directory:
    MOODCAL_HOME/
    ├── config.yaml    # Optional vocabulary / first-weekday overrides
    └── logs/          # Rotating operation and error logs

MOODCAL_HOME defaults to ~/.local/share/moodcal and can be redirected with
the environment variable of the same name. Nothing is created at import time;
directories are made on first use by the logger.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_home_dir() -> Path:
    """
    Determine the runtime home directory.

    Returns:
        Path from the MOODCAL_HOME environment variable if set,
        otherwise ~/.local/share/moodcal
    """
    override = os.environ.get("MOODCAL_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".local" / "share" / "moodcal"


# ----- Runtime directory -----
HOME_DIR: Path = _get_home_dir()

# ---- Logs ----
LOG_DIR = HOME_DIR / "logs"

# ---- Configuration ----
CONFIG_PATH = HOME_DIR / "config.yaml"
