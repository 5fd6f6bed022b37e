#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Mood Calendar commands.

Functions:
    setup_logger: Initialize MoodCalLogger for CLI operations

Classes:
    SessionStats: Counters for one interactive calendar session

Usage:
    from moodcal.core.cli import setup_logger, SessionStats

    logger = setup_logger(log_dir, "session")
    stats = SessionStats()
    stats.edits += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from moodcal.core.logging_manager import MoodCalLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> MoodCalLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a MoodCalLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'cli', 'session')

    Returns:
        Configured MoodCalLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return MoodCalLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class SessionStats:
    """
    Counters for one calendar session.

    Attributes:
        edits: Mood, tag and note writes that reached the store
        ignored_edits: Edits dropped because no date was selected
        navigations: Month changes (prev/next)
        rejected: Commands refused by the view-mode rules
        start_time: Session start timestamp
    """
    edits: int = 0
    ignored_edits: int = 0
    navigations: int = 0
    rejected: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        for name in ("edits", "ignored_edits", "navigations", "rejected"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def duration(self) -> float:
        """
        Get elapsed time in seconds (cached after first call).

        Returns:
            Seconds elapsed since start_time
        """
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Get formatted summary string."""
        parts = [
            f"{self.edits} edits",
            f"{self.navigations} month changes",
        ]
        if self.ignored_edits:
            parts.append(f"{self.ignored_edits} ignored")
        if self.rejected:
            parts.append(f"{self.rejected} rejected")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "edits": self.edits,
            "ignored_edits": self.ignored_edits,
            "navigations": self.navigations,
            "rejected": self.rejected,
            "duration": self.duration(),
        }
