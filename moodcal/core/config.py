#!/usr/bin/env python3
"""
config.py
---------
Runtime configuration: vocabularies and the first day of the week.

Defaults come from ``moodcal.configs.vocabulary``. An optional YAML file can
override them:

    moods: ["😄", "😐", "😢"]
    tags: [work, family, rain]
    first_weekday: monday      # or an int, calendar.MONDAY=0 ... SUNDAY=6

Unknown keys are ignored with a warning.

Usage:
    from moodcal.core.config import load_config

    config = load_config(Path("~/.local/share/moodcal/config.yaml"))
    config.first_weekday
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from moodcal.configs.vocabulary import FIRST_WEEKDAY, MOODS, TAGS, WEEKDAY_NAMES
from moodcal.core.exceptions import ConfigError
from moodcal.core.logging_manager import MoodCalLogger, safe_logger

KNOWN_KEYS = ("moods", "tags", "first_weekday")


@dataclass(frozen=True)
class DiaryConfig:
    """
    Resolved configuration for one session.

    Attributes:
        moods: Mood palette in display order
        tags: Tag palette in display order
        first_weekday: First grid column (calendar.MONDAY=0 ... SUNDAY=6)
        source: File the overrides came from, if any
    """

    moods: List[str] = field(default_factory=lambda: list(MOODS))
    tags: List[str] = field(default_factory=lambda: list(TAGS))
    first_weekday: int = FIRST_WEEKDAY
    source: Optional[Path] = None


def parse_weekday(value: Any) -> int:
    """
    Resolve a weekday name or number to calendar numbering.

    Raises:
        ConfigError: If the value names no weekday
    """
    if isinstance(value, bool):
        raise ConfigError(f"Unknown first_weekday: {value!r}")
    if isinstance(value, int):
        if 0 <= value <= 6:
            return value
        raise ConfigError(f"first_weekday must be 0-6, got {value}")
    if isinstance(value, str) and value.strip().lower() in WEEKDAY_NAMES:
        return WEEKDAY_NAMES[value.strip().lower()]
    raise ConfigError(f"Unknown first_weekday: {value!r}")


def _string_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"Config {key!r} must be a list of strings")
    return list(dict.fromkeys(value))


def load_yaml(path: Path) -> Dict[str, Any]:
    """
    Load a YAML mapping from ``path``.

    An empty file yields an empty mapping.

    Raises:
        ConfigError: If the file cannot be read, is not YAML, or is not a mapping
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def load_config(
    path: Optional[Path] = None,
    logger: Optional[MoodCalLogger] = None,
) -> DiaryConfig:
    """
    Build a DiaryConfig from defaults plus an optional YAML file.

    A missing file is not an error; the defaults are returned.

    Args:
        path: YAML file with overrides (optional)
        logger: Optional logger for warnings about ignored keys

    Returns:
        Resolved DiaryConfig

    Raises:
        ConfigError: If the file exists but is malformed
    """
    log = safe_logger(logger)
    if path is None or not Path(path).exists():
        return DiaryConfig()

    path = Path(path)
    data = load_yaml(path)

    unknown = sorted(str(k) for k in data if k not in KNOWN_KEYS)
    if unknown:
        log.log_warning("Ignoring unknown config keys", {"path": path, "keys": unknown})

    overrides: Dict[str, Any] = {}
    if "moods" in data:
        overrides["moods"] = _string_list(data, "moods")
    if "tags" in data:
        overrides["tags"] = _string_list(data, "tags")
    if "first_weekday" in data:
        overrides["first_weekday"] = parse_weekday(data["first_weekday"])

    log.log_debug("Loaded config", {"path": path, "keys": sorted(overrides)})
    return DiaryConfig(source=path, **overrides)
