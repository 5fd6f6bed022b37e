"""
test_config.py
--------------
Unit tests for moodcal.core.config.

Tests defaults, YAML overrides, weekday parsing and malformed files.
"""
import calendar

import pytest
from unittest.mock import MagicMock

from moodcal.configs.vocabulary import MOODS, TAGS
from moodcal.core.config import DiaryConfig, load_config, parse_weekday
from moodcal.core.exceptions import ConfigError
from moodcal.core.logging_manager import MoodCalLogger


class TestDefaults:
    """Test the built-in configuration."""

    def test_default_vocabulary(self):
        config = DiaryConfig()
        assert config.moods == MOODS
        assert config.tags == TAGS
        assert config.first_weekday == calendar.SUNDAY
        assert config.source is None

    def test_reference_vocabulary_sizes(self):
        assert len(MOODS) == 5
        assert len(TAGS) == 15
        assert "운동" in TAGS

    def test_missing_file_returns_defaults(self, tmp_dir):
        assert load_config(tmp_dir / "absent.yaml") == DiaryConfig()

    def test_none_returns_defaults(self):
        assert load_config(None) == DiaryConfig()


class TestOverrides:
    """Test YAML overrides."""

    def test_all_keys(self, config_file):
        config = load_config(config_file)
        assert config.moods == ["😄", "😢"]
        assert config.tags == ["work", "family"]
        assert config.first_weekday == calendar.MONDAY
        assert config.source == config_file

    def test_partial_override_keeps_defaults(self, tmp_dir):
        path = tmp_dir / "c.yaml"
        path.write_text("first_weekday: 0\n", encoding="utf-8")
        config = load_config(path)
        assert config.first_weekday == 0
        assert config.moods == MOODS

    def test_empty_file(self, tmp_dir):
        path = tmp_dir / "c.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path).moods == MOODS

    def test_duplicate_tokens_collapsed(self, tmp_dir):
        path = tmp_dir / "c.yaml"
        path.write_text("tags: [a, b, a]\n", encoding="utf-8")
        assert load_config(path).tags == ["a", "b"]

    def test_unknown_keys_warn(self, tmp_dir):
        path = tmp_dir / "c.yaml"
        path.write_text("colour: blue\n", encoding="utf-8")
        logger = MagicMock(spec=MoodCalLogger)
        load_config(path, logger)
        logger.log_warning.assert_called_once()


class TestMalformed:
    """Test ConfigError cases."""

    @pytest.mark.parametrize(
        "content",
        [
            "- just\n- a list\n",
            "moods: happy\n",
            "tags: [1, 2]\n",
            "first_weekday: someday\n",
            "first_weekday: 9\n",
            "moods: [unclosed\n",
        ],
    )
    def test_bad_content_raises(self, tmp_dir, content):
        path = tmp_dir / "c.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)


class TestParseWeekday:
    """Test parse_weekday."""

    @pytest.mark.parametrize(
        "value, expected",
        [("sunday", 6), ("Monday", 0), (" saturday ", 5), (0, 0), (6, 6)],
    )
    def test_valid(self, value, expected):
        assert parse_weekday(value) == expected

    @pytest.mark.parametrize("value", [True, -1, 7, "funday", None])
    def test_invalid(self, value):
        with pytest.raises(ConfigError):
            parse_weekday(value)
