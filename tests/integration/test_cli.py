#!/usr/bin/env python3
"""
Integration tests for the moodcal CLI.

Drives the click commands end to end with CliRunner, including scripted
interactive sessions fed through stdin.
"""
import pytest
from click.testing import CliRunner

from moodcal.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_path):
    """Invoke the CLI with logs and config isolated under tmp_path."""

    def _invoke(args, input=None, config=None):
        base = [
            "--log-dir", str(tmp_path / "logs"),
            "--config", str(config or tmp_path / "missing.yaml"),
        ]
        return runner.invoke(cli, base + list(args), input=input)

    return _invoke


class TestCLIBasics:
    """Test help and option handling."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Mood Calendar" in result.output

    @pytest.mark.parametrize("command", ["grid", "vocab", "session"])
    def test_command_help(self, invoke, command):
        result = invoke([command, "--help"])
        assert result.exit_code == 0

    def test_bad_month_is_usage_error(self, invoke):
        result = invoke(["grid", "2024-13"])
        assert result.exit_code == 2
        assert "Invalid month" in result.output

    def test_malformed_config_exits_with_error(self, invoke, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("first_weekday: someday\n", encoding="utf-8")
        result = invoke(["vocab"], config=bad)
        assert result.exit_code == 1
        assert "ConfigError" in result.output

    def test_logs_are_written(self, invoke, tmp_path):
        invoke(["grid", "2024-02"])
        assert (tmp_path / "logs" / "operations" / "cli.log").exists()


class TestGridAndVocab:
    """Test the read-only commands."""

    def test_grid_february_2024(self, invoke):
        result = invoke(["grid", "2024-02"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].strip() == "2024-02"
        assert lines[1].split()[0] == "일"
        assert lines[2].split() == ["1", "2", "3"]

    def test_grid_with_monday_config(self, invoke, config_file):
        result = invoke(["grid", "2024-02"], config=config_file)
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[1].split()[0] == "월"
        assert lines[2].split() == ["1", "2", "3", "4"]

    def test_vocab_defaults(self, invoke):
        result = invoke(["vocab"])
        assert result.exit_code == 0
        assert "😄 🙂 😐 😣 😢" in result.output
        assert "운동" in result.output

    def test_vocab_from_config(self, invoke, config_file):
        result = invoke(["vocab"], config=config_file)
        assert "work, family" in result.output
        assert str(config_file) in result.output


class TestSession:
    """Test scripted interactive sessions."""

    def test_record_a_day_and_view_summary(self, invoke):
        script = "\n".join([
            "select 10",
            "mood 😄",
            "tag 운동",
            "note good day",
            "done",
            "summary",
            "quit",
        ]) + "\n"
        result = invoke(["session", "--month", "2024-03"], input=script)
        assert result.exit_code == 0
        assert "[😄]" in result.output
        assert "[운동]" in result.output
        assert "Summary 2024-03" in result.output
        assert "10  😄  운동  | good day" in result.output
        assert "3 edits" in result.output
        assert "1 days recorded" in result.output

    def test_grid_shows_badge_after_confirm(self, invoke):
        result = invoke(
            ["session", "--month", "2024-03"], input="select 5\nmood 🙂\ndone\nquit\n"
        )
        assert "5🙂" in result.output

    def test_navigation_locked_while_day_open(self, invoke):
        script = "select 10\nnext\ndone\nnext\nquit\n"
        result = invoke(["session", "--month", "2024-03"], input=script)
        assert result.exit_code == 0
        assert "Month navigation is locked" in result.output
        assert "2024-04" in result.output
        assert "1 rejected" in result.output

    def test_empty_summary_has_no_data_message(self, invoke):
        result = invoke(["session", "--month", "2024-03"], input="summary\nquit\n")
        assert "No records for this month." in result.output

    def test_summary_navigation_and_back(self, invoke):
        script = "select 31\nnote x\ndone\nsummary\nnext\nprev\nback\nquit\n"
        result = invoke(["session", "--month", "2024-01"], input=script)
        assert result.exit_code == 0
        assert "Summary 2024-02" in result.output
        assert "31  -  | x" in result.output

    def test_edit_without_selection_is_ignored(self, invoke):
        result = invoke(["session", "--month", "2024-03"], input="mood 😄\nquit\n")
        assert "No date is open" in result.output
        assert "0 days recorded" in result.output

    def test_bad_input_keeps_session_alive(self, invoke):
        script = "select 40\nselect abc\nmood\ndance\nback\nselect 1\nquit\n"
        result = invoke(["session", "--month", "2024-02"], input=script)
        assert result.exit_code == 0
        assert "Day 40 is not in 2024-02" in result.output
        assert "Day must be a number" in result.output
        assert "Usage: mood TOKEN" in result.output
        assert "Unknown command: dance" in result.output
        assert "Not in the summary view" in result.output
        assert "2024-02-01" in result.output

    def test_end_of_input_ends_session(self, invoke):
        result = invoke(["session", "--month", "2024-03"], input="select 1\n")
        assert result.exit_code == 0
        assert "Session ended" in result.output

    def test_help_lists_commands(self, invoke):
        result = invoke(["session", "--month", "2024-03"], input="help\nquit\n")
        assert "select DAY" in result.output
