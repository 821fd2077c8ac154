"""
Tests for the Typer command line interface.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from timeslot import __version__
from timeslot.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch):
    """Run every command away from any real config.yaml."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestShow:
    """Tests for the show command."""

    def test_show_slot(self):
        result = runner.invoke(
            app,
            ["show", "2024-01-01 10:15:30", "--hours", "2", "--minutes", "30", "--tz", "UTC"],
        )

        assert result.exit_code == 0, result.output
        assert "2024-01-01 10:15:00" in result.output
        assert "2024-01-01 12:44:59" in result.output
        assert "Monday" in result.output

    def test_show_rounded(self):
        result = runner.invoke(app, ["show", "2024-01-01 10:15", "--round", "--tz", "UTC"])

        assert result.exit_code == 0, result.output
        assert "2024-01-01 10:00:00" in result.output
        assert "2024-01-01 10:59:59" in result.output

    def test_show_uses_configured_defaults(self, isolated_cwd: Path):
        (isolated_cwd / "config.yaml").write_text(
            "timezone: UTC\ndefaults:\n  hours: 2\n  minutes: 0\n",
            encoding="utf-8",
        )

        result = runner.invoke(app, ["show", "2024-01-01 10:00"])

        assert result.exit_code == 0, result.output
        assert "2024-01-01 11:59:59" in result.output

    def test_show_unparseable_start(self):
        result = runner.invoke(app, ["show", "not a date", "--tz", "UTC"])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_show_negative_duration(self):
        result = runner.invoke(app, ["show", "2024-01-01 10:00", "--hours=-1", "--tz", "UTC"])

        assert result.exit_code == 1
        assert "non-negative integer" in result.output

    def test_show_missing_config_file(self, isolated_cwd: Path):
        result = runner.invoke(app, ["show", "--config", str(isolated_cwd / "missing.yaml")])

        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestNow:
    """Tests for the now command."""

    def test_now_shows_current_hour(self, frozen_now):
        result = runner.invoke(app, ["now", "--tz", "Europe/Berlin"])

        assert result.exit_code == 0, result.output
        assert "2024-06-01 14:00:00" in result.output
        assert "2024-06-01 14:59:59" in result.output


class TestChaining:
    """Tests for the after and before commands."""

    def test_after(self):
        result = runner.invoke(app, ["after", "2024-01-01 10:00", "--tz", "UTC"])

        assert result.exit_code == 0, result.output
        assert "2024-01-01 11:00:00" in result.output
        assert "2024-01-01 11:59:59" in result.output

    def test_before(self):
        result = runner.invoke(app, ["before", "2024-01-01 12:00", "--tz", "UTC"])

        assert result.exit_code == 0, result.output
        assert "2024-01-01 11:00:00" in result.output
        assert "2024-01-01 11:59:59" in result.output


class TestHas:
    """Tests for the has command."""

    def test_instant_at_end_is_within(self):
        result = runner.invoke(
            app,
            ["has", "2024-01-01 10:59:59", "--start", "2024-01-01 10:00", "--tz", "UTC"],
        )

        assert result.exit_code == 0, result.output
        assert "is within" in result.output

    def test_instant_after_end_is_outside(self):
        result = runner.invoke(
            app,
            ["has", "2024-01-01 11:00:00", "--start", "2024-01-01 10:00", "--tz", "UTC"],
        )

        assert result.exit_code == 0, result.output
        assert "is outside" in result.output

    def test_unparseable_instant(self):
        result = runner.invoke(app, ["has", "whenever", "--start", "2024-01-01 10:00", "--tz", "UTC"])

        assert result.exit_code == 1
        assert "Error:" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
