"""Demo CLI tests."""

from __future__ import annotations

import re

from typer.testing import CliRunner

from rollingcubes.main import app

runner = CliRunner()


def test_shows_initial_tray() -> None:
    result = runner.invoke(app, ["--plain"])
    assert result.exit_code == 0, result.output
    assert "2 1 4 3 4" in result.output
    assert "5 0 3 1 2" in result.output
    assert "Not solved. Moves: 0" in result.output


def test_applies_rolls_in_order() -> None:
    result = runner.invoke(app, ["--plain", "-r", "0,1", "-r", "0,0"])
    assert result.exit_code == 0, result.output
    assert "Rolled (0,1) down" in result.output
    assert "Rolled (0,0) right" in result.output
    assert "Moves: 2" in result.output


def test_near_goal_is_solved() -> None:
    result = runner.invoke(app, ["--start", "near-goal", "--roll", "0,1"])
    assert result.exit_code == 0, result.output
    assert "Solved!" in result.output


def test_illegal_roll_exits_with_error() -> None:
    result = runner.invoke(app, ["--plain", "-r", "3,3"])
    assert result.exit_code == 1
    assert "cannot be rolled" in result.output


def test_malformed_roll_is_usage_error() -> None:
    result = runner.invoke(app, ["-r", "zero"])
    assert result.exit_code == 2


def test_reports_elapsed_time() -> None:
    result = runner.invoke(app, ["--plain", "-r", "0,1"])
    assert result.exit_code == 0, result.output
    assert re.search(r"Moves: 1  Time: \d\d:\d\d", result.output)


def test_info_log_level_traces_rolls() -> None:
    result = runner.invoke(app, ["--plain", "--log-level", "INFO", "-r", "0,1"])
    assert result.exit_code == 0, result.output
    assert "is rolled to down" in result.output


def test_default_log_level_hides_traces() -> None:
    result = runner.invoke(app, ["--plain", "-r", "0,1"])
    assert result.exit_code == 0, result.output
    assert "is rolled to" not in result.output
