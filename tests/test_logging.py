"""Logging setup and CLI logging flags."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tablefmt.cli.main import _extract_logging_flags
from tablefmt.lib.logging import level_from_verbosity


@pytest.mark.parametrize(
    "verbosity,expected",
    [
        pytest.param(0, logging.WARNING, id="default"),
        pytest.param(1, logging.INFO, id="verbose"),
        pytest.param(3, logging.DEBUG, id="debug"),
    ],
)
def test_level_from_verbosity(verbosity: int, expected: int) -> None:
    assert level_from_verbosity(verbosity) == expected


def test_extract_logging_flags() -> None:
    args, verbosity, json_logs = _extract_logging_flags(
        ["-v", "data.txt", "--verbose", "--log-json", "--plain"]
    )
    assert args == ["data.txt", "--plain"]
    assert verbosity == 2
    assert json_logs is True


def test_debug_logs_stay_on_stderr(run_tablefmt) -> None:
    result = run_tablefmt(["-v", "-v", "--log-json", "--plain"], stdin="a\n")
    assert result.returncode == 0, result.stderr
    assert result.stdout == " a \n"
    assert "Built grid." in result.stderr


def test_library_warnings_follow_log_json(run_tablefmt, tmp_path: Path) -> None:
    (tmp_path / "tablefmt.toml").write_text("[table]\nbogus = 1\n", encoding="utf-8")
    result = run_tablefmt(["--log-json", "--plain"], stdin="a\n")
    assert result.returncode == 0, result.stderr
    assert result.stdout == " a \n"

    events = [json.loads(line) for line in result.stderr.splitlines() if line.strip()]
    warning = next(event for event in events if event.get("logger") == "tablefmt.lib.settings")
    assert warning["level"] == "warning"
    assert warning["event"] == "Ignoring unknown tablefmt config key 'bogus'."
