"""Tests for the tracker CLI entry point."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from tracker_cli.main import _parse_set, main

NOW = 1_718_020_800_000


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "history.json"


def _run(data_file: Path, *args: str) -> int:
    return main(["--data-file", str(data_file), *args])


class TestParseSet:
    def test_reps_by_weight(self) -> None:
        assert _parse_set("8x102.5") == (8.0, 102.5)

    def test_uppercase_separator(self) -> None:
        assert _parse_set("12X50") == (12.0, 50.0)

    def test_invalid(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            _parse_set("8@100")


class TestCommands:
    def test_log_writes_history(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(data_file, "log", "15", "heavy", "8x100", "7x100", "--at", str(NOW)) == 0
        assert "Logged #15 LEG PRESS: 8@100, 7@100" in capsys.readouterr().out
        stored = json.loads(data_file.read_text(encoding="utf-8"))
        assert stored["15_HEAVY"][0]["time"] == NOW

    def test_suggest(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run(data_file, "log", "PRESS", "HEAVY", "8x100", "--at", str(NOW))
        capsys.readouterr()
        assert _run(data_file, "suggest", "PRESS", "HEAVY") == 0
        out = capsys.readouterr().out
        assert "suggested: 105 lb" in out
        assert "earned:    no" in out
        assert "muscle:    Quads / Glutes" in out
        assert "target:    3×6–8 tempo 3–1–2" in out

    def test_summary(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run(data_file, "log", "ROW", "LIGHT", "12x50", "--at", str(NOW))
        capsys.readouterr()
        assert _run(data_file, "summary", "--now", str(NOW)) == 0
        out = capsys.readouterr().out
        light_row = next(line for line in out.splitlines() if line.startswith("LIGHT"))
        assert light_row.split()[1] == "1"

    def test_plan(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(data_file, "plan", "Friday") == 0
        out = capsys.readouterr().out
        assert "UPPER — LIGHT / PUMP" in out
        assert "#1 DEPENDENT CURL" in out
        assert "Arms" in out
        assert "tempo 2–1–2" in out

    def test_trend(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run(data_file, "log", "PRESS", "HEAVY", "8x100", "--at", str(NOW))
        capsys.readouterr()
        assert _run(data_file, "trend", "PRESS", "HEAVY") == 0
        assert "best_e1rm" in capsys.readouterr().out

    def test_empty_session_is_error(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(data_file, "log", "PRESS", "HEAVY", "0x100") == 2
        assert "error:" in capsys.readouterr().err
        assert not data_file.exists()

    def test_unknown_category_is_error(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(data_file, "suggest", "PRESS", "CARDIO") == 2
        assert "CARDIO" in capsys.readouterr().err

    def test_unknown_machine_is_error(self, data_file: Path) -> None:
        assert _run(data_file, "suggest", "99", "HEAVY") == 2

    def test_unknown_day_is_error(self, data_file: Path) -> None:
        assert _run(data_file, "plan", "Sunday") == 2

    def test_back_dated_log_is_error(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _run(data_file, "log", "PRESS", "HEAVY", "8x120", "--at", str(NOW))
        before = data_file.read_text(encoding="utf-8")
        capsys.readouterr()

        ten_days_earlier = NOW - 10 * 86_400_000
        assert _run(data_file, "log", "PRESS", "HEAVY", "5x90", "--at", str(ten_days_earlier)) == 2
        assert "earlier than the last logged session" in capsys.readouterr().err
        assert data_file.read_text(encoding="utf-8") == before

        _run(data_file, "suggest", "PRESS", "HEAVY")
        assert "suggested: 125 lb" in capsys.readouterr().out

    def test_invalid_history_limit_is_error(
        self,
        data_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("tracker_cli.main.HISTORY_LIMIT", 0)
        assert _run(data_file, "plan", "Monday") == 2
        assert "max_sessions" in capsys.readouterr().err


class TestWeightCommand:
    def test_show_unset(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(data_file, "weight", "PRESS") == 0
        assert "#15 LEG PRESS working weight: 0 lb" in capsys.readouterr().out

    def test_set_then_step(self, data_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(data_file, "weight", "15", "100") == 0
        assert _run(data_file, "weight", "15", "--up", "HEAVY") == 0
        assert _run(data_file, "weight", "15", "--down", "LIGHT") == 0
        out = capsys.readouterr().out.splitlines()
        assert out[-1] == "#15 LEG PRESS working weight: 102.5 lb"
        stored = json.loads(data_file.read_text(encoding="utf-8"))
        assert stored["mtp-user-weights"] == {"PRESS": 102.5}

    def test_non_finite_value_is_error(self, data_file: Path) -> None:
        assert _run(data_file, "weight", "PRESS", "nan") == 2
        assert not data_file.exists()
