# tests/backtest/test_character_report.py
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from saltsim.backtest.record import Winner
from saltsim.backtest.report.characters import COLUMNS, CharacterStatsReport, character_frame
from saltsim.backtest.simulation import Simulation


@pytest.fixture
def sim(record_factory):
    s = Simulation()
    s.insert_records([
        record_factory("A", "B", left_bet=10, right_bet=20, winner=Winner.LEFT, duration=30),
        record_factory("A", "C", left_bet=30, right_bet=10, winner=Winner.LEFT, duration=90),
        record_factory("D", "D"),
    ])
    return s


def test_character_frame(sim):
    df = character_frame(sim)

    assert list(df.columns) == COLUMNS
    assert list(df["name"]) == ["A", "B", "C"]

    a = df.iloc[0]
    assert a["matches"] == 2
    assert a["winrate"] == 1.0
    assert a["upsets"] == 0.5
    assert a["favored"] == 0.5
    assert a["duration"] == 60.0


def test_character_frame_empty():
    df = character_frame(Simulation())

    assert df.empty
    assert list(df.columns) == COLUMNS


def test_report_writes_csv(sim, tmp_path: Path):
    out = tmp_path / "characters.csv"

    CharacterStatsReport(out).render(sim)

    df = pd.read_csv(out)
    assert len(df) == 3
    assert set(df["name"]) == {"A", "B", "C"}


def test_report_failure_is_raised(sim, tmp_path: Path):
    out = tmp_path / "missing_dir" / "characters.csv"

    with pytest.raises(OSError):
        CharacterStatsReport(out).render(sim)
