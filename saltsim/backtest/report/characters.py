# saltsim/backtest/report/characters.py
from __future__ import annotations

import pandas as pd

from saltsim import logs
from saltsim.backtest.report.base import Report
from saltsim.backtest.simulation import Simulation
from saltsim.lookup import statistics

COLUMNS = [
    "name",
    "matches",
    "winrate",
    "upsets",
    "favored",
    "odds",
    "bet_amount",
    "duration",
]


def character_frame(simulation: Simulation) -> pd.DataFrame:
    """
    One row per party in the simulation's history, sorted by match count.
    """
    rows = []
    for name in simulation.characters:
        records = simulation.lookup_character(name)
        rows.append(
            dict(
                name=name,
                matches=int(statistics.matches_len(records)),
                winrate=statistics.winrate(records, name),
                upsets=statistics.upsets(records, name),
                favored=statistics.favored(records, name),
                odds=statistics.odds(records, name),
                bet_amount=statistics.bet_amount(records, name),
                duration=statistics.duration(records),
            )
        )

    df = pd.DataFrame(rows, columns=COLUMNS)
    return df.sort_values(["matches", "name"], ascending=[False, True]).reset_index(drop=True)


class CharacterStatsReport(Report):
    def __init__(self, output_path):
        self._path = output_path

    @logs.catch("character report failed", log_time=True)
    def render(self, simulation: Simulation) -> None:
        df = character_frame(simulation)
        df.to_csv(self._path, index=False)
        logs.info(f"[CharacterStatsReport] {len(df)} characters -> {self._path}")
