# saltsim/backtest/result.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class SimulationResult:
    """
    SimulationResult (FINAL / FROZEN)

    Immutable snapshot of a Simulation's running totals, used for:
      - reporting
      - regression tests
      - comparing strategies outside this package
    """

    # -----------------------
    # Bankroll
    # -----------------------
    sum: float
    tournament_sum: float
    in_tournament: bool

    # -----------------------
    # Bet outcomes
    # -----------------------
    successes: float
    failures: float
    bets_placed: int
    mines_resets: int

    # -----------------------
    # History
    # -----------------------
    record_len: float
    max_character_len: int
    characters: int

    # main bankroll after each replayed record
    sum_curve: List[float] = field(default_factory=list)
