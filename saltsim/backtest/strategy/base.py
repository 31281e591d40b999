# saltsim/backtest/strategy/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from saltsim.backtest.bet import Bet
from saltsim.backtest.record import Record


class Simulator:
    """
    Read-only view of a running Simulation handed to strategies.
    """

    def matches_len(self, name: str) -> int:
        raise NotImplementedError

    def current_money(self) -> float:
        raise NotImplementedError

    def lookup_character(self, name: str) -> Sequence[Record]:
        raise NotImplementedError


class Strategy(ABC):
    """
    Strategy (FINAL / FROZEN)

    Pure decision:
      (simulator view, tier, left name, right name) -> Bet

    Must not mutate the simulator; amounts are clamped by the caller.
    """

    @abstractmethod
    def bet(self, simulation: Simulator, tier, left: str, right: str) -> Bet:
        ...
