# saltsim/backtest/report/base.py
from __future__ import annotations
from abc import ABC, abstractmethod

from saltsim.backtest.simulation import Simulation


class Report(ABC):
    """
    Report (FINAL / FROZEN)

    Simulation -> side effects (files)

    Reports are read-only consumers of a finished Simulation.
    They must not alter replay state.
    """

    @abstractmethod
    def render(self, simulation: Simulation) -> None:
        ...
