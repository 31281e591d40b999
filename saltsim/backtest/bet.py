from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from saltsim.backtest.record import Winner


class BetSide(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    NONE = "NONE"


@dataclass(frozen=True)
class Bet:
    """
    Bet: Left(amount) | Right(amount) | None

    amount is how much of the active pool goes on that side.
    """

    side: BetSide
    amount: float = 0.0

    @classmethod
    def left(cls, amount: float) -> "Bet":
        return cls(BetSide.LEFT, amount)

    @classmethod
    def right(cls, amount: float) -> "Bet":
        return cls(BetSide.RIGHT, amount)

    @classmethod
    def none(cls) -> "Bet":
        return cls(BetSide.NONE)

    def is_none(self) -> bool:
        return self.side is BetSide.NONE

    def swap(self) -> "Bet":
        if self.side is BetSide.LEFT:
            return Bet.right(self.amount)
        if self.side is BetSide.RIGHT:
            return Bet.left(self.amount)
        return self

    def wins(self, winner: Winner) -> bool:
        return self.side.value == winner.value
