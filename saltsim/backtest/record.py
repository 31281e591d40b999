from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Hashable

from saltsim.utils.errors import InvalidRecordError


# -------------------------
# Enums
# -------------------------
class Winner(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def swap(self) -> "Winner":
        return Winner.RIGHT if self is Winner.LEFT else Winner.LEFT


class Mode(str, Enum):
    MATCHMAKING = "MATCHMAKING"
    TOURNAMENT = "TOURNAMENT"


# -------------------------
# Character (one side of a match)
# -------------------------
@dataclass(frozen=True)
class Character:
    name: str
    # total amount wagered on this side
    bet_amount: float


# -------------------------
# Record
# -------------------------
@dataclass(frozen=True)
class Record:
    """
    Record (FROZEN)

    One concluded match. Immutable once ingested.

    Invariants:
      - both wagers are strictly positive
      - duration (seconds) is non-negative
      - tier is opaque: only strategies look at it
    """

    left: Character
    right: Character
    winner: Winner
    mode: Mode
    tier: Hashable
    duration: int

    def __post_init__(self):
        for side in (self.left, self.right):
            if not side.bet_amount > 0:
                raise InvalidRecordError(
                    f"wager for {side.name!r} must be > 0, got {side.bet_amount}"
                )

        if self.duration < 0:
            raise InvalidRecordError(f"duration must be >= 0, got {self.duration}")

    def is_mirror(self) -> bool:
        return self.left.name == self.right.name

    def is_winner(self, name: str) -> bool:
        if self.winner is Winner.LEFT:
            return self.left.name == name
        return self.right.name == name

    def swap(self) -> "Record":
        return replace(
            self,
            left=self.right,
            right=self.left,
            winner=self.winner.swap(),
        )

    def shuffle(self, rng: random.Random) -> "Record":
        """
        Swap sides with probability 1/2.

        Drawn once per call, so every record gets its own coin flip.
        """
        if rng.random() < 0.5:
            return self.swap()
        return self
