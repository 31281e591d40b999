from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from saltsim.backtest.record import Record
from saltsim.backtest.strategy.base import Simulator
from saltsim.genetic.gene import (
    Calculate,
    Gene,
    MUTATION_RATE,
    choose2,
    gen_rand_index,
    rand_is_percent,
)
from saltsim.lookup import statistics

"""
{#!filepath: saltsim/genetic/lookup.py}

Lookup genes (FINAL / FROZEN)

Alphabet:
    Lookup := Sum | Character(LookupSide, LookupFilter, LookupStatistic)

Every combination is a valid genome: 8 statistics x 2 filters x 2 sides,
plus Sum. Nothing has to be rejected after random generation or crossover.
"""


class _EnumGene(Gene):
    """
    Leaf gene over a closed Enum: uniform random, uniform parent pick.
    """

    @classmethod
    def random(cls, rng: random.Random):
        members = list(cls)
        return members[gen_rand_index(rng, len(members))]

    def choose(self, other, rng: random.Random, mutation_rate: float = MUTATION_RATE):
        if rand_is_percent(rng, mutation_rate):
            return type(self).random(rng)
        return choose2(rng, self, other)


# ------------------------------------------------------------------
# Statistic
# ------------------------------------------------------------------
class LookupStatistic(_EnumGene, Enum):
    UPSETS = "UPSETS"
    FAVORED = "FAVORED"
    WINRATE = "WINRATE"
    ODDS = "ODDS"
    EARNINGS = "EARNINGS"
    MATCHES_LEN = "MATCHES_LEN"
    BET_AMOUNT = "BET_AMOUNT"
    DURATION = "DURATION"

    def lookup(self, name: str, records: Iterable[Record]) -> float:
        if self is LookupStatistic.UPSETS:
            return statistics.upsets(records, name)
        if self is LookupStatistic.FAVORED:
            return statistics.favored(records, name)
        if self is LookupStatistic.WINRATE:
            return statistics.winrate(records, name)
        if self is LookupStatistic.ODDS:
            return statistics.odds(records, name)
        if self is LookupStatistic.BET_AMOUNT:
            return statistics.bet_amount(records, name)
        if self is LookupStatistic.DURATION:
            return statistics.duration(records)
        if self is LookupStatistic.MATCHES_LEN:
            return statistics.matches_len(records)
        if self is LookupStatistic.EARNINGS:
            # needs a wager size; call statistics.earnings directly
            raise NotImplementedError(
                "EARNINGS has no single-parameter lookup; use statistics.earnings(records, name, bet_amount)"
            )
        raise ValueError(f"unknown statistic: {self}")


# ------------------------------------------------------------------
# Filter
# ------------------------------------------------------------------
class LookupFilter(_EnumGene, Enum):
    ALL = "ALL"
    SPECIFIC = "SPECIFIC"

    def lookup(
        self,
        stat: LookupStatistic,
        name: str,
        opponent: str,
        records: Iterable[Record],
    ) -> float:
        if self is LookupFilter.SPECIFIC:
            return stat.lookup(name, statistics.filter_specific(records, opponent))
        return stat.lookup(name, records)


# ------------------------------------------------------------------
# Side
# ------------------------------------------------------------------
class LookupSide(_EnumGene, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


# ------------------------------------------------------------------
# Lookup
# ------------------------------------------------------------------
@dataclass(frozen=True)
class Lookup(Gene, Calculate[float]):
    """
    Sum (all three fields None) or Character(side, filter, statistic).

    Build with Lookup.sum() / Lookup.character(...).
    """

    side: Optional[LookupSide] = None
    filter: Optional[LookupFilter] = None
    statistic: Optional[LookupStatistic] = None

    def __post_init__(self):
        fields = (self.side, self.filter, self.statistic)
        if any(f is None for f in fields) and not all(f is None for f in fields):
            raise ValueError(f"Lookup must be Sum or a full Character, got {fields}")

    @classmethod
    def sum(cls) -> "Lookup":
        return cls()

    @classmethod
    def character(
        cls,
        side: LookupSide,
        filter: LookupFilter,
        statistic: LookupStatistic,
    ) -> "Lookup":
        return cls(side, filter, statistic)

    @property
    def is_sum(self) -> bool:
        return self.side is None

    @property
    def is_character(self) -> bool:
        return self.side is not None

    def describe(self) -> str:
        if self.is_sum:
            return "Sum"
        return f"Character({self.side.value}, {self.filter.value}, {self.statistic.value})"

    # --------------------------------------------------
    # Gene
    # --------------------------------------------------
    @classmethod
    def random(cls, rng: random.Random) -> "Lookup":
        if gen_rand_index(rng, 2) == 0:
            return cls.sum()

        return cls.character(
            LookupSide.random(rng),
            LookupFilter.random(rng),
            LookupStatistic.random(rng),
        )

    def choose(
        self,
        other: "Lookup",
        rng: random.Random,
        mutation_rate: float = MUTATION_RATE,
    ) -> "Lookup":
        if rand_is_percent(rng, mutation_rate):
            return Lookup.random(rng)

        # structural crossover only when both parents have the same shape
        if self.is_character and other.is_character:
            return Lookup.character(
                self.side.choose(other.side, rng, mutation_rate),
                self.filter.choose(other.filter, rng, mutation_rate),
                self.statistic.choose(other.statistic, rng, mutation_rate),
            )

        return choose2(rng, self, other)

    # --------------------------------------------------
    # Calculate
    # --------------------------------------------------
    def calculate(self, simulation: Simulator, tier, left: str, right: str) -> float:
        if self.is_sum:
            return simulation.current_money()

        if self.side is LookupSide.LEFT:
            name, opponent = left, right
        else:
            name, opponent = right, left

        return self.filter.lookup(
            self.statistic,
            name,
            opponent,
            simulation.lookup_character(name),
        )
