from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from saltsim.backtest.strategy.base import Simulator
from saltsim.config.genetic_config import GeneticConfig

T = TypeVar("T")
G = TypeVar("G", bound="Gene")

# default probability that choose() ignores both parents
MUTATION_RATE: float = GeneticConfig().mutation_rate


# ------------------------------------------------------------------
# Random helpers (the random source is always passed in)
# ------------------------------------------------------------------
def gen_rand_index(rng: random.Random, n: int) -> int:
    """Uniform index in [0, n)."""
    return rng.randrange(n)


def rand_is_percent(rng: random.Random, percent: float) -> bool:
    """True with probability `percent` (0.0 - 1.0)."""
    return rng.random() < percent


def choose2(rng: random.Random, a: T, b: T) -> T:
    if gen_rand_index(rng, 2) == 0:
        return a
    return b


def crossover(a: G, b: G, rng: random.Random, cfg: Optional[GeneticConfig] = None) -> G:
    """Child of `a` and `b`, mutating at the configured rate."""
    cfg = cfg or GeneticConfig()
    return a.choose(b, rng, cfg.mutation_rate)


# ------------------------------------------------------------------
# Contracts
# ------------------------------------------------------------------
class Gene:
    """
    Gene (FROZEN)

    An evolvable value:
      - random(rng)              -> fresh instance
      - choose(other, rng, rate) -> child of two parents (may mutate)

    Plain base class, not an ABC: Enum genes cannot mix in ABCMeta.
    """

    @classmethod
    def random(cls: type[G], rng: random.Random) -> G:
        raise NotImplementedError

    def choose(self: G, other: G, rng: random.Random, mutation_rate: float = MUTATION_RATE) -> G:
        raise NotImplementedError


class Calculate(ABC, Generic[T]):
    """
    Something evaluated against the simulation for one match.
    """

    @abstractmethod
    def calculate(self, simulation: Simulator, tier, left: str, right: str) -> T:
        ...

    def precalculate(self) -> Optional[T]:
        return None

    def optimize(self):
        return self
