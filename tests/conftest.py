# tests/conftest.py
from __future__ import annotations

import random

import pytest
from loguru import logger

from saltsim.backtest.bet import Bet
from saltsim.backtest.record import Character, Mode, Record, Winner
from saltsim.backtest.strategy.base import Strategy


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


class FixedRandom(random.Random):
    """random() always returns `value`: 0.9 never swaps, 0.1 always swaps."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


class FixedStrategy(Strategy):
    """Always answers the same Bet, remembers what it was asked."""

    def __init__(self, bet: Bet):
        self._bet = bet
        self.calls = []

    def bet(self, simulation, tier, left, right):
        self.calls.append((tier, left, right, simulation.matches_len(left), simulation.matches_len(right)))
        return self._bet


class NamedStrategy(Strategy):
    """Bets `amount` on whichever side `name` is on, regardless of swaps."""

    def __init__(self, name: str, amount: float):
        self._name = name
        self._amount = amount

    def bet(self, simulation, tier, left, right):
        if left == self._name:
            return Bet.left(self._amount)
        if right == self._name:
            return Bet.right(self._amount)
        return Bet.none()


def make_record(
    left: str = "A",
    right: str = "B",
    left_bet: float = 10.0,
    right_bet: float = 20.0,
    winner: Winner = Winner.LEFT,
    mode: Mode = Mode.MATCHMAKING,
    tier: str = "A",
    duration: int = 60,
) -> Record:
    return Record(
        left=Character(left, left_bet),
        right=Character(right, right_bet),
        winner=winner,
        mode=mode,
        tier=tier,
        duration=duration,
    )


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def no_swap():
    return FixedRandom(0.9)


@pytest.fixture
def always_swap():
    return FixedRandom(0.1)


@pytest.fixture
def fixed_strategy():
    return FixedStrategy


@pytest.fixture
def named_strategy():
    return NamedStrategy


@pytest.fixture
def fixed_random():
    return FixedRandom
