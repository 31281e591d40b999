from __future__ import annotations

from typing import Callable, Iterable, Iterator

from saltsim.backtest.record import Record, Winner

"""
{#!filepath: saltsim/lookup/statistics.py}

Record Statistics Engine (FINAL / FROZEN)

Pure functions:
    (records, name) -> float

Semantics:
- Every aggregation is a single fold: accumulate, count, then divide.
- An empty input returns a statistic-specific default instead of dividing by zero.
- Side detection is name based: a record's left side is `name`'s side when
  left.name == name, otherwise the right side is.
- Inputs are read, never mutated; the result does not depend on order.

Wagers are strictly positive (enforced when a Record is built), so the
ratio computations below never divide by zero.
"""


def _iterate_percentage(
    records: Iterable[Record],
    default: float,
    matches: Callable[[Record], bool],
) -> float:
    hits = 0.0
    n = 0.0

    for record in records:
        n += 1.0
        if matches(record):
            hits += 1.0

    if n == 0.0:
        return default

    return hits / n


def _iterate(
    records: Iterable[Record],
    initial: float,
    f: Callable[[float, Record], float],
) -> float:
    acc = initial
    n = 0.0

    for record in records:
        n += 1.0
        acc = f(acc, record)

    # empty input: the untouched accumulator
    if n == 0.0:
        return acc

    return acc / n


def _own_and_opponent(record: Record, name: str) -> tuple[float, float]:
    if record.left.name == name:
        return record.left.bet_amount, record.right.bet_amount
    return record.right.bet_amount, record.left.bet_amount


# ------------------------------------------------------------------
# Filters
# ------------------------------------------------------------------
def filter_specific(records: Iterable[Record], opponent: str) -> Iterator[Record]:
    """Only the records `opponent` took part in."""
    return (
        record
        for record in records
        if record.left.name == opponent or record.right.name == opponent
    )


# ------------------------------------------------------------------
# Rates
# ------------------------------------------------------------------
def winrate(records: Iterable[Record], name: str) -> float:
    return _iterate_percentage(records, 0.5, lambda record: record.is_winner(name))


def upsets(records: Iterable[Record], name: str) -> float:
    """
    Fraction of records where `name` was the underdog
    (opponent wager / own wager > 1).
    """
    # TODO: settle 0.0 vs 0.5 as the empty default (same for favored)
    return _iterate_percentage(
        records,
        0.0,
        lambda record: (
            (record.left.name == name
             and (record.right.bet_amount / record.left.bet_amount) > 1.0)
            or
            (record.right.name == name
             and (record.left.bet_amount / record.right.bet_amount) > 1.0)
        ),
    )


def favored(records: Iterable[Record], name: str) -> float:
    """
    Fraction of records where `name` was the favourite
    (own wager / opponent wager > 1).
    """
    return _iterate_percentage(
        records,
        0.0,
        lambda record: (
            (record.left.name == name
             and (record.left.bet_amount / record.right.bet_amount) > 1.0)
            or
            (record.right.name == name
             and (record.right.bet_amount / record.left.bet_amount) > 1.0)
        ),
    )


# ------------------------------------------------------------------
# Means
# ------------------------------------------------------------------
def bet_amount(records: Iterable[Record], name: str) -> float:
    return _iterate(
        records,
        0.0,
        lambda acc, record: acc + _own_and_opponent(record, name)[0],
    )


def odds(records: Iterable[Record], name: str) -> float:
    def step(acc: float, record: Record) -> float:
        own, opponent = _own_and_opponent(record, name)
        return acc + (opponent / own)

    return _iterate(records, 0.0, step)


def duration(records: Iterable[Record]) -> float:
    return _iterate(records, 0.0, lambda acc, record: acc + float(record.duration))


def matches_len(records: Iterable[Record]) -> float:
    n = 0.0
    for _ in records:
        n += 1.0
    return n


# ------------------------------------------------------------------
# Earnings
# ------------------------------------------------------------------
def earnings(records: Iterable[Record], name: str, bet_amount: float) -> float:
    """
    Net result of betting a fixed `bet_amount` on `name` in every record.

    win  : + bet_amount * opponent_wager / (own_wager + bet_amount)
    loss : - bet_amount

    The payout accounts for the extra wager diluting the pot on `name`'s side.
    Mirror matches are skipped.
    """
    total = 0.0

    for record in records:
        if record.is_mirror():
            continue

        if record.winner is Winner.LEFT:
            if record.left.name == name:
                total += bet_amount * (
                    record.right.bet_amount / (record.left.bet_amount + bet_amount)
                )
            else:
                total -= bet_amount
        else:
            if record.right.name == name:
                total += bet_amount * (
                    record.left.bet_amount / (record.right.bet_amount + bet_amount)
                )
            else:
                total -= bet_amount

    return total
