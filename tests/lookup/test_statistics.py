# tests/lookup/test_statistics.py
from __future__ import annotations

import pytest

from saltsim.backtest.record import Winner
from saltsim.lookup import statistics


def test_empty_defaults():
    assert statistics.winrate([], "A") == 0.5
    assert statistics.upsets([], "A") == 0.0
    assert statistics.favored([], "A") == 0.0
    assert statistics.bet_amount([], "A") == 0.0
    assert statistics.odds([], "A") == 0.0
    assert statistics.duration([]) == 0.0
    assert statistics.matches_len([]) == 0.0
    assert statistics.earnings([], "A", 10.0) == 0.0


def test_winrate_is_name_based(record_factory):
    records = [
        record_factory("A", "B", winner=Winner.LEFT),
        record_factory("B", "A", winner=Winner.LEFT),
        record_factory("A", "C", winner=Winner.RIGHT),
        record_factory("C", "A", winner=Winner.RIGHT),
    ]

    assert statistics.winrate(records, "A") == 0.5
    assert statistics.winrate(records, "B") == 0.25
    assert 0.0 <= statistics.winrate(records, "nobody") <= 1.0


def test_winrate_unaffected_by_swap(record_factory):
    records = [
        record_factory("A", "B", winner=Winner.LEFT),
        record_factory("A", "C", winner=Winner.LEFT),
        record_factory("D", "A", winner=Winner.LEFT),
    ]
    swapped = [r.swap() for r in records]

    assert statistics.winrate(records, "A") == statistics.winrate(swapped, "A")
    assert statistics.winrate(records, "A") == pytest.approx(2 / 3)


def test_upsets_and_favored(record_factory):
    records = [
        # A underdog
        record_factory("A", "B", left_bet=10, right_bet=20),
        # A favourite, on the right
        record_factory("C", "A", left_bet=10, right_bet=30),
        # even money: neither
        record_factory("A", "D", left_bet=15, right_bet=15),
        # A underdog, on the right
        record_factory("E", "A", left_bet=50, right_bet=5),
    ]

    assert statistics.upsets(records, "A") == 0.5
    assert statistics.favored(records, "A") == 0.25


def test_bet_amount_and_odds(record_factory):
    records = [
        record_factory("A", "B", left_bet=10, right_bet=20),
        record_factory("C", "A", left_bet=40, right_bet=30),
    ]

    assert statistics.bet_amount(records, "A") == 20.0
    assert statistics.odds(records, "A") == pytest.approx((2.0 + 40 / 30) / 2)


def test_duration_and_matches_len(record_factory):
    records = [
        record_factory(duration=60),
        record_factory(duration=120),
        record_factory(duration=0),
    ]

    assert statistics.duration(records) == 60.0
    assert statistics.matches_len(records) == 3.0
    assert isinstance(statistics.matches_len(records), float)


@pytest.mark.parametrize("k", [0, 1, 7])
def test_matches_len_counts(record_factory, k):
    assert statistics.matches_len([record_factory() for _ in range(k)]) == float(k)


def test_earnings_accounts_for_own_wager(record_factory):
    records = [
        # A wins as left: 10 * 20 / (10 + 10)
        record_factory("A", "B", left_bet=10, right_bet=20, winner=Winner.LEFT),
        # A loses as right
        record_factory("C", "A", left_bet=10, right_bet=20, winner=Winner.LEFT),
        # A wins as right: 10 * 30 / (90 + 10)
        record_factory("D", "A", left_bet=30, right_bet=90, winner=Winner.RIGHT),
    ]

    assert statistics.earnings(records, "A", 10.0) == pytest.approx(10.0 - 10.0 + 3.0)


def test_earnings_skips_mirror_matches(record_factory):
    records = [record_factory("A", "A", winner=Winner.RIGHT)]

    assert statistics.earnings(records, "A", 10.0) == 0.0


def test_filter_specific(record_factory):
    records = [
        record_factory("A", "B"),
        record_factory("A", "C"),
        record_factory("B", "A"),
    ]

    only_b = list(statistics.filter_specific(records, "B"))

    assert only_b == [records[0], records[2]]


def test_statistics_do_not_mutate_input(record_factory):
    records = [record_factory("A", "B"), record_factory("B", "A")]
    before = list(records)

    statistics.winrate(records, "A")
    statistics.odds(records, "A")
    statistics.earnings(records, "A", 5.0)

    assert records == before


def test_statistics_accept_generators(record_factory):
    records = [record_factory("A", "B", winner=Winner.LEFT)] * 3

    assert statistics.winrate((r for r in records), "A") == 1.0
