from __future__ import annotations

import math
import random
from typing import Dict, Iterable, List, Optional, Sequence

from saltsim import logs
from saltsim.backtest.bet import Bet, BetSide
from saltsim.backtest.record import Mode, Record, Winner
from saltsim.backtest.result import SimulationResult
from saltsim.backtest.strategy.base import Simulator, Strategy
from saltsim.config.simulation_config import SimulationConfig
from saltsim.lookup import statistics
from saltsim.observability.instrumentation import NoOpInstrumentation

"""
{#!filepath: saltsim/backtest/simulation.py}

Replay Simulation (FINAL / FROZEN)

Purpose:
- Replay concluded matches in order and account for a strategy's bets.

Semantics:
- Each record is decided (calculate) BEFORE it is indexed (insert_record),
  so a strategy only ever sees strictly earlier matches.
- Two pools: `sum` (matchmaking) and `tournament_sum` (tournament).
  Only the pool of the current mode is read or written.
- Mines: a pool at or below its floor forces an all-in bet; a pool that
  drops to <= 0 is reset to its floor on that same record.
- Each record gets its own random left/right swap before it is decided.
- Mirror matches (same name on both sides) are never bet on, so they never
  touch a pool or the success/failure counters.

Invariants:
- `characters` never holds mirror matches.
- Every indexed record is appended exactly twice (once per party).
"""


class Simulation(Simulator):
    """
    Single-writer replay state. Not thread safe; use one instance per run.
    """

    def __init__(
        self,
        cfg: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        matchmaking_strategy: Optional[Strategy] = None,
        tournament_strategy: Optional[Strategy] = None,
    ):
        self.cfg = cfg or SimulationConfig()
        self.rng = rng if rng is not None else random.Random(self.cfg.seed)

        self.salt_mine_amount: float = self.cfg.salt_mine_amount
        self.tournament_balance: float = self.cfg.tournament_balance

        self.matchmaking_strategy = matchmaking_strategy
        self.tournament_strategy = tournament_strategy

        self.record_len: float = 0.0
        self.sum: float = self.salt_mine_amount
        self.tournament_sum: float = self.tournament_balance
        self.in_tournament: bool = False
        self.successes: float = 0.0
        self.failures: float = 0.0
        self.max_character_len: int = 0
        self.characters: Dict[str, List[Record]] = {}

        # main bankroll after every calculated record
        self.sum_curve: List[float] = []
        self.bets_placed: int = 0
        self.mines_resets: int = 0

    # --------------------------------------------------
    # History
    # --------------------------------------------------
    def insert_match(self, name: str, record: Record) -> None:
        matches = self.characters.setdefault(name, [])
        matches.append(record)

        if len(matches) > self.max_character_len:
            self.max_character_len = len(matches)

    def insert_record(self, record: Record) -> None:
        if record.is_mirror():
            return

        self.record_len += 1.0
        self.insert_match(record.left.name, record)
        self.insert_match(record.right.name, record)

    def insert_records(self, records: Iterable[Record]) -> None:
        """Seed history without betting."""
        for record in records:
            self.insert_record(record)

    # --------------------------------------------------
    # Simulator view
    # --------------------------------------------------
    def matches_len(self, name: str) -> int:
        return len(self.lookup_character(name))

    def current_money(self) -> float:
        if self.in_tournament:
            return self.tournament_sum
        return self.sum

    def lookup_character(self, name: str) -> Sequence[Record]:
        # tuple: strategies get a read-only snapshot
        return tuple(self.characters.get(name, ()))

    # --------------------------------------------------
    # Bankroll rules
    # --------------------------------------------------
    def is_in_mines(self) -> bool:
        if self.in_tournament:
            return self.tournament_sum <= self.tournament_balance
        return self.sum <= self.salt_mine_amount

    def clamp(self, bet_amount: float) -> float:
        current = self.current_money()

        if self.is_in_mines():
            return current

        # cap before rounding so inf never reaches floor()
        bet_amount = min(bet_amount, current + 1.0)

        # nearest whole unit, .5 rounds up
        rounded = float(math.floor(bet_amount + 0.5))

        if rounded < 1.0:
            return 1.0
        if rounded > current:
            return current
        return rounded

    def pick_winner(self, strategy: Strategy, tier, left: str, right: str) -> Bet:
        if left != right:
            bet = strategy.bet(self, tier, left, right)

            if bet.side is BetSide.LEFT and bet.amount > 0.0:
                return Bet.left(self.clamp(bet.amount))

            if bet.side is BetSide.RIGHT and bet.amount > 0.0:
                return Bet.right(self.clamp(bet.amount))

        if self.is_in_mines():
            return Bet.left(self.current_money())

        return Bet.none()

    def _close_tournament(self) -> None:
        logs.info(
            f"[Simulation] tournament closed: sum={self.sum} + tournament_sum={self.tournament_sum}"
        )
        self.in_tournament = False
        self.sum += self.tournament_sum
        self.tournament_sum = self.tournament_balance

    # --------------------------------------------------
    # Per-record step
    # --------------------------------------------------
    def calculate(self, record: Record) -> None:
        record = record.shuffle(self.rng)

        if record.mode is Mode.MATCHMAKING:
            if self.in_tournament:
                self._close_tournament()
            strategy = self.matchmaking_strategy
        else:
            self.in_tournament = True
            strategy = self.tournament_strategy

        if strategy is None:
            return

        # mirror matches never bet, not even the all-in mines bet
        if record.is_mirror():
            return

        bet = self.pick_winner(strategy, record.tier, record.left.name, record.right.name)

        increase = self._resolve(bet, record)

        if self.in_tournament:
            self.tournament_sum += increase
            if self.tournament_sum <= 0.0:
                self.mines_resets += 1
                logs.warning(f"[Simulation] tournament pool hit {self.tournament_sum}, reset to {self.tournament_balance}")
                self.tournament_sum = self.tournament_balance
        else:
            self.sum += increase
            if self.sum <= 0.0:
                self.mines_resets += 1
                logs.warning(f"[Simulation] bankroll hit {self.sum}, reset to {self.salt_mine_amount}")
                self.sum = self.salt_mine_amount

    def _resolve(self, bet: Bet, record: Record) -> float:
        if bet.is_none():
            return 0.0

        self.bets_placed += 1

        if bet.wins(record.winner):
            if record.winner is Winner.LEFT:
                odds = record.right.bet_amount / record.left.bet_amount
            else:
                odds = record.left.bet_amount / record.right.bet_amount

            self.successes += 1.0
            increase = float(math.ceil(bet.amount * odds))
        else:
            self.failures += 1.0
            increase = -bet.amount

        logs.debug(
            f"[Simulation] {record.left.name} vs {record.right.name}: "
            f"{bet.side.value} {bet.amount} -> {increase:+}"
        )
        return increase

    # --------------------------------------------------
    # Replay
    # --------------------------------------------------
    def simulate(self, records: Iterable[Record], inst=None) -> None:
        inst = inst or NoOpInstrumentation()

        logs.info(f"[Simulation] replay start: sum={self.sum} records_seen={self.record_len}")

        with inst.timer("simulate"):
            for i, record in enumerate(records):
                try:
                    self.calculate(record)
                except Exception:
                    logs.exception(f"[Simulation] failed on record #{i}: {record}")
                    raise

                self.insert_record(record)
                self.sum_curve.append(self.sum)

            if self.in_tournament:
                self._close_tournament()

        logs.info(
            f"[Simulation] replay done: sum={self.sum} successes={self.successes} "
            f"failures={self.failures} records={self.record_len}"
        )

    def winrate(self, name: str) -> float:
        return statistics.winrate(self.lookup_character(name), name)

    def result(self) -> SimulationResult:
        return SimulationResult(
            sum=self.sum,
            tournament_sum=self.tournament_sum,
            in_tournament=self.in_tournament,
            successes=self.successes,
            failures=self.failures,
            record_len=self.record_len,
            max_character_len=self.max_character_len,
            characters=len(self.characters),
            bets_placed=self.bets_placed,
            mines_resets=self.mines_resets,
            sum_curve=list(self.sum_curve),
        )
