from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SimulationConfig(BaseModel):
    """
    SimulationConfig (FROZEN)

    Bankroll floors for a Simulation:
      - salt_mine_amount   : main bankroll floor / starting value
      - tournament_balance : tournament sub-pool floor / starting value,
                             base amount plus a fixed per-entry cost
      - seed               : seed for the per-record side swap (None = OS entropy)
    """

    model_config = {"frozen": True}

    salt_mine_amount: float = 400.0

    tournament_base: float = 1000.0
    tournament_entries: int = Field(22, ge=0)
    tournament_entry_cost: float = Field(25.0, ge=0.0)

    seed: Optional[int] = None

    @field_validator("salt_mine_amount", "tournament_base")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"bankroll floor must be > 0, got {v}")
        return v

    @property
    def tournament_balance(self) -> float:
        return self.tournament_base + (self.tournament_entries * self.tournament_entry_cost)
