# saltsim/config/genetic_config.py
from pydantic import BaseModel, Field


class GeneticConfig(BaseModel):
    # probability that choose() ignores both parents
    mutation_rate: float = Field(0.01, ge=0.0, le=1.0)
