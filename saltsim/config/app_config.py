#!filepath: saltsim/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from .log_config import LogConfig
from .simulation_config import SimulationConfig
from .genetic_config import GeneticConfig
from saltsim import logs
from saltsim.utils.errors import UserInputError


def project_root() -> str:
    """
    Project root derived from this file:
    saltsim/config/app_config.py -> saltsim/config -> saltsim -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    simulation: SimulationConfig = SimulationConfig()
    genetic: GeneticConfig = GeneticConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to saltsim/config/base.yml
        - SALTSIM_SEED / SALTSIM_LOG_LEVEL override the YAML values
        """
        root = project_root()

        # 1) .env at the project root
        load_dotenv(os.path.join(root, ".env"))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) environment overrides
        seed = os.getenv("SALTSIM_SEED")
        if seed:
            raw.setdefault("simulation", {})["seed"] = seed

        level = os.getenv("SALTSIM_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})["level"] = level

        try:
            cfg = cls(**raw)
        except ValidationError as e:
            raise UserInputError(f"Invalid config {path}: {e}") from e

        logs.debug(f"[AppConfig] loaded {path}")
        return cfg
