# simulations/config.py
"""Run configuration from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv

from dance_marathon.constants import DEFAULT_SEED, DEFAULT_TRIALS, get_logger

logger = get_logger("config")

TRIALS_ENV = "MARATHON_TRIALS"
SEED_ENV = "MARATHON_SEED"


def load_environment(env_file: Union[str, Path]) -> None:
    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(env_path)
        logger.debug(f"Loaded environment from {env_path}")


def _int_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


@dataclass
class MarathonConfig:
    trials: int = DEFAULT_TRIALS
    seed: int = DEFAULT_SEED

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "MarathonConfig":
        """Read MARATHON_TRIALS / MARATHON_SEED, falling back to defaults."""
        env = os.environ if env is None else env
        trials = _int_from_env(env, TRIALS_ENV, DEFAULT_TRIALS)
        if trials <= 0:
            logger.warning(f"Ignoring {TRIALS_ENV}={trials}: must be > 0, using {DEFAULT_TRIALS}")
            trials = DEFAULT_TRIALS
        return cls(trials=trials, seed=_int_from_env(env, SEED_ENV, DEFAULT_SEED))
