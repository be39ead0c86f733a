# simulations/run.py

from __future__ import annotations

import random
from pathlib import Path
from typing import Union

from dance_marathon.catalog import Catalog
from dance_marathon.constants import DEFAULT_SEED, DEFAULT_TRIALS, get_logger
from dance_marathon.marathon import run_trials

from .common import MarathonResult, MarathonSpec, Timer
from .loader import load_catalog

logger = get_logger("run")


def run_marathon(
    catalog: Catalog,
    trials: int = DEFAULT_TRIALS,
    seed: int = DEFAULT_SEED,
) -> MarathonResult:
    """
    Run a seeded marathon over an already loaded catalog.

    Parameters
    ----------
    catalog:
        Songs to draw from.
    trials:
        Number of independent trials.
    seed:
        RNG seed; the same seed and trials give identical counts.

    Returns
    -------
    MarathonResult
    """
    spec = MarathonSpec(trials=trials, seed=seed)
    rng = random.Random(spec.seed)

    with Timer() as t:
        counter = run_trials(catalog, spec.trials, rng)

    logger.debug(f"Marathon of {spec.trials} trials took {t.elapsed_s:.3f}s")
    return MarathonResult(spec=spec, catalog=catalog, counter=counter, runtime_s=t.elapsed_s)


def run_file(
    path: Union[str, Path],
    trials: int = DEFAULT_TRIALS,
    seed: int = DEFAULT_SEED,
) -> MarathonResult:
    """
    Convenience helper: load a song file and run a marathon over it.
    """
    return run_marathon(load_catalog(path), trials=trials, seed=seed)
