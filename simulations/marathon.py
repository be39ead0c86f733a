# simulations/marathon.py

from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt

from dance_marathon.catalog import EmptyCatalogError
from dance_marathon.constants import get_logger, setup_logging

from .common import MarathonResult, format_catalog_lines, format_report_lines
from .config import MarathonConfig, load_environment
from .loader import CatalogFormatError, load_catalog
from .run import run_marathon

logger = get_logger("cli")


def plot_play_counts(r: MarathonResult) -> None:
    """
    Histogram of per-song play counts.
    """
    counts = r.counter.values()

    plt.figure(figsize=(8, 4))
    plt.hist(counts, bins=60, range=(min(counts), max(counts) + 1))
    plt.title(f"Dance marathon: {r.spec.trials} trials, {r.catalog.size()} songs")
    plt.xlabel("Plays per song")
    plt.ylabel("Number of songs")
    plt.tight_layout()
    plt.show()


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Play random songs until one repeats, many times over, and report play counts."
    )
    parser.add_argument("filename", help="song file, one <SEP>-delimited song per line")
    parser.add_argument("--trials", type=int, default=None, help="number of trials (env MARATHON_TRIALS)")
    parser.add_argument("--seed", type=int, default=None, help="random seed (env MARATHON_SEED)")
    parser.add_argument("--plot", action="store_true", help="show a histogram of plays per song")
    parser.add_argument("--env-file", default=".env", help="path to .env file with MARATHON_* settings")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    load_environment(args.env_file)

    config = MarathonConfig.from_env()
    if args.trials is not None:
        if args.trials <= 0:
            parser.error("--trials must be > 0")
        config.trials = args.trials
    if args.seed is not None:
        config.seed = args.seed

    try:
        catalog = load_catalog(args.filename)
    except (OSError, UnicodeDecodeError, CatalogFormatError, EmptyCatalogError) as e:
        logger.error(f"Cannot load jukebox from {args.filename}: {e}")
        return 1

    for line in format_catalog_lines(catalog, args.filename):
        print(line)

    print("Running the simulation. The jukebox starts rockin'!")
    result = run_marathon(catalog, trials=config.trials, seed=config.seed)
    for line in format_report_lines(result):
        print(line)

    if args.plot:
        plot_play_counts(result)

    return 0


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
