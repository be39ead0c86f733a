"""Constants and logging setup for the dance marathon simulation."""

import logging
import sys

# --- Simulation ---
DEFAULT_TRIALS = 100000
DEFAULT_SEED = 42
PREVIEW_SIZE = 5

# --- Song files ---
SONG_FIELD_SEPARATOR = "<SEP>"
ARTIST_FIELD = 2
TITLE_FIELD = 3

# --- Logging ---
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send dance_marathon logs to stderr; DEBUG when verbose, else WARNING."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    logger = logging.getLogger("dance_marathon")
    logger.setLevel(level)

    # matplotlib is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the dance_marathon namespace, e.g. dance_marathon.loader."""
    return logging.getLogger(f"dance_marathon.{name}")
