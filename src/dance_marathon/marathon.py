import random
from typing import Dict, Iterable, Iterator, List, Optional, Protocol, Set, Tuple

from .catalog import Catalog, Song
from .constants import get_logger

logger = get_logger("marathon")


class IndexSource(Protocol):
    """Anything that can draw a uniform integer in [0, stop)."""

    def randrange(self, stop: int) -> int: ...


class PlayCounter:
    """
    Per-song play counts accumulated across all trials.

    One entry per catalog song, all starting at zero, kept in catalog order.
    That order is the deterministic iteration order used for tie-breaking
    when looking up the most played song.
    """

    def __init__(self, songs: Iterable[Song]):
        self._counts: Dict[Song, int] = {song: 0 for song in songs}

    def increment(self, song: Song) -> None:
        if song not in self._counts:
            raise KeyError(f"song not in catalog: {song}")
        self._counts[song] += 1

    def __getitem__(self, song: Song) -> int:
        return self._counts[song]

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._counts)

    def items(self) -> List[Tuple[Song, int]]:
        return list(self._counts.items())

    def values(self) -> List[int]:
        return list(self._counts.values())

    def snapshot(self) -> Dict[Song, int]:
        """
        Return a copy of the counts for inspection/debugging.
        """
        return dict(self._counts)


def run_trial(catalog: Catalog, counter: PlayCounter, rng: IndexSource) -> int:
    """
    Play one trial: draw songs until one repeats.

    Every song heard for the first time in this trial bumps its counter by one;
    the repeat that ends the trial is not counted. The trial set can hold at
    most catalog.size() songs, so a repeat is forced by draw size() + 1.

    Returns the number of distinct songs played.
    """
    k = catalog.size()
    played: Set[Song] = set()

    while True:
        song = catalog.at(rng.randrange(k))
        if song in played:
            return len(played)
        counter.increment(song)
        played.add(song)


def run_trials(
    catalog: Catalog,
    trial_count: int,
    rng: Optional[IndexSource] = None,
    counter: Optional[PlayCounter] = None,
) -> PlayCounter:
    """
    Run trial_count independent trials and accumulate plays into one counter.

    Parameters
    ----------
    catalog:
        Songs to draw from. Never mutated.
    trial_count:
        Number of trials, must be >= 1.
    rng:
        Uniform index source; defaults to an unseeded random.Random().
        Pass random.Random(seed) for reproducible runs.
    counter:
        Optional counter to accumulate into; a fresh zeroed one by default.

    Returns
    -------
    PlayCounter
    """
    if trial_count < 1:
        raise ValueError("trial_count must be >= 1")

    if rng is None:
        rng = random.Random()
    if counter is None:
        counter = PlayCounter(catalog)

    logger.debug(f"Running {trial_count} trials over {catalog.size()} songs")

    plays = 0
    for _ in range(trial_count):
        plays += run_trial(catalog, counter, rng)

    logger.debug(f"Finished {trial_count} trials, {plays} plays")
    return counter
