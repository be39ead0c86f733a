import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .catalog import Catalog, Song
from .marathon import PlayCounter


class EmptyCounterError(ValueError):
    """Raised when statistics are asked of a counter with no songs."""


@dataclass(frozen=True)
class Report:
    """
    Read-only snapshot of a finished marathon.

    artist_songs holds every song by the most played song's artist in natural
    order; artist_plays holds their play counts in the same order.
    """
    trial_count: int
    total_plays: int
    average_plays: int
    most_played: Song
    artist_songs: Tuple[Song, ...]
    artist_plays: Tuple[int, ...]


def total_plays(counter: PlayCounter) -> int:
    return sum(counter.values())


def average_plays(total: int, trial_count: int) -> int:
    """
    Average songs played per trial, rounded up.
    """
    if trial_count == 0:
        raise ZeroDivisionError("trial_count must be non-zero")
    return math.ceil(total / trial_count)


def most_played(counter: PlayCounter, order: Optional[Iterable[Song]] = None) -> Song:
    """
    Song with the strictly greatest count.

    Ties go to the first song seen under `order` (the counter's own catalog
    order by default); no secondary key is applied. A custom `order` must
    list exactly the counter's songs, otherwise ValueError.
    """
    if len(counter) == 0:
        raise EmptyCounterError("counter has no songs")

    songs = list(counter) if order is None else list(order)
    if order is not None:
        counted = set(counter)
        unknown = [s for s in songs if s not in counted]
        if unknown:
            raise ValueError(f"order names songs not in counter: {unknown[0]}")
        missing = counted.difference(songs)
        if missing:
            raise ValueError(f"order leaves out counted songs: {min(missing)}")

    best = songs[0]
    best_count = counter[best]
    for song in songs[1:]:
        c = counter[song]
        if c > best_count:
            best = song
            best_count = c
    return best


def songs_by_artist(counter: PlayCounter, artist: str) -> List[Song]:
    """
    All counted songs by `artist`, sorted by artist then title.
    """
    return sorted(song for song in counter if song.artist == artist)


def build_report(catalog: Catalog, counter: PlayCounter, trial_count: int) -> Report:
    total = total_plays(counter)
    top = most_played(counter, order=catalog)
    by_artist = songs_by_artist(counter, top.artist)

    return Report(
        trial_count=trial_count,
        total_plays=total,
        average_plays=average_plays(total, trial_count),
        most_played=top,
        artist_songs=tuple(by_artist),
        artist_plays=tuple(counter[song] for song in by_artist),
    )
