from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .constants import PREVIEW_SIZE


class EmptyCatalogError(ValueError):
    """Raised when a catalog would hold no songs."""


@dataclass(frozen=True, order=True)
class Song:
    """
    A jukebox song.

    Two songs are equal when both artist and title match exactly. Natural
    order is by artist, then by title (plain, case-sensitive str comparison).
    """

    artist: str
    title: str

    def __str__(self) -> str:
        return f"Artist: {self.artist}, Title: {self.title}"


class Catalog:
    """
    Ordered, duplicate-free, read-only collection of songs.

    Songs keep the order in which they were first seen; positional access
    backs the uniform random draw of the simulation.
    """

    def __init__(self, songs: Iterable[Song]):
        # dict.fromkeys drops duplicates and keeps first-seen order
        self._songs: Tuple[Song, ...] = tuple(dict.fromkeys(songs))
        if not self._songs:
            raise EmptyCatalogError("catalog must contain at least one song")

    @classmethod
    def build(cls, records: Iterable[Tuple[str, str]]) -> "Catalog":
        """
        Build a catalog from (artist, title) pairs.
        """
        return cls(Song(artist=artist, title=title) for artist, title in records)

    # ------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------

    def size(self) -> int:
        return len(self._songs)

    def at(self, index: int) -> Song:
        if index < 0 or index >= len(self._songs):
            raise IndexError(f"song index {index} out of range [0, {len(self._songs)})")
        return self._songs[index]

    def first(self) -> Song:
        return self.at(0)

    def last(self) -> Song:
        return self.at(len(self._songs) - 1)

    def preview(self, n: int = PREVIEW_SIZE) -> List[Song]:
        """
        The first n songs (fewer if the catalog is smaller).
        """
        return list(self._songs[:n])

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def __repr__(self) -> str:
        return f"Catalog(size={len(self._songs)})"
