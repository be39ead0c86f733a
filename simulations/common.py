# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
import time

from dance_marathon.catalog import Catalog
from dance_marathon.marathon import PlayCounter
from dance_marathon.stats import Report, build_report


@dataclass(frozen=True)
class MarathonSpec:
    """
    Parameters of one marathon run.
    """
    trials: int
    seed: int

    def __post_init__(self) -> None:
        if self.trials <= 0:
            raise ValueError("trials must be > 0")


@dataclass
class MarathonResult:
    """
    Everything a finished run produced: inputs, raw counts and the report.
    """
    spec: MarathonSpec
    catalog: Catalog
    counter: PlayCounter

    report: Report = field(init=False)
    runtime_s: Optional[float] = None

    def __post_init__(self) -> None:
        self.report = build_report(self.catalog, self.counter, self.spec.trials)

        # Sanity: every trial plays at least one and at most size() songs
        lo = self.spec.trials
        hi = self.spec.trials * self.catalog.size()
        if not lo <= self.report.total_plays <= hi:
            raise ValueError(
                f"total plays out of bounds: expected [{lo}, {hi}], "
                f"got {self.report.total_plays}"
            )


class Timer:
    """
    Wall-clock duration of a block, reported as "Simulation took ...".

        with Timer() as t:
            counter = run_trials(...)
        t.elapsed_s  # None until the block exits
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_catalog_lines(catalog: Catalog, source: str) -> List[str]:
    """
    Lines announcing a freshly loaded jukebox.
    """
    return [
        "Loading the jukebox with songs:",
        f"\tReading songs from {source} into jukebox...",
        f"\tJukebox is loaded with {catalog.size()} songs",
        f"\tFirst song in jukebox: {catalog.first()}",
        f"\tLast song in jukebox: {catalog.last()}",
    ]


def format_report_lines(r: MarathonResult) -> List[str]:
    """
    Human-friendly summary of a finished run, one entry per printed line.
    """
    rep = r.report
    top = rep.most_played

    lines = ["\tPrinting first 5 songs played..."]
    lines += [f"\t\t{song}" for song in r.catalog.preview()]
    if r.runtime_s is not None:
        lines.append(f"\tSimulation took {r.runtime_s:.3f} second/s to run")

    lines += [
        "Displaying simulation statistics:",
        f"\tNumber of simulations run: {rep.trial_count}",
        f"\tTotal number of songs played: {rep.total_plays}",
        f"\tAverage number of songs played per simulation to get duplicate: {rep.average_plays}",
        f'\tMost played song: "{top.title}" by "{top.artist}":',
        f'\tAll songs alphabetically by: "{top.artist}":',
    ]
    for song, plays in zip(rep.artist_songs, rep.artist_plays):
        lines.append(f'\t\t"{song.title}" with {plays} plays')
    return lines
