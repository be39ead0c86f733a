# simulations/loader.py

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from dance_marathon.catalog import Catalog
from dance_marathon.constants import (
    ARTIST_FIELD,
    SONG_FIELD_SEPARATOR,
    TITLE_FIELD,
    get_logger,
)

logger = get_logger("loader")


class CatalogFormatError(ValueError):
    """A song file line could not be split into artist and title."""


def parse_line(line: str) -> Tuple[str, str]:
    """
    Split one song file line into (artist, title).

    Lines look like:
        TRMMMYQ128F932D901<SEP>SOQMMHC12AB0180CB8<SEP>Faster Pussy cat<SEP>Silent Night
    """
    fields = line.split(SONG_FIELD_SEPARATOR)
    if len(fields) <= TITLE_FIELD:
        raise CatalogFormatError(
            f"expected at least {TITLE_FIELD + 1} fields, got {len(fields)}"
        )
    return fields[ARTIST_FIELD], fields[TITLE_FIELD]


def load_records(path: Union[str, Path]) -> List[Tuple[str, str]]:
    path = Path(path)
    records: List[Tuple[str, str]] = []

    with open(path, encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            try:
                records.append(parse_line(line))
            except CatalogFormatError as e:
                raise CatalogFormatError(f"{path}:{lineno}: {e}") from e

    logger.debug(f"Read {len(records)} song lines from {path}")
    return records


def load_catalog(path: Union[str, Path]) -> Catalog:
    """
    Read a song file into a deduplicated catalog.
    """
    catalog = Catalog.build(load_records(path))
    logger.debug(f"Catalog from {path} holds {catalog.size()} distinct songs")
    return catalog
