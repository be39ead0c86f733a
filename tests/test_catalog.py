import pytest

from dance_marathon.catalog import Catalog, EmptyCatalogError, Song


def test_song_equality_is_structural():
    assert Song("A", "X") == Song("A", "X")
    assert Song("A", "X") != Song("A", "Y")
    assert Song("A", "X") != Song("B", "X")
    assert len({Song("A", "X"), Song("A", "X")}) == 1


def test_song_orders_by_artist_then_title_case_sensitive():
    songs = [Song("b", "a"), Song("B", "z"), Song("A", "y"), Song("A", "X")]
    assert sorted(songs) == [Song("A", "X"), Song("A", "y"), Song("B", "z"), Song("b", "a")]


def test_song_is_immutable():
    song = Song("A", "X")
    with pytest.raises(AttributeError):
        song.artist = "B"


def test_song_str():
    assert str(Song("Faster Pussy cat", "Silent Night")) == "Artist: Faster Pussy cat, Title: Silent Night"


def test_build_collapses_duplicates_keeping_first_seen_order():
    catalog = Catalog.build([("B", "Z"), ("A", "X"), ("B", "Z"), ("A", "Y"), ("A", "X")])
    assert catalog.size() == 3
    assert list(catalog) == [Song("B", "Z"), Song("A", "X"), Song("A", "Y")]
    assert catalog.first() == Song("B", "Z")
    assert catalog.last() == Song("A", "Y")


def test_build_empty_raises():
    with pytest.raises(EmptyCatalogError):
        Catalog.build([])


def test_at_bounds():
    catalog = Catalog.build([("A", "X"), ("A", "Y")])
    assert catalog.at(1) == Song("A", "Y")
    for bad in (-1, 2, 100):
        with pytest.raises(IndexError):
            catalog.at(bad)


def test_preview_is_capped_by_size():
    small = Catalog.build([("A", "X"), ("A", "Y")])
    assert small.preview() == [Song("A", "X"), Song("A", "Y")]

    big = Catalog.build([("A", str(i)) for i in range(8)])
    assert big.preview() == [Song("A", str(i)) for i in range(5)]
    assert big.preview(2) == [Song("A", "0"), Song("A", "1")]
