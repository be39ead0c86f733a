import pytest

from dance_marathon.catalog import EmptyCatalogError, Song
from simulations.loader import CatalogFormatError, load_catalog, load_records, parse_line


def _write(tmp_path, lines):
    path = tmp_path / "songs.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_parse_line_takes_artist_and_title_fields():
    line = "TRMMMYQ128F932D901<SEP>SOQMMHC12AB0180CB8<SEP>Faster Pussy cat<SEP>Silent Night"
    assert parse_line(line) == ("Faster Pussy cat", "Silent Night")


def test_parse_line_too_few_fields():
    with pytest.raises(CatalogFormatError):
        parse_line("TR1<SEP>SO1<SEP>Artist only")


def test_load_catalog_skips_blank_lines_and_dedupes(tmp_path):
    path = _write(tmp_path, [
        "T1<SEP>S1<SEP>Karkkiautomaatti<SEP>Tanssi vaan",
        "",
        "T2<SEP>S2<SEP>Hudson Mohawke<SEP>Nothing Matters",
        "T3<SEP>S3<SEP>Karkkiautomaatti<SEP>Tanssi vaan",
    ])
    catalog = load_catalog(path)
    assert list(catalog) == [
        Song("Karkkiautomaatti", "Tanssi vaan"),
        Song("Hudson Mohawke", "Nothing Matters"),
    ]


def test_load_records_reports_line_number(tmp_path):
    path = _write(tmp_path, [
        "T1<SEP>S1<SEP>A<SEP>X",
        "broken line",
    ])
    with pytest.raises(CatalogFormatError) as exc_info:
        load_records(path)
    assert ":2:" in str(exc_info.value)


def test_load_catalog_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(EmptyCatalogError):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "nope.txt")
