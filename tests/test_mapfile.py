import pytest

from wirefdf.mapfile import HeightMap, MapError, parse_int, read_map, split_fields


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("+5", 5),
        ("12abc", 12),
        ("abc", 0),
        ("\t\n3", 3),
        ("--3", 0),
        ("10,0xFF", 10),
        ("7\n", 7),
        ("", 0),
    ],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_split_fields_collapses_spaces():
    assert split_fields("1  2 3") == ["1", "2", "3"]


def test_split_fields_only_spaces():
    assert split_fields("    ") == []


def test_split_fields_keeps_newline_on_last_field():
    assert split_fields("1 2\n") == ["1", "2\n"]


def test_read_map_basic(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("0 1 2\n3 4 5\n")
    heightmap = read_map(path)
    assert heightmap.width == 3
    assert heightmap.height == 2
    assert heightmap.at(2, 1) == 5
    assert heightmap.at(0, 0) == 0
    assert heightmap.rows == ((0, 1, 2), (3, 4, 5))


def test_read_map_without_trailing_newline(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("1 2\n3 4")
    heightmap = read_map(path)
    assert heightmap.rows == ((1, 2), (3, 4))


def test_read_map_negative_and_colour_suffix(tmp_path):
    path = tmp_path / "grid.fdf"
    path.write_text("-3 10,0xFF0000\n0 0\n")
    heightmap = read_map(path)
    assert heightmap.at(0, 0) == -3
    assert heightmap.at(1, 0) == 10


def test_read_map_ragged_rows(tmp_path):
    path = tmp_path / "bad.fdf"
    path.write_text("1 2 3\n4 5\n")
    with pytest.raises(MapError):
        read_map(path)


def test_read_map_blank_trailing_line_is_invalid(tmp_path):
    path = tmp_path / "bad.fdf"
    path.write_text("1 2\n\n")
    with pytest.raises(MapError):
        read_map(path)


def test_read_map_empty(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError):
        read_map(path)


def test_read_map_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_map(tmp_path / "missing.fdf")


def test_at_outside_map():
    heightmap = HeightMap(2, 1, ((1, 2),))
    with pytest.raises(IndexError):
        heightmap.at(2, 0)
    with pytest.raises(IndexError):
        heightmap.at(-1, 0)


def test_heightmap_rejects_wrong_shape():
    with pytest.raises(MapError):
        HeightMap(3, 1, ((1, 2),))