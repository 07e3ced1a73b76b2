import pytest

from wirefdf.app import has_fdf_extension, main


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/42.fdf", True),
        ("pyramid.fdf", True),
        ("map.txt", False),
        ("map.fd", False),
        ("map.xdf", True),
        ("f", False),
    ],
)
def test_has_fdf_extension(path, expected):
    assert has_fdf_extension(path) is expected


@pytest.mark.parametrize("argv", [[], ["a.fdf", "b.fdf"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 1
    assert "Usage:" in capsys.readouterr().err


def test_wrong_extension_is_rejected_before_opening(tmp_path, capsys):
    missing = tmp_path / "map.txt"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().err.strip() == "Error! Not '.fdf'."


def test_missing_file_is_invalid(tmp_path, capsys):
    missing = tmp_path / "absent.fdf"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().err.strip() == "Error! Invalid File."


def test_ragged_map_is_invalid(tmp_path, capsys):
    path = tmp_path / "ragged.fdf"
    path.write_text("1 2 3\n4 5\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.strip() == "Error! Invalid Map."


def test_empty_map_is_invalid(tmp_path, capsys):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.strip() == "Error! Invalid Map."


def test_directory_is_invalid_file(tmp_path, capsys):
    folder = tmp_path / "maps.fdf"
    folder.mkdir()
    assert main([str(folder)]) == 1
    assert capsys.readouterr().err.strip() == "Error! Invalid File."