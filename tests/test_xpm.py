from dataclasses import replace

import pytest

from wirefdf.colornames import lookup_color
from wirefdf.image import DEFAULT_VISUAL, MSB_FIRST
from wirefdf.xpm import (
    TRANSPARENT,
    XpmError,
    get_col_name,
    parse_xpm,
    quoted_lines,
    strip_comments,
    text_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SMALL = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]


def test_get_col_name_single_char_is_its_code():
    assert get_col_name("a") == ord("a")
    assert get_col_name("") == 0


def test_get_col_name_distinguishes_order():
    assert get_col_name("ab") != get_col_name("ba")
    assert get_col_name("ab") == get_col_name("ab")


def test_text_rgb_hex():
    assert text_rgb("#FF0000") == 0xFF0000
    assert text_rgb("#00ff7f", None) == 0x00FF7F


def test_text_rgb_hex_without_digits_is_zero():
    assert text_rgb("#zz") == 0


def test_text_rgb_names():
    assert text_rgb("red") == lookup_color("red")
    assert text_rgb("RED") == lookup_color("red")
    assert text_rgb("ghost", "white") == lookup_color("ghost white")


def test_text_rgb_none_and_unknown():
    assert text_rgb("None") == -1
    assert text_rgb("nosuchcolour") == 0


def test_strip_comments_block():
    text = "/* head */x"
    out = strip_comments(text)
    assert len(out) == len(text)
    assert out.strip() == "x"


def test_strip_comments_line_comment_takes_newline():
    out = strip_comments("// note\n\"a\"")
    assert "note" not in out
    assert "\n" not in out
    assert out.endswith('"a"')


def test_strip_comments_keeps_quoted():
    text = '"/* keep */"'
    assert strip_comments(text) == text


def test_quoted_lines():
    assert list(quoted_lines('x "one", y "two" z')) == ["one", "two"]
    assert list(quoted_lines('"a" "unterminated')) == ["a"]


def test_xpm_to_image_pixels():
    image = xpm_to_image(SMALL)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == TRANSPARENT
    assert image.get_pixel(0, 1) == TRANSPARENT
    assert image.get_pixel(1, 1) == 0xFF0000


def test_big_endian_visual_stores_bytes_high_first():
    visual = replace(DEFAULT_VISUAL, byte_order=MSB_FIRST)
    image = parse_xpm(["1 1 1 1", "a c #FF0000", "a"], visual)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert bytes(image.data[0:4]) == (0xFF0000).to_bytes(4, "big")


def test_two_chars_per_pixel():
    image = xpm_to_image(["2 1 2 2", "aa c #0000FF", "bb c #00FF00", "bbaa"])
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == 0x0000FF


def test_duplicates_last_wins_for_short_keys():
    image = xpm_to_image(["1 1 2 1", "a c #0000FF", "a c #00FF00", "a"])
    assert image.get_pixel(0, 0) == 0x00FF00


def test_duplicates_first_wins_for_long_keys():
    image = xpm_to_image(["1 1 2 3", "abc c #0000FF", "abc c #00FF00", "abc"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_undefined_char_is_zero():
    image = xpm_to_image(["2 1 1 1", "a c #FFFFFF", "az"])
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "data",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c #FFFFFF", "aa", "aa"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1", "a c #FFFFFF"],
        ["2 1 1 1", "a c #FFFFFF", "a"],
    ],
)
def test_malformed_data_raises(data):
    with pytest.raises(XpmError):
        xpm_to_image(data)


def test_xpm_file_to_image(tmp_path):
    source = (
        "/* XPM */\n"
        "static char *pic[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c white", // a comment with "quotes"\n'
        '"b c #0000FF",\n'
        '"ab"\n'
        "};\n"
    )
    path = tmp_path / "pic.xpm"
    path.write_text(source)
    image = xpm_file_to_image(path)
    assert image.get_pixel(0, 0) == lookup_color("white")
    assert image.get_pixel(1, 0) == 0x0000FF


def test_xpm_file_missing(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "missing.xpm")