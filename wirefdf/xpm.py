"""Loading XPM pixmaps into off-screen images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike
from pathlib import Path

from wirefdf.colornames import NONE_COLOR, lookup_color
from wirefdf.image import Image, Visual, new_image
from wirefdf.mapfile import parse_int
from wirefdf.wordtab import str_str_quoted, str_to_wordtab

# Pixel value stored for the transparent colour "None".
TRANSPARENT = 0xFF000000

_NAME_BUFFER = 63
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def get_col_name(chars: str) -> int:
    """Pack the character codes of ``chars`` into one key, first one highest."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def text_rgb(name: str, end: str | None = None) -> int:
    """Return the 0xRRGGBB value of an XPM colour specification.

    ``#`` introduces a hexadecimal value; otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up in the colour table.
    Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        digits = match.group(2)
        if not digits:
            return 0
        value = int(digits, 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _blank(text: str, begin: int, stop: int) -> str:
    return text[:begin] + " " * (stop - begin) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces.

    The result has the same length as ``text``. Block comments are removed
    first, then line comments together with their newline.
    """
    while (begin := str_str_quoted(text, "/*", len(text))) != -1:
        close = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if close < 0 else close + 2)
    while (begin := str_str_quoted(text, "//", len(text))) != -1:
        newline = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if newline < 0 else newline + 1)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text`` in order."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(lines: Iterator[str]) -> tuple[int, int, int, int]:
    words = str_to_wordtab(_next_line(lines, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (parse_int(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words[:4])}")
    return width, height, ncolors, cpp


def _read_palette(lines: Iterator[str], ncolors: int, cpp: int) -> dict[int, int]:
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    later_wins = cpp <= 2
    palette: dict[int, int] = {}
    for number in range(1, ncolors + 1):
        line = _next_line(lines, f"colour definition {number}")
        words = str_to_wordtab(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition {number} has no 'c' key") from None
        if at >= len(words):
            raise XpmError(f"colour definition {number} has no colour after 'c'")
        end = words[at + 1] if at + 1 < len(words) else None
        value = text_rgb(words[at], end)
        key = get_col_name(line[:cpp])
        if later_wins:
            palette[key] = value
        else:
            palette.setdefault(key, value)
    return palette


def parse_xpm(lines: Iterable[str], visual: Visual | None = None) -> Image:
    """Build an image from XPM lines: header, colour table, then pixel rows.

    Colours are stored unconverted; the transparent colour is stored as
    ``TRANSPARENT`` and characters without a definition give 0.
    """
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(rows)
    palette = _read_palette(rows, ncolors, cpp)
    image = new_image(width, height, visual)
    for y in range(height):
        line = _next_line(rows, f"pixel row {y + 1}")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y + 1} is shorter than {width} pixels")
        for x in range(width):
            color = palette.get(get_col_name(line[x * cpp:(x + 1) * cpp]), 0)
            if color == NONE_COLOR:
                color = TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def xpm_file_to_image(
    path: str | PathLike[str], visual: Visual | None = None
) -> Image:
    """Load an XPM file written as C source.

    Raises ``OSError`` if the file cannot be read and ``XpmError`` if its
    contents are malformed.
    """
    text = strip_comments(Path(path).read_bytes().decode("latin-1"))
    return parse_xpm(quoted_lines(text), visual)


def xpm_to_image(xpm_data: Sequence[str], visual: Visual | None = None) -> Image:
    """Build an image from XPM data held as a list of strings."""
    return parse_xpm(xpm_data, visual)