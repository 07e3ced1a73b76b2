"""Reading height maps from ``.fdf`` files."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_SPACES = " \t\n\v\f\r"
_DIGITS = re.compile(r"[0-9]*")


class MapError(ValueError):
    """Raised when a map file does not describe a rectangular grid."""


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of integer heights, indexed by column and row."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if len(self.rows) != self.height:
            raise MapError(f"expected {self.height} rows, got {len(self.rows)}")
        for number, row in enumerate(self.rows, 1):
            if len(row) != self.width:
                raise MapError(
                    f"row {number} has {len(row)} values, expected {self.width}"
                )

    def at(self, x: int, y: int) -> int:
        """Return the height at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"point ({x}, {y}) is outside a {self.width}x{self.height} map"
            )
        return self.rows[y][x]


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way ``atoi`` does.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    return sign * int(digits) if digits else 0


def split_fields(line: str) -> list[str]:
    """Split a map line on spaces, dropping empty pieces.

    Only the space character separates fields; a trailing newline stays
    attached to the last field.
    """
    return [field for field in line.split(" ") if field]


def _lines(data: bytes) -> Iterator[str]:
    """Yield the lines of ``data``, each keeping its terminating newline."""
    start = 0
    while start < len(data):
        end = data.find(b"\n", start)
        end = len(data) if end < 0 else end + 1
        yield data[start:end].decode("latin-1")
        start = end


def read_map(path: str | PathLike[str]) -> HeightMap:
    """Read a height map file.

    The first line fixes the width; every line must have that many fields.
    Raises ``OSError`` if the file cannot be read and ``MapError`` if the
    map is empty or not rectangular.
    """
    lines = list(_lines(Path(path).read_bytes()))
    if not lines:
        raise MapError(f"{path}: map is empty")
    width = len(split_fields(lines[0]))
    rows = []
    for number, line in enumerate(lines, 1):
        fields = split_fields(line)
        if len(fields) != width:
            raise MapError(
                f"{path}: line {number} has {len(fields)} values, expected {width}"
            )
        rows.append(tuple(parse_int(field) for field in fields))
    return HeightMap(width, len(rows), tuple(rows))