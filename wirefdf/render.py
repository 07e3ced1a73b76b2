"""Rasterising a height map into a pixel canvas, plus the side menu layout."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from typing import NamedTuple

from wirefdf.color import paint
from wirefdf.mapfile import HeightMap
from wirefdf.projection import (
    Segment,
    apply_position,
    apply_zoom,
    project_isometric,
    rotate,
    step_deltas,
)
from wirefdf.view import HEIGHT, MENU_WIDTH, WIDTH, View

MENU_X = WIDTH - MENU_WIDTH
TEXT_X = MENU_X + 10

_MENU_TEXTS = (
    "Close: Esc",
    "2D/3D: Space",
    "Move: > < ^ v",
    "Zoom: scroll +/-",
    "Spin Z: Z/X",
    "Rotate Z: Q/E",
    "Rotate X: W/S",
    "Rotate Y: A/D",
    "3D Depth: M/N",
    "Reset: Enter",
)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Canvas:
    """The drawing image: ``width`` by ``height`` pixels stored row by row.

    Writes are accepted up to and including ``x == width`` and
    ``y == height``; such writes spill into the next row or past the
    visible area, as they do in a packed pixel buffer.
    """

    def __init__(self, width: int = WIDTH - MENU_WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self._pixels: dict[int, int] = {}

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Write ``color`` at ``(x, y)``; negative or far-off points are ignored."""
        if x < 0 or y < 0 or x > self.width or y > self.height:
            return
        self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get(self, x: int, y: int) -> int:
        """Return the colour at a visible point; unset pixels are black."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"point ({x}, {y}) is outside a {self.width}x{self.height} canvas"
            )
        return self._pixels.get(y * self.width + x, 0)

    def clear(self) -> None:
        """Reset every pixel to black."""
        self._pixels.clear()

    def pixels(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(x, y, color)`` for every written visible pixel, row by row."""
        visible = self.width * self.height
        for offset in sorted(self._pixels):
            if offset < visible:
                y, x = divmod(offset, self.width)
                yield x, y, self._pixels[offset]


class MenuEntry(NamedTuple):
    """One line of help text in the side menu."""

    x: int
    y: int
    color: int
    text: str


def edge_color(z: int) -> int:
    """Colour of an edge by the height of its first point."""
    if z == 0:
        return 0x00FF00
    if z > 0:
        return 0xFF0000
    return 0x0000FF


def draw_segment(canvas: Canvas, segment: Segment, view: View) -> None:
    """Transform ``segment`` with ``view`` and draw it with a DDA line.

    Even projection numbers are 3D (rotated and isometric), odd ones flat.
    The end point itself is not drawn.
    """
    color = edge_color(segment.z0)
    segment = apply_zoom(segment, view.zoom)
    if view.projection % 2 == 0:
        segment = project_isometric(rotate(segment, view), view)
    segment = apply_position(segment, view)
    dx, dy, steps = step_deltas(segment)
    if steps == 0:
        return
    x, y = segment.x0, segment.y0
    # One spare step lets rounding settle; the walk never runs past it.
    for _ in range(steps + 1):
        if not (int(_f32(x - segment.x1)) or int(_f32(y - segment.y1))):
            break
        canvas.put_pixel(int(x), int(y), color)
        x = _f32(x + dx)
        y = _f32(y + dy)


def draw_map(canvas: Canvas, heightmap: HeightMap, view: View) -> None:
    """Draw every edge of the grid: each point to its right and lower neighbour."""
    for y in range(heightmap.height):
        for x in range(heightmap.width):
            here = heightmap.at(x, y)
            if x < heightmap.width - 1:
                right = Segment(x, y, here, x + 1, y, heightmap.at(x + 1, y))
                draw_segment(canvas, right, view)
            if y < heightmap.height - 1:
                below = Segment(x, y, here, x, y + 1, heightmap.at(x, y + 1))
                draw_segment(canvas, below, view)


def menu_entries() -> list[MenuEntry]:
    """The help lines shown in the side menu, top to bottom."""
    return [
        MenuEntry(TEXT_X, 25 * (index + 1), paint(index - 4, -4, 5), text)
        for index, text in enumerate(_MENU_TEXTS)
    ]


def sidebar_colors() -> list[int]:
    """Colours of the vertical separator line at ``MENU_X``, indexed by row."""
    half = HEIGHT // 2
    return [paint(row - half + 1, -half, half) for row in range(HEIGHT)]