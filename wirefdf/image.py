"""Off-screen images and conversion of 0xRRGGBB colours to pixel values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

LSB_FIRST = 0
MSB_FIRST = 1

_BITMAP_PAD = 32
_EXTRA_COLUMNS = 32


class ImageType(IntEnum):
    """How an image's pixels are stored."""

    XIMAGE = 1
    SHM = 2
    SHM_PIXMAP = 3


def _channel(mask: int) -> tuple[int, int]:
    """Return ``(shift, bits)`` of a contiguous colour mask."""
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    bits = 0
    rest = mask >> shift
    while rest & 1:
        rest >>= 1
        bits += 1
    return shift, bits


@dataclass(frozen=True)
class Visual:
    """A TrueColor visual: depth, colour masks and server byte order.

    ``channels`` holds ``(shift, bits)`` for red, green and blue.
    """

    depth: int
    red_mask: int
    green_mask: int
    blue_mask: int
    channels: tuple[tuple[int, int], tuple[int, int], tuple[int, int]]
    byte_order: int = LSB_FIRST

    @classmethod
    def from_masks(
        cls, red_mask: int, green_mask: int, blue_mask: int, depth: int
    ) -> Visual:
        """Build a visual, working out each channel's shift and width."""
        channels = (_channel(red_mask), _channel(green_mask), _channel(blue_mask))
        return cls(depth, red_mask, green_mask, blue_mask, channels)

    @property
    def bits_per_pixel(self) -> int:
        """Storage size of one pixel in a Z-format image."""
        if self.depth <= 8:
            return 8
        if self.depth <= 16:
            return 16
        return 32

    def good_color(self, color: int) -> int:
        """Convert 0xRRGGBB to this visual's pixel value.

        Depths of 24 and above take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        levels = (
            (color >> 8) & 0xFF00,
            color & 0xFF00,
            (color << 8) & 0xFF00,
        )
        return sum(
            (level >> (16 - bits)) << shift
            for level, (shift, bits) in zip(levels, self.channels)
        )


DEFAULT_VISUAL = Visual.from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)


@dataclass(eq=False)
class Image:
    """A block of pixel memory laid out in rows of ``size_line`` bytes."""

    width: int
    height: int
    bpp: int
    size_line: int
    endian: int
    data: bytearray = field(repr=False)
    type: ImageType = ImageType.XIMAGE
    destroyed: bool = False

    def _offset(self, x: int, y: int) -> int:
        if self.destroyed:
            raise RuntimeError("image has been destroyed")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"point ({x}, {y}) is outside a {self.width}x{self.height} image"
            )
        return y * self.size_line + x * (self.bpp // 8)

    @property
    def _order(self) -> str:
        return "big" if self.endian == MSB_FIRST else "little"

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store the pixel value ``color`` at ``(x, y)``, truncated to size."""
        offset = self._offset(x, y)
        size = self.bpp // 8
        value = color & ((1 << (8 * size)) - 1)
        self.data[offset:offset + size] = value.to_bytes(size, self._order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at ``(x, y)``."""
        offset = self._offset(x, y)
        size = self.bpp // 8
        return int.from_bytes(self.data[offset:offset + size], self._order)

    def destroy(self) -> None:
        """Release the pixel memory; the image cannot be used afterwards."""
        self.data = bytearray()
        self.destroyed = True

    def __enter__(self) -> Image:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.destroyed:
            self.destroy()


def new_image(width: int, height: int, visual: Visual | None = None) -> Image:
    """Create a black image of the given size for ``visual``."""
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    visual = visual or DEFAULT_VISUAL
    bpp = visual.bits_per_pixel
    size_line = (width * bpp + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)
    data = bytearray((width + _EXTRA_COLUMNS) * height * 4)
    return Image(width, height, bpp, size_line, visual.byte_order, data)


def get_color_value(visual: Visual, color: int) -> int:
    """Convert 0xRRGGBB to the pixel value used by ``visual``."""
    return visual.good_color(color)