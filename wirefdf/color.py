"""Height-to-colour gradient."""

from __future__ import annotations

import struct


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def paint(z: int, zmin: int, zmax: int) -> int:
    """Return an 0xRRGGBB colour for height ``z`` within ``[zmin, zmax]``.

    Zero is green, positive heights fade towards red, negative heights fade
    towards blue, and heights outside the range are black. The ratio is
    computed in single precision.
    """
    if z == 0:
        return 0x00FF00
    if 0 < z <= zmax:
        red = int(_f32(255 * _f32(z / zmax)))
        return (red << 16) | ((255 - red) << 8)
    if zmin <= z < 0:
        blue = int(_f32(255 * _f32(z / zmin)))
        return ((255 - blue) << 8) | blue
    return 0x000000