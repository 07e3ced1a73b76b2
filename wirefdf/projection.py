"""Geometric transforms applied to one wireframe edge before it is drawn."""

from __future__ import annotations

import struct
from dataclasses import dataclass, replace
from math import cos, sin

from wirefdf.view import View


def _f32(value: float) -> float:
    """Round ``value`` to single precision, as the drawing coordinates are."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Segment:
    """An edge between two map points: screen-space x/y and integer heights."""

    x0: float
    y0: float
    z0: int
    x1: float
    y1: float
    z1: int


def apply_zoom(segment: Segment, zoom: int) -> Segment:
    """Scale both end points' x and y by ``zoom``; heights are unchanged."""
    return replace(
        segment,
        x0=_f32(segment.x0 * zoom),
        y0=_f32(segment.y0 * zoom),
        x1=_f32(segment.x1 * zoom),
        y1=_f32(segment.y1 * zoom),
    )


def apply_position(segment: Segment, view: View) -> Segment:
    """Shift the segment by the view's pan offsets and margin."""
    shift_x = view.xaxis + view.start
    shift_y = view.yaxis + view.start
    return replace(
        segment,
        x0=_f32(segment.x0 + shift_x),
        y0=_f32(segment.y0 + shift_y),
        x1=_f32(segment.x1 + shift_x),
        y1=_f32(segment.y1 + shift_y),
    )


def _rotate_alpha(segment: Segment, view: View) -> Segment:
    c, s = cos(view.alpha), sin(view.alpha)

    def turn(y: float, z: int) -> tuple[float, int]:
        depth = int(z * view.z)
        return _f32(y * c - depth * s), int(y * s + depth * c)

    y0, z0 = turn(segment.y0, segment.z0)
    y1, z1 = turn(segment.y1, segment.z1)
    return replace(segment, y0=y0, z0=z0, y1=y1, z1=z1)


def _rotate_beta(segment: Segment, view: View) -> Segment:
    c, s = cos(view.beta), sin(view.beta)

    def turn(x: float, z: int) -> tuple[float, int]:
        depth = int(z * view.z)
        return _f32(x * c + depth * s), int(-x * s + depth * c)

    x0, z0 = turn(segment.x0, segment.z0)
    x1, z1 = turn(segment.x1, segment.z1)
    return replace(segment, x0=x0, z0=z0, x1=x1, z1=z1)


def _rotate_gamma(segment: Segment, view: View) -> Segment:
    c, s = cos(view.gamma), sin(view.gamma)

    def turn(x: float, y: float) -> tuple[float, float]:
        return _f32(x * c - y * s), _f32(x * s + y * c)

    x0, y0 = turn(segment.x0, segment.y0)
    x1, y1 = turn(segment.x1, segment.y1)
    return replace(segment, x0=x0, y0=y0, x1=x1, y1=y1)


def rotate(segment: Segment, view: View) -> Segment:
    """Rotate about the x axis (alpha), then y (beta), then z (gamma).

    Heights are scaled by ``view.z`` in both the x and y rotations and are
    truncated to integers after each step.
    """
    return _rotate_gamma(_rotate_beta(_rotate_alpha(segment, view), view), view)


def project_isometric(segment: Segment, view: View) -> Segment:
    """Project onto the screen plane using ``view.angle`` and height scale."""
    c, s = cos(view.angle), sin(view.angle)

    def project(x: float, y: float, z: int) -> tuple[float, float]:
        return _f32((x - y) * c), _f32((x + y) * s - z * view.z)

    x0, y0 = project(segment.x0, segment.y0, segment.z0)
    x1, y1 = project(segment.x1, segment.y1, segment.z1)
    return replace(segment, x0=x0, y0=y0, x1=x1, y1=y1)


def step_deltas(segment: Segment) -> tuple[float, float, int]:
    """Return the per-pixel step ``(dx, dy)`` and the number of steps.

    The step count is the larger whole-pixel extent of the segment. A
    segment shorter than one pixel on both axes has no steps.
    """
    dx = _f32(segment.x1 - segment.x0)
    dy = _f32(segment.y1 - segment.y0)
    steps = max(int(abs(dx)), int(abs(dy)))
    if steps == 0:
        return 0.0, 0.0, 0
    return _f32(dx / steps), _f32(dy / steps), steps