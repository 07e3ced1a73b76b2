"""View state of the wireframe viewer and its keyboard and mouse controls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

WIDTH = 1920
HEIGHT = 1080
MENU_WIDTH = 150

SCROLL_UP = 4
SCROLL_DOWN = 5

_PAN_STEP = 30
_ANGLE_STEP = 0.1
_MIN_ZOOM = 2


class Key(IntEnum):
    """X11 key symbols the viewer reacts to."""

    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    SPACE = 32
    A = 97
    D = 100
    W = 119
    S = 115
    E = 101
    Q = 113
    Z = 122
    X = 120
    M = 109
    N = 110
    ENTER = 65293
    PLUS = 65451
    MINUS = 65453


_PAN = {
    Key.UP: (0, _PAN_STEP),
    Key.DOWN: (0, -_PAN_STEP),
    Key.LEFT: (_PAN_STEP, 0),
    Key.RIGHT: (-_PAN_STEP, 0),
}

_TURN = {
    Key.W: ("alpha", _ANGLE_STEP),
    Key.S: ("alpha", -_ANGLE_STEP),
    Key.E: ("gamma", _ANGLE_STEP),
    Key.Q: ("gamma", -_ANGLE_STEP),
    Key.A: ("beta", -_ANGLE_STEP),
    Key.D: ("beta", _ANGLE_STEP),
    Key.Z: ("angle", _ANGLE_STEP),
    Key.X: ("angle", -_ANGLE_STEP),
    Key.M: ("z", _ANGLE_STEP),
    Key.N: ("z", -_ANGLE_STEP),
}


@dataclass
class View:
    """Camera settings for drawing a map of ``width`` by ``height`` points."""

    width: int
    height: int
    zoom: int = _MIN_ZOOM
    xaxis: int = 0
    yaxis: int = 0
    z: float = 1.0
    angle: float = 0.8
    projection: int = 0
    start: int = 10
    gamma: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0

    @classmethod
    def for_map(cls, width: int, height: int) -> View:
        """Return the initial view for a map of the given size."""
        view = cls(width, height)
        view.reset()
        return view

    def reset(self) -> None:
        """Restore zoom, position and angles to their starting values."""
        big = max(self.height, self.width)
        self.zoom = max(15 - (big // 10) * 2, _MIN_ZOOM)
        self.xaxis = (WIDTH - MENU_WIDTH) // 2
        self.yaxis = HEIGHT // 2 - (self.height * self.zoom) // 2
        self.z = 1.0
        self.angle = 0.8
        self.projection = 0
        self.start = 10
        self.gamma = 0.0
        self.alpha = 0.0
        self.beta = 0.0

    def on_key(self, keycode: int) -> bool:
        """Apply a key press; return False when the viewer should close."""
        if keycode == Key.ESC:
            return False
        if keycode in _PAN:
            dx, dy = _PAN[keycode]
            self.xaxis += dx
            self.yaxis += dy
        elif keycode == Key.PLUS:
            self.zoom += 1
        elif keycode == Key.MINUS:
            if self.zoom > _MIN_ZOOM:
                self.zoom -= 1
        elif keycode == Key.SPACE:
            self.projection += 1
        elif keycode == Key.ENTER:
            self.reset()
        elif keycode in _TURN:
            name, delta = _TURN[keycode]
            setattr(self, name, getattr(self, name) + delta)
        return True

    def on_mouse(self, button: int) -> None:
        """Apply a mouse button press: the wheel zooms in and out."""
        if button == SCROLL_DOWN and self.zoom > _MIN_ZOOM:
            self.zoom -= 1
        elif button == SCROLL_UP:
            self.zoom += 1