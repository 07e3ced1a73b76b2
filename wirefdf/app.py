"""Command-line entry point: read a map file and show it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from wirefdf.mapfile import HeightMap, MapError, read_map
from wirefdf.render import MENU_X, Canvas, draw_map, menu_entries, sidebar_colors
from wirefdf.view import HEIGHT, WIDTH, Key, View

TITLE = "| FDF |"

USAGE = "Usage: wirefdf <filename>."
NOT_FDF = "Error! Not '.fdf'."
INVALID_FILE = "Error! Invalid File."
INVALID_MAP = "Error! Invalid Map."

_FONT_SIZE = 20


def has_fdf_extension(path: str) -> bool:
    """Tell whether ``path`` looks like a ``.fdf`` file.

    Only the final ``"df"`` is compared, so names such as ``map.xdf`` are
    accepted as well.
    """
    return path.endswith("df")


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def run_window(heightmap: HeightMap) -> int:
    """Show ``heightmap`` in a window until it is closed; return the exit status."""
    import pygame

    keysyms = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_UP: Key.UP,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_RETURN: Key.ENTER,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_KP_MINUS: Key.MINUS,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, _FONT_SIZE)
        view = View.for_map(heightmap.width, heightmap.height)
        canvas = Canvas()
        separator = [_rgb(color) for color in sidebar_colors()]
        entries = [
            (font.render(entry.text, True, _rgb(entry.color)), entry.x, entry.y)
            for entry in menu_entries()
        ]

        def redraw() -> None:
            canvas.clear()
            draw_map(canvas, heightmap, view)
            screen.fill((0, 0, 0))
            for x, y, color in canvas.pixels():
                screen.set_at((x, y), _rgb(color))
            for row, rgb in enumerate(separator):
                screen.set_at((MENU_X, row), rgb)
            for label, x, baseline in entries:
                screen.blit(label, (x, baseline - font.get_ascent()))
            pygame.display.flip()

        redraw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                if not view.on_key(keysyms.get(event.key, event.key)):
                    return 0
            elif event.type == pygame.MOUSEBUTTONDOWN:
                view.on_mouse(event.button)
            elif event.type != pygame.WINDOWENTER:
                continue
            redraw()
    finally:
        pygame.quit()


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the single map file named in ``argv``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _fail(USAGE)
    path = args[0]
    if not has_fdf_extension(path):
        return _fail(NOT_FDF)
    try:
        heightmap = read_map(path)
    except OSError:
        return _fail(INVALID_FILE)
    except MapError:
        return _fail(INVALID_MAP)
    return run_window(heightmap)


if __name__ == "__main__":
    sys.exit(main())