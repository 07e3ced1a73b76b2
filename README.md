# wirefdf

`wirefdf` draws a height map as a wireframe in a pygame window. It starts in
an isometric 3D view and can switch to a flat top-down view. The model can be
moved, zoomed and rotated from the keyboard and the mouse wheel.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Usage

```
wirefdf map.fdf
```

The same entry point is `wirefdf.app.main`, which takes an optional list of
arguments and returns the exit status.

Exactly one file name must be given. The check on the name is loose: only its
last two characters are compared, so it has to end in `df` (`map.fdf` passes,
and so does `map.xdf`).

Each line of the file is one row of the map: integer heights separated by
spaces. Every row must have as many values as the first one. Values are read
like C `atoi`: leading whitespace and one sign are accepted and reading stops
at the first non-digit, so `10,0xFF` counts as `10`.

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

On failure a message is printed to standard error and the exit status is 1:

| Message                       | Cause                                    |
|-------------------------------|------------------------------------------|
| `Usage: wirefdf <filename>.`  | not exactly one argument                 |
| `Error! Not '.fdf'.`          | the name does not end in `df`            |
| `Error! Invalid File.`        | the file cannot be read                  |
| `Error! Invalid Map.`         | the file is empty or not rectangular     |

Each edge is coloured by the height of its starting point: green at zero, red
above zero, blue below zero. A help menu with a coloured separator line is
drawn on the right-hand side of the 1920×1080 window.

### Controls

| Input                  | Action                                    |
|------------------------|-------------------------------------------|
| Esc, closing the window| quit                                      |
| Space                  | switch between the 3D and the flat view   |
| Arrow keys             | move the model by 30 pixels               |
| Keypad `+` / `-`       | zoom in / out (zoom never goes below 2)   |
| Mouse wheel            | zoom in / out                             |
| Z / X                  | change the isometric angle                |
| Q / E                  | rotate around Z                           |
| W / S                  | rotate around X                           |
| A / D                  | rotate around Y                           |
| M / N                  | increase / decrease the height scale      |
| Enter                  | reset the view                            |

## Library use

The modules can be used without opening a window:

- `wirefdf.mapfile` — `read_map(path)` returns a `HeightMap` (`width`,
  `height`, `rows`, `at(x, y)`) and raises `MapError` for bad maps;
  `parse_int` and `split_fields` are the field helpers it uses.
- `wirefdf.view` — `View.for_map(width, height)` gives the starting camera;
  `on_key(keycode)` and `on_mouse(button)` apply the controls above
  (`on_key` returns `False` for Esc). `Key` lists the key symbols.
- `wirefdf.projection` — `Segment` and the transforms `apply_zoom`, `rotate`,
  `project_isometric`, `apply_position` and `step_deltas`.
- `wirefdf.render` — `Canvas` (`put_pixel`, `get`, `clear`, `pixels`),
  `draw_map(canvas, heightmap, view)`, `draw_segment`, `edge_color`,
  `menu_entries()` and `sidebar_colors()`.
- `wirefdf.color` — `paint(z, zmin, zmax)`, the green/red/blue gradient.
- `wirefdf.colornames` — `lookup_color(name)` for X11 colour names
  (case-insensitive, `"none"` gives -1) and `color_names()`.
- `wirefdf.image` — `Visual`, `Image` and `new_image(width, height, visual)`,
  an off-screen pixel buffer, plus `get_color_value` for converting
  0xRRGGBB to a visual's pixel format.
- `wirefdf.xpm` — `xpm_file_to_image(path)`, `xpm_to_image(lines)` and
  `parse_xpm` load XPM pixmaps into an `Image`; `XpmError` is raised for
  malformed data.
- `wirefdf.wordtab` — word splitting and quote-aware substring search used by
  the XPM reader.
- `wirefdf.events` — `EventType`, `EventMask`, `Event` and `HookTable`, which
  registers one callback per event type and dispatches events to it with the
  arguments that type carries.

```python
from wirefdf.mapfile import read_map
from wirefdf.render import Canvas, draw_map
from wirefdf.view import View

heightmap = read_map("map.fdf")
canvas = Canvas()
draw_map(canvas, heightmap, View.for_map(heightmap.width, heightmap.height))
lit = list(canvas.pixels())
```

## What it does not do

The only window the package opens is the viewer started by `wirefdf`.
There is no general window or display object: images built with
`wirefdf.image` or `wirefdf.xpm` stay in memory and cannot be shown on
screen, and `HookTable` is not connected to any event loop — events have to
be passed to `dispatch` by the caller.

## Tests

```
pytest
```