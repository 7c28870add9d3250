# fildefer

A wireframe viewer for heightmap files. A map is a grid of integer heights.
fildefer joins every point to its right and lower neighbours, projects the
grid with a rotatable camera, and colours each pixel by its height: blue at
the lowest point, shading through purple and red to yellow at the highest.

## Installing

```
pip install .
```

## Map files

Each line of a map is one row of heights separated by spaces. Every row
must have the same number of values as the first. A value may carry a
suffix after a comma (such as `10,0xFF0000`); only the leading integer is
read and the suffix is ignored. A value that does not start with a number
counts as 0. The first line without any value ends the map.

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

A file that cannot be opened, that holds no rows, or whose rows differ in
length is rejected with a `fildefer.parsing.MapError`.

## Running

```
fildefer path/to/map.fdf
```

This opens a 1000×700 window with the wireframe and a short help overlay.
It exits with status 1, and a message on standard error, when it is not
given exactly one argument, when the map cannot be read, or when the
display cannot be opened.

Controls:

| Key                   | Action                                   |
|-----------------------|------------------------------------------|
| Left / Right arrows   | Rotate the view about the vertical axis  |
| Up / Down arrows      | Tilt the view (kept within a fixed range)|
| `+` / `=` / keypad `+`| Zoom in                                  |
| `-` / keypad `-`      | Zoom out (never below scale 1)           |
| `z`                   | Raise the relief                         |
| `x`                   | Flatten the relief                       |
| `r`                   | Reset the view                           |
| `Esc`                 | Quit (closing the window also quits)     |

## Using it as a library

```python
from fildefer.parsing import parse_map_text
from fildefer.colors import build_color_lut
from fildefer.render import Camera, Frame, render

heightmap = parse_map_text("0 0 0\n0 9 0\n0 0 0\n")
camera = Camera.for_map(heightmap)
frame = Frame()
render(frame, heightmap, camera, build_color_lut())
print(frame.get_pixel(500, 350))
```

The modules:

- `fildefer.parsing` — `parse_map(path)` and `parse_map_text(text)` return
  a `HeightMap` (with `width`, `height`, `values`, `z_min`, `z_max` and
  `at(x, y)`); `atoi` and `numlen` are the integer helpers they use.
- `fildefer.colors` — `build_color_lut()` builds the 256-colour gradient and
  `get_color(z, z_min, z_max, lut)` picks a colour for a height.
- `fildefer.line` — `line_pixels(a, b)` yields `(x, y, z)` for every pixel of
  the line between two `Point`s, interpolating the height along the way;
  `LineSetup.from_points` holds the prepared line.
- `fildefer.render` — `Camera`, `Frame` (a packed-RGB pixel buffer with
  `clear`, `put_pixel` and `get_pixel`), `project` and `render`.
- `fildefer.controls` — the `Action` enum and `apply_action(camera, action,
  heightmap)`, which updates a camera and returns False for `Action.QUIT`.
- `fildefer.app` — the viewer itself: `main`, `hud_lines` and
  `action_for_key`.
- `fildefer.printf` — `sprintf(fmt, *args)` and `printf(fmt, *args,
  file=None)`, a small formatter for the `c s p d i u x X` conversions and
  `%%`, with width, precision, `-` and `0` flags. It raises `TypeError` when
  the arguments run out and `ValueError` for a directive without a
  conversion. `fildefer.formatting` holds the per-directive parsing and
  rendering it is built on.

## What it does not do

- Colours given after a comma in a map file are not used; lines are always
  coloured by height.
- The view can be rotated, tilted, zoomed and stretched in height, but not
  panned; the map stays centred in the window.
- There is no mouse control, and no way to save the rendered picture.