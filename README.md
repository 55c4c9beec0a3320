# wireframe

Render a height map as a wireframe grid and save it as an image.

A map file is plain text: each line is a row of the grid, and each
space-separated field on it is the height (`z`) of one point. A field's
value is its leading integer (after an optional sign); a field with none
counts as 0.

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

The points are spread over an 800×600 canvas (`cx = x * 800 // width`,
`cy = y * 600 // height`, where `width` is the length of the last row
read), heights are multiplied by 5, and each point is joined to its right
and lower neighbours with white Bresenham lines.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
wireframe path/to/map.fdf
```

Options:

- `map` – the map file; defaults to `./4 dots.fdf`.
- `--title` – the canvas title (default `Fdf`).
- `--output` – the image file to write (default `fdf.png`); the image
  format follows the file extension.
- `--frames N` – after drawing the grid, run `N` animation steps, each of
  which adds a shift of 10 along x to the view's translation, recomputes the
  translate/rotate/scale matrix, clears the canvas and redraws the
  transformed grid.

On an error the message is written to standard error and the command
returns a non-zero status: the system error number when the map cannot be
opened, 1 when it is empty or has no points.

## Library use

```python
from wireframe.heightmap import HeightMap
from wireframe.matrix import Mat4
from wireframe.bresenham import line_pixels

grid = HeightMap.from_file("map.fdf")
print(grid.format())

m = Mat4.translation(10, 0, 0) @ Mat4.rotation_z(90)
print(m.transform(1, 0, 0, 1))

print(list(line_pixels(0, 0, 4, 2)))
```

- `wireframe.heightmap` – `HeightMap.from_file` / `HeightMap.from_lines`
  build a grid of `Point`s; `format` and `print` write the heights back out;
  `read_lines` raises `MapError` for a file that cannot be read or is empty.
- `wireframe.matrix` – `Mat4`, an immutable 4x4 matrix with constructors
  for identity, zeros, translation, scaling, rotations about x, y and z (in
  degrees) and the screen-centring translations; `@` multiplies and
  `transform` applies it to `(x, y, z, w)`.
- `wireframe.vector` – `TransformVector`, the accumulated translation,
  rotation and scale, updated with `configure(xyz, Mode.…)`.
- `wireframe.trs` – `Trs.compute` combines the vector into one matrix and
  `Trs.apply` transforms a point's screen coordinates about the canvas
  centre, rounding to integers.
- `wireframe.bresenham` – `line_pixels` yields the pixels of a segment,
  start included and end excluded; `plot_bresenham` draws one on a canvas.
- `wireframe.display` – `Canvas`, an off-screen surface (`put_pixel`,
  `pixel`, `clear`, `to_image`, `save`); `create_trgb` packs a colour; `Key`
  lists X11 key codes.
- `wireframe.app` – `Fdf` ties these together: `from_file`, `project`,
  `draw_grid`, `animate` and `handle_key` (true only for `Key.ESC`).

## What it does not do

There is no on-screen window and no event loop: drawing happens on an
in-memory canvas that is saved as an image file. `Fdf.handle_key` only
reports whether a key code would close the viewer; nothing reads keys from
a keyboard. The isometric matrix slot (`Mat4.isometric`) is the zero matrix
and is not used in drawing.