# torusview

A small desktop viewer for a shaded 3D torus. The surface is built from a
30 × 30 grid of quadrilateral faces. Back faces are culled and the faces are
lit by a single point light. Faces further away are drawn darker, which gives
a fog effect. Red X, Y and Z axes are drawn with the torus and sorted by depth
along with the faces.

## Installation

```
pip install .
```

The viewer uses Tkinter from the standard library and needs no other
dependencies. To run the tests, install the `test` extra (`pip install .[test]`)
and run `pytest`.

## Running

```
torusview
```

`python -m torusview.app` starts the same program.

A small window opens and asks for a graphic number. The field starts with
`1`. Enter `3` and press **Build a graph** or Enter to open the torus window.
Only the leading integer of the text is read. Any other number, or text
without a number, shows an error message. If you build the graph again, the
old torus window is closed and a new one opens.

The torus window opens with the major radius `a = 2.0` and the minor radius
`b = 0.5`.

### Controls in the torus window

| Action                      | Effect                                                        |
|-----------------------------|---------------------------------------------------------------|
| Left-drag                   | Rotate the torus (0.01 radian per pixel moved)                |
| Mouse wheel                 | Zoom in (× 1.1) or out (× 0.9). The scale stays between 10 and 200. |
| `+` (keypad or keyboard)    | Increase `a` by 0.3 while it is below 4.9                     |
| `-` (keypad or keyboard)    | Decrease `a` by 0.3 while it is above 2.0                     |
| `Shift` + `+`               | Increase `b` by 0.1 while it is below 2.0                     |
| `Shift` + `-`               | Decrease `b` by 0.1 while it is above 0.5                     |

The window title always shows the current radii, for example
`Torus: a = 2.0, b = 0.5`.

## Using the renderer directly

The code in `torusview.renderer` and `torusview.geometry` does not depend on
any GUI toolkit. `TorusRenderer.render()` returns drawing commands ordered
from farthest to nearest:

- `PolygonCommand`: the projected `points` of one face, its `fill` colour,
  its `depth`, and the `outline` colour and `outline_width`.
- `AxisCommand`: the `start` and `end` of one axis in screen coordinates,
  its `label`, `depth`, `color` and `width`.

```python
from torusview.renderer import TorusRenderer

renderer = TorusRenderer(800, 800)
renderer.change_parameters(3.0, 1.0)
renderer.rotate(40, 25)
for command in renderer.render():
    print(command)
```

`TorusRenderer` also has `scale` (50 by default), `project()`,
`rotate_point()`, and the drag methods `start_drag()`, `update_drag()` and
`end_drag()`. `torusview.app` has the pure helpers `parse_graphic_number`,
`format_title`, `zoom_scale` and `step_parameters` that the windows use.

`torusview.geometry` holds the vector helpers: `Point3D`,
`calculate_normal`, `normalize` and `is_face_visible`.

## Limitations

The number prompt knows only graphic `3`, the torus. There are no other
graphics. The projection is orthographic, and the view cannot be saved or
exported.