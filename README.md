# gridsphere

A small 3D wireframe viewer. It draws a ground grid and two wireframe spheres
through a perspective camera. The first sphere is drawn white, and it turns
red while it touches or overlaps the second sphere. The second sphere is
always drawn grey.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Run the viewer

```
gridsphere
```

This opens a 1280x720 window. The command takes no options.

Controls:

- `W` / `S` move the camera forward and back along Z
- `A` / `D` move the camera left and right along X
- `Esc` or closing the window quits

## Library use

### `gridsphere.linalg`

- `Vector3` is an immutable vector. It supports `+`, `-`, `*` and `/` by a
  scalar, unary `-`, and the methods `dot`, `cross`, `length` and
  `normalized`. Normalising the zero vector gives the zero vector.
- `Matrix4x4` is an immutable 4x4 matrix that uses row vectors. It is built
  from four rows of four values, otherwise it raises `ValueError`. It
  supports `+`, `-`, `@`, `inverse()`, `transpose()` and indexing by row.
  `inverse()` raises `ValueError` for a singular matrix.
- The builders are `make_identity`, `make_translate_matrix`,
  `make_scale_matrix`, `make_rotate_x_matrix`, `make_rotate_y_matrix`,
  `make_rotate_z_matrix`, `make_affine_matrix` (scale, then rotation, then
  translation), `make_perspective_fov_matrix`, `make_orthographic_matrix` and
  `make_viewport_matrix`.
- `transform(vector, matrix)` applies a matrix to a point and then divides by
  w. It raises `ValueError` when w is zero.
- `format_matrix(matrix, label)` and `format_vector(vector, label)` return
  text dumps, with values to two decimals.

```python
from gridsphere.linalg import Vector3, make_affine_matrix, transform

world = make_affine_matrix(Vector3(1, 1, 1), Vector3(0, 0, 0), Vector3(1, 2, 3))
print(transform(Vector3(0, 0, 0), world))  # Vector3(x=1.0, y=2.0, z=3.0)
```

### `gridsphere.geometry`

- The shapes are `Sphere`, `Line`, `Ray` and `Segment`.
- `project(v1, v2)` gives the orthogonal projection of `v1` onto `v2`. If
  `v2` is the zero vector, the result is the zero vector.
- `closest_point(point, segment)` gives the point nearest to `point` on the
  infinite line through the segment. The result is not clamped to the
  segment's ends.
- `is_collision(s1, s2)` returns `True` when two spheres touch or overlap.
- `sphere_lines(sphere, view_projection, viewport, color)` and
  `grid_lines(view_projection, viewport)` yield `ScreenLine` values. Each one
  holds integer screen coordinates for `start` and `end`, plus an RGBA
  `color` in `0xRRGGBBAA` form. The grid lies on the XZ plane from -2 to 2,
  and its two centre lines are drawn dark.

### `gridsphere.scene`

`Scene` holds the world transform, the camera and the two spheres.

- `update(pressed)` advances the scene by one frame. `pressed` is an iterable
  of `Key` members or the strings `"w"`, `"a"`, `"s"` and `"d"`.
- `view_projection()` and `viewport()` return the matrices for the frame.
- `lines()` yields every segment to draw: the grid first, then the first
  sphere, then the second sphere.
- `main()` runs the viewer.

## What it does not do

The viewer has no on-screen controls for changing the spheres. To move them or
resize them, you set `sphere_a` and `sphere_b` on a `Scene` in code. The
camera can only be moved with the four keys. It cannot be rotated while the
viewer runs.