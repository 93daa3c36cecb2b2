# cortexgeom

Two-dimensional geometry building blocks for computer vision: points and
polar coordinates, polylines and cubic Bezier splines, path simplification,
reduction and smoothing, spiral traversal of a square, Bresenham lines,
triangle rasterization and simple sample statistics. Paths and splines
render to SVG path data.

The package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `cortexgeom.point`: `Point`, an immutable 2D point with integer or float
  components, supporting `+`, `-`, negation, multiplication and division by
  a number, `dot`, `norm`, `distance_to`, `rotate`, `rotate_about_origin`,
  `rotate_90deg`, `get_normalized`, `to_polar`, `to_point_i32`,
  `to_point_f64` and `to_svg_string`. `Polar` holds an angle and radius and
  converts back with `to_point`. `number_format` writes a coordinate for
  SVG, optionally rounded to a number of decimals with trailing zeros
  dropped.
- `cortexgeom.statistic`: `SimpleStatBuilder` and `SampleStatBuilder`
  collect integer values and `build` a `SimpleStat` (count, mean, standard
  deviation) or a `SampleStat` (adding mode, median, median frequency and
  number of histogram bins). `SampleStatBuilder.percentile` reads a
  percentile once `build` has sorted the values; `median` and
  `median_frequency` are also available as functions.
- `cortexgeom.pathutil`: `find_intersection` of two lines, returning the
  point and an `Intersection` (`inside`, `outside`, `coincide`), or `None`
  for parallel lines; `signed_area`, `find_mid_point`, `norm`, `normalize`,
  `angle` and `signed_angle_difference`.
- `cortexgeom.simplify`: `remove_staircase` and `limit_penalties` for
  pixel-walked polygons, `evaluate_penalty`, and the `PathSimplifyMode`
  enum.
- `cortexgeom.reduce`: `simplify_radial_dist`, `simplify_douglas_peucker`,
  `simplify` and `reduce` for open point sequences.
- `cortexgeom.smooth`: `find_corners`, `find_splice_points`,
  `subdivide_keep_corners` (one pass of 4-point subdivision that keeps
  corners sharp) and `retract_handles`.
- `cortexgeom.paths`: `Path`, a mutable sequence of points with `add`,
  `pop`, indexing, `to_open`, `to_closed`, `offset`, `to_svg_string`,
  `reduce` (returns `None` if the shape collapses), `smooth`, `simplify` and
  `to_path_f64`.
- `cortexgeom.spline`: `Spline`, a chain of cubic Bezier curves stored as
  1 + 3n control points, with `starting_at`, `add`, `get_control_points`,
  `num_curves`, `offset` and `to_svg_string` (raises `ValueError` when the
  point count is not 1 + 3n).
- `cortexgeom.compound`: `CompoundPath`, a list of paths and splines forming
  one shape with holes; `to_svg_string` returns the SVG string relative to
  the first point together with the new offset. `reduce` and `smooth` raise
  `TypeError` if a spline is present.
- `cortexgeom.walker`: `spiral_walk(size)` yields the cells of a square in a
  clockwise spiral from its centre.
- `cortexgeom.arc`: `circular_arc` and `approximate_circle_with_spline`
  build Bezier approximations of quarter circles and circles.
- `cortexgeom.rasterizer`: `bresenham` yields the points of a line, and
  `walk_triangle` yields the points covered by a triangle row by row.

## Example

```python
from cortexgeom.point import Point
from cortexgeom.paths import Path

path = Path([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 0)])
print(path.to_svg_string(True, Point(0, 0), None))
# M0,0 L1,0 L1,1 Z

p = Point(1.21786434, 2.98252586)
print(p.to_svg_string(2))
# 1.22,2.98
```

## What it does not do

The package works on points, paths and splines only. It has no image
types: it does not trace the outline of pixel regions into paths, cluster
images, recognise shapes, or fit Bezier curves to a path to build a
`Spline`. `walk_triangle` yields points; drawing them into an image is left
to the caller. There is no command-line program.