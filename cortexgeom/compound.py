"""Compound paths: several paths and splines forming one shape with holes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from cortexgeom.paths import Path
from cortexgeom.point import Point
from cortexgeom.spline import Spline

Element = Path | Spline

_DEFAULT_MAX_ITERATIONS = 10


def _is_integral_point(p: Point) -> bool:
    return isinstance(p.x, int) and isinstance(p.y, int)


def _is_integral_path(path: Path) -> bool:
    return all(_is_integral_point(p) for p in path)


@dataclass
class CompoundPath:
    """A collection of paths and splines that together describe a shape with holes."""

    paths: list[Element] = field(default_factory=list)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def append(self, other: CompoundPath) -> None:
        """Move every element of ``other`` to the end of this compound path."""
        self.paths.extend(other.paths)
        other.paths = []

    def add_path(self, path: Path) -> None:
        self.paths.append(path)

    def add_spline(self, spline: Spline) -> None:
        self.paths.append(spline)

    def to_svg_string(
        self, close: bool, offset: Point, precision: int | None = None
    ) -> tuple[str, Point]:
        """A single SVG path string relative to the first point, and the new offset.

        The coordinates are shifted so the first point of the first element lies
        at the origin; the returned offset places the string back where it was.
        """
        integral_offset = _is_integral_point(offset)
        if self.paths:
            first = self.paths[0].points[0]
            if integral_offset:
                origin = Point(0, 0) - first.to_point_i32()
            else:
                origin = Point(0.0, 0.0) - first.to_point_f64()
        else:
            origin = Point(0, 0) if integral_offset else Point(0.0, 0.0)

        parts = []
        for element in self.paths:
            if isinstance(element, Spline):
                parts.append(element.to_svg_string(close, origin.to_point_f64(), precision))
            elif _is_integral_path(element):
                parts.append(element.to_svg_string(close, origin.to_point_i32(), precision))
            else:
                parts.append(element.to_svg_string(close, origin.to_point_f64(), precision))

        return "".join(parts), offset - origin

    def reduce(self, tolerance: float) -> CompoundPath:
        """Reduce every path, dropping those that collapse.

        Raises TypeError if the compound path holds a spline.
        """
        reduced: list[Element] = []
        for element in self.paths:
            if isinstance(element, Spline):
                raise TypeError("splines cannot be reduced")
            result = element.reduce(tolerance)
            if result is not None:
                reduced.append(result)
        return CompoundPath(reduced)

    def remove_holes(self) -> None:
        """Keep only the outer (first) element."""
        del self.paths[1:]

    def is_empty(self) -> bool:
        return not self.paths

    def smooth(
        self, corner_threshold: float, outset_ratio: float, segment_length: float
    ) -> CompoundPath:
        """Smooth every path into a real-valued path, keeping corners.

        Raises TypeError if the compound path holds a spline.
        """
        smoothed: list[Element] = []
        for element in self.paths:
            if isinstance(element, Spline):
                raise TypeError("splines cannot be smoothed")
            smoothed.append(
                element.smooth(
                    corner_threshold, outset_ratio, segment_length, _DEFAULT_MAX_ITERATIONS
                )
            )
        return CompoundPath(smoothed)