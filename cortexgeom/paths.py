"""Paths of 2D points: SVG output, reduction, smoothing and simplification."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import overload

from cortexgeom.point import Point
from cortexgeom.reduce import reduce as reduce_open
from cortexgeom.simplify import limit_penalties, remove_staircase
from cortexgeom.smooth import find_corners, subdivide_keep_corners


@dataclass
class Path:
    """An ordered sequence of points in 2D space.

    Points with integer components form a pixel path; points with float
    components form a real-valued path.
    """

    points: list[Point] = field(default_factory=list)

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self.points = list(points)

    def add(self, point: Point) -> None:
        """Append a point to the end of the path."""
        self.points.append(point)

    def pop(self) -> Point | None:
        """Remove and return the last point, or None if the path is empty."""
        return self.points.pop() if self.points else None

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> list[Point]: ...

    def __getitem__(self, index: int | slice) -> Point | list[Point]:
        return self.points[index]

    def __setitem__(self, index: int, value: Point) -> None:
        self.points[index] = value

    def is_empty(self) -> bool:
        return not self.points

    def _is_integral(self) -> bool:
        return all(isinstance(p.x, int) and isinstance(p.y, int) for p in self.points)

    def to_open(self) -> Path:
        """A copy without the repeated closing point; unchanged if empty or already open."""
        if self.points and self.points[0] == self.points[-1]:
            return Path(self.points[:-1])
        return Path(self.points)

    def to_closed(self) -> Path:
        """A copy ending with its first point; unchanged if empty or already closed."""
        if self.points and self.points[0] != self.points[-1]:
            return Path([*self.points, self.points[0]])
        return Path(self.points)

    def offset(self, o: Point) -> None:
        """Shift every point by ``o``."""
        self.points = [p + o for p in self.points]

    def to_svg_string(
        self, close: bool, offset: Point = Point(0, 0), precision: int | None = None
    ) -> str:
        """SVG path data for the path with ``offset`` applied to every point.

        If ``close`` is true, the last point is taken to repeat the first one
        and a closing command is written instead.
        """
        parts: list[str] = []
        if self.points:
            parts.append(f"M{(self.points[0] + offset).to_svg_string(precision)} ")
        count = max(len(self.points) - (2 if close else 1), 0)
        for p in self.points[1:1 + count]:
            parts.append(f"L{(p + offset).to_svg_string(precision)} ")
        if close:
            parts.append("Z ")
        return "".join(parts)

    def reduce(self, tolerance: float) -> Path | None:
        """Reduce a closed path section by section between its extreme points.

        The path is split at its west-, north-, east- and south-most points and
        each section is reduced on its own. Returns None when the shape is
        smaller than ``tolerance`` or collapses to three points or fewer.
        Raises ValueError if the path is empty or not closed.
        """
        path = self.points
        if not path:
            raise ValueError("cannot reduce an empty path")
        if path[0] != path[-1]:
            raise ValueError("reduce expects a closed path")

        corners = [(0, path[0])] * 4
        for i, p in enumerate(path[:-1]):
            if p.x < corners[0][1].x:
                corners[0] = (i, p)
            if p.y <= corners[1][1].y:
                corners[1] = (i, p)
            if p.x >= corners[2][1].x:
                corners[2] = (i, p)
            if p.y >= corners[3][1].y:
                corners[3] = (i, p)

        if (
            abs(float(corners[0][1].x - corners[2][1].x)) < tolerance
            and abs(float(corners[1][1].y - corners[3][1].y)) < tolerance
        ):
            return None

        corners.sort(key=lambda c: c[0])
        c0, c1, c2, c3 = (c[0] for c in corners)
        sections = [
            path[c0:c1 + 1],
            path[c1:c2 + 1],
            path[c2:c3 + 1],
            path[c3:len(path) - 1] + path[0:c0 + 1],
        ]

        combined: list[Point] = []
        for i, section in enumerate(sections):
            reduced = reduce_open(section, tolerance)
            if i != 3 and reduced:
                reduced.pop()
            combined.extend(reduced)

        if len(combined) <= 3:
            return None
        return Path(combined)

    def smooth(
        self,
        corner_threshold: float,
        outset_ratio: float,
        segment_length: float,
        max_iterations: int,
    ) -> Path:
        """Subdivision smoothing of a closed path that keeps its corners.

        ``corner_threshold`` is in radians, ``outset_ratio`` is at least 1 and
        ``segment_length`` is in path units. A pixel path is refined pass after
        pass; a real-valued path has every pass applied to the original points.
        Raises ValueError if ``max_iterations`` is not positive.
        """
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        integral = self._is_integral()
        corners = find_corners(self.points, corner_threshold)
        original = self.to_path_f64().points
        path = original
        for _ in range(max_iterations):
            source = path if integral else original
            path, corners, done = subdivide_keep_corners(
                source, corners, outset_ratio, segment_length
            )
            if done:
                break
        return Path(path)

    def simplify(self, clockwise: bool) -> Path:
        """Remove staircases, then drop vertices whose removal costs little."""
        return Path(limit_penalties(remove_staircase(self.points, clockwise)))

    def to_path_f64(self) -> Path:
        """A copy with float components."""
        return Path(p.to_point_f64() for p in self.points)