"""Series of connected cubic Bezier curves."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from cortexgeom.point import Point, number_format


@dataclass
class Spline:
    """A chain of cubic Bezier curves stored as 1 + 3 * n control points.

    The first curve uses the first four points; each later curve starts at the
    last point of the previous one and adds three more.
    """

    points: list[Point] = field(default_factory=list)

    @classmethod
    def starting_at(cls, point: Point) -> Spline:
        """A spline with no curves, starting at ``point``."""
        return cls([point])

    def add(self, point2: Point, point3: Point, point4: Point) -> None:
        """Append a curve given its second to fourth control points."""
        self.points.extend((point2, point3, point4))

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def get_control_points(self) -> list[list[Point]]:
        """The four control points of every curve, in order."""
        return [self.points[i:i + 4] for i in range(0, len(self.points) - 3, 3)]

    def num_curves(self) -> int:
        return (len(self.points) - 1) // 3 if self.points else 0

    def is_empty(self) -> bool:
        """True if the spline holds no complete curve."""
        return len(self.points) <= 3

    def offset(self, offset: Point) -> None:
        """Shift every point by ``offset``."""
        self.points = [p + offset for p in self.points]

    def to_svg_string(
        self, close: bool, offset: Point = Point(0.0, 0.0), precision: int | None = None
    ) -> str:
        """SVG path data for the spline, with ``offset`` applied to every point.

        Raises ValueError if the number of points is not 1 + 3 * n.
        """
        if self.is_empty():
            return ""
        if (len(self.points) - 1) % 3 != 0:
            raise ValueError("Invalid spline! Length must be 1+3n.")

        def fmt(p: Point) -> str:
            return (
                f"{number_format(float(p.x + offset.x), precision)} "
                f"{number_format(float(p.y + offset.y), precision)}"
            )

        parts = [f"M{fmt(self.points[0])} "]
        for i in range(1, len(self.points), 3):
            a, b, c = self.points[i:i + 3]
            parts.append(f"C{fmt(a)} {fmt(b)} {fmt(c)} ")
        if close:
            parts.append("Z ")
        return "".join(parts)