"""Geometric helpers shared by the path algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cortexgeom.point import Point

_NEGLIGIBLE = 1e-7
_OUTSIDE_MARGIN = 1e-3


def _div(a: float, b: float) -> float:
    """IEEE division: zero divisors give infinities or NaN instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _acos(x: float) -> float:
    """Arc cosine that yields NaN outside [-1, 1] instead of raising."""
    if math.isnan(x) or abs(x) > 1.0:
        return math.nan
    return math.acos(x)


def signed_area(p1: Point, p2: Point, p3: Point) -> int:
    """Twice the signed triangle area; positive means clockwise with a top-left origin."""
    return (p2.x - p1.x) * (p3.y - p1.y) - (p3.x - p1.x) * (p2.y - p1.y)


@dataclass(eq=False)
class Intersection:
    """Relative positions of an intersection along two segments.

    ``mua`` is 0 at p1 and 1 at p2; ``mub`` is 0 at p3 and 1 at p4.
    Both are NaN when the lines coincide.
    """

    mua: float
    mub: float

    def outside(self) -> bool:
        """True if the intersection lies outside either segment."""
        e = _OUTSIDE_MARGIN
        return (self.mua < -e or self.mua > 1.0 + e) or (self.mub < -e or self.mub > 1.0 + e)

    def inside(self) -> bool:
        """True if the intersection lies within both segments."""
        return not self.outside()

    def coincide(self) -> bool:
        return math.isnan(self.mua) and math.isnan(self.mub)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        if self.coincide() and other.coincide():
            return True
        return self.mua == other.mua and self.mub == other.mub

    __hash__ = None  # type: ignore[assignment]


def _negligible(v: float) -> bool:
    return -_NEGLIGIBLE < v < _NEGLIGIBLE


def find_intersection(
    p1: Point, p2: Point, p3: Point, p4: Point
) -> tuple[Point, Intersection] | None:
    """Intersect lines (p1, p2) and (p3, p4).

    Coinciding lines give the mid-point of (p1, p2); parallel lines give None.
    """
    denom = (p4.y - p3.y) * (p2.x - p1.x) - (p4.x - p3.x) * (p2.y - p1.y)
    numera = (p4.x - p3.x) * (p1.y - p3.y) - (p4.y - p3.y) * (p1.x - p3.x)
    numerb = (p2.x - p1.x) * (p1.y - p3.y) - (p2.y - p1.y) * (p1.x - p3.x)

    if _negligible(denom) and _negligible(numera) and _negligible(numerb):
        return find_mid_point(p1, p2), Intersection(math.nan, math.nan)

    if _negligible(denom):
        return None

    mua = numera / denom
    mub = numerb / denom
    point = Point(p1.x + mua * (p2.x - p1.x), p1.y + mua * (p2.y - p1.y))
    return point, Intersection(mua, mub)


def find_mid_point(p1: Point, p2: Point) -> Point:
    return Point((p1.x + p2.x) / 2.0, (p1.y + p2.y) / 2.0)


def norm(p: Point) -> float:
    """Length of a vector."""
    return math.sqrt(p.x * p.x + p.y * p.y)


def normalize(p: Point) -> Point:
    """Unit vector in the direction of ``p``; NaN components for a zero vector."""
    n = norm(p)
    return Point(_div(float(p.x), n), _div(float(p.y), n))


def angle(p: Point) -> float:
    """Angle in (-pi, pi] of a unit vector, measured from the positive x axis."""
    if math.copysign(1.0, p.y) < 0:
        return -_acos(p.x)
    return _acos(p.x)


def signed_angle_difference(from_angle: float, to_angle: float) -> float:
    """Signed difference between two angles in (-pi, pi]; positive is clockwise."""
    v1 = from_angle
    v2 = to_angle
    if v1 > v2:
        v2 += 2.0 * math.pi
    diff = v2 - v1
    if diff > math.pi:
        return diff - 2.0 * math.pi
    return diff