"""Approximation of circular arcs with cubic Bezier curves."""

from __future__ import annotations

from cortexgeom.point import Point
from cortexgeom.spline import Spline

# Control points of a quarter circle, P0 = (0, a), P1 = (b, c), P2 = (c, b),
# P3 = (a, 0), taken relative to the corner instead of the centre.
ARC_A = 1.00005519 - 1.0
ARC_B = 1.0 - 0.55342686
ARC_C = 1.0 - 0.99873585


def _sign_of(a: float, b: float) -> int:
    if a == b:
        return 0
    return 1 if a > b else -1


def _mul(s: int, v: float) -> float:
    if s == 1:
        return v
    if s == -1:
        return -v
    if s == 0:
        return 0.0
    raise ValueError(f"sign must be -1, 0 or 1, got {s}")


def circular_arc(p_0: Point, ap: Point, p_3: Point) -> Spline:
    """A quarter circle from ``p_0`` to ``p_3`` bulging towards the corner ``ap``.

    The vector from ``p_0`` to ``p_3`` must be at 45 degrees; the centre lies
    on the side opposite to ``ap``. Raises ValueError if ``p_0`` and ``ap`` are
    not on an axis-aligned line.
    """
    dx = _sign_of(ap.x, p_0.x)
    dy = _sign_of(ap.y, p_0.y)
    dxx = _sign_of(p_3.x, ap.x)
    dyy = _sign_of(p_3.y, ap.y)
    start = p_0.to_point_f64()
    corner = ap.to_point_f64()
    end = p_3.to_point_f64()
    r = abs(end.x - start.x)
    a = r * ARC_A
    b = r * ARC_B
    c = r * ARC_C

    if dx != 0 and dy == 0:
        start = Point(start.x, start.y - _mul(dyy, a))
        end = Point(end.x + _mul(dx, a), end.y)
        spline = Spline.starting_at(start)
        spline.add(
            Point(corner.x - _mul(dx, b), corner.y + _mul(dyy, c)),
            Point(corner.x - _mul(dx, c), corner.y + _mul(dyy, b)),
            end,
        )
        return spline
    if dx == 0 and dy != 0:
        start = Point(start.x - _mul(dxx, a), start.y)
        end = Point(end.x, end.y + _mul(dy, a))
        spline = Spline.starting_at(start)
        spline.add(
            Point(corner.x + _mul(dxx, c), corner.y - _mul(dy, b)),
            Point(corner.x + _mul(dxx, b), corner.y - _mul(dy, c)),
            end,
        )
        return spline
    raise ValueError(f"corner direction ({dx},{dy}) is not axis-aligned")


def approximate_circle_with_spline(left_top: Point, diameter: int) -> Spline:
    """A closed spline of four quarter arcs inscribed in the given square."""
    r = int(diameter / 2)
    a = Point(left_top.x + r, left_top.y)
    b = Point(left_top.x + diameter, left_top.y)
    c = Point(b.x, b.y + r)
    spline = circular_arc(a, b, c)

    b = Point(b.x, b.y + diameter)
    a = Point(a.x, a.y + diameter)
    spline.points.extend(circular_arc(c, b, a).points[1:])

    b = Point(left_top.x, b.y)
    c = Point(left_top.x, c.y)
    spline.points.extend(circular_arc(a, b, c).points[1:])

    b = left_top
    a = Point(a.x, left_top.y)
    spline.points.extend(circular_arc(c, b, a).points[1:])
    return spline