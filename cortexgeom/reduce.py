"""Point reduction for open paths: radial distance and Ramer-Douglas-Peucker."""

from __future__ import annotations

from collections.abc import Sequence

from cortexgeom.point import Point


def _sq_dist(p1: Point, p2: Point) -> float:
    """Squared distance between two points."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return float(dx * dx + dy * dy)


def _sq_seg_dist(p: Point, p1: Point, p2: Point) -> float:
    """Squared distance from a point to a segment."""
    x = float(p1.x)
    y = float(p1.y)
    dx = float(p2.x) - x
    dy = float(p2.y) - y

    if dx != 0.0 or dy != 0.0:
        t = ((float(p.x) - x) * dx + (float(p.y) - y) * dy) / (dx * dx + dy * dy)
        if t > 1.0:
            x = float(p2.x)
            y = float(p2.y)
        elif t > 0.0:
            x += dx * t
            y += dy * t

    dx = float(p.x) - x
    dy = float(p.y) - y
    return dx * dx + dy * dy


def simplify_radial_dist(points: Sequence[Point], sq_tolerance: float) -> list[Point]:
    """Drop points closer than the tolerance to the previously kept point."""
    if len(points) <= 2:
        return list(points)

    prev_point = points[0]
    new_points = [prev_point]
    for point in points[1:]:
        if _sq_dist(point, prev_point) > sq_tolerance:
            new_points.append(point)
            prev_point = point

    if prev_point != points[-1]:
        new_points.append(points[-1])
    return new_points


def _dp_step(
    points: Sequence[Point],
    first: int,
    last: int,
    sq_tolerance: float,
    simplified: list[Point],
) -> None:
    max_sq_dist = sq_tolerance
    index = 0
    for i in range(first + 1, last):
        sq_dist = _sq_seg_dist(points[i], points[first], points[last])
        if sq_dist > max_sq_dist:
            index = i
            max_sq_dist = sq_dist

    if max_sq_dist > sq_tolerance:
        if index - first > 1:
            _dp_step(points, first, index, sq_tolerance, simplified)
        simplified.append(points[index])
        if last - index > 1:
            _dp_step(points, index, last, sq_tolerance, simplified)


def simplify_douglas_peucker(points: Sequence[Point], sq_tolerance: float) -> list[Point]:
    """Simplify with the Ramer-Douglas-Peucker algorithm."""
    if not points:
        raise ValueError("cannot simplify an empty point sequence")
    last = len(points) - 1
    simplified = [points[0]]
    _dp_step(points, 0, last, sq_tolerance, simplified)
    simplified.append(points[last])
    return simplified


def simplify(original: Sequence[Point], tolerance: float, highest_quality: bool) -> list[Point]:
    """Radial distance pre-pass (unless ``highest_quality``) followed by Douglas-Peucker."""
    if len(original) <= 2:
        return list(original)
    sq_tolerance = tolerance * tolerance
    points = original if highest_quality else simplify_radial_dist(original, sq_tolerance)
    return simplify_douglas_peucker(points, sq_tolerance)


def reduce(original: Sequence[Point], tolerance: float) -> list[Point]:
    """Reduce the points of an open path; a larger tolerance leaves fewer points."""
    if len(original) <= 2 or tolerance == 0.0:
        return list(original)
    sq_tolerance = tolerance * tolerance
    radial = simplify_radial_dist(original, sq_tolerance * 0.5)
    return simplify_douglas_peucker(radial, sq_tolerance)