"""Simplification of pixel-walked polygon paths."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum

from cortexgeom.pathutil import signed_area
from cortexgeom.point import Point

_PENALTY_TOLERANCE = 1.0


class PathSimplifyMode(Enum):
    """How a walked outline is turned into a path."""

    NONE = "none"
    POLYGON = "polygon"
    SPLINE = "spline"


def _segment_length(a: Point, b: Point) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def remove_staircase(points: Sequence[Point], clockwise: bool) -> list[Point]:
    """Drop the inner corners of 1-pixel staircases.

    ``clockwise`` tells which turn direction is the outset one.
    """
    n = len(points)
    result: list[Point] = []
    for i, p in enumerate(points):
        if i in (0, n - 1):
            keep = True
        else:
            prev = points[i - 1]
            nxt = points[(i + 1) % n]
            if _segment_length(p, prev) == 1 or _segment_length(p, nxt) == 1:
                area = signed_area(prev, p, nxt)
                keep = area != 0 and (area > 0) == clockwise
            else:
                keep = True
        if keep:
            result.append(p)
    return result


def evaluate_penalty(a: Point, b: Point, c: Point) -> float:
    """Squared area of triangle (a, b, c) divided by the length of a-c."""

    def length(p: Point, q: Point) -> float:
        return math.sqrt(float((p.x - q.x) ** 2 + (p.y - q.y) ** 2))

    l1 = length(a, b)
    l2 = length(b, c)
    l3 = length(c, a)
    p = (l1 + l2 + l3) / 2.0
    product = p * (p - l1) * (p - l2) * (p - l3)
    area = math.sqrt(product) if product >= 0 else math.nan
    squared = area * area
    if l3 == 0:
        return math.nan if squared == 0 or math.isnan(squared) else math.inf
    return squared / l3


def _max_penalty(points: Sequence[Point], start: int, end: int) -> float:
    worst = 0.0
    for i in range(start + 1, end):
        penalty = evaluate_penalty(points[start], points[i], points[end])
        if not math.isnan(penalty) and penalty > worst:
            worst = penalty
    return worst


def limit_penalties(points: Sequence[Point]) -> list[Point]:
    """Keep only the vertices needed to hold every skipped vertex within tolerance."""
    n = len(points)
    result: list[Point] = []
    last = 0
    for i, p in enumerate(points):
        if i == 0:
            result.append(p)
        elif i == last + 1:
            continue
        elif _max_penalty(points, last, i) >= _PENALTY_TOLERANCE:
            last = i - 1
            result.append(points[i - 1])
        if i == n - 1:
            result.append(p)
    return result