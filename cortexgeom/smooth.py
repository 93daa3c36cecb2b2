"""Corner detection and subdivision smoothing of closed polygons."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

from cortexgeom.pathutil import (
    angle,
    find_intersection,
    find_mid_point,
    norm,
    normalize,
    signed_angle_difference,
)
from cortexgeom.point import Point


def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_sign_positive(v: float) -> bool:
    return math.copysign(1.0, v) > 0


def _open_polygon(points: Sequence[Point]) -> Sequence[Point]:
    if not points:
        raise ValueError("a closed path needs at least one point")
    return points[:-1]


def _turn(prev: Point, curr: Point, nxt: Point) -> float:
    v1 = curr - prev
    v2 = nxt - curr
    return signed_angle_difference(angle(normalize(v1)), angle(normalize(v2)))


def find_corners(points: Sequence[Point], threshold: float) -> list[bool]:
    """Flag the vertices of a closed path whose turning angle is at least ``threshold``.

    The last point repeats the first, so the result is one shorter than ``points``.
    """
    path = _open_polygon(points)
    n = len(path)
    return [
        abs(_turn(path[(i - 1) % n], p, path[(i + 1) % n])) >= threshold
        for i, p in enumerate(path)
    ]


def find_splice_points(points: Sequence[Point], threshold: float) -> list[bool]:
    """Flag inflection points and points where the accumulated turn reaches ``threshold``.

    The last point repeats the first, so the result is one shorter than ``points``.
    """
    path = _open_polygon(points)
    n = len(path)
    splice_points = [False] * n
    is_angle_increasing = False
    angle_disp = 0.0
    for i, p in enumerate(path):
        angle_diff = _turn(path[(i - 1) % n], p, path[(i + 1) % n])
        is_currently_increasing = _is_sign_positive(angle_diff)

        if i == 0:
            is_angle_increasing = is_currently_increasing
        elif is_angle_increasing != is_currently_increasing:
            splice_points[i] = True
            is_angle_increasing = is_currently_increasing

        angle_disp += angle_diff
        if abs(angle_disp) >= threshold:
            splice_points[i] = True

        if splice_points[i]:
            angle_disp = 0.0
    return splice_points


def _new_point_from_4_point_scheme(
    p_i: Point, p_j: Point, p_1: Point, p_2: Point, outset_ratio: float
) -> Point:
    mid_out = find_mid_point(p_i, p_j)
    mid_in = find_mid_point(p_1, p_2)
    vector_out = mid_out - mid_in
    new_magnitude = _div(vector_out.norm(), outset_ratio)
    if new_magnitude < sys.float_info.epsilon:
        return mid_out
    return mid_out + vector_out.get_normalized() * new_magnitude


def subdivide_keep_corners(
    points: Sequence[Point],
    corners: Sequence[bool],
    outset_ratio: float,
    segment_length: float,
) -> tuple[list[Point], list[bool], bool]:
    """One pass of the 4-point subdivision scheme that keeps corners sharp.

    Segments no longer than ``segment_length`` are not divided. Returns the new
    closed path, the updated corner flags and whether no further pass is needed.
    """
    path = _open_polygon(points)
    n = len(path)
    if n == 0:
        raise ValueError("a closed path needs at least two points to subdivide")

    can_terminate = True
    new_path: list[Point] = []
    new_corners: list[bool] = []

    for i, p in enumerate(path):
        new_path.append(Point(float(p.x), float(p.y)))
        new_corners.append(bool(corners[i]))
        j = (i + 1) % n

        length_curr = norm(path[i] - path[j])
        if length_curr <= segment_length:
            continue

        prev = (i - 1) % n
        nxt = (j + 1) % n

        length_prev = norm(path[prev] - path[i])
        length_next = norm(path[nxt] - path[j])
        if _div(length_prev, length_curr) >= 2.0 or _div(length_next, length_curr) >= 2.0:
            continue

        if corners[i]:
            prev = i
        if corners[j]:
            nxt = j

        if prev == i and nxt == j:
            continue

        new_point = _new_point_from_4_point_scheme(
            path[i], path[j], path[prev], path[nxt], outset_ratio
        )
        new_path.append(new_point)
        new_corners.append(False)
        if norm(path[i] - new_point) > segment_length or norm(path[j] - new_point) > segment_length:
            can_terminate = False

    new_path.append(new_path[0])
    return new_path, new_corners, can_terminate


def retract_handles(a: Point, b: Point, c: Point, d: Point) -> tuple[Point, Point, Point, Point]:
    """Pull crossing Bezier handles back to the intersection of their lines."""
    ab = b - a
    dab = signed_angle_difference(angle(normalize(a - d)), angle(normalize(ab)))
    abc = signed_angle_difference(angle(normalize(ab)), angle(normalize(c - b)))

    if _is_sign_positive(dab) != _is_sign_positive(abc):
        found = find_intersection(a, b, c, d)
        if found is not None:
            intersection, _ = found
            return a, intersection, intersection, d
    return a, b, c, d