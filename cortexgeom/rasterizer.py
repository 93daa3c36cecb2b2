"""Rasterization of lines and triangles onto integer points."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from cortexgeom.point import Point


def bresenham(p0: Point, p1: Point) -> Iterator[Point]:
    """All points of the line from ``p0`` to ``p1``, both ends included."""
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    adx = abs(dx)
    ady = abs(dy)
    sx = 1 if dx > 0 else -1
    sy = 1 if dy > 0 else -1
    x, y = p0.x, p0.y
    eps = 0

    if adx > ady:
        while (x >= p1.x) if sx < 0 else (x <= p1.x):
            yield Point(x, y)
            eps += ady
            if eps * 2 >= adx:
                y += sy
                eps -= adx
            x += sx
    else:
        while (y >= p1.y) if sy < 0 else (y <= p1.y):
            yield Point(x, y)
            eps += adx
            if eps * 2 >= ady:
                x += sx
                eps -= ady
            y += sy


def walk_triangle(triangle: Sequence[Point]) -> Iterator[Point]:
    """All points covered by a triangle, row by row from top to bottom.

    Raises ValueError unless exactly three vertices are given.
    """
    if len(triangle) != 3:
        raise ValueError("a triangle needs exactly three vertices")
    t0, t1, t2 = triangle
    points = [*bresenham(t1, t2), *bresenham(t0, t2), *bresenham(t0, t1)]
    points.sort(key=lambda p: (p.y, p.x))

    for current, following in zip(points, [*points[1:], None]):
        if following is not None and following.y == current.y:
            for x in range(current.x, following.x):
                yield Point(x, current.y)
        else:
            yield current