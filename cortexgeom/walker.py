"""Spiral traversal of a square region."""

from __future__ import annotations

from collections.abc import Iterator

_STEPS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def spiral_walk(size: int) -> Iterator[tuple[int, int]]:
    """Walk a ``size`` by ``size`` square in a clockwise spiral from its centre.

    Assumes a top-left origin. Yields ``size * size`` coordinates.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    area = size * size
    if area == 1:
        yield 0, 0
        return

    x = y = (size >> 1) - 1
    gx, gy = _STEPS[0]
    direction = 0
    leg = 1
    taken = 0
    for _ in range(area):
        yield x, y
        x += gx
        y += gy
        taken += 1
        if taken >= leg:
            taken = 0
            direction = (direction + 1) % 4
            if direction % 2 == 0:
                leg += 1
            gx, gy = _STEPS[direction]