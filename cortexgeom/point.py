"""Points and polar coordinates in 2D space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

Number = int | float

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _plain_float(num: float) -> str:
    """Shortest round-trip text of a float, never in exponent form."""
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "inf" if num > 0 else "-inf"
    text = format(Decimal(repr(num)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def number_format(num: Number, precision: int | None = None) -> str:
    """Format a coordinate for SVG output.

    Integers are written as they are. Floats are written in their shortest
    form when ``precision`` is None, otherwise rounded to ``precision``
    decimals with trailing zeros removed.
    """
    if isinstance(num, int):
        return str(num)
    if precision is None:
        return _plain_float(num)
    if math.isnan(num) or math.isinf(num):
        return _plain_float(num)
    if precision == 0:
        return format(num, ".0f")
    return format(num, f".{precision}f").rstrip("0").rstrip(".")


def _to_i32(value: Number) -> int:
    """Truncate towards zero and saturate to the 32-bit signed range."""
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return _I32_MAX if value > 0 else _I32_MIN
    return max(_I32_MIN, min(_I32_MAX, math.trunc(value)))


@dataclass(frozen=True)
class Point:
    """A point (or vector) in 2D space with integer or float components."""

    x: Number = 0
    y: Number = 0

    def dot(self, v: Point) -> Number:
        return self.x * v.x + self.y * v.y

    def translate(self, vector: Point) -> Point:
        return self + vector

    def rotate_90deg(self, origin: Point, clockwise: bool) -> Point:
        """Rotate by 90 degrees about ``origin``, assuming a top-left origin."""
        o = origin
        if clockwise:
            return Point(-(self.y - o.y) + o.x, (self.x - o.x) + o.y)
        return Point((self.y - o.y) + o.x, -(self.x - o.x) + o.y)

    def rotate(self, origin: Point, angle: float) -> Point:
        cos, sin = math.cos(angle), math.sin(angle)
        dx, dy = self.x - origin.x, self.y - origin.y
        return Point(cos * dx - sin * dy + origin.x, sin * dx + cos * dy + origin.y)

    def rotate_about_origin(self, angle: float) -> Point:
        cos, sin = math.cos(angle), math.sin(angle)
        return Point(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def norm(self) -> float:
        """The L2-norm."""
        return math.sqrt(self.dot(self))

    def distance_to(self, other: Point) -> float:
        """The euclidean distance."""
        return (self - other).norm()

    def to_polar(self) -> Polar:
        return Polar(a=math.atan2(self.y, self.x), r=self.norm())

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def get_normalized(self) -> Point:
        n = self.norm()
        if n != 0:
            return self / n
        return Point(0.0, 0.0)

    def to_point_i32(self) -> Point:
        return Point(_to_i32(self.x), _to_i32(self.y))

    def to_point_f64(self) -> Point:
        return Point(float(self.x), float(self.y))

    def to_svg_string(self, precision: int | None = None) -> str:
        return f"{number_format(self.x, precision)},{number_format(self.y, precision)}"

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, rhs: Number) -> Point:
        if not isinstance(rhs, (int, float)):
            return NotImplemented
        return Point(self.x * rhs, self.y * rhs)

    __rmul__ = __mul__

    def __truediv__(self, rhs: Number) -> Point:
        if not isinstance(rhs, (int, float)):
            return NotImplemented
        return Point(self.x / rhs, self.y / rhs)


@dataclass(frozen=True)
class Polar:
    """A polar coordinate: angle ``a`` and radius ``r``."""

    a: float = 0.0
    r: float = 0.0

    def to_point(self) -> Point:
        return Point(self.r * math.cos(self.a), self.r * math.sin(self.a))