import math

import pytest

from cortexgeom.point import Point, Polar, number_format


def test_pointf64_rotate():
    r = Point(1.0, 0.0).rotate(Point(0.0, 0.0), math.pi / 2.0)
    assert -1e-9 < r.x < 1e-9
    assert 1.0 - 1e-9 < r.y < 1.0 + 1e-9


def test_round_i32():
    z = Point(0, 2)
    assert z.to_svg_string(None) == "0,2"
    assert z.to_svg_string(5) == "0,2"
    r = Point(1, 2)
    assert r.to_svg_string(None) == "1,2"
    assert r.to_svg_string(5) == "1,2"


def test_round_f64_zero():
    z = Point(0.0, 0.1)
    assert z.to_svg_string(0) == "0,0"
    assert z.to_svg_string(1) == "0,0.1"
    assert z.to_svg_string(2) == "0,0.1"
    assert z.to_svg_string(None) == "0,0.1"


@pytest.mark.parametrize(
    "precision, expected",
    [
        (0, "1,3"),
        (1, "1.2,3"),
        (2, "1.22,2.98"),
        (3, "1.218,2.983"),
        (4, "1.2179,2.9825"),
        (5, "1.21786,2.98253"),
        (6, "1.217864,2.982526"),
        (7, "1.2178643,2.9825259"),
        (None, "1.21786434,2.98252586"),
    ],
)
def test_round_f64(precision, expected):
    p = Point(1.21786434, 2.98252586)
    assert p.to_svg_string(precision) == expected


def test_pointi32_rotate():
    r = Point(1, 0).rotate_90deg(Point(), True)
    assert r == Point(0, 1)


def test_rotate_90deg_counter_clockwise():
    assert Point(1, 0).rotate_90deg(Point(0, 0), False) == Point(0, -1)


def test_number_format_plain():
    assert number_format(1.0) == "1"
    assert number_format(1e-05) == "0.00001"
    assert number_format(7, 3) == "7"


def test_arithmetic():
    a = Point(1, 2)
    b = Point(3, 5)
    assert a + b == Point(4, 7)
    assert b - a == Point(2, 3)
    assert -a == Point(-1, -2)
    assert a * 2.0 == Point(2.0, 4.0)
    assert b / 2.0 == Point(1.5, 2.5)
    assert a.translate(b) == Point(4, 7)
    assert a.dot(b) == 13


def test_norm_and_distance():
    assert Point(3.0, 4.0).norm() == 5.0
    assert Point(1.0, 1.0).distance_to(Point(4.0, 5.0)) == 5.0


def test_normalized():
    n = Point(3.0, 4.0).get_normalized()
    assert n == Point(0.6, 0.8)
    assert Point(0.0, 0.0).get_normalized() == Point(0.0, 0.0)


def test_is_zero():
    assert Point(0, 0).is_zero()
    assert not Point(0, 1).is_zero()


def test_polar_round_trip():
    p = Point(3.0, -4.0)
    polar = p.to_polar()
    assert polar.r == 5.0
    back = polar.to_point()
    assert back.x == pytest.approx(3.0)
    assert back.y == pytest.approx(-4.0)


def test_polar_to_point():
    p = Polar(a=0.0, r=2.0).to_point()
    assert p == Point(2.0, 0.0)


def test_conversions():
    assert Point(1.9, -2.7).to_point_i32() == Point(1, -2)
    converted = Point(1, 2).to_point_f64()
    assert isinstance(converted.x, float) and converted == Point(1.0, 2.0)


def test_rotate_about_origin():
    r = Point(0.0, 1.0).rotate_about_origin(math.pi)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(-1.0)