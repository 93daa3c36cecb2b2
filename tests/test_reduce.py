import pytest

from cortexgeom.point import Point
from cortexgeom.reduce import (
    reduce,
    simplify,
    simplify_douglas_peucker,
    simplify_radial_dist,
)


def _pts(pairs):
    return [Point(x, y) for x, y in pairs]


I32_POINTS = _pts([
    (22455, 25015), (22691, 24419), (23331, 24145), (23498, 23606),
    (24421, 23276), (26259, 21531), (26776, 21381), (27357, 20184),
    (27312, 19216), (27762, 18903), (28036, 18141), (28651, 17774),
    (29241, 15937), (29691, 15564), (31495, 15137), (31975, 14516),
    (33033, 13757), (34148, 13996), (36998, 13789), (38739, 14251),
    (39128, 13939), (40952, 14114), (41482, 13975), (42772, 12730),
    (43960, 11974), (47493, 10787), (48651, 10675), (48920, 10945),
    (49379, 10863), (50474, 11966), (51296, 12235), (51863, 12089),
    (52409, 12688), (52957, 12786), (53421, 14093), (53927, 14724),
    (56769, 14891), (57525, 15726), (58062, 15815), (60153, 15685),
    (61774, 15986), (62200, 16704), (62955, 19460), (63890, 19561),
    (64126, 20081), (65177, 20456), (67155, 22255), (68368, 21745),
    (69525, 21915), (70064, 21798), (70312, 21436), (71226, 21587),
    (72149, 21281), (72781, 21336), (72998, 20873), (73532, 20820),
    (73994, 20477), (76998, 20842), (77960, 21687), (78420, 21816),
    (80024, 21462), (81053, 21973), (81719, 22682), (82077, 23617),
    (82723, 23616), (82989, 23989), (85100, 24894), (85988, 25549),
    (86521, 26853), (85795, 28030), (86548, 29145), (86681, 29866),
    (86468, 30271), (86779, 30617), (85987, 31137), (86008, 31435),
    (85829, 31494), (85810, 32760), (85454, 33540), (86092, 34300),
    (85643, 35015), (85142, 35296), (84984, 35959), (85456, 36553),
    (84974, 37038), (84409, 37189), (84475, 38044), (84152, 38367),
    (83957, 39040), (84559, 39905), (84840, 40755), (84371, 41130),
    (84409, 41988), (83951, 43276), (84133, 44104), (84762, 44922),
    (84716, 45844), (85138, 46279), (85397, 47115), (86636, 48077),
])

I32_SIMPLIFIED = _pts([
    (22455, 25015), (26776, 21381), (29691, 15564), (33033, 13757),
    (40952, 14114), (43960, 11974), (48651, 10675), (52957, 12786),
    (53927, 14724), (61774, 15986), (62955, 19460), (67155, 22255),
    (72781, 21336), (73994, 20477), (76998, 20842), (77960, 21687),
    (80024, 21462), (82077, 23617), (85988, 25549), (86521, 26853),
    (85795, 28030), (86779, 30617), (85987, 31137), (85454, 33540),
    (86092, 34300), (84984, 35959), (85456, 36553), (84409, 37189),
    (83957, 39040), (84840, 40755), (83951, 43276), (85397, 47115),
    (86636, 48077),
])

F64_POINTS = _pts([
    (224.55, 250.15), (226.91, 244.19), (233.31, 241.45), (234.98, 236.06),
    (244.21, 232.76), (262.59, 215.31), (267.76, 213.81), (273.57, 201.84),
    (273.12, 192.16), (277.62, 189.03), (280.36, 181.41), (286.51, 177.74),
    (292.41, 159.37), (296.91, 155.64), (314.95, 151.37), (319.75, 145.16),
    (330.33, 137.57), (341.48, 139.96), (369.98, 137.89), (387.39, 142.51),
    (391.28, 139.39), (409.52, 141.14), (414.82, 139.75), (427.72, 127.30),
    (439.60, 119.74), (474.93, 107.87), (486.51, 106.75), (489.20, 109.45),
    (493.79, 108.63), (504.74, 119.66), (512.96, 122.35), (518.63, 120.89),
    (524.09, 126.88), (529.57, 127.86), (534.21, 140.93), (539.27, 147.24),
    (567.69, 148.91), (575.25, 157.26), (580.62, 158.15), (601.53, 156.85),
    (617.74, 159.86), (622.00, 167.04), (629.55, 194.60), (638.90, 195.61),
    (641.26, 200.81), (651.77, 204.56), (671.55, 222.55), (683.68, 217.45),
    (695.25, 219.15), (700.64, 217.98), (703.12, 214.36), (712.26, 215.87),
    (721.49, 212.81), (727.81, 213.36), (729.98, 208.73), (735.32, 208.20),
    (739.94, 204.77), (769.98, 208.42), (779.60, 216.87), (784.20, 218.16),
    (800.24, 214.62), (810.53, 219.73), (817.19, 226.82), (820.77, 236.17),
    (827.23, 236.16), (829.89, 239.89), (851.00, 248.94), (859.88, 255.49),
    (865.21, 268.53), (857.95, 280.30), (865.48, 291.45), (866.81, 298.66),
    (864.68, 302.71), (867.79, 306.17), (859.87, 311.37), (860.08, 314.35),
    (858.29, 314.94), (858.10, 327.60), (854.54, 335.40), (860.92, 343.00),
    (856.43, 350.15), (851.42, 352.96), (849.84, 359.59), (854.56, 365.53),
    (849.74, 370.38), (844.09, 371.89), (844.75, 380.44), (841.52, 383.67),
    (839.57, 390.40), (845.59, 399.05), (848.40, 407.55), (843.71, 411.30),
    (844.09, 419.88), (839.51, 432.76), (841.33, 441.04), (847.62, 449.22),
    (847.16, 458.44), (851.38, 462.79), (853.97, 471.15), (866.36, 480.77),
])

F64_SIMPLIFIED = _pts([
    (224.55, 250.15), (267.76, 213.81), (296.91, 155.64), (330.33, 137.57),
    (409.52, 141.14), (439.60, 119.74), (486.51, 106.75), (529.57, 127.86),
    (539.27, 147.24), (617.74, 159.86), (629.55, 194.60), (671.55, 222.55),
    (727.81, 213.36), (739.94, 204.77), (769.98, 208.42), (779.60, 216.87),
    (800.24, 214.62), (820.77, 236.17), (859.88, 255.49), (865.21, 268.53),
    (857.95, 280.30), (867.79, 306.17), (859.87, 311.37), (854.54, 335.40),
    (860.92, 343.00), (849.84, 359.59), (854.56, 365.53), (844.09, 371.89),
    (839.57, 390.40), (848.40, 407.55), (839.51, 432.76), (853.97, 471.15),
    (866.36, 480.77),
])


def test_simplify_i32():
    assert simplify(I32_POINTS, 500.0, False) == I32_SIMPLIFIED


def test_simplify_f64():
    assert simplify(F64_POINTS, 5.0, False) == F64_SIMPLIFIED


def test_simplify_one():
    points = [Point(22455, 25015)]
    assert simplify(points, 5.0, False) == points


def test_simplify_zero():
    assert simplify([], 5.0, False) == []


def test_simplify_keeps_endpoints_highest_quality():
    result = simplify(I32_POINTS, 500.0, True)
    assert result[0] == I32_POINTS[0]
    assert result[-1] == I32_POINTS[-1]
    assert len(result) < len(I32_POINTS)


def test_radial_dist_drops_close_points_and_keeps_last():
    points = _pts([(0, 0), (1, 0), (5, 0), (6, 0)])
    assert simplify_radial_dist(points, 4.0) == _pts([(0, 0), (5, 0), (6, 0)])


def test_radial_dist_short_input_unchanged():
    points = _pts([(0, 0), (0, 0)])
    assert simplify_radial_dist(points, 100.0) == points


def test_douglas_peucker_removes_collinear_point():
    points = _pts([(0, 0), (5, 0), (10, 0)])
    assert simplify_douglas_peucker(points, 1.0) == _pts([(0, 0), (10, 0)])


def test_douglas_peucker_keeps_far_point():
    points = _pts([(0, 0), (5, 5), (10, 0)])
    assert simplify_douglas_peucker(points, 1.0) == points


def test_douglas_peucker_empty_raises():
    with pytest.raises(ValueError):
        simplify_douglas_peucker([], 1.0)


def test_reduce_zero_tolerance_is_identity():
    points = _pts([(0, 0), (1, 0), (2, 0), (3, 0)])
    assert reduce(points, 0.0) == points


def test_reduce_straight_line():
    points = _pts([(0, 0), (1, 0), (2, 0), (3, 0), (10, 0)])
    assert reduce(points, 1.0) == _pts([(0, 0), (10, 0)])


def test_reduce_returns_new_list():
    points = _pts([(0, 0), (1, 1)])
    result = reduce(points, 1.0)
    assert result == points
    assert result is not points