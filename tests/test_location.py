import pytest

from polykernel.errors import DegenerateInputError, InvalidInputError
from polykernel.generators import convex_polygon
from polykernel.location import (
    LocationMethod,
    PointLocation,
    locate,
    triangle_location,
    wedge_location,
)
from polykernel.orientation import Orientation
from polykernel.vector import Point

INSIDE, OUTSIDE, EDGE = PointLocation.INSIDE, PointLocation.OUTSIDE, PointLocation.EDGE
CONVEX_METHODS = [LocationMethod.CONVEX_LINEAR, LocationMethod.CONVEX_BINARY]
ALL_METHODS = [LocationMethod.RAY_CAST] + CONVEX_METHODS


def test_location_renders_fixed_strings():
    assert [str(l) for l in (INSIDE, OUTSIDE, EDGE)] == ["Inside", "Outside", "Edge"]


# Ray casting: triangle A(0,0) B(10,0) C(5,5).
@pytest.mark.parametrize("query, expected", [
    ((2.5, 2.5), INSIDE),
    ((5, 2.5), INSIDE),
    ((0, 1), OUTSIDE),
    ((5, -1), OUTSIDE),
    ((0, 0), EDGE),
])
def test_ray_cast_triangle(triangle, query, expected):
    assert locate(triangle, query) is expected


@pytest.mark.parametrize("query, expected", [
    ((0, 0), EDGE),
    ((2, 1), INSIDE),
    ((-2, 1), OUTSIDE),
    ((5, 10), EDGE),
    ((11, 10), OUTSIDE),
    ((5, 5), INSIDE),
])
def test_ray_cast_square(square, query, expected):
    assert locate(square, query, LocationMethod.RAY_CAST) is expected


def test_ray_cast_concave():
    l_shape = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]
    assert locate(l_shape, (0.5, 0.5)) is INSIDE
    assert locate(l_shape, (1.5, 1.5)) is OUTSIDE
    assert locate(l_shape, (0.5, 1.5)) is INSIDE
    # The ray from (0.5, 1) passes through the reflex vertex (1, 1).
    assert locate(l_shape, (0.5, 1)) is INSIDE
    assert locate(l_shape, (1.5, 1)) is EDGE


def test_ray_cast_vertex_on_ray_counted_once():
    diamond = [(0, -2), (2, 0), (0, 2), (-2, 0)]
    assert locate(diamond, (0, 0)) is INSIDE
    assert locate(diamond, (-3, 0)) is OUTSIDE
    assert locate(diamond, (-1, 0)) is INSIDE


def test_ray_cast_duplicate_vertices():
    square = [(0, 0), (10, 0), (10, 0), (10, 10), (0, 10), (0, 10)]
    assert locate(square, (2, 1)) is INSIDE
    assert locate(square, (12, 1)) is OUTSIDE
    assert locate(square, (10, 0)) is EDGE


def test_ray_cast_accepts_clockwise(square):
    cw = square[::-1]
    assert locate(cw, (2, 1)) is INSIDE
    assert locate(cw, (-2, 1)) is OUTSIDE


@pytest.mark.parametrize("method", CONVEX_METHODS)
@pytest.mark.parametrize("query, expected", [
    ((0, 0), EDGE),
    ((2, 1), INSIDE),
    ((-2, 1), OUTSIDE),
    ((10, 10), EDGE),
    ((5, 0), EDGE),
    ((0, 5), EDGE),
    ((7, 7), INSIDE),
    ((15, 15), OUTSIDE),
    ((20, 0), OUTSIDE),
])
def test_convex_square(square, method, query, expected):
    assert locate(square, query, method) is expected
    assert locate(square[::-1], query, method) is expected


@pytest.mark.parametrize("method", CONVEX_METHODS)
@pytest.mark.parametrize("query, expected", [
    ((5, 5), INSIDE),
    ((0, 0), EDGE),
    ((5, -2.5), EDGE),
    ((25, 25), OUTSIDE),
    ((18.5, 15), EDGE),
    ((19, 1), INSIDE),
    ((-1, 5), OUTSIDE),
])
def test_convex_heptagon(heptagon_cw, heptagon_ccw, method, query, expected):
    assert locate(heptagon_cw, query, method) is expected
    assert locate(heptagon_ccw, query, method) is expected


@pytest.mark.parametrize("method", CONVEX_METHODS)
def test_convex_triangle(triangle, method):
    assert locate(triangle, (5, 2.5), method) is INSIDE
    assert locate(triangle, (2.5, 2.5), method) is EDGE
    assert locate(triangle, (0, 0), method) is EDGE
    assert locate(triangle, (5, 5), method) is EDGE
    assert locate(triangle, (5, -1), method) is OUTSIDE
    assert locate(triangle, (15, 0), method) is OUTSIDE


def test_diagonals_from_base_are_interior(heptagon_ccw):
    base = heptagon_ccw[0]
    for v in heptagon_ccw[2:-1]:
        mid = Point((base.x + v.x) / 2, (base.y + v.y) / 2)
        assert locate(heptagon_ccw, mid, LocationMethod.CONVEX_BINARY) is INSIDE


def _grid(x0, x1, y0, y1, step):
    x = x0
    while x <= x1:
        y = y0
        while y <= y1:
            yield Point(x, y)
            y += step
        x += step


@pytest.mark.parametrize("polygon", [
    [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)],
    [Point(0, 0), Point(10, -5), Point(20, 0), Point(20, 10), Point(17, 20), Point(14, 20), Point(0, 10)],
    [Point(0, 0), Point(6, 0), Point(3, 9)],
    convex_polygon(12, radius=10.0),
])
def test_linear_and_binary_agree(polygon):
    for orientation_variant in (polygon, polygon[::-1]):
        for q in _grid(-3, 23, -8, 23, 1):
            linear = locate(orientation_variant, q, LocationMethod.CONVEX_LINEAR)
            binary = locate(orientation_variant, q, LocationMethod.CONVEX_BINARY)
            assert linear is binary, f"{q}: linear={linear} binary={binary}"


def test_all_methods_agree_off_boundary(heptagon_ccw):
    for q in _grid(-2.5, 22.5, -7.5, 22.5, 2.0):
        results = {m: locate(heptagon_ccw, q, m) for m in ALL_METHODS}
        if EDGE in results.values():
            continue
        assert len(set(results.values())) == 1, f"{q}: {results}"


def test_method_by_name(square):
    assert locate(square, (2, 1), "convex-binary") is INSIDE
    with pytest.raises(ValueError):
        locate(square, (2, 1), "bogus")


def test_invalid_input():
    with pytest.raises(InvalidInputError):
        locate([(0, 0), (1, 1)], (0, 0))
    with pytest.raises(DegenerateInputError):
        locate([(0, 0), (1, 1), (2, 2)], (1, 1), LocationMethod.CONVEX_BINARY)


def test_does_not_mutate_input(square):
    before = list(square)
    locate(square, (2, 1), LocationMethod.CONVEX_BINARY)
    assert square == before


def test_wedge_location():
    a, b, c = Point(0, 10), Point(0, 0), Point(10, 0)
    assert wedge_location(a, b, c, Point(3, 3)) is INSIDE
    # The wedge is unbounded: far points inside the angle are still INSIDE.
    assert wedge_location(a, b, c, Point(30, 30)) is INSIDE
    assert wedge_location(a, b, c, Point(5, 0)) is EDGE
    assert wedge_location(a, b, c, Point(0, 5)) is EDGE
    assert wedge_location(a, b, c, b) is EDGE
    assert wedge_location(a, b, c, Point(15, 0)) is OUTSIDE
    assert wedge_location(a, b, c, Point(-1, 3)) is OUTSIDE


@pytest.mark.parametrize("query, expected", [
    ((5, 2.5), INSIDE),
    ((2.5, 2.5), EDGE),
    ((0, 1), OUTSIDE),
    ((5, -1), OUTSIDE),
    ((0, 0), EDGE),
])
def test_triangle_location(query, expected):
    assert triangle_location((0, 0), (10, 0), (5, 5), query) is expected
    assert triangle_location((5, 5), (10, 0), (0, 0), query) is expected


@pytest.mark.parametrize("method", ALL_METHODS)
@pytest.mark.parametrize("query", [(-3, -2), (-2, -3), (-1, -1)])
def test_behind_base_vertex_is_outside(square, method, query):
    assert locate(square, query, method) is OUTSIDE
    assert locate(square[::-1], query, method) is OUTSIDE


@pytest.mark.parametrize("method", ALL_METHODS)
def test_behind_base_of_strictly_convex_polygon(method):
    pentagon = [(-6, -2), (-4, -2), (6, 0), (0, 6), (-4, 6)]
    assert locate(pentagon, (-7, -3), method) is OUTSIDE
    assert locate(pentagon, (0, 2), method) is INSIDE


# Square with an extra vertex in the middle of the bottom side.
SQUARE_WITH_MIDPOINT = [Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 10), Point(0, 10)]


@pytest.mark.parametrize("method", ALL_METHODS)
@pytest.mark.parametrize("query, expected", [
    ((7, 0), EDGE),
    ((2, 0), EDGE),
    ((5, 0), EDGE),
    ((7, 3), INSIDE),
    ((12, 0), OUTSIDE),
    ((-1, 0), OUTSIDE),
])
def test_colinear_vertex(method, query, expected):
    assert locate(SQUARE_WITH_MIDPOINT, query, method) is expected
    assert locate(SQUARE_WITH_MIDPOINT[::-1], query, method) is expected


@pytest.mark.parametrize("polygon", [
    SQUARE_WITH_MIDPOINT,
    # The base vertex itself sits in the middle of a side.
    [Point(5, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0)],
    [Point(5, 0), Point(7, 0), Point(10, 0), Point(5, 8), Point(0, 0)],
    [Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 10), Point(5, 12), Point(0, 10)],
])
def test_colinear_vertex_agreement(polygon):
    for variant in (polygon, polygon[::-1]):
        for q in _grid(-3, 13, -3, 13, 1):
            linear = locate(variant, q, LocationMethod.CONVEX_LINEAR)
            binary = locate(variant, q, LocationMethod.CONVEX_BINARY)
            assert linear is binary, f"{q}: linear={linear} binary={binary}"


def test_wedge_rejects_mirrored_cone():
    a, b, c = Point(0, 10), Point(0, 0), Point(10, 0)
    assert wedge_location(a, b, c, Point(-3, -3)) is OUTSIDE
    assert wedge_location(c, b, a, Point(-3, -3)) is OUTSIDE
    assert wedge_location(c, b, a, Point(3, 3)) is INSIDE


def test_wedge_straight_angle_needs_a_turn():
    a, b, c = Point(-10, 0), Point(0, 0), Point(10, 0)
    assert wedge_location(a, b, c, Point(0, 5)) is OUTSIDE
    assert wedge_location(a, b, c, Point(0, 5), Orientation.COUNTER_CLOCKWISE) is INSIDE
    assert wedge_location(a, b, c, Point(0, -5), Orientation.COUNTER_CLOCKWISE) is OUTSIDE
    assert wedge_location(a, b, c, Point(0, -5), Orientation.CLOCKWISE) is INSIDE
    assert wedge_location(a, b, c, Point(3, 0), Orientation.CLOCKWISE) is EDGE


@pytest.mark.parametrize("polygon", [
    [Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0), Point(5, 0)],
    [Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 10), Point(5, 12), Point(0, 10)],
])
def test_colinear_run_from_base(polygon):
    assert locate(polygon, (7, 0), LocationMethod.CONVEX_BINARY) is EDGE
    assert locate(polygon, (11, 0), LocationMethod.CONVEX_BINARY) is OUTSIDE
    assert locate(polygon, (7, 1), LocationMethod.CONVEX_BINARY) is INSIDE
