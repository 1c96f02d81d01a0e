import matplotlib

matplotlib.use("Agg")

import pytest

from polykernel.vector import Point

TRIANGLE = [Point(0, 0), Point(10, 0), Point(5, 5)]
SQUARE = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]

# Concave L with the reflex vertex at (1, 1).
L_SHAPE = [Point(0, 0), Point(2, 0), Point(2, 1), Point(1, 1), Point(1, 2), Point(0, 2)]
ARROW = [Point(0, 1), Point(2, 1), Point(2, 0), Point(4, 1.5), Point(2, 3), Point(2, 2), Point(0, 2)]

# Clockwise convex heptagon.
HEPTAGON_CW = [
    Point(0, 10), Point(14, 20), Point(17, 20), Point(20, 10),
    Point(20, 0), Point(10, -5), Point(0, 0),
]


@pytest.fixture
def triangle():
    return list(TRIANGLE)


@pytest.fixture
def square():
    return list(SQUARE)


@pytest.fixture
def heptagon_cw():
    return list(HEPTAGON_CW)


@pytest.fixture
def heptagon_ccw():
    return list(reversed(HEPTAGON_CW))


@pytest.fixture
def l_shape():
    return list(L_SHAPE)


@pytest.fixture
def arrow():
    return list(ARROW)
