"""
Convex hull constructions.

All three algorithms return the hull counter-clockwise, starting at the
lowest-leftmost input point, without duplicate points. Turns are tested
strictly, so points lying on a hull edge (colinear boundary points) are
dropped by every algorithm and the three results are identical lists.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, List, Sequence, Union

from .errors import DegenerateInputError, HullError, InvalidInputError
from .orientation import Orientation, orientation
from .vector import Point, as_points, manhattan

logger = logging.getLogger(__name__)


class HullMethod(Enum):
    GIFT_WRAPPING = "gift-wrapping"
    GRAHAM_SCAN = "graham-scan"
    MONOTONE_CHAIN = "monotone-chain"


def leftmost_index(points: Sequence[Point]) -> int:
    """Index of the leftmost point; lowest y on ties, then first occurrence."""
    best = 0
    for i in range(1, len(points)):
        if (points[i].x, points[i].y) < (points[best].x, points[best].y):
            best = i
    return best


def _prepare(points: Iterable) -> List[Point]:
    pts = as_points(points)
    if len(pts) < 3:
        raise InvalidInputError(f"Convex hull needs at least 3 points, got {len(pts)}")

    a = pts[0]
    b = next((p for p in pts if p != a), None)
    if b is None:
        raise DegenerateInputError("All input points coincide")
    if all(orientation(a, b, p) is Orientation.COLINEAR for p in pts):
        raise DegenerateInputError("All input points are colinear")
    return pts


def _is_ccw(a: Point, b: Point, c: Point) -> bool:
    return orientation(a, b, c) is Orientation.COUNTER_CLOCKWISE


def gift_wrapping(points: Iterable) -> List[Point]:
    """Jarvis march, O(n*h)."""
    pts = _prepare(points)
    start = pts[leftmost_index(pts)]

    hull: List[Point] = []
    current = start
    # Each iteration adds a distinct hull vertex; a walk longer than n is a bug
    # or non-finite input.
    for _ in range(len(pts)):
        hull.append(current)

        candidate = None
        for p in pts:
            if p == current:
                continue
            if candidate is None:
                candidate = p
                continue
            o = orientation(current, candidate, p)
            if o is Orientation.CLOCKWISE or (
                o is Orientation.COLINEAR
                and manhattan(current, p) > manhattan(current, candidate)
            ):
                candidate = p

        current = candidate
        if current == start:
            logger.debug("gift wrapping: %d points -> %d hull vertices", len(pts), len(hull))
            return hull

    raise HullError("Gift wrapping did not return to the start point")


def graham_scan(points: Iterable) -> List[Point]:
    """Graham scan, O(n log n)."""
    pts = _prepare(points)
    pivot = pts[leftmost_index(pts)]

    def compare_by_angle(a: Point, b: Point) -> int:
        o = orientation(pivot, a, b)
        if o is Orientation.COLINEAR:
            da = manhattan(a, pivot)
            db = manhattan(b, pivot)
            return (da > db) - (da < db)
        return -1 if o is Orientation.COUNTER_CLOCKWISE else 1

    rest = sorted((p for p in pts if p != pivot), key=cmp_to_key(compare_by_angle))

    hull: List[Point] = [pivot]
    for p in rest:
        while len(hull) > 1 and not _is_ccw(hull[-2], hull[-1], p):
            hull.pop()
        hull.append(p)

    logger.debug("graham scan: %d points -> %d hull vertices", len(pts), len(hull))
    return hull


def _half_chain(points: Iterable[Point]) -> List[Point]:
    chain: List[Point] = []
    for p in points:
        while len(chain) > 1 and not _is_ccw(chain[-2], chain[-1], p):
            chain.pop()
        chain.append(p)
    return chain


def monotone_chain(points: Iterable) -> List[Point]:
    """Andrew's monotone chain, O(n log n)."""
    pts = _prepare(points)
    ordered = sorted(pts, key=lambda p: (p.x, p.y))

    lower = _half_chain(ordered)
    upper = _half_chain(reversed(ordered))
    hull = lower[:-1] + upper[:-1]

    logger.debug("monotone chain: %d points -> %d hull vertices", len(pts), len(hull))
    return hull


_BUILDERS = {
    HullMethod.GIFT_WRAPPING: gift_wrapping,
    HullMethod.GRAHAM_SCAN: graham_scan,
    HullMethod.MONOTONE_CHAIN: monotone_chain,
}


def convex_hull(
    points: Iterable,
    method: Union[HullMethod, str] = HullMethod.MONOTONE_CHAIN,
) -> List[Point]:
    return _BUILDERS[HullMethod(method)](points)
