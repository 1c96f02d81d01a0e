"""Polygon helpers: coercion, area, convexity and simplicity checks."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from .errors import DegenerateInputError, InvalidInputError
from .orientation import Orientation, on_segment, orientation, polygon_signed_area
from .vector import Point, as_points


def as_polygon(points: Iterable, min_vertices: int = 3) -> List[Point]:
    """Copy points into a list of Point, requiring at least min_vertices."""
    polygon = as_points(points)
    if len(polygon) < min_vertices:
        raise InvalidInputError(
            f"Polygon must have at least {min_vertices} vertices, got {len(polygon)}"
        )
    return polygon


def edges(polygon: Sequence[Point]) -> Iterator[Tuple[Point, Point]]:
    """Yield (a, b) for every edge, including the closing one."""
    n = len(polygon)
    for i in range(n):
        yield polygon[i], polygon[(i + 1) % n]


def polygon_area(polygon: Sequence[Point]):
    """Unsigned area."""
    return abs(polygon_signed_area(polygon)) / 2


def require_area(polygon: Sequence[Point]):
    """Return the shoelace sum, raising if the polygon has zero area."""
    area2 = polygon_signed_area(polygon)
    if area2 == 0:
        raise DegenerateInputError("Polygon has zero area")
    return area2


def drop_colinear(polygon: Sequence[Point]) -> List[Point]:
    """Copy without repeated consecutive vertices and without vertices inside a straight run."""
    pts = [p for i, p in enumerate(polygon) if p != polygon[i - 1]]
    n = len(pts)
    return [
        pts[i] for i in range(n)
        if orientation(pts[i - 1], pts[i], pts[(i + 1) % n]) is not Orientation.COLINEAR
    ]


def is_convex(polygon: Sequence[Point]) -> bool:
    """
    True if every turn agrees with the polygon orientation.

    Colinear consecutive vertices are tolerated; zero-area polygons are not
    convex.
    """
    polygon = as_polygon(polygon)
    if polygon_signed_area(polygon) == 0:
        return False
    n = len(polygon)
    seen = None
    for i in range(n):
        o = orientation(polygon[i - 1], polygon[i], polygon[(i + 1) % n])
        if o is Orientation.COLINEAR:
            continue
        if seen is None:
            seen = o
        elif o is not seen:
            return False
    return True


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """Closed-segment intersection test, touching endpoints included."""
    o1 = orientation(a, b, c)
    o2 = orientation(a, b, d)
    o3 = orientation(c, d, a)
    o4 = orientation(c, d, b)
    if (o1 is not o2 and Orientation.COLINEAR not in (o1, o2)
            and o3 is not o4 and Orientation.COLINEAR not in (o3, o4)):
        return True
    return (on_segment(a, b, c) or on_segment(a, b, d)
            or on_segment(c, d, a) or on_segment(c, d, b))


def self_intersections(polygon: Sequence[Point]) -> List[Tuple[int, int]]:
    """Pairs of non-adjacent edge indices that intersect. O(n^2)."""
    polygon = as_polygon(polygon)
    n = len(polygon)
    found = []
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if segments_intersect(polygon[i], polygon[(i + 1) % n],
                                  polygon[j], polygon[(j + 1) % n]):
                found.append((i, j))
    return found


def is_simple(polygon: Sequence[Point]) -> bool:
    return not self_intersections(polygon)
