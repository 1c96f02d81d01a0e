"""
Point location: classify a query point against a polygon.

Three strategies sit behind locate():

- RAY_CAST       crossing number, any simple polygon, O(n)
- CONVEX_LINEAR  edge-side scan, convex polygons only, O(n)
- CONVEX_BINARY  angular binary search around polygon[0], convex only, O(log n)

The convex strategies do not check convexity; see polygon.is_convex().
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence, Union

from .orientation import Orientation, on_segment, orientation, polygon_orientation
from .polygon import as_polygon, drop_colinear, edges, require_area
from .vector import Point, as_point

logger = logging.getLogger(__name__)


class PointLocation(Enum):
    INSIDE = "Inside"
    OUTSIDE = "Outside"
    EDGE = "Edge"

    def __str__(self) -> str:
        return self.value


class LocationMethod(Enum):
    RAY_CAST = "ray-cast"
    CONVEX_LINEAR = "convex-linear"
    CONVEX_BINARY = "convex-binary"


def locate_ray_cast(polygon: Sequence[Point], query: Point) -> PointLocation:
    """
    Crossing-number test with a horizontal ray towards +x.

    Horizontal edges (and zero-length edges from duplicate vertices) only
    report EDGE when the query sits on them; they never count as a crossing.
    An edge counts when lo.y <= query.y < hi.y, so a ray through a shared
    vertex is counted once, and the edge lies to the right of the query.
    Points on non-horizontal edges follow this half-open rule instead of
    reporting EDGE.
    """
    inside = False
    for a, b in edges(polygon):
        if a.y == b.y:
            if query.y == a.y and min(a.x, b.x) <= query.x <= max(a.x, b.x):
                return PointLocation.EDGE
            continue

        lo, hi = (a, b) if a.y < b.y else (b, a)
        if lo.y <= query.y < hi.y:
            if orientation(lo, hi, query) is Orientation.COUNTER_CLOCKWISE:
                inside = not inside

    return PointLocation.INSIDE if inside else PointLocation.OUTSIDE


def locate_convex_linear(polygon: Sequence[Point], query: Point) -> PointLocation:
    """
    Check that the query is on the interior side of every edge.

    A query colinear with an edge but off it can still lie on a neighbouring
    colinear edge, so that edge is skipped; a query beyond the polygon along
    the line is rejected by the next non-colinear edge.
    """
    winding = polygon_orientation(polygon)
    n = len(polygon)
    for i in range(n):
        prev = polygon[i - 1]
        cur = polygon[i]
        o = orientation(prev, cur, query)
        if o is Orientation.COLINEAR:
            if on_segment(prev, cur, query):
                return PointLocation.EDGE
            continue
        if o is not winding:
            return PointLocation.OUTSIDE
    return PointLocation.INSIDE


def wedge_location(a: Point, b: Point, c: Point, p: Point, turn: Optional[Orientation] = None) -> PointLocation:
    """
    Angular wedge test for the triangle (a, b, c) at apex b.

    INSIDE means p is strictly inside the angle abc: both orientations
    (b, c, p) and (a, b, p) equal the wedge turn. The turn defaults to the
    orientation of (a, b, c); a straight angle has no turn of its own, so the
    caller passes the winding that picks the interior half-plane. Points in
    the mirrored cone behind b agree on both sides but not with the turn and
    are OUTSIDE.
    EDGE means p lies on segment ab or bc, endpoints included. A point
    colinear with one of the sides but beyond the segment is OUTSIDE.
    """
    if turn is None:
        turn = orientation(a, b, c)
    bcp = orientation(b, c, p)
    abp = orientation(a, b, p)

    if bcp is Orientation.COLINEAR or abp is Orientation.COLINEAR:
        if (bcp is Orientation.COLINEAR and on_segment(b, c, p)) or (
            abp is Orientation.COLINEAR and on_segment(a, b, p)
        ):
            return PointLocation.EDGE
        return PointLocation.OUTSIDE

    if bcp is abp is turn:
        return PointLocation.INSIDE
    return PointLocation.OUTSIDE


def triangle_location(a: Point, b: Point, c: Point, p: Point) -> PointLocation:
    """Classify p against triangle abc of either orientation."""
    a, b, c, p = (as_point(v) for v in (a, b, c, p))
    sides = [orientation(a, b, p), orientation(b, c, p), orientation(c, a, p)]
    if Orientation.COLINEAR not in sides and sides[0] is sides[1] is sides[2]:
        return PointLocation.INSIDE
    if on_segment(a, b, p) or on_segment(b, c, p) or on_segment(c, a, p):
        return PointLocation.EDGE
    return PointLocation.OUTSIDE


def _spoke_edge(polygon: Sequence[Point], query: Point, spokes) -> PointLocation:
    # Diagonal edges are interior. The query lies on a spoke segment from the
    # base, so it is inside the polygon; it is on the boundary only at a
    # vertex or on a supporting line through the base. Those lines carry the
    # edges base-polygon[1] and polygon[-1]-base, plus any colinear vertices
    # that continue them.
    base = polygon[0]
    if query == base or any(query == polygon[k] for k in spokes):
        return PointLocation.EDGE
    if (orientation(base, polygon[1], query) is Orientation.COLINEAR
            or orientation(polygon[-1], base, query) is Orientation.COLINEAR):
        return PointLocation.EDGE
    return PointLocation.INSIDE


def locate_convex_binary(polygon: Sequence[Point], query: Point) -> PointLocation:
    """
    Binary search over the fan of triangles around polygon[0].

    The window [right, left] shrinks towards the wedge that contains the
    query until it spans a single fan triangle (polygon[left], base,
    polygon[right]); the query is then compared with that triangle's outer
    edge. Repeated vertices and vertices inside a straight run are dropped
    first, so every fan wedge is a proper angle.
    """
    polygon = drop_colinear(polygon)
    base = polygon[0]
    winding = polygon_orientation(polygon)
    right = 1
    left = len(polygon) - 1

    while left - right > 1:
        mid = (left + right) // 2
        in_left = wedge_location(polygon[left], base, polygon[mid], query, winding)
        in_right = wedge_location(polygon[mid], base, polygon[right], query, winding)

        if in_left is PointLocation.INSIDE:
            right = mid
        elif in_right is PointLocation.INSIDE:
            left = mid
        elif PointLocation.EDGE in (in_left, in_right):
            return _spoke_edge(polygon, query, (left, mid, right))
        else:
            return PointLocation.OUTSIDE

    last = wedge_location(polygon[left], base, polygon[right], query, winding)
    if last is PointLocation.OUTSIDE:
        return PointLocation.OUTSIDE
    if last is PointLocation.EDGE:
        return _spoke_edge(polygon, query, (left, right))

    side = orientation(polygon[left], query, polygon[right])
    if side is Orientation.COLINEAR:
        return PointLocation.EDGE
    if side is winding:
        return PointLocation.INSIDE
    return PointLocation.OUTSIDE


_LOCATORS = {
    LocationMethod.RAY_CAST: locate_ray_cast,
    LocationMethod.CONVEX_LINEAR: locate_convex_linear,
    LocationMethod.CONVEX_BINARY: locate_convex_binary,
}


def locate(
    polygon: Sequence,
    query,
    method: Union[LocationMethod, str] = LocationMethod.RAY_CAST,
) -> PointLocation:
    """Classify query as INSIDE, OUTSIDE or on the EDGE of polygon."""
    method = LocationMethod(method)
    polygon = as_polygon(polygon)
    query = as_point(query)
    if method is not LocationMethod.RAY_CAST:
        require_area(polygon)

    result = _LOCATORS[method](polygon, query)
    logger.debug("locate %s n=%d query=%s -> %s", method.value, len(polygon), tuple(query), result)
    return result
