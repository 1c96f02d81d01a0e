"""
Correctness checks for triangulations and hulls.

Checks for a triangulation:
1. Triangle count: n - 2 triangles for an n-vertex polygon
2. Valid indices: every triangle vertex is a polygon index
3. No degenerate triangles: every triangle has positive area
4. Area preservation: sum of triangle areas == polygon area

Checks for a hull:
1. Membership: every hull vertex is an input point
2. No duplicates
3. Strict convexity, counter-clockwise
4. Containment: no input point is outside the hull
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .location import LocationMethod, PointLocation, locate
from .orientation import Orientation, orientation, signed_area
from .polygon import polygon_area
from .vector import Point, as_points


def verify_triangulation(
    points: Sequence,
    triangles: Iterable[Tuple[int, int, int]],
    rel_tol: float = 1e-6,
) -> Tuple[bool, str]:
    pts = as_points(points)
    tris = list(triangles)
    n = len(pts)

    expected = n - 2
    if len(tris) != expected:
        return False, f"Wrong count: {len(tris)} != {expected}"

    for tri in tris:
        for v in tri:
            if v < 0 or v >= n:
                return False, f"Invalid vertex index: {v}"

    for tri in tris:
        if signed_area(pts[tri[0]], pts[tri[1]], pts[tri[2]]) == 0:
            return False, f"Degenerate triangle: {tri}"

    poly_a = polygon_area(pts)
    tri_a = sum(abs(signed_area(pts[a], pts[b], pts[c])) / 2 for a, b, c in tris)
    if abs(poly_a - tri_a) > rel_tol * max(1, poly_a):
        return False, f"Area mismatch: {float(poly_a):.6f} vs {float(tri_a):.6f}"

    return True, "OK"


def verify_hull(points: Sequence, hull: Sequence) -> Tuple[bool, str]:
    pts = as_points(points)
    hull_pts: List[Point] = as_points(hull)
    members = set(pts)

    for p in hull_pts:
        if p not in members:
            return False, f"Synthesized point: {tuple(p)}"

    if len(set(hull_pts)) != len(hull_pts):
        return False, "Duplicate hull vertex"

    h = len(hull_pts)
    if h < 3:
        return False, f"Hull has only {h} vertices"
    for i in range(h):
        o = orientation(hull_pts[i - 1], hull_pts[i], hull_pts[(i + 1) % h])
        if o is not Orientation.COUNTER_CLOCKWISE:
            return False, f"Turn at vertex {i} is {o.name}"

    for p in pts:
        if locate(hull_pts, p, LocationMethod.CONVEX_LINEAR) is PointLocation.OUTSIDE:
            return False, f"Point outside hull: {tuple(p)}"

    return True, "OK"
