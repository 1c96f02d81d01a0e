"""
Ear-clipping triangulation.

The working polygon is a doubly linked list of vertex indices (prev/next
arrays), so clipping an ear is O(1) and the caller's sequence is never
touched. The default ear test only checks that the candidate triangle turns
the same way as the whole polygon; it does not look for other vertices inside
the ear. That is enough for convex polygons and for many simple ones, but a
reflex vertex poking into a candidate ear yields overlapping triangles.
strict=True adds the containment check.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Tuple

from .errors import TriangulationError
from .orientation import signed_area
from .polygon import as_polygon, require_area
from .vector import Point

logger = logging.getLogger(__name__)


class Triangle(NamedTuple):
    a: Point
    b: Point
    c: Point

    def signed_area(self):
        """Twice the signed area, positive for CCW."""
        return signed_area(self.a, self.b, self.c)

    def area(self):
        return abs(self.signed_area()) / 2


def _contains(a: Point, b: Point, c: Point, p: Point, sign: int) -> bool:
    # p inside or on the boundary of the triangle abc that turns with `sign`.
    return (signed_area(a, b, p) * sign >= 0
            and signed_area(b, c, p) * sign >= 0
            and signed_area(c, a, p) * sign >= 0)


def ear_clip(polygon: Iterable, strict: bool = False) -> List[Tuple[int, int, int]]:
    """
    Triangulate a simple polygon, returning n - 2 index triples.

    Raises DegenerateInputError for zero-area input and TriangulationError
    when a full pass over the remaining vertices finds no ear.
    """
    pts = as_polygon(polygon)
    sign = 1 if require_area(pts) > 0 else -1
    n = len(pts)

    prev = [(i - 1) % n for i in range(n)]
    nxt = [(i + 1) % n for i in range(n)]
    head = 0
    remaining = n

    triangles: List[Tuple[int, int, int]] = []
    cur = head
    misses = 0
    while remaining > 3:
        a, b, c = prev[cur], cur, nxt[cur]
        is_ear = signed_area(pts[a], pts[b], pts[c]) * sign > 0
        if is_ear and strict:
            v = nxt[c]
            while v != a:
                if pts[v] not in (pts[a], pts[b], pts[c]) and _contains(pts[a], pts[b], pts[c], pts[v], sign):
                    is_ear = False
                    break
                v = nxt[v]

        if is_ear:
            triangles.append((a, b, c))
            nxt[a] = c
            prev[c] = a
            remaining -= 1
            if b == head:
                head = c
            cur = head
            misses = 0
        else:
            cur = c
            misses += 1
            if misses > remaining:
                raise TriangulationError(
                    f"No ear found among {remaining} remaining vertices; polygon is not simple?"
                )

    triangles.append((prev[head], head, nxt[head]))
    logger.debug("ear clip: %d vertices -> %d triangles", n, len(triangles))
    return triangles


def triangulate(polygon: Iterable, strict: bool = False) -> List[Triangle]:
    """Ear-clipping triangulation returning Triangle(a, b, c) per ear."""
    pts = as_polygon(polygon)
    return [Triangle(pts[a], pts[b], pts[c]) for a, b, c in ear_clip(pts, strict=strict)]
