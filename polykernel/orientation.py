"""
Orientation predicate.

Every turn/side decision in the kernel goes through orientation() (or the
signed area it is computed from), so colinear ties are broken the same way
everywhere. Comparisons are exact: with float input, values that are colinear
on paper may not be colinear after rounding.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Sequence

from .vector import Point, cross, dot, sub


class Orientation(Enum):
    COLINEAR = auto()
    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


def signed_area(a: Point, b: Point, p: Point):
    """[ABP] = AB x AP, twice the signed area of triangle abp."""
    return cross(sub(b, a), sub(p, a))


def orientation_of(area) -> Orientation:
    if area == 0:
        return Orientation.COLINEAR
    return Orientation.CLOCKWISE if area < 0 else Orientation.COUNTER_CLOCKWISE


def orientation(a: Point, b: Point, p: Point) -> Orientation:
    """Rotational sense of a -> b -> p (y axis pointing up)."""
    return orientation_of(signed_area(a, b, p))


def on_segment(a: Point, b: Point, p: Point) -> bool:
    """True if p lies on the closed segment ab."""
    if orientation(a, b, p) is not Orientation.COLINEAR:
        return False
    return dot(sub(p, a), sub(p, b)) <= 0


def polygon_signed_area(polygon: Sequence[Point]):
    """Shoelace sum: twice the signed area, positive for CCW vertex order."""
    n = len(polygon)
    area = 0
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        area += cross(a, b)
    return area


def polygon_orientation(polygon: Sequence[Point]) -> Orientation:
    return orientation_of(polygon_signed_area(polygon))
