"""
2D point type and named vector algebra.

Coordinates can be any real scalar that supports +, -, * and comparison
(int, float, fractions.Fraction). Nothing here converts to float except
rotate(), which needs trigonometry.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, List, NamedTuple

from .errors import InvalidInputError


class Point(NamedTuple):
    x: Any
    y: Any


def as_point(obj) -> Point:
    """Coerce an (x, y) pair into a Point."""
    if isinstance(obj, Point):
        return obj
    try:
        x, y = obj
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Expected an (x, y) pair, got {obj!r}") from exc
    for c in (x, y):
        if isinstance(c, bool) or not isinstance(c, numbers.Real):
            raise InvalidInputError(f"Non-numeric coordinate in {obj!r}")
    return Point(x, y)


def as_points(objs: Iterable) -> List[Point]:
    return [as_point(o) for o in objs]


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def sub(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def scale(a: Point, c) -> Point:
    return Point(a.x * c, a.y * c)


def cross(a: Point, b: Point):
    """Scalar cross product a.x*b.y - a.y*b.x."""
    return a.x * b.y - a.y * b.x


def dot(a: Point, b: Point):
    return a.x * b.x + a.y * b.y


def rotate(a: Point, angle_rad: float) -> Point:
    """Rotate counter-clockwise around the origin."""
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return Point(ca * a.x - sa * a.y, sa * a.x + ca * a.y)


def manhattan(a: Point, b: Point):
    return abs(a.x - b.x) + abs(a.y - b.y)
