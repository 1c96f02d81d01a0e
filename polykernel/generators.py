"""
Deterministic polygon and point-set generators for tests and benchmarks.

Every random generator takes a seed, so datasets are reproducible.
"""

from __future__ import annotations

import math
import random
from typing import Callable, Dict, List

from . import config
from .errors import InvalidInputError
from .vector import Point, rotate


def rotate_points(points: List[Point], angle_rad: float) -> List[Point]:
    return [rotate(p, angle_rad) for p in points]


def convex_polygon(n: int, radius: float = 100.0) -> List[Point]:
    """Regular n-gon, counter-clockwise."""
    return [
        Point(radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Star-shaped random polygon: sorted random angles, random radii. Simple."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append(Point(r * math.cos(angle), r * math.sin(angle)))
    return points


def star_polygon(n_pairs: int, outer: float = 100.0, inner: float = 30.0) -> List[Point]:
    points = []
    for i in range(2 * n_pairs):
        angle = math.pi * i / n_pairs
        r = outer if i % 2 == 0 else inner
        points.append(Point(r * math.cos(angle), r * math.sin(angle)))
    return points


def comb_polygon(teeth: int) -> List[Point]:
    """Concave comb with the given number of triangular teeth; 4 + 3 * teeth vertices."""
    pts = [Point(0, 0), Point(teeth * 2, 0), Point(teeth * 2, 1)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.extend([Point(x + 0.5, 1), Point(x, 2), Point(x - 0.5, 1)])
    pts.append(Point(0, 1))
    return pts


def random_points(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Uniform points in a disc, for hull construction."""
    rng = random.Random(seed + n)
    points = []
    for _ in range(n):
        angle = rng.random() * 2 * math.pi
        r = radius * math.sqrt(rng.random())
        points.append(Point(r * math.cos(angle), r * math.sin(angle)))
    return points


GENERATORS: Dict[str, Callable[[int, int], List[Point]]] = {
    "convex": lambda n, seed: convex_polygon(n),
    "random": lambda n, seed: random_polygon(n, seed=seed),
    "star": lambda n, seed: star_polygon(max(3, n // 2)),
    "comb": lambda n, seed: comb_polygon(max(1, (n - 4) // 3)),
    "points": lambda n, seed: random_points(n, seed=seed),
}


def generate(kind: str, n: int, seed: int = 42, rotated: bool = True) -> List[Point]:
    """Build a named dataset; rotated by config.ROT_ANGLE unless told otherwise."""
    if kind not in GENERATORS:
        raise InvalidInputError(f"Unknown dataset kind {kind!r}; choose from {sorted(GENERATORS)}")
    if n < 3:
        raise InvalidInputError(f"Dataset needs at least 3 points, got {n}")
    points = GENERATORS[kind](n, seed)
    return rotate_points(points, config.ROT_ANGLE) if rotated else points
