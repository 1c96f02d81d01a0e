"""
Text formats.

.poly  first line N, then N lines "x y"; an optional extra line holds a
       query point.
.tri   "# vertices", N, N coordinate lines, "# triangles", M, M index triples.
.hull  N, then N lines "x y".

Lines starting with '#' and blank lines are ignored when reading.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from . import config
from .errors import InvalidInputError
from .vector import Point

PathLike = Union[str, Path]


def _data_lines(path: PathLike) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [l.strip() for l in f if l.strip() and not l.lstrip().startswith("#")]


def _parse_point(line: str, path: PathLike) -> Point:
    parts = line.split()
    if len(parts) != 2:
        raise InvalidInputError(f"{path}: expected 'x y', got {line!r}")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError as exc:
        raise InvalidInputError(f"{path}: bad coordinate in {line!r}") from exc


def _parse_count(line: str, path: PathLike) -> int:
    try:
        n = int(line)
    except ValueError as exc:
        raise InvalidInputError(f"{path}: expected a vertex count, got {line!r}") from exc
    if n < 0:
        raise InvalidInputError(f"{path}: negative count {n}")
    return n


def read_polygon(path: PathLike) -> Tuple[List[Point], Optional[Point]]:
    """Read a .poly file. Returns (points, query or None)."""
    lines = _data_lines(path)
    if not lines:
        raise InvalidInputError(f"{path}: empty file")
    n = _parse_count(lines[0], path)
    if len(lines) < n + 1:
        raise InvalidInputError(f"{path}: expected {n} points, found {len(lines) - 1}")

    points = [_parse_point(l, path) for l in lines[1:n + 1]]
    query = _parse_point(lines[n + 1], path) if len(lines) > n + 1 else None
    return points, query


def write_polygon(points: Sequence, path: PathLike, query=None) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fmt = config.POLY_FORMAT
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(points)}\n")
        for x, y in points:
            f.write(f"{fmt.format(x)} {fmt.format(y)}\n")
        if query is not None:
            f.write(f"{fmt.format(query[0])} {fmt.format(query[1])}\n")


def write_triangulation(points: Sequence, triangles: Iterable[Tuple[int, int, int]], path: PathLike) -> None:
    triangles = list(triangles)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# vertices\n")
        f.write(f"{len(points)}\n")
        for x, y in points:
            f.write(f"{x} {y}\n")

        f.write("# triangles\n")
        f.write(f"{len(triangles)}\n")
        for t in triangles:
            f.write(f"{t[0]} {t[1]} {t[2]}\n")


def read_triangulation(path: PathLike) -> Tuple[List[Point], List[Tuple[int, int, int]]]:
    lines = _data_lines(path)
    if not lines:
        raise InvalidInputError(f"{path}: empty file")

    i = 0
    n = _parse_count(lines[i], path)
    i += 1
    pts = [_parse_point(l, path) for l in lines[i:i + n]]
    i += n

    tris = []
    if i < len(lines):
        nt = _parse_count(lines[i], path)
        i += 1
        for line in lines[i:i + nt]:
            try:
                v0, v1, v2 = map(int, line.split())
            except ValueError as exc:
                raise InvalidInputError(f"{path}: bad triangle {line!r}") from exc
            tris.append((v0, v1, v2))
    return pts, tris


def write_hull(points: Sequence, path: PathLike) -> None:
    write_polygon(points, path)


def format_point(p, precision: Optional[int] = None) -> str:
    prec = config.PRECISION if precision is None else precision
    return f"[{float(p[0]):.{prec}f}, {float(p[1]):.{prec}f}]"


def format_points(points: Iterable, precision: Optional[int] = None) -> str:
    return " ".join(format_point(p, precision) for p in points)


def format_triangles(triangles: Iterable, precision: Optional[int] = None) -> List[str]:
    """One 'Triangle i: A(x, y) B(x, y) C(x, y)' line per triangle."""
    prec = config.PRECISION if precision is None else precision
    out = []
    for i, tri in enumerate(triangles):
        corners = " ".join(
            f"{name}({float(p[0]):.{prec}f}, {float(p[1]):.{prec}f})"
            for name, p in zip("ABC", tri)
        )
        out.append(f"Triangle {i}: {corners}")
    return out


def summary_line(name: str, **fields) -> str:
    """Machine-readable 'name,k=v,k=v' line."""
    return ",".join([name] + [f"{k}={v}" for k, v in fields.items()])


def parse_kv_line(line: str) -> Dict[str, str]:
    parts = line.strip().split(",")
    out: Dict[str, str] = {"algorithm": parts[0]}
    for p in parts[1:]:
        if "=" in p:
            k, v = p.split("=", 1)
            out[k.strip()] = v.strip()
    return out
