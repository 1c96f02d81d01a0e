"""
Benchmark runner.

Times every hull method, the ear clipper and every point-location method on
generated datasets. Each (algorithm, dataset, run) is an independent job, so
jobs can be spread over a process pool. Results come back as a pandas
DataFrame with one row per run:

    algorithm, polygon, kind, num_vertices, run, time_ms, output_size
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from . import config
from .errors import InvalidInputError
from .generators import generate
from .hull import HullMethod, convex_hull
from .location import LocationMethod, PointLocation, locate
from .triangulation import ear_clip
from .vector import Point

logger = logging.getLogger(__name__)

# Queries per location run, spread over the dataset's bounding box.
LOCATE_QUERIES = 64


@dataclass
class RunResult:
    algorithm: str
    polygon: str
    kind: str
    num_vertices: int
    run: int
    time_ms: float
    output_size: int


def query_grid(points: Sequence[Point], count: int = LOCATE_QUERIES) -> List[Point]:
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    x0, x1, y0, y1 = min(xs), max(xs), min(ys), max(ys)
    side = max(2, int(count ** 0.5))
    return [
        Point(x0 + (x1 - x0) * (i + 0.5) / side, y0 + (y1 - y0) * (j + 0.5) / side)
        for i in range(side)
        for j in range(side)
    ]


def _hull_job(method: str) -> Callable[[List[Point]], int]:
    return lambda pts: len(convex_hull(pts, method))


def _triangulate_job(pts: List[Point]) -> int:
    return len(ear_clip(pts, strict=True))


def _locate_job(method: str) -> Callable[[List[Point]], int]:
    def run(pts: List[Point]) -> int:
        return sum(1 for q in query_grid(pts) if locate(pts, q, method) is not PointLocation.OUTSIDE)
    return run


def algorithms() -> Dict[str, Tuple[Callable[[List[Point]], int], Tuple[str, ...]]]:
    """name -> (job, dataset kinds it is valid for)."""
    table: Dict[str, Tuple[Callable[[List[Point]], int], Tuple[str, ...]]] = {}
    for m in HullMethod:
        table[m.value] = (_hull_job(m.value), ("convex", "random", "star", "comb", "points"))
    table["ear-clipping"] = (_triangulate_job, ("convex", "random", "star"))
    table[LocationMethod.RAY_CAST.value] = (_locate_job(LocationMethod.RAY_CAST.value), ("convex", "random", "star", "comb"))
    for m in (LocationMethod.CONVEX_LINEAR, LocationMethod.CONVEX_BINARY):
        table[m.value] = (_locate_job(m.value), ("convex",))
    return table


def run_one(algorithm: str, kind: str, n: int, run: int, seed: int = 42) -> RunResult:
    job, _ = algorithms()[algorithm]
    pts = generate(kind, n, seed=seed + run)

    start = time.perf_counter()
    size = job(pts)
    elapsed_ms = (time.perf_counter() - start) * 1000

    return RunResult(
        algorithm=algorithm,
        polygon=f"{kind}_{n}",
        kind=kind,
        num_vertices=n,
        run=run,
        time_ms=elapsed_ms,
        output_size=size,
    )


def _run_args(args: Tuple[str, str, int, int, int]) -> RunResult:
    return run_one(*args)


def run_benchmark(
    sizes: Optional[Sequence[int]] = None,
    kinds: Optional[Sequence[str]] = None,
    runs: int = config.DEFAULT_RUNS,
    algorithms_filter: Optional[Sequence[str]] = None,
    jobs: int = 1,
    seed: int = 42,
) -> pd.DataFrame:
    sizes = list(sizes or config.DEFAULT_SIZES)
    kinds = list(kinds or config.DEFAULT_KINDS)
    table = algorithms()
    names = list(algorithms_filter or table)
    unknown = [name for name in names if name not in table]
    if unknown:
        raise InvalidInputError(f"Unknown algorithms {unknown}; choose from {sorted(table)}")

    tasks = []
    for name in names:
        _, valid = table[name]
        for kind in kinds:
            if kind not in valid:
                continue
            for n in sizes:
                for r in range(runs):
                    tasks.append((name, kind, n, r, seed))

    logger.info("benchmark: %d jobs (%d algorithms, sizes=%s, runs=%d)", len(tasks), len(names), sizes, runs)
    if jobs > 1:
        with ProcessPoolExecutor(max_workers=jobs) as pool:
            results = list(pool.map(_run_args, tasks))
    else:
        results = [_run_args(t) for t in tasks]

    df = pd.DataFrame([r.__dict__ for r in results])
    if df.empty:
        df = pd.DataFrame(columns=list(RunResult.__dataclass_fields__))
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std of time_ms per (algorithm, kind, num_vertices)."""
    return (
        df.groupby(["algorithm", "kind", "num_vertices"])["time_ms"]
        .agg(["mean", "std", "min"])
        .reset_index()
        .rename(columns={"mean": "time_ms_mean", "std": "time_ms_std", "min": "time_ms_min"})
    )


def write_results(df: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.info("wrote %d rows to %s", len(df), path)
    return path
