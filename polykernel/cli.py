"""
Command line entry point.

    polykernel locate -i square.poly --query 2 1 --method convex-binary
    polykernel hull -i cloud.poly --method graham-scan -o cloud.hull
    polykernel triangulate -i polygon.poly -o polygon.tri
    polykernel generate --output polygons/generated --sizes 10 100
    polykernel bench --sizes 10 100 --runs 3 --csv results/bench.csv
    polykernel plot -i polygon.poly --triangulate -o polygon.png
    polykernel plot -i square.poly --locate convex-binary -o square.png

Every command prints a final 'name,key=value,...' summary line.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from . import __version__, config
from .errors import GeometryError, InvalidInputError
from .generators import GENERATORS, generate
from .hull import HullMethod, convex_hull
from .io import (
    format_points,
    format_triangles,
    read_polygon,
    summary_line,
    write_hull,
    write_polygon,
    write_triangulation,
)
from .location import LocationMethod, locate
from .triangulation import ear_clip

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> str:
    return f"{(time.perf_counter() - start) * 1000:.3f}"


def cmd_locate(args: argparse.Namespace) -> int:
    polygon, query = read_polygon(args.input)
    if args.query is not None:
        query = tuple(args.query)
    if query is None:
        raise InvalidInputError(f"{args.input}: no query point in file and none given with --query")

    start = time.perf_counter()
    location = locate(polygon, query, args.method)
    elapsed = _elapsed_ms(start)

    print(location)
    print(summary_line("locate", method=args.method, vertices=len(polygon),
                       location=location, time_ms=elapsed))
    return 0


def cmd_hull(args: argparse.Namespace) -> int:
    points, _ = read_polygon(args.input)

    start = time.perf_counter()
    hull = convex_hull(points, args.method)
    elapsed = _elapsed_ms(start)

    if args.output:
        write_hull(hull, args.output)
        logger.info("wrote hull to %s", args.output)
    print(format_points(hull, args.precision))
    print(summary_line(args.method, points=len(points), hull=len(hull), time_ms=elapsed))
    return 0


def cmd_triangulate(args: argparse.Namespace) -> int:
    polygon, _ = read_polygon(args.input)

    start = time.perf_counter()
    triangles = ear_clip(polygon, strict=args.strict)
    elapsed = _elapsed_ms(start)

    if args.output:
        write_triangulation(polygon, triangles, args.output)
        logger.info("wrote triangulation to %s", args.output)
    for line in format_triangles([[polygon[i] for i in t] for t in triangles], args.precision):
        print(line)
    print(summary_line("earclip", vertices=len(polygon), triangles=len(triangles), time_ms=elapsed))
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    count = 0
    for n in args.sizes:
        for kind in args.kinds:
            path = args.output / f"{kind}_{n}.poly"
            write_polygon(generate(kind, n, seed=args.seed), path)
            count += 1
    logger.info("generated %d datasets in %s", count, args.output)
    print(summary_line("generate", files=count, output=args.output))
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    from .benchmark import run_benchmark, summarize, write_results

    df = run_benchmark(sizes=args.sizes, kinds=args.kinds, runs=args.runs,
                       algorithms_filter=args.algorithms, jobs=args.jobs, seed=args.seed)
    print(summarize(df).to_string(index=False))
    write_results(df, args.csv)
    if args.plot:
        from .plot import plot_benchmark_times

        plot_benchmark_times(df, args.plot)
        logger.info("saved plot to %s", args.plot)
    print(summary_line("bench", rows=len(df), algorithms=df["algorithm"].nunique() if len(df) else 0))
    return 0


def cmd_plot(args: argparse.Namespace) -> int:
    import matplotlib.pyplot as plt

    from .benchmark import query_grid
    from .plot import plot_hull, plot_locations, plot_polygon, plot_triangulation, save

    points, _ = read_polygon(args.input)
    fig, ax = plt.subplots(figsize=(6, 6))
    if args.hull:
        plot_hull(points, convex_hull(points, args.hull), ax, method=args.hull)
    elif args.triangulate:
        plot_triangulation(points, ear_clip(points, strict=args.strict), ax)
    elif args.locate:
        queries = query_grid(points)
        plot_locations(points, queries, [locate(points, q, args.locate) for q in queries], ax)
    else:
        plot_polygon(points, ax)
    save(fig, args.output)
    print(summary_line("plot", input=args.input, output=args.output))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polykernel", description="2D computational geometry kernel")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only warnings and errors")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("locate", help="classify a query point against a polygon")
    p.add_argument("--input", "-i", required=True, type=Path, help="input .poly file")
    p.add_argument("--query", nargs=2, type=float, metavar=("X", "Y"),
                   help="query point (default: the extra line of the .poly file)")
    p.add_argument("--method", choices=[m.value for m in LocationMethod],
                   default=LocationMethod.RAY_CAST.value)
    p.set_defaults(func=cmd_locate)

    p = sub.add_parser("hull", help="convex hull of a point set")
    p.add_argument("--input", "-i", required=True, type=Path)
    p.add_argument("--output", "-o", type=Path, help="write the hull as a .hull file")
    p.add_argument("--method", choices=[m.value for m in HullMethod],
                   default=HullMethod.MONOTONE_CHAIN.value)
    p.add_argument("--precision", type=int, default=config.PRECISION)
    p.set_defaults(func=cmd_hull)

    p = sub.add_parser("triangulate", help="ear-clipping triangulation")
    p.add_argument("--input", "-i", required=True, type=Path)
    p.add_argument("--output", "-o", type=Path, help="write a .tri file")
    p.add_argument("--strict", action="store_true",
                   help="reject ears that contain another vertex")
    p.add_argument("--precision", type=int, default=config.PRECISION)
    p.set_defaults(func=cmd_triangulate)

    p = sub.add_parser("generate", help="write deterministic .poly datasets")
    p.add_argument("--output", default=Path("polygons/generated"), type=Path)
    p.add_argument("--sizes", nargs="+", type=int, default=config.DEFAULT_SIZES)
    p.add_argument("--kinds", nargs="+", choices=sorted(GENERATORS), default=config.DEFAULT_KINDS)
    p.add_argument("--seed", type=int, default=42)
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("bench", help="time every algorithm on generated datasets")
    p.add_argument("--sizes", nargs="+", type=int, default=config.DEFAULT_SIZES)
    p.add_argument("--kinds", nargs="+", choices=sorted(GENERATORS), default=config.DEFAULT_KINDS)
    p.add_argument("--algorithms", nargs="+", help="subset of algorithm names")
    p.add_argument("--runs", type=int, default=config.DEFAULT_RUNS)
    p.add_argument("--jobs", type=int, default=1, help="worker processes")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--csv", type=Path, default=config.RESULTS_DIR / "benchmark.csv",
                   help="write raw results as CSV")
    p.add_argument("--plot", type=Path, help="save a time-vs-size plot")
    p.set_defaults(func=cmd_bench)

    p = sub.add_parser("plot", help="render a polygon with its hull, triangulation or point locations")
    p.add_argument("--input", "-i", required=True, type=Path)
    p.add_argument("--output", "-o", required=True, type=Path)
    group = p.add_mutually_exclusive_group()
    group.add_argument("--hull", choices=[m.value for m in HullMethod])
    group.add_argument("--triangulate", action="store_true")
    group.add_argument("--locate", choices=[m.value for m in LocationMethod],
                       help="classify a grid of query points")
    p.add_argument("--strict", action="store_true")
    p.set_defaults(func=cmd_plot)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)

    try:
        return args.func(args)
    except (GeometryError, OSError) as exc:
        logger.error("%s: %s", args.command, exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
