"""
matplotlib rendering of polygons, triangulations, hulls and benchmark curves.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.collections import PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from .location import PointLocation

plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10

COLORS = {
    'gift-wrapping': '#e41a1c',
    'graham-scan': '#377eb8',
    'monotone-chain': '#4daf4a',
    'ear-clipping': '#ff7f00',
    'ray-cast': '#984ea3',
    'convex-linear': '#a65628',
    'convex-binary': '#f781bf',
}

LOCATION_COLORS = {
    PointLocation.INSIDE: '#4daf4a',
    PointLocation.OUTSIDE: '#e41a1c',
    PointLocation.EDGE: '#ff7f00',
}


def to_array(points: Sequence) -> np.ndarray:
    """(n, 2) float array from a sequence of (x, y) pairs."""
    return np.array([(float(x), float(y)) for x, y in points], dtype=float).reshape(-1, 2)


def plot_polygon(points: Sequence, ax, color: str = 'black', closed: bool = True, label: Optional[str] = None):
    vertices = to_array(points)
    outline = np.vstack([vertices, vertices[0]]) if closed else vertices
    ax.plot(outline[:, 0], outline[:, 1], '-', color=color, linewidth=1.5, label=label)
    ax.scatter(vertices[:, 0], vertices[:, 1], c=color, s=20, zorder=5)
    ax.set_aspect('equal')


def plot_triangulation(points: Sequence, triangles: Sequence[Tuple[int, int, int]], ax,
                       color: str = COLORS['ear-clipping'], title: Optional[str] = None):
    vertices = to_array(points)
    patches = [MplPolygon(vertices[list(tri)], closed=True) for tri in triangles]
    p = PatchCollection(patches, alpha=0.4, facecolor=color, edgecolor='#333333', linewidth=0.5)
    ax.add_collection(p)
    plot_polygon(points, ax)
    ax.set_title(title or f'{len(triangles)} triangles')


def plot_hull(points: Sequence, hull: Sequence, ax, method: str = 'monotone-chain'):
    cloud = to_array(points)
    ax.scatter(cloud[:, 0], cloud[:, 1], c='#999999', s=10, zorder=3)
    plot_polygon(hull, ax, color=COLORS.get(method, 'black'), label=method)
    ax.set_title(f'{method} ({len(hull)} vertices)')


def plot_locations(polygon: Sequence, queries: Sequence, locations: Sequence[PointLocation], ax):
    plot_polygon(polygon, ax)
    q = to_array(queries)
    colors = [LOCATION_COLORS[loc] for loc in locations]
    ax.scatter(q[:, 0], q[:, 1], c=colors, s=16, zorder=6)


def plot_benchmark_times(df: pd.DataFrame, output: Path) -> Path:
    """Log-log time vs. size, one line per algorithm (mean over runs and kinds)."""
    fig, ax = plt.subplots(figsize=(10, 6))

    for alg in df['algorithm'].unique():
        alg_data = df[df['algorithm'] == alg].groupby('num_vertices')['time_ms'].mean().reset_index()
        ax.plot(alg_data['num_vertices'], alg_data['time_ms'],
                'o-', label=alg, color=COLORS.get(alg, 'gray'), linewidth=2, markersize=6)

    ax.set_xlabel('Number of Vertices (N)')
    ax.set_ylabel('Time (ms)')
    ax.set_title('Geometry Kernel Performance')
    ax.legend(loc='upper left')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.grid(True, alpha=0.3)

    return save(fig, output)


def save(fig, output: Path) -> Path:
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output
