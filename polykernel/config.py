"""Defaults shared by the tool layer. Environment variables override a few."""

from __future__ import annotations

import os
from pathlib import Path

RESULTS_DIR = Path(os.environ.get("POLYKERNEL_RESULTS_DIR", "results"))

# Fixed rotation (radians) applied to generated datasets so that regular
# shapes do not produce equal-y vertices.
ROT_ANGLE = 0.123456789

DEFAULT_SIZES = [10, 50, 100, 200, 500]
DEFAULT_RUNS = 3
DEFAULT_KINDS = ["convex", "random", "star"]

# Decimals used when rendering results for people.
PRECISION = int(os.environ.get("POLYKERNEL_PRECISION", "2"))

# .poly coordinates; high precision avoids accidental equal y after rounding.
POLY_FORMAT = "{:.17g}"

LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
