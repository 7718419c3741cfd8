"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box of an Nx2 point array."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def distance(x0: float, y0: float, x1: float, y1: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x1 - x0, y1 - y0)


def polyline_length(points: NDArray[np.float64], closed: bool = False) -> float:
    """Sum of segment lengths; ``closed`` adds the segment back to the first point."""
    if len(points) < 2:
        return 0.0
    if closed:
        points = np.vstack([points, points[:1]])
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


def ellipse_perimeter(rx: float, ry: float) -> float:
    """Ramanujan's second approximation. Exact for circles."""
    if rx <= 0 or ry <= 0:
        return 0.0
    h = ((rx - ry) / (rx + ry)) ** 2
    return float(math.pi * (rx + ry) * (1 + 3 * h / (10 + math.sqrt(4 - 3 * h))))
