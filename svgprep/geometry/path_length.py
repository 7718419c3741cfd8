"""Path Length Estimator: stroke lengths for sizing draw-on dash animations.

The estimate walks the commands once and uses fixed correction factors for
curves instead of integrating arc length. Animation timing in existing
presets depends on these magnitudes, so the factors are kept as named,
configurable constants. ``precise_path_length`` is the exact alternative.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
from svgpathtools import parse_path

from svgprep.svg.path_data import CommandKind, PathCommand, walk
from svgprep.svg.primitives import Circle, Ellipse, Line, Path, Polygon, Rect, Shape
from svgprep.svg.serializer import format_path_data
from svgprep.utils.geometry import distance, ellipse_perimeter, polyline_length

logger = logging.getLogger(__name__)

CUBIC_LENGTH_FACTOR = 1.2
QUADRATIC_LENGTH_FACTOR = 1.15
ARC_RADIUS_FACTOR = 0.5


@dataclass(frozen=True)
class LengthModel:
    """How lengths are measured: the factor estimate, or "precise" via svgpathtools."""

    cubic_factor: float = CUBIC_LENGTH_FACTOR
    quadratic_factor: float = QUADRATIC_LENGTH_FACTOR
    arc_radius_factor: float = ARC_RADIUS_FACTOR
    method: str = "estimate"


def estimate_path_length(commands: Iterable[PathCommand], model: LengthModel | None = None) -> float:
    """Approximate length of a command sequence. Always >= 0."""
    model = model or LengthModel()
    total = 0.0

    for seg in walk(commands):
        kind = seg.command.kind
        if kind is CommandKind.MOVE:
            continue
        chord = distance(*seg.start, *seg.end)

        if kind is CommandKind.CUBIC:
            total += chord * model.cubic_factor
        elif kind is CommandKind.QUADRATIC:
            total += chord * model.quadratic_factor
        elif kind is CommandKind.ARC:
            rx, ry = abs(seg.command.params[0]), abs(seg.command.params[1])
            total += max(chord, (rx + ry) / 2 * model.arc_radius_factor)
        else:
            # line, horizontal, vertical, close
            total += chord

    return max(0.0, total)


def precise_path_length(commands: Iterable[PathCommand]) -> float:
    """Numerically integrated arc length (svgpathtools)."""
    d = format_path_data(commands)
    if not d:
        return 0.0
    return max(0.0, float(parse_path(d).length()))


def path_length(commands: Iterable[PathCommand], model: LengthModel | None = None) -> float:
    model = model or LengthModel()
    commands = tuple(commands)
    if model.method == "precise":
        try:
            return precise_path_length(commands)
        except Exception as e:
            logger.warning("Precise length failed (%s), using estimate", e)
    return estimate_path_length(commands, model)


def shape_length(shape: Shape, model: LengthModel | None = None) -> float | None:
    """Stroke length of a leaf shape; None for shapes without a stroke outline (groups)."""
    if isinstance(shape, Path):
        return path_length(shape.commands, model)
    if isinstance(shape, Line):
        return distance(shape.x1, shape.y1, shape.x2, shape.y2)
    if isinstance(shape, Polygon):
        return polyline_length(np.asarray(shape.points, dtype=np.float64).reshape(-1, 2), closed=shape.closed)
    if isinstance(shape, Rect):
        return 2 * (shape.width + shape.height)
    if isinstance(shape, Circle):
        return 2 * math.pi * shape.r
    if isinstance(shape, Ellipse):
        return ellipse_perimeter(shape.rx, shape.ry)
    return None
