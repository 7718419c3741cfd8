"""Bounding Box Calculator: axis-aligned bounds of shapes, recursively for groups.

Pure functions over the shape tree. Absence of bounds is ``None`` and means
"exclude from aggregation", never an error.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import reduce

import numpy as np

from svgprep.svg.path_data import CommandKind, PathCommand, walk
from svgprep.svg.primitives import Circle, Ellipse, Group, Line, Path, Polygon, Rect, Shape, iter_leaves
from svgprep.utils.geometry import bbox


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def center_y(self) -> float:
        return (self.min_y + self.max_y) / 2

    def contains(self, x: float, y: float) -> bool:
        """Inclusive on all four edges."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @classmethod
    def from_points(cls, points: Sequence[tuple[float, float]]) -> BoundingBox:
        return cls(*bbox(np.asarray(points, dtype=np.float64)))


def union(a: BoundingBox | None, b: BoundingBox | None) -> BoundingBox | None:
    """Envelope of two boxes. Associative and commutative; None is the identity."""
    if a is None:
        return b
    if b is None:
        return a
    return BoundingBox(
        min(a.min_x, b.min_x),
        min(a.min_y, b.min_y),
        max(a.max_x, b.max_x),
        max(a.max_y, b.max_y),
    )


def bounds(shape: Shape) -> BoundingBox | None:
    """Axis-aligned bounds of a single shape, or None when it has no extent to speak of."""
    if isinstance(shape, Rect):
        return BoundingBox(shape.x, shape.y, shape.x + shape.width, shape.y + shape.height)
    if isinstance(shape, Circle):
        return BoundingBox(shape.cx - shape.r, shape.cy - shape.r, shape.cx + shape.r, shape.cy + shape.r)
    if isinstance(shape, Ellipse):
        return BoundingBox(shape.cx - shape.rx, shape.cy - shape.ry, shape.cx + shape.rx, shape.cy + shape.ry)
    if isinstance(shape, Line):
        return BoundingBox.from_points([(shape.x1, shape.y1), (shape.x2, shape.y2)])
    if isinstance(shape, Polygon):
        if len(shape.points) < 2:
            return None
        return BoundingBox.from_points(shape.points)
    if isinstance(shape, Path):
        return path_bounds(shape.commands)
    if isinstance(shape, Group):
        return reduce(union, (bounds(child) for child in shape.children), None)
    return None


def path_bounds(commands: Iterable[PathCommand]) -> BoundingBox | None:
    """Envelope of the coordinates appearing in the command parameters.

    Control points count even where the rendered curve stays inside them, so
    the box can be larger than the true curve extent. Arcs contribute their
    endpoint only.
    """
    points: list[tuple[float, float]] = []
    for seg in walk(commands):
        if seg.command.kind is CommandKind.CLOSE:
            continue
        points.extend(seg.controls)
        points.append(seg.end)
    if not points:
        return None
    return BoundingBox.from_points(points)


def aggregate_bounds(shapes: Iterable[Shape]) -> BoundingBox | None:
    """Union of the bounds of every leaf shape in the forest."""
    return reduce(union, (bounds(shape) for shape in iter_leaves(shapes)), None)
