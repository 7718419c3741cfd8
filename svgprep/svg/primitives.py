"""Shape model: typed vector primitives extracted from SVG markup.

All shapes are frozen dataclasses: a parse produces a fresh forest per request
and nothing downstream mutates it. Tree rewrites (see ``restructure``) build
new shapes with ``dataclasses.replace``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from svgprep.svg.path_data import PathCommand

Point = tuple[float, float]

# Tags that receive synthesized ids and take part in pivot/bounds lookups.
ANIMATABLE_TAGS = frozenset({"path", "rect", "circle", "ellipse", "polygon", "polyline", "line", "g"})


@dataclass(frozen=True)
class Stroke:
    color: str
    width: float = 1.0


@dataclass(frozen=True)
class Shape:
    """Fields shared by every primitive."""

    id: str = ""
    tag: str = ""
    # True when the id was generated rather than read from the markup
    id_synthesized: bool = False
    stroke: Stroke | None = None
    fill: str | None = None
    # Inherited and own paint declarations as written (fill, stroke, stroke-width)
    paint: dict[str, str] = field(default_factory=dict, compare=False)
    # Attributes exactly as written on the element (unescaped values)
    attributes: dict[str, str] = field(default_factory=dict, compare=False)
    # Opening tag text and its (start, end) offsets in the source markup
    source_tag: str = field(default="", compare=False)
    source_span: tuple[int, int] = field(default=(0, 0), compare=False)
    # Offsets of the closing tag; equal to source_span for a self-closing element
    close_span: tuple[int, int] = field(default=(0, 0), compare=False)


@dataclass(frozen=True)
class Rect(Shape):
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Circle(Shape):
    cx: float = 0.0
    cy: float = 0.0
    r: float = 0.0


@dataclass(frozen=True)
class Ellipse(Shape):
    cx: float = 0.0
    cy: float = 0.0
    rx: float = 0.0
    ry: float = 0.0


@dataclass(frozen=True)
class Line(Shape):
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0


@dataclass(frozen=True)
class Polygon(Shape):
    points: tuple[Point, ...] = ()
    # <polyline> shares this model with closed=False
    closed: bool = True


@dataclass(frozen=True)
class Path(Shape):
    commands: tuple[PathCommand, ...] = ()
    d: str = ""


@dataclass(frozen=True)
class Group(Shape):
    children: tuple[Shape, ...] = ()
    # Element children in the markup, counting ones that produced no shape
    element_children: int = field(default=0, compare=False)


def iter_shapes(shapes: Iterable[Shape]) -> Iterator[Shape]:
    """Pre-order walk: a group is yielded before its descendants."""
    for shape in shapes:
        yield shape
        if isinstance(shape, Group):
            yield from iter_shapes(shape.children)


def iter_leaves(shapes: Iterable[Shape]) -> Iterator[Shape]:
    """Non-group shapes in document order."""
    for shape in iter_shapes(shapes):
        if not isinstance(shape, Group):
            yield shape

