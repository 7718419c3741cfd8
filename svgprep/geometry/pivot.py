"""Coordinate / Pivot Mapper: display space ↔ document space, element-relative pivots.

The document-to-display mapping is a uniform affine scale plus offset (no
rotation or skew). Nothing is cached: callers pass the current display
geometry on every call, so results follow container resizes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from svgprep.errors import IssueKind
from svgprep.geometry.bounds import BoundingBox, bounds
from svgprep.geometry.viewbox import ViewBox
from svgprep.models.responses import Diagnostic, PivotOutcome, PivotPoint
from svgprep.models.svg_document import SvgDocument
from svgprep.svg.primitives import Group, Shape, iter_shapes
from svgprep.utils.math_helpers import clamp, round_half_up

logger = logging.getLogger(__name__)


class DisplayGeometry(BaseModel):
    """Where and how large the document is currently rendered, in device pixels."""

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    origin_x: float = 0.0
    origin_y: float = 0.0


def display_to_document(view_box: ViewBox, display: DisplayGeometry, x: float, y: float) -> tuple[float, float]:
    scale_x = view_box.width / display.width
    scale_y = view_box.height / display.height
    return (
        (x - display.origin_x) * scale_x + view_box.x,
        (y - display.origin_y) * scale_y + view_box.y,
    )


def document_to_display(view_box: ViewBox, display: DisplayGeometry, x: float, y: float) -> tuple[float, float]:
    """Inverse of display_to_document, e.g. to draw a crosshair at a stored pivot."""
    scale_x = display.width / view_box.width
    scale_y = display.height / view_box.height
    return (
        (x - view_box.x) * scale_x + display.origin_x,
        (y - view_box.y) * scale_y + display.origin_y,
    )


def origin_descriptor(relative_x: float, relative_y: float) -> str:
    """CSS transform-origin text: (0.5, 0.25) → "50.0% 25.0%"."""
    return f"{round_half_up(relative_x * 100, 1):.1f}% {round_half_up(relative_y * 100, 1):.1f}%"


def resolve_target(
    shapes: Iterable[Shape],
    x: float,
    y: float,
    include_groups: bool = True,
) -> tuple[Shape, BoundingBox] | None:
    """First shape in document order whose bounds contain the point.

    Groups precede their children in document order, so with
    ``include_groups`` a click inside a grouped shape resolves to the group.
    """
    for shape in iter_shapes(shapes):
        if not include_groups and isinstance(shape, Group):
            continue
        box = bounds(shape)
        if box is not None and box.contains(x, y):
            return shape, box
    return None


def pivot_for_element(shape: Shape, x: float, y: float, box: BoundingBox | None = None) -> PivotOutcome:
    """Pivot at document point (x, y) expressed relative to ``shape``'s bounds."""
    box = box or bounds(shape)
    if box is None or box.width == 0 or box.height == 0:
        size = "no bounds" if box is None else f"{box.width}x{box.height}"
        return PivotOutcome(
            issue=Diagnostic(
                kind=IssueKind.DEGENERATE_GEOMETRY,
                message=f"Element bounds are degenerate ({size}); pivot refused",
                element_id=shape.id,
                tag=shape.tag,
            )
        )

    relative_x = clamp((x - box.min_x) / box.width)
    relative_y = clamp((y - box.min_y) / box.height)
    pivot = PivotPoint(
        document_x=x,
        document_y=y,
        element_id=shape.id,
        relative_x=relative_x,
        relative_y=relative_y,
        origin=origin_descriptor(relative_x, relative_y),
    )
    return PivotOutcome(pivot=pivot)


def place_pivot(
    document: SvgDocument,
    view_box: ViewBox,
    display: DisplayGeometry,
    display_x: float,
    display_y: float,
    include_groups: bool = True,
) -> PivotOutcome:
    """Map a display-space click to a pivot on the element under it."""
    x, y = display_to_document(view_box, display, display_x, display_y)
    hit = resolve_target(document.shapes, x, y, include_groups=include_groups)
    if hit is None:
        return PivotOutcome(
            issue=Diagnostic(
                kind=IssueKind.UNRESOLVED_TARGET,
                message=f"No element at ({x:.2f}, {y:.2f})",
            )
        )

    shape, box = hit
    outcome = pivot_for_element(shape, x, y, box)
    if outcome.pivot is not None:
        logger.debug("Placed pivot for %s at %s", shape.id, outcome.pivot.origin)
    return outcome


def centered_pivot(shape: Shape) -> PivotPoint | None:
    box = bounds(shape)
    if box is None:
        return None
    return PivotPoint(
        document_x=box.center_x,
        document_y=box.center_y,
        element_id=shape.id,
        relative_x=0.5,
        relative_y=0.5,
        origin=origin_descriptor(0.5, 0.5),
    )


def auto_place_pivots(document: SvgDocument) -> list[PivotPoint]:
    """One centered pivot per bounded element, in document order."""
    pivots = [p for p in (centered_pivot(shape) for shape in document.iter_shapes()) if p is not None]
    logger.info("Auto-placed %d pivot points", len(pivots))
    return pivots


def upsert_pivot(pivots: Iterable[PivotPoint], pivot: PivotPoint) -> list[PivotPoint]:
    """New list where ``pivot`` replaces any earlier pivot for the same element."""
    updated = [p for p in pivots if p.element_id != pivot.element_id]
    updated.append(pivot)
    return updated
