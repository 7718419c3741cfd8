"""ViewBox Synthesizer: a content-fitting, padded viewBox for responsive output.

A declared viewBox (or positive width/height) wins and is returned as is, so
running synthesis over its own output changes nothing. Otherwise the
aggregate bounds of all shapes are padded on every side by
``max(5% of width, 5% of height, 5 units)`` and rounded to two decimals.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from svgprep.geometry.bounds import aggregate_bounds
from svgprep.models.responses import ViewBoxInfo
from svgprep.models.svg_document import SvgDocument
from svgprep.svg.primitives import Shape
from svgprep.utils.math_helpers import format_number, round_half_up

logger = logging.getLogger(__name__)

PADDING_RATIO = 0.05
MIN_PADDING = 5.0
PLACES = 2

_SPLIT_RE = re.compile(r"[\s,]+")
# Absolute units accepted on root width/height, as CSS pixels per unit.
# Percentages and font-relative units depend on the viewport and are rejected.
_PX_PER_UNIT = {"": 1.0, "px": 1.0, "pt": 4 / 3, "pc": 16.0, "in": 96.0, "cm": 96 / 2.54, "mm": 96 / 25.4}
_DIMENSION_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(px|pt|pc|in|cm|mm)?\s*$")


@dataclass(frozen=True)
class ViewBox:
    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 100.0
    is_optimized: bool = False
    source: str = "default"

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height if self.height else 1.0

    def to_attribute(self, places: int = PLACES) -> str:
        return " ".join(format_number(v, places) for v in (self.x, self.y, self.width, self.height))

    def to_info(self) -> ViewBoxInfo:
        return ViewBoxInfo(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            aspect_ratio=self.aspect_ratio,
            is_optimized=self.is_optimized,
            source=self.source,
        )


DEFAULT_VIEW_BOX = ViewBox()


def parse_view_box(value: str | None) -> ViewBox | None:
    """Four finite numbers with positive width and height, else None."""
    if not value:
        return None
    parts = [p for p in _SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        return None
    try:
        x, y, width, height = (float(p) for p in parts)
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in (x, y, width, height)) or width <= 0 or height <= 0:
        return None
    return ViewBox(x, y, width, height, is_optimized=True, source="declared")


def parse_dimension(value: str | None) -> float | None:
    if not value:
        return None
    m = _DIMENSION_RE.match(value)
    if not m:
        return None
    number = float(m.group(1)) * _PX_PER_UNIT[m.group(2) or ""]
    return number if math.isfinite(number) and number > 0 else None


def declared_view_box(root_attributes: dict[str, str]) -> ViewBox | None:
    """The viewBox the document already declares, falling back to width/height."""
    declared = parse_view_box(root_attributes.get("viewBox"))
    if declared is not None:
        return declared
    width = parse_dimension(root_attributes.get("width"))
    height = parse_dimension(root_attributes.get("height"))
    if width is not None and height is not None:
        # Unit conversion can leave long fractions; keep what the markup will carry
        width, height = round_half_up(width, PLACES), round_half_up(height, PLACES)
        return ViewBox(0.0, 0.0, width, height, is_optimized=True, source="dimensions")
    return None


def content_view_box(
    shapes: Iterable[Shape],
    padding_ratio: float = PADDING_RATIO,
    min_padding: float = MIN_PADDING,
    places: int = PLACES,
) -> ViewBox:
    """Padded envelope of all shapes; the default box when nothing has bounds."""
    box = aggregate_bounds(shapes)
    if box is None:
        return DEFAULT_VIEW_BOX

    padding = max(box.width * padding_ratio, box.height * padding_ratio, min_padding)
    return ViewBox(
        x=round_half_up(box.min_x - padding, places),
        y=round_half_up(box.min_y - padding, places),
        width=round_half_up(box.width + 2 * padding, places),
        height=round_half_up(box.height + 2 * padding, places),
        is_optimized=True,
        source="content",
    )


def synthesize_view_box(
    document: SvgDocument,
    padding_ratio: float = PADDING_RATIO,
    min_padding: float = MIN_PADDING,
    places: int = PLACES,
) -> ViewBox:
    """Declared viewBox if present, otherwise one fitted to the content. Never raises."""
    try:
        declared = declared_view_box(document.root_attributes)
        if declared is not None:
            return declared
        return content_view_box(document.shapes, padding_ratio, min_padding, places)
    except (ValueError, ArithmeticError) as e:
        logger.warning("ViewBox synthesis failed, using default: %s", e)
        return DEFAULT_VIEW_BOX
