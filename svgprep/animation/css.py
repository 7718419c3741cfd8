"""CSS generators for prepared markup: draw-on keyframes and responsive sizing."""

from __future__ import annotations

import math
from collections.abc import Iterable

from svgprep.geometry.viewbox import ViewBox
from svgprep.models.responses import StrokeLength, ViewBoxInfo
from svgprep.utils.math_helpers import format_number, round_half_up

RESPONSIVE_CLASS = "responsive-svg"


def generate_draw_on_css(
    lengths: Iterable[StrokeLength],
    duration: float = 1.5,
    easing: str = "ease-out",
) -> str:
    """Per-element dash setup and keyframes, plus a generic ``.draw-on-all`` rule.

    Elements opt in by getting the ``draw-on`` class; the generic rule targets
    anything carrying ``data-draw-length``.
    """
    seconds = f"{format_number(duration)}s"
    blocks = []
    for record in lengths:
        dash = math.ceil(record.length)
        blocks.append(
            f"""
/* Draw-on animation for {record.element_id} */
#{record.element_id} {{
  stroke-dasharray: {dash};
  stroke-dashoffset: {dash};
  --path-length: {dash};
}}

#{record.element_id}.draw-on {{
  animation: drawOn-{record.element_id} {seconds} {easing} forwards;
}}

@keyframes drawOn-{record.element_id} {{
  to {{
    stroke-dashoffset: 0;
  }}
}}"""
        )

    return f"""/* Auto-generated draw-on animations */
{chr(10).join(blocks)}

/* Generic draw-on class for all stroked elements */
.draw-on-all [data-draw-length] {{
  animation-name: drawOnGeneric;
  animation-duration: {seconds};
  animation-timing-function: {easing};
  animation-fill-mode: forwards;
}}

@keyframes drawOnGeneric {{
  to {{
    stroke-dashoffset: 0;
  }}
}}
"""


def generate_responsive_css(view_box: ViewBox | ViewBoxInfo) -> str:
    """Fluid-width rules; the container keeps the viewBox aspect ratio via padding-bottom."""
    ratio = f"{round_half_up(view_box.height / view_box.width * 100, 2):.2f}"
    return f"""/* Responsive SVG Styles */
.{RESPONSIVE_CLASS} {{
  width: 100%;
  height: auto;
  max-width: 100%;
  display: block;
}}

/* Maintain aspect ratio */
.{RESPONSIVE_CLASS}-container {{
  position: relative;
  width: 100%;
  padding-bottom: {ratio}%;
  height: 0;
  overflow: hidden;
}}

.{RESPONSIVE_CLASS}-container .{RESPONSIVE_CLASS} {{
  position: absolute;
  top: 0;
  left: 0;
  width: 100%;
  height: 100%;
}}

/* Animation-friendly base styles */
.{RESPONSIVE_CLASS} * {{
  vector-effect: non-scaling-stroke;
}}

.{RESPONSIVE_CLASS} path,
.{RESPONSIVE_CLASS} circle,
.{RESPONSIVE_CLASS} rect,
.{RESPONSIVE_CLASS} ellipse,
.{RESPONSIVE_CLASS} polygon,
.{RESPONSIVE_CLASS} line {{
  transform-origin: center;
  transform-box: fill-box;
}}
"""
