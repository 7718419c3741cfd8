"""GSAP generator: the draw-on animation as JavaScript instead of CSS keyframes."""

from __future__ import annotations

import math
from collections.abc import Iterable

from svgprep.models.responses import StrokeLength
from svgprep.utils.math_helpers import format_number


def generate_draw_on_gsap(
    lengths: Iterable[StrokeLength],
    duration: float = 1.5,
    ease: str = "power2.out",
    stagger: float = 0.2,
) -> str:
    """One ``gsap.fromTo`` tween per stroked element, plus an ``animateAllPaths``
    timeline that starts each element ``stagger`` seconds after the previous one.
    """
    records = list(lengths)
    seconds = format_number(duration)

    tweens = "\n\n".join(
        f"""// Draw-on animation for {record.element_id}
gsap.fromTo("#{record.element_id}", {{
  strokeDashoffset: {math.ceil(record.length)}
}}, {{
  strokeDashoffset: 0,
  duration: {seconds},
  ease: "{ease}"
}});"""
        for record in records
    )
    timeline = "\n".join(
        f"""  tl.fromTo("#{record.element_id}", {{
    strokeDashoffset: {math.ceil(record.length)}
  }}, {{
    strokeDashoffset: 0,
    duration: {seconds},
    ease: "{ease}"
  }}, {format_number(index * stagger)});"""
        for index, record in enumerate(records)
    )

    return f"""// Auto-generated GSAP draw-on animations
import {{ gsap }} from "gsap";

{tweens}

// Batch animate all draw-on paths
function animateAllPaths() {{
  const tl = gsap.timeline();

{timeline}

  return tl;
}}
"""
