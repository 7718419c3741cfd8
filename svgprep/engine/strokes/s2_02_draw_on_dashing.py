"""S2.02: Draw-On Dashing.

A dash as long as the stroke, offset by the same amount, hides the stroke;
animating ``stroke-dashoffset`` to 0 draws it on. Lengths are rounded up so
no sliver of the stroke shows before the animation starts.
"""

from __future__ import annotations

import math

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step


@step(
    id="S2.02",
    stage=Stage.STROKES,
    option="setup_draw_on_dashing",
    dependencies=["S2.01"],
    description="stroke-dasharray/dashoffset for draw-on animation",
)
def draw_on_dashing(ctx: PreparationContext) -> None:
    for record in ctx.collect_stroke_lengths():
        dash = str(math.ceil(record.length))
        ctx.set_attributes(
            record.element_id,
            {"stroke-dasharray": dash, "stroke-dashoffset": dash, "data-draw-length": dash},
        )
