"""S1.03: Aspect Ratio Hint."""

from __future__ import annotations

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step


@step(
    id="S1.03",
    stage=Stage.CANVAS,
    option="add_aspect_ratio_hint",
    description='preserveAspectRatio="xMidYMid meet" unless one is declared',
)
def aspect_ratio_hint(ctx: PreparationContext) -> None:
    if "preserveAspectRatio" not in ctx.root_attributes:
        ctx.set_root_attributes({"preserveAspectRatio": "xMidYMid meet"})
