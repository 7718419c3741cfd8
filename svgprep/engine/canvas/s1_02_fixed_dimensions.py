"""S1.02: Remove Fixed Dimensions.

width/height are dropped only when the output keeps a viewBox, otherwise the
drawing would lose its coordinate system.
"""

from __future__ import annotations

import logging

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step
from svgprep.geometry.viewbox import parse_view_box
from svgprep.models.edit_ops import ROOT_TARGET

logger = logging.getLogger(__name__)


@step(
    id="S1.02",
    stage=Stage.CANVAS,
    option="remove_fixed_dimensions",
    dependencies=["S1.01"],
    description="Drop width/height from the root element",
)
def remove_fixed_dimensions(ctx: PreparationContext) -> None:
    declared = parse_view_box(ctx.root_attributes.get("viewBox"))
    written = "S1.01" in ctx.completed_steps and ctx.view_box.is_optimized
    if declared is None and not written:
        logger.info("No viewBox in output, keeping width/height")
        return
    ctx.remove_attributes(ROOT_TARGET, "width", "height")
