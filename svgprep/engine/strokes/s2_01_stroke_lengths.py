"""S2.01: Stroke Lengths.

Every stroked element with a positive length gets a record and a
``data-length`` attribute (two decimals).
"""

from __future__ import annotations

import logging

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step
from svgprep.utils.math_helpers import round_half_up

logger = logging.getLogger(__name__)


@step(
    id="S2.01",
    stage=Stage.STROKES,
    option="compute_stroke_lengths",
    description="Measure stroked elements and add data-length",
)
def stroke_lengths(ctx: PreparationContext) -> None:
    for record in ctx.collect_stroke_lengths():
        ctx.set_attributes(record.element_id, {"data-length": f"{round_half_up(record.length, 2):.2f}"})
    logger.debug("Measured %d stroked elements", len(ctx.stroke_lengths))
