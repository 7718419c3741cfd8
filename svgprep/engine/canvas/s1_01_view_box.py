"""S1.01: Ensure ViewBox.

A declared viewBox is left byte-identical. A box derived from width/height or
fitted to the content is written to the root element; the fallback default
is reported but not written.
"""

from __future__ import annotations

import logging

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step
from svgprep.geometry.viewbox import synthesize_view_box

logger = logging.getLogger(__name__)


@step(
    id="S1.01",
    stage=Stage.CANVAS,
    option="ensure_view_box",
    description="Declared or content-fitted viewBox on the root element",
)
def ensure_view_box(ctx: PreparationContext) -> None:
    cfg = ctx.config
    view_box = synthesize_view_box(
        ctx.document,
        padding_ratio=cfg.padding_ratio,
        min_padding=cfg.min_padding,
        places=cfg.view_box_places,
    )
    ctx.view_box = view_box
    if view_box.is_optimized and view_box.source != "declared":
        value = view_box.to_attribute(cfg.view_box_places)
        ctx.set_root_attributes({"viewBox": value})
        logger.debug("Set viewBox %s (%s)", value, view_box.source)
