"""S0.02: Strip Metadata."""

from __future__ import annotations

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step
from svgprep.models.edit_ops import EditOp
from svgprep.svg.cleanup import find_removable_spans


@step(
    id="S0.02",
    stage=Stage.STRUCTURE,
    option="strip_metadata",
    description="Remove comments, <metadata> and empty <title>/<desc>",
)
def strip_metadata(ctx: PreparationContext) -> None:
    for span in find_removable_spans(ctx.document.svg_raw):
        ctx.edits.append(EditOp(action="delete_span", span=span))
