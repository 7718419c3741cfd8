"""S0.01: Flatten Groups.

Unwrap <g> elements that carry no attributes and hold a single shape. The
working tree is rewritten bottom-up; in the markup only the group's opening
and closing tags are removed, so the child's text is untouched.
"""

from __future__ import annotations

import logging

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step
from svgprep.models.edit_ops import EditOp
from svgprep.svg.restructure import flatten_single_child_groups

logger = logging.getLogger(__name__)


@step(
    id="S0.01",
    stage=Stage.STRUCTURE,
    option="flatten_groups",
    description="Unwrap attribute-less single-child groups",
)
def flatten_groups(ctx: PreparationContext) -> None:
    shapes, removed = flatten_single_child_groups(ctx.shapes)
    ctx.shapes = shapes
    for group in removed:
        ctx.edits.append(EditOp(action="unwrap", target=group.id))
    if removed:
        logger.debug("Unwrapped %d groups", len(removed))
