"""S1.05: Animation Attributes.

Standalone output needs the SVG namespace. ``vector-effect`` is not
inherited, so non-scaling strokes are requested on each stroked element
rather than on the root.
"""

from __future__ import annotations

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step
from svgprep.svg.primitives import iter_leaves

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


@step(
    id="S1.05",
    stage=Stage.CANVAS,
    option="add_animation_attributes",
    description="Ensure xmlns on the root and non-scaling strokes on stroked elements",
)
def animation_attributes(ctx: PreparationContext) -> None:
    if "xmlns" not in ctx.root_attributes:
        ctx.set_root_attributes({"xmlns": SVG_NAMESPACE})
    for shape in iter_leaves(ctx.shapes):
        if shape.stroke is not None and "vector-effect" not in shape.attributes:
            ctx.set_attributes(shape.id, {"vector-effect": "non-scaling-stroke"})
