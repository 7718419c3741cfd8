"""S0.03: Stable IDs.

Write the ids synthesized at parse time into the markup. Runs after group
flattening so unwrapped groups are not given an id.
"""

from __future__ import annotations

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step
from svgprep.svg.primitives import iter_shapes


@step(
    id="S0.03",
    stage=Stage.STRUCTURE,
    option="assign_stable_ids",
    dependencies=["S0.01"],
    description="Write deterministic ids for elements without one",
)
def stable_ids(ctx: PreparationContext) -> None:
    for shape in iter_shapes(ctx.shapes):
        if shape.id_synthesized:
            ctx.set_attributes(shape.id, {"id": shape.id})
