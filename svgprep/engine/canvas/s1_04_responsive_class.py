"""S1.04: Responsive Class."""

from __future__ import annotations

from svgprep.animation.css import RESPONSIVE_CLASS
from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step


@step(
    id="S1.04",
    stage=Stage.CANVAS,
    option="add_responsive_class",
    description="Add the responsive-svg class to the root element",
)
def responsive_class(ctx: PreparationContext) -> None:
    classes = ctx.root_attributes.get("class", "").split()
    if RESPONSIVE_CLASS not in classes:
        ctx.set_root_attributes({"class": " ".join([*classes, RESPONSIVE_CLASS])})
