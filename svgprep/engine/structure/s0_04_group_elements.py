"""S0.04: Group Elements.

Gather sibling paths into one group per fill color or per shape class, so a
whole color layer or all curved outlines can be animated as a unit. The
stacking mode adds layer hints to the new groups; with ``group_by="none"``
it is applied to each path instead.
"""

from __future__ import annotations

import itertools
import logging

from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, step
from svgprep.models.edit_ops import EditOp
from svgprep.svg.path_data import CommandKind
from svgprep.svg.primitives import Group, Path, iter_leaves
from svgprep.svg.restructure import GROUP_MARKER, group_sibling_paths

logger = logging.getLogger(__name__)

SHAPE_CLASSES = ("simple", "complex", "curves")
# Straight-edged paths with more commands than this count as complex
COMPLEX_COMMAND_COUNT = 10
DEFAULT_FILL = "#000000"

_CURVE_KINDS = frozenset({CommandKind.CUBIC, CommandKind.QUADRATIC, CommandKind.ARC})
_LAYER_PROPS = ("z-index", "isolation")


def fill_key(path: Path) -> str:
    """Effective fill as written, inherited or not; an explicit ``none`` stays a key of its own."""
    return path.paint.get("fill") or DEFAULT_FILL


def shape_class(path: Path) -> str:
    if any(cmd.kind in _CURVE_KINDS for cmd in path.commands):
        return "curves"
    if len(path.commands) > COMPLEX_COMMAND_COUNT:
        return "complex"
    return "simple"


@step(
    id="S0.04",
    stage=Stage.STRUCTURE,
    option="group_elements",
    dependencies=["S0.01"],
    description="Group sibling paths by fill color or shape class",
)
def group_elements(ctx: PreparationContext) -> None:
    mode = ctx.options.group_by
    stacking = ctx.options.shape_stacking
    if mode == "none":
        _stack_paths(ctx, stacking)
        return

    used_ids = set(ctx.document.element_map())
    color_index = itertools.count()

    def make_group(key: str, members: tuple[Path, ...]) -> Group:
        if mode == "color":
            layer = next(color_index)
            attrs = {"id": _unique_id(f"color-group-{layer}", used_ids)}
            # The group takes over fill only when every member declares it itself
            if all("fill" in m.attributes for m in members):
                attrs["fill"] = key
            attrs["data-color"] = key
            z_index = layer
        else:
            layer = SHAPE_CLASSES.index(key)
            attrs = {"id": _unique_id(f"shape-group-{key}", used_ids), "class": f"shapes-{key}"}
            z_index = layer + 1
        attrs[GROUP_MARKER] = mode
        if stacking == "layered":
            attrs["style"] = f"z-index: {z_index}; isolation: isolate"
        elif stacking == "stacked":
            attrs["data-layer"] = str(layer)
        return Group(id=attrs["id"], tag="g", attributes=attrs, children=members, element_children=len(members))

    shapes, created = group_sibling_paths(ctx.shapes, fill_key if mode == "color" else shape_class, make_group)
    ctx.shapes = shapes
    for group in created:
        ctx.edits.append(EditOp(action="group", names=[m.id for m in group.children], attributes=group.attributes))
        if "fill" in group.attributes:
            for member in group.children:
                if "fill" in member.attributes:
                    ctx.remove_attributes(member.id, "fill")
    logger.debug("Created %d %s groups", len(created), mode)


def _stack_paths(ctx: PreparationContext, stacking: str) -> None:
    if stacking not in ("layered", "flat"):
        return
    paths = [shape for shape in iter_leaves(ctx.shapes) if isinstance(shape, Path)]
    for index, path in enumerate(paths):
        original = [decl.strip() for decl in path.attributes.get("style", "").split(";") if decl.strip()]
        declarations = [d for d in original if d.partition(":")[0].strip().lower() not in _LAYER_PROPS]
        if stacking == "layered":
            declarations += [f"z-index: {index}", "isolation: isolate"]
        if declarations == original:
            continue
        if declarations:
            ctx.set_attributes(path.id, {"style": "; ".join(declarations)})
        elif "style" in path.attributes:
            ctx.remove_attributes(path.id, "style")


def _unique_id(base: str, used: set[str]) -> str:
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate
