"""Structural tree rewrites. Each pass returns a new forest; inputs are never mutated."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace

from svgprep.svg.primitives import Group, Path, Shape


def flatten_single_child_groups(shapes: Iterable[Shape]) -> tuple[tuple[Shape, ...], list[Group]]:
    """Replace every attribute-less group whose only child element is a shape by that shape.

    A group that also wraps a <title>, a skipped element or any other markup
    is kept, so nothing it holds changes parent.

    Bottom-up, so nested wrappers (<g><g><path/></g></g>) collapse fully.
    Returns the rewritten forest and the groups that were removed, outermost last.
    """
    removed: list[Group] = []

    def rewrite(shape: Shape) -> Shape:
        if not isinstance(shape, Group):
            return shape
        children = tuple(rewrite(child) for child in shape.children)
        if len(children) == 1 and shape.element_children == 1 and not shape.attributes:
            removed.append(shape)
            return children[0]
        return replace(shape, children=children)

    return tuple(rewrite(shape) for shape in shapes), removed


# Attribute marking a group created by ``group_sibling_paths``
GROUP_MARKER = "data-group"


def group_sibling_paths(
    shapes: Iterable[Shape],
    key: Callable[[Path], str],
    make_group: Callable[[str, tuple[Path, ...]], Group],
) -> tuple[tuple[Shape, ...], list[Group]]:
    """Gather the <path> children of every container into one new group per key.

    Paths only join siblings, so transforms on their parents keep applying.
    Each new group takes the place of its first member and the other
    siblings keep their order. Groups carrying GROUP_MARKER were built by an
    earlier run and are left alone. Returns the new forest and the groups
    created, in document order.
    """
    created: list[Group] = []

    def regroup(children: Iterable[Shape]) -> tuple[Shape, ...]:
        children = tuple(children)
        buckets: dict[str, list[Path]] = {}
        for child in children:
            if isinstance(child, Path):
                buckets.setdefault(key(child), []).append(child)
        first_member = {id(members[0]): k for k, members in buckets.items()}

        result: list[Shape] = []
        for child in children:
            if not isinstance(child, Path):
                result.append(rewrite(child))
            elif id(child) in first_member:
                k = first_member[id(child)]
                group = make_group(k, tuple(buckets[k]))
                created.append(group)
                result.append(group)
        return tuple(result)

    def rewrite(shape: Shape) -> Shape:
        if not isinstance(shape, Group) or GROUP_MARKER in shape.attributes:
            return shape
        return replace(shape, children=regroup(shape.children))

    return regroup(shapes), created
