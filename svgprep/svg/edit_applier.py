"""Surgical SVG edit applier: splices edit operations into the original SVG text."""

from __future__ import annotations

import logging
import re

from svgprep.models.edit_ops import ROOT_TARGET, EditOp
from svgprep.models.svg_document import SvgDocument
from svgprep.svg.primitives import Group, Shape
from svgprep.svg.serializer import build_tag

logger = logging.getLogger(__name__)

_TAG_NAME_RE = re.compile(r"<\s*([\w:.-]+)")

# (opening tag text, (start, end), attributes as parsed)
_TagSource = tuple[str, tuple[int, int], dict[str, str]]


def apply_edits(svg_raw: str, ops: list[EditOp], doc: SvgDocument) -> str:
    """Apply a list of edit operations to an SVG string, returning the modified SVG.

    Operations reference elements by id (ROOT_TARGET for the <svg> element) as
    they appear in ``doc``, which must be the parse of ``svg_raw``. The text is
    spliced at the offsets stored during parsing, so untouched elements remain
    byte-identical. All set/remove ops on one target are merged into a single
    rewrite of its opening tag; a tag whose attributes end up unchanged is left
    alone. A group op moves its members into a new <g> at the place of the
    first member, carrying their other edits along.
    """
    element_map = doc.element_map()

    # Unwrap wins over attribute edits on the same group
    targets_to_unwrap = {op.target for op in ops if op.action == "unwrap" and op.target}

    splices: list[tuple[int, int, str]] = []
    deletions: list[tuple[int, int]] = []
    group_ops: list[EditOp] = []
    pending: dict[str, dict[str, str]] = {}

    for op in ops:
        if op.action == "delete_span":
            if op.span is None or not 0 <= op.span[0] <= op.span[1] <= len(svg_raw):
                logger.warning("Edit op delete_span: invalid span %r, skipping", op.span)
                continue
            deletions.append(op.span)

        elif op.action == "unwrap":
            group = element_map.get(op.target or "")
            if not isinstance(group, Group):
                logger.warning("Edit op unwrap: %r is not a group, skipping", op.target)
                continue
            start, end = group.source_span
            splices.append((start, end - start, ""))
            if group.close_span != group.source_span:
                start, end = group.close_span
                splices.append((start, end - start, ""))

        elif op.action == "group":
            group_ops.append(op)

        else:
            source = _tag_source(op.target, doc, element_map)
            if source is None:
                logger.warning("Edit op %s: unknown target %r, skipping", op.action, op.target)
                continue
            if op.target in targets_to_unwrap:
                logger.info("Edit op %s on %s skipped, group is being unwrapped", op.action, op.target)
                continue
            attrs = pending.setdefault(op.target, dict(source[2]))
            if op.action == "set":
                attrs.update(op.attributes or {})
            else:
                for name in op.names or []:
                    attrs.pop(name, None)

    rebuilt: dict[str, str] = {}
    for target, attrs in pending.items():
        source_tag, _, original = _tag_source(target, doc, element_map)
        if attrs != original:
            rebuilt[target] = _rebuild_tag(source_tag, attrs)

    for op in group_ops:
        members = _group_members(op, element_map)
        if not members:
            logger.warning("Edit op group: no movable members in %r, skipping", op.names)
            continue
        parts = []
        for shape in members:
            start, end = _element_span(shape)
            inner = [d for d in deletions if start <= d[0] and d[1] <= end]
            deletions = [d for d in deletions if d not in inner]
            parts.append(_element_text(svg_raw, shape, rebuilt.pop(shape.id, None), inner))
        start, end = _element_span(members[0])
        splices.append((start, end - start, build_tag("g", op.attributes or {}, False) + "".join(parts) + "</g>"))
        for shape in members[1:]:
            start, end = _element_span(shape)
            splices.append((start, end - start, ""))

    for target, tag in rebuilt.items():
        _, (start, end), _ = _tag_source(target, doc, element_map)
        splices.append((start, end - start, tag))
    splices.extend((start, end - start, "") for start, end in deletions)

    if not splices:
        return svg_raw

    # Sort by offset descending so earlier splices don't shift later offsets
    splices.sort(key=lambda s: s[0], reverse=True)

    result = svg_raw
    limit = len(svg_raw)
    for offset, length, replacement in splices:
        if offset + length > limit:
            logger.warning("Overlapping edit at offset %d dropped", offset)
            continue
        result = result[:offset] + replacement + result[offset + length:]
        limit = offset

    return result


def _tag_source(target: str | None, doc: SvgDocument, element_map: dict) -> _TagSource | None:
    if target == ROOT_TARGET:
        if doc.root_span == (0, 0):
            return None
        return doc.root_tag, doc.root_span, doc.root_attributes
    shape = element_map.get(target or "")
    if shape is None or shape.source_span == (0, 0):
        return None
    return shape.source_tag, shape.source_span, shape.attributes


def _element_span(shape: Shape) -> tuple[int, int]:
    """Opening tag through closing tag."""
    return shape.source_span[0], shape.close_span[1]


def _group_members(op: EditOp, element_map: dict) -> list[Shape]:
    members = []
    for member_id in op.names or []:
        shape = element_map.get(member_id)
        if shape is None or isinstance(shape, Group) or shape.source_span == (0, 0) or shape.close_span == (0, 0):
            logger.warning("Edit op group: member %r cannot be moved, skipping it", member_id)
            continue
        members.append(shape)
    return sorted(members, key=lambda s: s.source_span[0])


def _element_text(svg_raw: str, shape: Shape, new_tag: str | None, deletions: list[tuple[int, int]]) -> str:
    """Markup of one element with its own pending edits applied."""
    start, end = _element_span(shape)
    text = svg_raw[start:end]
    # Deleted spans sit inside the element's content, after its opening tag
    for d_start, d_end in sorted(deletions, reverse=True):
        text = text[: d_start - start] + text[d_end - start:]
    if new_tag is not None:
        text = new_tag + text[shape.source_span[1] - start:]
    return text


def _rebuild_tag(source_tag: str, attributes: dict[str, str]) -> str:
    """Re-render an opening tag with new attributes, keeping its name and closing style."""
    tag_match = _TAG_NAME_RE.match(source_tag)
    if not tag_match:
        return source_tag
    is_self_closing = source_tag.rstrip().endswith("/>")
    return build_tag(tag_match.group(1), attributes, is_self_closing)
