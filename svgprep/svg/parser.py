"""SVG parser: ElementTree for well-formedness, a tag scanner for the shape forest.

Converts raw SVG string → SvgDocument. Every shape records the text and
character span of its opening tag, so edits can later be spliced into the
original markup and untouched elements stay byte-identical.
"""

from __future__ import annotations

import html
import logging
import math
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from svgprep.errors import InvalidDocumentError, IssueKind, ParseError
from svgprep.models.responses import Diagnostic
from svgprep.models.svg_document import SvgDocument
from svgprep.svg.ids import DEFAULT_ID_PREFIX, IdAllocator
from svgprep.svg.path_data import NUMBER_RE, parse_path_data
from svgprep.svg.primitives import (
    ANIMATABLE_TAGS,
    Circle,
    Ellipse,
    Group,
    Line,
    Path,
    Point,
    Polygon,
    Rect,
    Shape,
    Stroke,
)
from svgprep.utils.math_helpers import parse_float

logger = logging.getLogger(__name__)

# Markup tokens: comments, CDATA, processing instructions and declarations are
# matched so they can be skipped; group 1-3 capture real element tags.
_TAG_RE = re.compile(
    r"<!--.*?-->"
    r"|<!\[CDATA\[.*?\]\]>"
    r"|<\?.*?\?>"
    r"|<!(?:[^>\[]|\[.*?\])*>"
    r"|<(/?)([A-Za-z_][\w:.-]*)((?:[^>\"']|\"[^\"]*\"|'[^']*')*)>",
    re.DOTALL,
)
_ATTR_RE = re.compile(r"""([A-Za-z_:][\w:.-]*)\s*=\s*(?:"([^"]*)"|'([^']*)')""")

# Containers whose content is never rendered in place
_OPAQUE_TAGS = frozenset({
    "defs", "clippath", "mask", "symbol", "pattern", "marker", "metadata", "title",
    "desc", "style", "script", "lineargradient", "radialgradient", "filter", "foreignobject",
})

_PAINT_PROPS = ("fill", "stroke", "stroke-width")
_NO_PAINT = frozenset({"none", "transparent"})


@dataclass
class _Node:
    tag: str
    attributes: dict[str, str]
    source_tag: str
    span: tuple[int, int]
    close_span: tuple[int, int]
    children: list[_Node] = field(default_factory=list)


def parse_svg(svg_text: str, id_prefix: str = DEFAULT_ID_PREFIX) -> SvgDocument:
    """Parse raw SVG markup into an SvgDocument.

    Raises InvalidDocumentError when the markup is not well-formed XML or its
    root element is not <svg>. Individual malformed elements are skipped and
    reported in ``SvgDocument.diagnostics``.
    """
    try:
        root_el = ET.fromstring(svg_text.lstrip("\ufeff \t\r\n"))
    except ET.ParseError as e:
        raise InvalidDocumentError(f"Markup is not well-formed: {e}") from e
    if _strip_ns(root_el.tag) != "svg":
        raise InvalidDocumentError(f"Root element is <{_strip_ns(root_el.tag)}>, expected <svg>")

    root = _scan(svg_text)
    if root is None:
        raise InvalidDocumentError("No <svg> root element found")

    existing_ids = {n.attributes["id"].strip() for n in _walk(root) if n.attributes.get("id", "").strip()}
    builder = _ShapeBuilder(IdAllocator(existing_ids, id_prefix))
    root_paint = _own_paint(root.attributes)
    shapes = builder.build_children(root, root_paint)

    doc = SvgDocument(
        svg_raw=svg_text,
        shapes=tuple(shapes),
        root_attributes=root.attributes,
        root_tag=root.source_tag,
        root_span=root.span,
        diagnostics=tuple(builder.diagnostics),
    )
    logger.info(
        "Parsed SVG: %d elements (%d top-level), %d skipped",
        doc.num_elements,
        len(doc.shapes),
        len(builder.diagnostics),
    )
    return doc


def extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract key=value attributes from an SVG tag string (values unescaped)."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        raw = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = html.unescape(raw)
    return attrs


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _local_name(tag: str) -> str:
    return tag.split(":")[-1]


def _scan(svg_text: str) -> _Node | None:
    """Build a lightweight element tree with source offsets."""
    stack: list[_Node] = []
    root: _Node | None = None

    for m in _TAG_RE.finditer(svg_text):
        name = m.group(2)
        if name is None:
            continue
        if m.group(1):
            if stack:
                stack.pop().close_span = m.span()
            continue

        attr_text = m.group(3)
        self_closing = attr_text.rstrip().endswith("/")
        node = _Node(
            tag=_local_name(name),
            attributes=extract_attrs(attr_text),
            source_tag=m.group(0),
            span=m.span(),
            close_span=m.span(),
        )
        if stack:
            stack[-1].children.append(node)
        elif root is None:
            root = node
        else:
            continue
        if not self_closing:
            stack.append(node)

    return root


def _walk(node: _Node) -> Iterator[_Node]:
    yield node
    for child in node.children:
        yield from _walk(child)


def _own_paint(attributes: dict[str, str]) -> dict[str, str]:
    """Presentation attributes overridden by inline style declarations."""
    props = {k: attributes[k].strip() for k in _PAINT_PROPS if k in attributes}
    for decl in attributes.get("style", "").split(";"):
        name, sep, value = decl.partition(":")
        name = name.strip().lower()
        if sep and name in _PAINT_PROPS:
            props[name] = value.strip()
    return {k: v for k, v in props.items() if v and v != "inherit"}


def _stroke(paint: dict[str, str]) -> Stroke | None:
    color = paint.get("stroke")
    if not color or color.lower() in _NO_PAINT:
        return None
    try:
        width = parse_float(paint.get("stroke-width", "").removesuffix("px"), 1.0)
    except ValueError:
        width = 1.0
    return Stroke(color=color, width=width)


def _fill(paint: dict[str, str]) -> str | None:
    color = paint.get("fill")
    if not color or color.lower() in _NO_PAINT:
        return None
    return color


class _ShapeBuilder:
    """Turns scanned nodes into shapes, numbering animatable elements in document order."""

    def __init__(self, allocator: IdAllocator) -> None:
        self.allocator = allocator
        self.ordinal = 0
        self.diagnostics: list[Diagnostic] = []

    def build_children(self, node: _Node, paint: dict[str, str]) -> list[Shape]:
        shapes: list[Shape] = []
        for child in node.children:
            shapes.extend(self._build(child, paint))
        return shapes

    def _build(self, node: _Node, inherited: dict[str, str]) -> list[Shape]:
        tag = node.tag
        if tag.lower() in _OPAQUE_TAGS:
            return []

        paint = {**inherited, **_own_paint(node.attributes)}
        if tag not in ANIMATABLE_TAGS:
            # Unknown wrapper (<a>, <switch>, ...): ignore the tag, keep its content
            return self.build_children(node, paint)

        ordinal = self.ordinal
        self.ordinal += 1
        element_id = node.attributes.get("id", "").strip()
        synthesized = not element_id
        if synthesized:
            element_id = self.allocator.allocate(tag, ordinal)

        common: dict[str, Any] = {
            "id": element_id,
            "tag": tag,
            "id_synthesized": synthesized,
            "stroke": _stroke(paint),
            "fill": _fill(paint),
            "paint": paint,
            "attributes": dict(node.attributes),
            "source_tag": node.source_tag,
            "source_span": node.span,
            "close_span": node.close_span,
        }

        if tag == "g":
            children = self.build_children(node, paint)
            return [Group(children=tuple(children), element_children=len(node.children), **common)]

        try:
            return [_GEOMETRY_BUILDERS[tag](node.attributes, common)]
        except (ParseError, ValueError) as e:
            logger.warning("Skipping <%s> %s: %s", tag, element_id, e)
            self.diagnostics.append(
                Diagnostic(kind=IssueKind.PARSE_ERROR, message=str(e), element_id=element_id, tag=tag)
            )
            return []


def _length(attrs: dict[str, str], name: str) -> float:
    value = attrs.get(name)
    return parse_float(value.strip().removesuffix("px") if value else value)


def _non_negative(**values: float) -> None:
    for name, value in values.items():
        if value < 0:
            raise ParseError(f"negative {name}: {value}")


def _rect(attrs: dict[str, str], common: dict[str, Any]) -> Rect:
    x, y, width, height = (_length(attrs, k) for k in ("x", "y", "width", "height"))
    _non_negative(width=width, height=height)
    return Rect(x=x, y=y, width=width, height=height, **common)


def _circle(attrs: dict[str, str], common: dict[str, Any]) -> Circle:
    cx, cy, r = (_length(attrs, k) for k in ("cx", "cy", "r"))
    _non_negative(r=r)
    return Circle(cx=cx, cy=cy, r=r, **common)


def _ellipse(attrs: dict[str, str], common: dict[str, Any]) -> Ellipse:
    cx, cy, rx, ry = (_length(attrs, k) for k in ("cx", "cy", "rx", "ry"))
    _non_negative(rx=rx, ry=ry)
    return Ellipse(cx=cx, cy=cy, rx=rx, ry=ry, **common)


def _line(attrs: dict[str, str], common: dict[str, Any]) -> Line:
    x1, y1, x2, y2 = (_length(attrs, k) for k in ("x1", "y1", "x2", "y2"))
    return Line(x1=x1, y1=y1, x2=x2, y2=y2, **common)


def _polygon(attrs: dict[str, str], common: dict[str, Any]) -> Polygon:
    return Polygon(points=parse_points(attrs.get("points", "")), closed=common["tag"] == "polygon", **common)


def _path(attrs: dict[str, str], common: dict[str, Any]) -> Path:
    d = attrs.get("d", "")
    return Path(commands=tuple(parse_path_data(d)), d=d, **common)


def parse_points(text: str) -> tuple[Point, ...]:
    """Parse a points list ("0,0 10,0 10 10"). A trailing odd coordinate is dropped."""
    leftover = NUMBER_RE.sub(" ", text)
    if leftover.strip(" \t\r\n,"):
        raise ParseError(f"invalid points list: {text!r}")
    values = [float(v) for v in NUMBER_RE.findall(text)]
    if not all(math.isfinite(v) for v in values):
        raise ParseError(f"non-finite coordinate in points list: {text!r}")
    if len(values) % 2:
        logger.debug("Dropping trailing coordinate in points list %r", text)
        values = values[:-1]
    return tuple(zip(values[0::2], values[1::2]))


_GEOMETRY_BUILDERS: dict[str, Callable[[dict[str, str], dict[str, Any]], Shape]] = {
    "rect": _rect,
    "circle": _circle,
    "ellipse": _ellipse,
    "line": _line,
    "polygon": _polygon,
    "polyline": _polygon,
    "path": _path,
}
