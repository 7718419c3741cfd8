"""Parsed SVG document model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from svgprep.models.responses import Diagnostic
from svgprep.svg.primitives import Shape, iter_shapes


@dataclass(frozen=True)
class SvgDocument:
    """Represents a parsed SVG file: the root element plus an ordered shape forest."""

    svg_raw: str
    shapes: tuple[Shape, ...] = ()
    root_attributes: dict[str, str] = field(default_factory=dict)
    root_tag: str = ""
    root_span: tuple[int, int] = (0, 0)
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def num_elements(self) -> int:
        return sum(1 for _ in iter_shapes(self.shapes))

    def iter_shapes(self) -> Iterator[Shape]:
        return iter_shapes(self.shapes)

    def element_map(self) -> dict[str, Shape]:
        return {shape.id: shape for shape in iter_shapes(self.shapes)}

    def get_element(self, element_id: str) -> Shape | None:
        for shape in iter_shapes(self.shapes):
            if shape.id == element_id:
                return shape
        return None
