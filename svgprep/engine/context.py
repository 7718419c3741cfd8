"""PreparationContext: the single mutable state object flowing through all steps.

Steps never edit markup directly. They read the parsed document, update the
working shape tree and queue EditOps; the edits are spliced into the original
text once, after the last step.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from svgprep.engine.config import PipelineConfig
from svgprep.geometry.path_length import shape_length
from svgprep.geometry.viewbox import DEFAULT_VIEW_BOX, ViewBox
from svgprep.models.edit_ops import ROOT_TARGET, EditOp
from svgprep.models.requests import PreparationOptions
from svgprep.models.responses import Diagnostic, StrokeLength
from svgprep.models.svg_document import SvgDocument
from svgprep.svg.primitives import Shape, iter_leaves


@dataclass
class PreparationContext:
    """Shared state flowing through the entire pipeline."""

    # Parse of the original markup; every EditOp is resolved against it
    document: SvgDocument
    options: PreparationOptions = field(default_factory=PreparationOptions)
    config: PipelineConfig = field(default_factory=PipelineConfig)
    # Working shape forest (restructuring steps replace it)
    shapes: tuple[Shape, ...] = ()
    view_box: ViewBox = DEFAULT_VIEW_BOX
    stroke_lengths: list[StrokeLength] = field(default_factory=list)
    edits: list[EditOp] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_steps: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    _strokes: list[tuple[Shape, float]] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.shapes:
            self.shapes = self.document.shapes

    @property
    def root_attributes(self) -> dict[str, str]:
        return self.document.root_attributes

    def set_attributes(self, target: str, attributes: dict[str, str]) -> None:
        self.edits.append(EditOp(action="set", target=target, attributes=attributes))

    def remove_attributes(self, target: str, *names: str) -> None:
        self.edits.append(EditOp(action="remove", target=target, names=list(names)))

    def set_root_attributes(self, attributes: dict[str, str]) -> None:
        self.set_attributes(ROOT_TARGET, attributes)

    def measured_strokes(self) -> list[tuple[Shape, float]]:
        """Stroked leaf shapes with a positive length, in document order. Computed once."""
        if self._strokes is None:
            model = self.config.length_model
            strokes: list[tuple[Shape, float]] = []
            for shape in iter_leaves(self.shapes):
                if shape.stroke is None:
                    continue
                length = shape_length(shape, model)
                if length:
                    strokes.append((shape, length))
            self._strokes = strokes
        return self._strokes

    def collect_stroke_lengths(self) -> list[StrokeLength]:
        """Fill ``stroke_lengths`` from the measured strokes unless already done."""
        if not self.stroke_lengths:
            self.stroke_lengths = [
                StrokeLength(
                    element_id=shape.id,
                    length=length,
                    stroke_color=shape.stroke.color,
                    stroke_width=shape.stroke.width,
                )
                for shape, length in self.measured_strokes()
            ]
        return self.stroke_lengths
