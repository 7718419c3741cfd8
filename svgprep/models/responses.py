"""Result models handed back to callers."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgprep.errors import IssueKind


class Diagnostic(BaseModel):
    """A recoverable problem found while processing a document."""

    kind: IssueKind
    message: str
    element_id: str | None = None
    tag: str | None = None


class ViewBoxInfo(BaseModel):
    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 100.0
    aspect_ratio: float = 1.0
    is_optimized: bool = False
    source: str = "default"  # declared, dimensions, content, default


class StrokeLength(BaseModel):
    element_id: str
    length: float
    stroke_color: str = ""
    stroke_width: float = 1.0


class PivotPoint(BaseModel):
    document_x: float
    document_y: float
    element_id: str
    relative_x: float = Field(ge=0.0, le=1.0)
    relative_y: float = Field(ge=0.0, le=1.0)
    origin: str  # CSS transform-origin pair, e.g. "50.0% 50.0%"


class PivotOutcome(BaseModel):
    """Either a pivot or the reason none could be placed."""

    pivot: PivotPoint | None = None
    issue: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.pivot is not None


class PreparationResult(BaseModel):
    svg: str
    view_box: ViewBoxInfo = Field(default_factory=ViewBoxInfo)
    stroke_lengths: list[StrokeLength] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    element_count: int = 0
    steps_completed: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class IdStabilityReport(BaseModel):
    iterations: int
    element_count: int = 0
    comparisons: int = 0
    mismatches: list[str] = Field(default_factory=list)
    consistency_score: float = 100.0  # 0-100
    passed: bool = True
