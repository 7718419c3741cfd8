"""svgprep: prepare traced SVG markup for animation."""

from svgprep.animation.css import generate_draw_on_css, generate_responsive_css
from svgprep.animation.gsap import generate_draw_on_gsap
from svgprep.engine.config import PipelineConfig
from svgprep.errors import InvalidDocumentError, IssueKind, ParseError, SvgPrepError
from svgprep.geometry.bounds import BoundingBox, aggregate_bounds, bounds
from svgprep.geometry.path_length import estimate_path_length, precise_path_length, shape_length
from svgprep.geometry.pivot import (
    DisplayGeometry,
    auto_place_pivots,
    display_to_document,
    document_to_display,
    pivot_for_element,
    place_pivot,
    resolve_target,
    upsert_pivot,
)
from svgprep.geometry.viewbox import ViewBox, synthesize_view_box
from svgprep.models.requests import PreparationOptions
from svgprep.models.responses import PivotOutcome, PivotPoint, PreparationResult
from svgprep.prepare import apply_pivot_origins, prepare_batch, prepare_for_animation
from svgprep.svg.ids import check_id_stability
from svgprep.svg.parser import parse_svg

__all__ = [
    "BoundingBox",
    "DisplayGeometry",
    "InvalidDocumentError",
    "IssueKind",
    "ParseError",
    "PipelineConfig",
    "PivotOutcome",
    "PivotPoint",
    "PreparationOptions",
    "PreparationResult",
    "SvgPrepError",
    "ViewBox",
    "aggregate_bounds",
    "apply_pivot_origins",
    "auto_place_pivots",
    "bounds",
    "check_id_stability",
    "display_to_document",
    "document_to_display",
    "estimate_path_length",
    "generate_draw_on_css",
    "generate_draw_on_gsap",
    "generate_responsive_css",
    "parse_svg",
    "pivot_for_element",
    "place_pivot",
    "precise_path_length",
    "prepare_batch",
    "prepare_for_animation",
    "resolve_target",
    "shape_length",
    "synthesize_view_box",
    "upsert_pivot",
]
