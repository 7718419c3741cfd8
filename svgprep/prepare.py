"""Top-level operations: prepare markup for animation, one document or a batch."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from svgprep.engine.config import PipelineConfig
from svgprep.engine.context import PreparationContext
from svgprep.engine.pipeline import Pipeline, create_pipeline
from svgprep.errors import InvalidDocumentError
from svgprep.geometry.viewbox import DEFAULT_VIEW_BOX, declared_view_box
from svgprep.models.edit_ops import EditOp
from svgprep.models.requests import PreparationOptions
from svgprep.models.responses import Diagnostic, PivotPoint, PreparationResult
from svgprep.models.svg_document import SvgDocument
from svgprep.svg.edit_applier import apply_edits
from svgprep.svg.parser import parse_svg
from svgprep.svg.primitives import iter_shapes

logger = logging.getLogger(__name__)


def prepare_for_animation(
    svg_text: str,
    options: PreparationOptions | None = None,
    config: PipelineConfig | None = None,
    pipeline: Pipeline | None = None,
) -> PreparationResult:
    """Run the enabled preparation steps over one document.

    Markup that is not an SVG document is returned unchanged with an
    INVALID_DOCUMENT diagnostic. Running this over its own output with the same
    options returns the output unchanged.
    """
    start = time.perf_counter()
    options = options or PreparationOptions()
    config = config or PipelineConfig()

    try:
        document = parse_svg(svg_text, id_prefix=options.id_prefix or config.id_prefix)
    except InvalidDocumentError as e:
        logger.warning("Document rejected: %s", e)
        return PreparationResult(
            svg=svg_text,
            diagnostics=[Diagnostic(kind=e.kind, message=str(e))],
            processing_time_ms=_elapsed_ms(start),
        )

    ctx = PreparationContext(
        document=document,
        options=options,
        config=config,
        view_box=declared_view_box(document.root_attributes) or DEFAULT_VIEW_BOX,
        diagnostics=list(document.diagnostics),
    )
    (pipeline or create_pipeline(config)).run(ctx)
    svg = apply_edits(svg_text, ctx.edits, document)

    return PreparationResult(
        svg=svg,
        view_box=ctx.view_box.to_info(),
        stroke_lengths=ctx.stroke_lengths,
        diagnostics=ctx.diagnostics,
        element_count=sum(1 for _ in iter_shapes(ctx.shapes)),
        steps_completed=ctx.completed_steps,
        errors=ctx.errors,
        processing_time_ms=_elapsed_ms(start),
    )


def prepare_batch(
    documents: Iterable[str],
    options: PreparationOptions | None = None,
    config: PipelineConfig | None = None,
    max_workers: int | None = None,
) -> list[PreparationResult]:
    """Prepare independent documents concurrently; results keep input order."""
    config = config or PipelineConfig()
    pipeline = create_pipeline(config)
    documents = list(documents)
    workers = max(1, min(max_workers or config.max_workers, len(documents) or 1))

    logger.info("Preparing %d documents on %d workers", len(documents), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(
            executor.map(
                lambda text: prepare_for_animation(text, options, config, pipeline),
                documents,
            )
        )


def apply_pivot_origins(document: SvgDocument, pivots: Iterable[PivotPoint]) -> str:
    """Write each pivot as a ``transform-origin`` declaration in its element's style.

    Elements whose id was synthesized also get the id written, so the style
    stays addressable by animation code.
    """
    element_map = document.element_map()
    ops: list[EditOp] = []
    for pivot in pivots:
        shape = element_map.get(pivot.element_id)
        if shape is None:
            logger.warning("Pivot for unknown element %r ignored", pivot.element_id)
            continue
        attributes = {"style": _with_transform_origin(shape.attributes.get("style", ""), pivot.origin)}
        if shape.id_synthesized:
            attributes["id"] = shape.id
        ops.append(EditOp(action="set", target=shape.id, attributes=attributes))
    return apply_edits(document.svg_raw, ops, document)


def _with_transform_origin(style: str, origin: str) -> str:
    declarations = [
        decl.strip()
        for decl in style.split(";")
        if decl.strip() and decl.partition(":")[0].strip().lower() != "transform-origin"
    ]
    return "; ".join([f"transform-origin: {origin}", *declarations])


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 1)
