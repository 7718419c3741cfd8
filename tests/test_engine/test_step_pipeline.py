"""Tests for the pipeline orchestrator and the registered preparation steps."""

from __future__ import annotations

from svgprep.engine.config import PipelineConfig
from svgprep.engine.context import PreparationContext
from svgprep.engine.pipeline import Pipeline, create_pipeline
from svgprep.engine.registry import Stage, StepRegistry, StepSpec, get_registry
from svgprep.models.edit_ops import ROOT_TARGET
from svgprep.models.requests import PreparationOptions
from svgprep.svg.parser import parse_svg
from tests.conftest import SINGLE_RECT_SVG, STROKED_PATHS_SVG, TRACED_SVG


def _ctx(svg: str = SINGLE_RECT_SVG, **flags) -> PreparationContext:
    return PreparationContext(document=parse_svg(svg), options=PreparationOptions(**flags))


def _root_edits(ctx: PreparationContext) -> dict[str, str]:
    merged: dict[str, str] = {}
    for op in ctx.edits:
        if op.target == ROOT_TARGET and op.action == "set":
            merged.update(op.attributes)
    return merged


class TestPipeline:
    def test_pipeline_runs_steps(self):
        reg = StepRegistry()
        results = []

        def s1(ctx: PreparationContext) -> None:
            results.append("s1")

        def s2(ctx: PreparationContext) -> None:
            results.append("s2")

        reg.register(StepSpec(id="S0.02", stage=Stage.STRUCTURE, fn=s2, dependencies=["S0.01"]))
        reg.register(StepSpec(id="S0.01", stage=Stage.STRUCTURE, fn=s1))

        ctx = Pipeline(registry=reg).run(_ctx())

        assert results == ["s1", "s2"]
        assert ctx.completed_steps == ["S0.01", "S0.02"]

    def test_pipeline_handles_errors(self):
        reg = StepRegistry()

        def fail(ctx: PreparationContext) -> None:
            raise ValueError("test error")

        reg.register(StepSpec(id="S0.01", stage=Stage.STRUCTURE, fn=fail))
        reg.register(StepSpec(id="S0.02", stage=Stage.STRUCTURE, fn=lambda ctx: None))

        ctx = Pipeline(registry=reg).run(_ctx())

        assert "test error" in ctx.errors["S0.01"]
        assert ctx.completed_steps == ["S0.02"]

    def test_disabled_option_skips_step(self):
        reg = StepRegistry()
        ran = []
        reg.register(StepSpec(id="S0.01", stage=Stage.STRUCTURE, fn=lambda ctx: ran.append(1), option="flatten_groups"))

        Pipeline(registry=reg).run(_ctx(flatten_groups=False))
        assert ran == []
        Pipeline(registry=reg).run(_ctx(flatten_groups=True))
        assert ran == [1]

    def test_run_stage(self):
        reg = StepRegistry()
        reg.register(StepSpec(id="S0.01", stage=Stage.STRUCTURE, fn=lambda ctx: None))
        reg.register(StepSpec(id="S1.01", stage=Stage.CANVAS, fn=lambda ctx: None))

        ctx = Pipeline(registry=reg).run_stage(_ctx(), Stage.CANVAS)
        assert ctx.completed_steps == ["S1.01"]

    def test_all_steps_registered(self):
        create_pipeline()
        ids = {spec.id for spec in get_registry().all()}
        assert ids == {
            "S0.01", "S0.02", "S0.03", "S0.04",
            "S1.01", "S1.02", "S1.03", "S1.04", "S1.05",
            "S2.01", "S2.02",
        }
        assert all(spec.option for spec in get_registry().all())


class TestSteps:
    def test_view_box_from_content(self):
        ctx = create_pipeline().run(_ctx())
        assert ctx.view_box.source == "content"
        assert _root_edits(ctx)["viewBox"] == "5 5 30 40"

    def test_declared_view_box_not_rewritten(self):
        ctx = create_pipeline().run(_ctx(STROKED_PATHS_SVG))
        assert ctx.view_box.source == "declared"
        assert "viewBox" not in _root_edits(ctx)

    def test_dimensions_kept_without_view_box(self):
        ctx = create_pipeline().run(_ctx(TRACED_SVG, ensure_view_box=False))
        assert not any(op.action == "remove" for op in ctx.edits)

    def test_stable_ids_skip_unwrapped_groups(self):
        ctx = create_pipeline().run(_ctx(TRACED_SVG, flatten_groups=True))
        id_targets = [op.target for op in ctx.edits if op.attributes and "id" in op.attributes]
        assert id_targets == ["anim_path_1", "anim_circle_3", "anim_circle_4"]
        assert any(op.action == "unwrap" and op.target == "anim_g_0" for op in ctx.edits)

    def test_stroke_records(self):
        ctx = create_pipeline().run(_ctx(STROKED_PATHS_SVG))
        records = {r.element_id: r for r in ctx.stroke_lengths}
        assert set(records) == {"zigzag", "curve"}
        assert records["zigzag"].length == 20
        assert records["zigzag"].stroke_width == 2
        assert records["curve"].stroke_color == "#f00"

    def test_draw_on_alone_still_measures(self):
        ctx = create_pipeline().run(
            _ctx(STROKED_PATHS_SVG, compute_stroke_lengths=False, setup_draw_on_dashing=True)
        )
        assert len(ctx.stroke_lengths) == 2
        dash_ops = [op for op in ctx.edits if op.attributes and "stroke-dasharray" in op.attributes]
        assert {op.attributes["stroke-dasharray"] for op in dash_ops} == {"20", "12"}
        assert not any(op.attributes and "data-length" in op.attributes for op in ctx.edits)

    def test_precise_length_method(self):
        ctx = PreparationContext(
            document=parse_svg(STROKED_PATHS_SVG),
            config=PipelineConfig(length_method="precise"),
        )
        create_pipeline().run(ctx)
        curve = next(r for r in ctx.stroke_lengths if r.element_id == "curve")
        assert abs(curve.length - 10) < 0.01
