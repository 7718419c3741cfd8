"""Pipeline orchestrator: runs the enabled steps in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgprep.engine.config import PipelineConfig
from svgprep.engine.context import PreparationContext
from svgprep.engine.registry import Stage, StepRegistry, StepSpec, get_registry

logger = logging.getLogger(__name__)

_STEP_PACKAGES = ("structure", "canvas", "strokes")


class Pipeline:
    """Orchestrates the preparation steps."""

    def __init__(
        self,
        registry: StepRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: PreparationContext) -> PreparationContext:
        """Run every step whose option flag is enabled on the given context."""
        start = time.perf_counter()

        ordered = self.registry.resolve_order(self.registry.enabled(ctx.options))

        logger.info(
            "Pipeline: %d steps queued (%d disabled)",
            len(ordered),
            self.registry.count - len(ordered),
        )

        for spec in ordered:
            self._run_step(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d steps in %.0fms",
            len(ctx.completed_steps),
            len(ordered),
            total,
        )
        return ctx

    def run_stage(self, ctx: PreparationContext, stage: Stage) -> PreparationContext:
        """Run only the enabled steps of a single stage."""
        for spec in self.registry.resolve_order(self.registry.enabled(ctx.options)):
            if spec.stage == stage:
                self._run_step(ctx, spec)
        return ctx

    def _run_step(self, ctx: PreparationContext, spec: StepSpec) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            return
        ctx.completed_steps.append(spec.id)
        logger.debug("  %s completed in %.1fms", spec.id, (time.perf_counter() - t0) * 1000)


def register_steps() -> None:
    """Import all step modules so @step decorators fire."""
    for package_suffix in _STEP_PACKAGES:
        package_name = f"svgprep.engine.{package_suffix}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline over the registered steps."""
    register_steps()
    return Pipeline(config=config)
