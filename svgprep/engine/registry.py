"""Step registry: every preparation step is a standalone function registered via decorator.

Usage:
    @step(id="S2.01", stage=Stage.STROKES, option="compute_stroke_lengths")
    def stroke_lengths(ctx: PreparationContext) -> None:
        for shape, length in ctx.measured_strokes():
            ...

Adding a new step = creating one file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import heapq
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from svgprep.models.requests import PreparationOptions

if TYPE_CHECKING:
    from svgprep.engine.context import PreparationContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    STRUCTURE = 0
    CANVAS = 1
    STROKES = 2


@dataclass
class StepSpec:
    id: str
    stage: Stage
    fn: Callable[["PreparationContext"], None]
    # PreparationOptions flag that enables this step; None means always run
    option: str | None = None
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StepRegistry:
    """Registry of preparation steps, filled at import time and read-only afterwards."""

    def __init__(self) -> None:
        self._steps: dict[str, StepSpec] = {}

    def register(self, spec: StepSpec) -> None:
        if spec.id in self._steps:
            raise ValueError(f"Duplicate step ID: {spec.id}")
        if spec.id in spec.dependencies:
            raise ValueError(f"Step {spec.id} depends on itself")
        self._steps[spec.id] = spec
        logger.debug("Registered step %s (%s, option=%s)", spec.id, spec.stage.name, spec.option)

    def get_stage(self, stage: Stage) -> list[StepSpec]:
        specs = [s for s in self._steps.values() if s.stage == stage]
        return sorted(specs, key=lambda s: s.id)

    def all(self) -> list[StepSpec]:
        return sorted(self._steps.values(), key=lambda s: (s.stage, s.id))

    def enabled(self, options: PreparationOptions) -> list[StepSpec]:
        """Steps switched on by ``options``; steps without an option always run."""
        return [s for s in self.all() if s.option is None or getattr(options, s.option)]

    def resolve_order(self, specs: Iterable[StepSpec] | None = None) -> list[StepSpec]:
        """Order ``specs`` (default: every step) so dependencies run first.

        Ties break by (stage, id), so stages run in order. A dependency outside
        ``specs`` only constrains order and is not pulled in: a step whose flag
        is off stays off. A dependency on a later stage, or on an id that was
        never registered, is a wiring error and raises ValueError.
        """
        pool = {s.id: s for s in (self._steps.values() if specs is None else specs)}

        for spec in pool.values():
            for dep in spec.dependencies:
                dep_spec = self._steps.get(dep)
                if dep_spec is None:
                    raise ValueError(f"Step {spec.id} depends on unknown step {dep}")
                if dep_spec.stage > spec.stage:
                    raise ValueError(f"Step {spec.id} ({spec.stage.name}) depends on later step {dep}")

        dependents: dict[str, list[str]] = {sid: [] for sid in pool}
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    dependents[dep].append(sid)
                    in_degree[sid] += 1

        ready = [(pool[sid].stage, sid) for sid, d in in_degree.items() if d == 0]
        heapq.heapify(ready)
        ordered: list[StepSpec] = []
        while ready:
            _, sid = heapq.heappop(ready)
            ordered.append(pool[sid])
            for other_id in dependents[sid]:
                in_degree[other_id] -= 1
                if in_degree[other_id] == 0:
                    heapq.heappush(ready, (pool[other_id].stage, other_id))

        if len(ordered) != len(pool):
            stuck = sorted(sid for sid, d in in_degree.items() if d > 0)
            raise ValueError(f"Circular dependency detected among: {stuck}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._steps)


# Module-level singleton
_registry = StepRegistry()


def get_registry() -> StepRegistry:
    return _registry


def step(
    *,
    id: str,
    stage: Stage,
    option: str | None = None,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a preparation step.

    ``option`` names the PreparationOptions flag that switches the step on;
    a misspelt flag fails at import rather than silently never running.
    """
    if option is not None and option not in PreparationOptions.model_fields:
        raise ValueError(f"Step {id}: unknown option {option!r}")

    def decorator(fn: Callable[["PreparationContext"], None]):
        _registry.register(
            StepSpec(
                id=id,
                stage=stage,
                fn=fn,
                option=option,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
