"""svgprep preparation step engine."""

from svgprep.engine.registry import step, Stage, get_registry
from svgprep.engine.config import PipelineConfig
from svgprep.engine.context import PreparationContext
from svgprep.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "step",
    "Stage",
    "get_registry",
    "PipelineConfig",
    "PreparationContext",
    "Pipeline",
    "create_pipeline",
]
