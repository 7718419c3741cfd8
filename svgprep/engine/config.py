"""Pipeline configuration: the numeric constants behind every step."""

from __future__ import annotations

from dataclasses import dataclass

from svgprep.geometry.path_length import (
    ARC_RADIUS_FACTOR,
    CUBIC_LENGTH_FACTOR,
    QUADRATIC_LENGTH_FACTOR,
    LengthModel,
)
from svgprep.geometry.viewbox import MIN_PADDING, PADDING_RATIO, PLACES
from svgprep.svg.ids import DEFAULT_ID_PREFIX


@dataclass
class PipelineConfig:
    """Tunable constants. Defaults reproduce the shipped animation presets."""

    # Curve length correction (estimate method)
    cubic_length_factor: float = CUBIC_LENGTH_FACTOR  # chord * 1.2
    quadratic_length_factor: float = QUADRATIC_LENGTH_FACTOR  # chord * 1.15
    arc_radius_factor: float = ARC_RADIUS_FACTOR  # mean radius * 0.5
    length_method: str = "estimate"  # or "precise" (svgpathtools arc length)

    # ViewBox synthesis
    padding_ratio: float = PADDING_RATIO  # 5% of the larger side
    min_padding: float = MIN_PADDING
    view_box_places: int = PLACES

    # Ids
    id_prefix: str = DEFAULT_ID_PREFIX

    # Batch preparation
    max_workers: int = 4

    @property
    def length_model(self) -> LengthModel:
        return LengthModel(
            cubic_factor=self.cubic_length_factor,
            quadratic_factor=self.quadratic_length_factor,
            arc_radius_factor=self.arc_radius_factor,
            method=self.length_method,
        )

    @classmethod
    def from_settings(cls, settings=None) -> PipelineConfig:
        """Seed a config from environment settings (``svgprep.config.settings`` by default)."""
        if settings is None:
            from svgprep.config import settings
        return cls(
            length_method=settings.svgprep_length_method,
            id_prefix=settings.svgprep_id_prefix,
            max_workers=settings.svgprep_max_workers,
        )
