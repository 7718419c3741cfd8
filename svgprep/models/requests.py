"""Caller-facing option models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PreparationOptions(BaseModel):
    """Each flag independently enables one preparation step."""

    ensure_view_box: bool = Field(default=True, description="Write a declared or content-fitted viewBox")
    remove_fixed_dimensions: bool = Field(default=True, description="Drop width/height on the root <svg>")
    add_aspect_ratio_hint: bool = Field(default=True, description='Add preserveAspectRatio="xMidYMid meet"')
    compute_stroke_lengths: bool = Field(default=True, description="Measure stroked elements, add data-length")
    setup_draw_on_dashing: bool = Field(default=False, description="Set stroke-dasharray/offset for draw-on")
    assign_stable_ids: bool = Field(default=True, description="Write synthesized ids into the markup")
    flatten_groups: bool = Field(default=False, description="Unwrap attribute-less single-child groups")
    strip_metadata: bool = Field(default=False, description="Remove comments, <metadata>, empty title/desc")
    add_responsive_class: bool = Field(default=False, description='Add the "responsive-svg" class')
    add_animation_attributes: bool = Field(default=False, description="Ensure xmlns and non-scaling strokes")
    group_elements: bool = Field(default=False, description="Gather sibling paths into groups by color or shape")
    group_by: Literal["color", "shape", "none"] = Field(
        default="color", description="Grouping key; \"none\" only applies the stacking mode to each path"
    )
    shape_stacking: Literal["stacked", "layered", "flat", "place_cutouts"] = Field(
        default="stacked", description="Layer hints written on groups (or on paths when group_by is \"none\")"
    )
    id_prefix: str | None = Field(default=None, description="Prefix for synthesized ids (settings default)")
