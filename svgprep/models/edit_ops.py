"""Edit operation models for surgical SVG modification."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

# Target name addressing the root <svg> element
ROOT_TARGET = ":root"


class EditOp(BaseModel):
    """A single surgical edit on the original markup."""

    action: Literal["set", "remove", "unwrap", "delete_span", "group"]
    target: str | None = None  # Element id or ROOT_TARGET (set/remove/unwrap)
    attributes: dict[str, str] | None = None  # For set: attrs to add/override; for group: the new <g>'s attrs
    names: list[str] | None = None  # For remove: attribute names to drop; for group: member ids
    span: tuple[int, int] | None = None  # For delete_span: (start, end) in the original text
