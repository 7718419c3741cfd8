"""Write SVG text fragments: tags, attribute values, path data."""

from __future__ import annotations

from collections.abc import Iterable

from svgprep.svg.path_data import PathCommand
from svgprep.utils.math_helpers import format_number

# Enough precision that re-serialized path data measures the same as the source.
_PATH_PLACES = 6


def escape_attr(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace('"', "&quot;")


def build_tag(tag_name: str, attributes: dict[str, str], self_closing: bool) -> str:
    """Render an opening tag from already-unescaped attribute values."""
    parts = [f'{k}="{escape_attr(v)}"' for k, v in attributes.items()]
    attrs_str = (" " + " ".join(parts)) if parts else ""
    if self_closing:
        return f"<{tag_name}{attrs_str} />"
    return f"<{tag_name}{attrs_str}>"


def format_path_data(commands: Iterable[PathCommand]) -> str:
    """Serialize commands back to ``d`` text, one letter per command."""
    chunks = []
    for cmd in commands:
        if cmd.params:
            numbers = " ".join(format_number(v, _PATH_PLACES) for v in cmd.params)
            chunks.append(f"{cmd.letter}{numbers}")
        else:
            chunks.append(cmd.letter)
    return " ".join(chunks)
