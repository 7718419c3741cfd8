"""Math helpers: rounding, clamping, number formatting. No engine imports."""

from __future__ import annotations

import math


def round_half_up(value: float, places: int = 2) -> float:
    """Round with ties going up (2.345 → 2.35), unlike Python's banker's rounding.

    Emitted markup must not flip between runs or platforms, so all rounded
    output goes through this.
    """
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def format_number(value: float, places: int = 2) -> str:
    """Shortest decimal text for ``value`` at ``places`` precision: 5.0 → "5", 2.50 → "2.5"."""
    text = f"{round_half_up(value, places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def parse_float(text: str | None, default: float = 0.0) -> float:
    """Parse an SVG numeric attribute. Missing/blank → default; garbage → ValueError."""
    if text is None or not text.strip():
        return default
    value = float(text.strip())
    if not math.isfinite(value):
        raise ValueError(f"non-finite number: {text!r}")
    return value
