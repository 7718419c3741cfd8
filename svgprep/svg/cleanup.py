"""Locate markup that only adds weight to animation output.

Comments, <metadata> blocks and empty <title>/<desc> elements. Only spans are
reported here; removal happens through the edit applier so that every change
to a document is spliced against the same original text.
"""

from __future__ import annotations

import re

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_METADATA_RE = re.compile(
    r"<\s*(?:\w+:)?metadata\b[^>]*?(?:/>|>.*?</\s*(?:\w+:)?metadata\s*>)",
    re.DOTALL | re.IGNORECASE,
)
_EMPTY_TEXT_TAG_RE = re.compile(
    r"<\s*(title|desc)\b[^>]*?(?:/>|>\s*</\s*\1\s*>)",
    re.IGNORECASE,
)


def find_removable_spans(svg_text: str) -> list[tuple[int, int]]:
    """(start, end) offsets of removable markup, sorted, with nested spans merged away."""
    spans = [
        m.span()
        for pattern in (_COMMENT_RE, _METADATA_RE, _EMPTY_TEXT_TAG_RE)
        for m in pattern.finditer(svg_text)
    ]
    spans.sort()

    merged: list[tuple[int, int]] = []
    for start, end in spans:
        if merged and start < merged[-1][1]:
            # Overlaps the previous span (e.g. a comment inside <metadata>)
            merged[-1] = (merged[-1][0], max(end, merged[-1][1]))
        else:
            merged.append((start, end))
    return merged
