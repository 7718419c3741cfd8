"""Path data model: tokenizes ``d`` attributes into an ordered PathCommand sequence.

Each command keeps its source letter, so relative (lowercase) and smooth
(S/T) forms survive the round trip. Implicit repeats are split into one
command per parameter group; extra pairs after a moveto become lineto, as
the SVG grammar requires.
"""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from svgprep.errors import PathDataError


class CommandKind(str, enum.Enum):
    MOVE = "move"
    LINE = "line"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    CUBIC = "cubic"
    QUADRATIC = "quadratic"
    ARC = "arc"
    CLOSE = "close"


_KIND_BY_LETTER: dict[str, CommandKind] = {
    "M": CommandKind.MOVE,
    "L": CommandKind.LINE,
    "H": CommandKind.HORIZONTAL,
    "V": CommandKind.VERTICAL,
    "C": CommandKind.CUBIC,
    "S": CommandKind.CUBIC,
    "Q": CommandKind.QUADRATIC,
    "T": CommandKind.QUADRATIC,
    "A": CommandKind.ARC,
    "Z": CommandKind.CLOSE,
}

# Parameters consumed per command letter.
_ARITY: dict[str, int] = {
    "M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "T": 2, "A": 7, "Z": 0,
}

# Arc parameters 3 and 4 are single-character flags ("a1 1 0 0110 10" is legal).
_ARC_FLAG_SLOTS = (3, 4)

NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATORS = " \t\r\n\f,"

Point = tuple[float, float]


@dataclass(frozen=True)
class PathCommand:
    """One path command with the parameters its letter consumes."""

    letter: str
    params: tuple[float, ...] = ()

    @property
    def kind(self) -> CommandKind:
        return _KIND_BY_LETTER[self.letter.upper()]

    @property
    def relative(self) -> bool:
        return self.letter.islower()


@dataclass(frozen=True)
class Segment:
    """A command resolved to absolute coordinates."""

    command: PathCommand
    start: Point
    end: Point
    # Explicit control points (C: two, S/Q: one, T: none)
    controls: tuple[Point, ...] = ()
    subpath_start: Point = (0.0, 0.0)


def parse_path_data(d: str) -> list[PathCommand]:
    """Tokenize path data. Raises PathDataError on malformed input."""
    commands: list[PathCommand] = []
    letter: str | None = None
    pos = 0
    n = len(d)

    while True:
        pos = _skip_separators(d, pos)
        if pos >= n:
            break
        ch = d[pos]

        if ch.isalpha():
            if ch.upper() not in _ARITY:
                raise PathDataError(f"unknown path command {ch!r}", pos)
            letter = ch
            pos += 1
        elif letter is None or letter in "Zz":
            raise PathDataError(f"expected a command letter, got {ch!r}", pos)

        if not commands and letter not in "Mm":
            raise PathDataError("path data must begin with a moveto", pos)

        if letter in "Zz":
            commands.append(PathCommand(letter))
            continue

        params, pos = _read_params(d, pos, letter)
        commands.append(PathCommand(letter, params))

        # Implicit repeats after a moveto are linetos
        if letter == "M":
            letter = "L"
        elif letter == "m":
            letter = "l"

    return commands


def walk(commands: Iterable[PathCommand]) -> Iterator[Segment]:
    """Resolve commands to absolute segments, tracking current point and subpath start."""
    cx = cy = 0.0
    sx = sy = 0.0

    for cmd in commands:
        p = cmd.params
        ox, oy = (cx, cy) if cmd.relative else (0.0, 0.0)
        start = (cx, cy)
        controls: tuple[Point, ...] = ()
        kind = cmd.kind

        if kind is CommandKind.HORIZONTAL:
            cx = ox + p[0]
        elif kind is CommandKind.VERTICAL:
            cy = oy + p[0]
        elif kind is CommandKind.ARC:
            cx, cy = ox + p[5], oy + p[6]
        elif kind is CommandKind.CLOSE:
            cx, cy = sx, sy
        else:
            pairs = [(ox + p[i], oy + p[i + 1]) for i in range(0, len(p), 2)]
            controls = tuple(pairs[:-1])
            cx, cy = pairs[-1]
            if kind is CommandKind.MOVE:
                sx, sy = cx, cy

        yield Segment(command=cmd, start=start, end=(cx, cy), controls=controls, subpath_start=(sx, sy))


def _skip_separators(d: str, pos: int) -> int:
    while pos < len(d) and d[pos] in _SEPARATORS:
        pos += 1
    return pos


def _read_params(d: str, pos: int, letter: str) -> tuple[tuple[float, ...], int]:
    values: list[float] = []
    is_arc = letter in "Aa"
    for slot in range(_ARITY[letter.upper()]):
        pos = _skip_separators(d, pos)
        if is_arc and slot in _ARC_FLAG_SLOTS:
            if pos >= len(d) or d[pos] not in "01":
                raise PathDataError(f"invalid arc flag for {letter!r}", pos)
            values.append(float(d[pos]))
            pos += 1
            continue
        m = NUMBER_RE.match(d, pos)
        if not m:
            raise PathDataError(f"missing parameter {slot + 1} for {letter!r}", pos)
        value = float(m.group(0))
        if not math.isfinite(value):
            raise PathDataError(f"non-finite parameter {m.group(0)!r} for {letter!r}", pos)
        values.append(value)
        pos = m.end()
    return tuple(values), pos
