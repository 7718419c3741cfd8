"""Error taxonomy: exceptions raised inside helpers, issue kinds reported to callers."""

from __future__ import annotations

import enum


class IssueKind(str, enum.Enum):
    PARSE_ERROR = "parse_error"
    INVALID_DOCUMENT = "invalid_document"
    DEGENERATE_GEOMETRY = "degenerate_geometry"
    UNRESOLVED_TARGET = "unresolved_target"


class SvgPrepError(Exception):
    """Base class for all svgprep errors."""

    kind: IssueKind = IssueKind.PARSE_ERROR


class ParseError(SvgPrepError):
    """A single element could not be parsed. Recoverable: the element is skipped."""


class PathDataError(ParseError):
    """Malformed path ``d`` attribute."""

    def __init__(self, message: str, position: int = -1) -> None:
        super().__init__(message if position < 0 else f"{message} at offset {position}")
        self.position = position


class InvalidDocumentError(SvgPrepError):
    """The markup is not well-formed XML or its root is not <svg>."""

    kind = IssueKind.INVALID_DOCUMENT
