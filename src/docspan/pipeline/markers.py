# topmark:header:start
#
#   project      : DocSpan
#   file         : markers.py
#   file_relpath : src/docspan/pipeline/markers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Span marker patterns and line classification.

A span opens on a line matching the *start* pattern and closes on a line
matching the *end* pattern. Patterns are regular expressions evaluated with
`re.search` against the line after trailing whitespace has been stripped, so
they should be anchored with ``^`` to avoid matching a marker token in the middle
of a line.

[`classify_line`][docspan.pipeline.markers.classify_line] is a pure function;
the extractor state machine consumes its result and never inspects line text
for markers itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from docspan.constants import DEFAULT_END_PATTERN, DEFAULT_START_PATTERN


class MarkerPatternError(ValueError):
    """Raised when a start or end marker pattern is not a valid regular expression."""


class LineKind(Enum):
    """Classification of a single source line."""

    BLANK = "blank"
    START = "start"
    END = "end"
    CONTENT = "content"


def _compile(pattern: str, role: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise MarkerPatternError(f"Invalid {role} marker pattern {pattern!r}: {exc}") from exc


@dataclass(frozen=True)
class MarkerSet:
    """Compiled start/end marker patterns.

    Attributes:
        start (re.Pattern[str]): Pattern that opens a span.
        end (re.Pattern[str]): Pattern that closes a span.
    """

    start: re.Pattern[str]
    end: re.Pattern[str]

    @classmethod
    def from_patterns(
        cls,
        start_pattern: str = DEFAULT_START_PATTERN,
        end_pattern: str = DEFAULT_END_PATTERN,
    ) -> MarkerSet:
        """Compile a marker set from regular expression strings.

        Args:
            start_pattern (str): Regular expression for the start marker line.
            end_pattern (str): Regular expression for the end marker line.

        Returns:
            MarkerSet: The compiled marker set.

        Raises:
            MarkerPatternError: If either pattern does not compile.
        """
        return cls(
            start=_compile(start_pattern, "start"),
            end=_compile(end_pattern, "end"),
        )

    @classmethod
    def from_tokens(cls, start_token: str, end_token: str) -> MarkerSet:
        """Build a line-anchored marker set from literal marker tokens.

        The token must appear at the beginning of the line, optionally preceded
        by whitespace. Anything may follow it.

        Args:
            start_token (str): Literal start marker text (e.g. ``"/*!doc"``).
            end_token (str): Literal end marker text (e.g. ``"*/"``).

        Returns:
            MarkerSet: The compiled marker set.
        """
        return cls.from_patterns(
            start_pattern=rf"^\s*{re.escape(start_token)}",
            end_pattern=rf"^\s*{re.escape(end_token)}",
        )

    @classmethod
    def default(cls) -> MarkerSet:
        """Return the default ``#if(0 && JSDOC)`` / ``#endif`` marker set."""
        return cls.from_patterns()


def classify_line(line: str, markers: MarkerSet) -> LineKind:
    """Classify a line as blank, start marker, end marker, or content.

    The start pattern is tested before the end pattern, so a line matching both
    opens a span.

    Args:
        line (str): Raw line text, with or without its terminator.
        markers (MarkerSet): Marker patterns to test.

    Returns:
        LineKind: The line classification.
    """
    text: str = line.rstrip()
    if not text:
        return LineKind.BLANK
    if markers.start.search(text):
        return LineKind.START
    if markers.end.search(text):
        return LineKind.END
    return LineKind.CONTENT
