# topmark:header:start
#
#   project      : DocSpan
#   file         : extractor.py
#   file_relpath : src/docspan/pipeline/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker-scoped span extractor.

[`SpanExtractor`][docspan.pipeline.extractor.SpanExtractor] is a two-state
machine (``OUTSIDE`` / ``INSIDE``) fed one line at a time. It returns a
[`Span`][docspan.pipeline.extractor.Span] each time an end marker closes an open
span.

Transitions:
    - blank lines (empty after trimming trailing whitespace) are ignored in every
      state; they are neither tested for markers nor accumulated;
    - a start marker opens a new, empty span. If a span is already open, its
      buffered lines are discarded and the span restarts at the new marker;
    - an end marker closes the open span; outside a span it is ignored;
    - any other line is appended (trailing whitespace trimmed) while inside.

A span still open when the input ends is dropped without being emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from docspan.config.logging import get_logger
from docspan.pipeline.markers import LineKind, classify_line

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from docspan.config.logging import DocspanLogger
    from docspan.pipeline.markers import MarkerSet

logger: DocspanLogger = get_logger(__name__)


class ExtractorState(Enum):
    """States of the span extractor."""

    OUTSIDE = "outside"
    INSIDE = "inside"


@dataclass(frozen=True)
class Span:
    """A closed documentation span.

    Attributes:
        lines (tuple[str, ...]): Captured lines, trailing whitespace trimmed,
            without line terminators. Never contains empty lines.
        path (Path | None): Source file, or None for in-memory input.
        start_line (int): 1-based line number of the start marker.
        end_line (int): 1-based line number of the end marker.
    """

    lines: tuple[str, ...]
    path: Path | None
    start_line: int
    end_line: int

    @property
    def text(self) -> str:
        """Return the raw span text, each line terminated by a newline."""
        return "".join(f"{line}\n" for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)


class SpanExtractor:
    """Line-fed state machine turning one file's lines into closed spans.

    Use one extractor per file, or call `reset()` between files: no state
    carries over from one input to the next.

    Args:
        markers (MarkerSet): Start/end marker patterns.
        path (Path | None): Source path recorded on emitted spans.
    """

    def __init__(self, markers: MarkerSet, *, path: Path | None = None) -> None:
        self.markers: MarkerSet = markers
        self.path: Path | None = path
        self._state: ExtractorState = ExtractorState.OUTSIDE
        self._buffer: list[str] = []
        self._start_line: int = 0
        self._line_no: int = 0

    @property
    def state(self) -> ExtractorState:
        """Current state of the machine."""
        return self._state

    @property
    def is_open(self) -> bool:
        """True while a span is open."""
        return self._state is ExtractorState.INSIDE

    def reset(self, *, path: Path | None = None) -> None:
        """Return to ``OUTSIDE`` with an empty buffer, ready for a new file.

        Args:
            path (Path | None): Source path recorded on spans emitted from now on.
        """
        self.path = path
        self._state = ExtractorState.OUTSIDE
        self._buffer = []
        self._start_line = 0
        self._line_no = 0

    def feed(self, line: str) -> Span | None:
        """Consume one line.

        Args:
            line (str): The next line of the file, with or without terminator.

        Returns:
            Span | None: The span closed by this line, if any.
        """
        self._line_no += 1
        kind: LineKind = classify_line(line, self.markers)

        if kind is LineKind.BLANK:
            return None

        if kind is LineKind.START:
            if self._state is ExtractorState.INSIDE:
                logger.debug(
                    "%s:%d: start marker inside open span (opened at line %d); restarting span",
                    self.path or "<text>",
                    self._line_no,
                    self._start_line,
                )
            self._buffer = []
            self._start_line = self._line_no
            self._state = ExtractorState.INSIDE
            return None

        if kind is LineKind.END:
            if self._state is ExtractorState.OUTSIDE:
                logger.trace(
                    "%s:%d: end marker outside a span", self.path or "<text>", self._line_no
                )
                return None
            span = Span(
                lines=tuple(self._buffer),
                path=self.path,
                start_line=self._start_line,
                end_line=self._line_no,
            )
            self._buffer = []
            self._state = ExtractorState.OUTSIDE
            logger.trace(
                "%s: span closed (lines %d-%d, %d content line(s))",
                self.path or "<text>",
                span.start_line,
                span.end_line,
                len(span),
            )
            return span

        if self._state is ExtractorState.INSIDE:
            self._buffer.append(line.rstrip())
        return None

    def finish(self) -> None:
        """Signal end of input; an open span is discarded."""
        if self._state is ExtractorState.INSIDE:
            logger.debug(
                "%s: unterminated span opened at line %d discarded (%d line(s))",
                self.path or "<text>",
                self._start_line,
                len(self._buffer),
            )
        self._buffer = []
        self._state = ExtractorState.OUTSIDE


def extract_spans(
    lines: Iterable[str],
    markers: MarkerSet,
    *,
    path: Path | None = None,
) -> list[Span]:
    """Return all closed spans found in ``lines``, in order.

    Args:
        lines (Iterable[str]): Lines of a single file.
        markers (MarkerSet): Start/end marker patterns.
        path (Path | None): Source path recorded on emitted spans.

    Returns:
        list[Span]: Closed spans; unterminated trailing spans are dropped.
    """
    extractor = SpanExtractor(markers, path=path)
    spans: list[Span] = []
    for line in lines:
        span: Span | None = extractor.feed(line)
        if span is not None:
            spans.append(span)
    extractor.finish()
    return spans
