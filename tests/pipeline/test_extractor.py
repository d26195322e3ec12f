# topmark:header:start
#
#   project      : DocSpan
#   file         : test_extractor.py
#   file_relpath : tests/pipeline/test_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `SpanExtractor` state machine.

The extractor is fed one line at a time and emits a `Span` whenever an end
marker closes an open span. Blank lines never reach the buffer, end markers
outside a span are ignored, a second start marker restarts the span, and an
unterminated span is dropped.
"""

from __future__ import annotations

from pathlib import Path

from docspan.pipeline.extractor import ExtractorState, Span, SpanExtractor, extract_spans
from docspan.pipeline.markers import MarkerSet
from tests.conftest import END, START

MARKERS: MarkerSet = MarkerSet.default()


def _texts(lines: list[str]) -> list[tuple[str, ...]]:
    return [span.lines for span in extract_spans(lines, MARKERS)]


def test_no_start_marker_yields_no_spans() -> None:
    """Content without any start marker produces nothing."""
    assert _texts(["int a;", "  // comment", END, "", "int b;"]) == []


def test_start_without_end_yields_no_spans() -> None:
    """An unterminated span is discarded at end of input."""
    assert _texts([START, "  hello", "  world"]) == []


def test_single_span_content_and_positions() -> None:
    """Content lines are captured with trailing whitespace trimmed."""
    spans: list[Span] = extract_spans(
        ["int a;", START, "  hello  ", "  world\t", END, "int b;"],
        MARKERS,
        path=Path("a.hh"),
    )
    assert len(spans) == 1
    span: Span = spans[0]
    assert span.lines == ("  hello", "  world")
    assert span.path == Path("a.hh")
    assert (span.start_line, span.end_line) == (2, 5)
    assert span.text == "  hello\n  world\n"
    assert len(span) == 2


def test_blank_lines_are_dropped_inside_span() -> None:
    """Empty and whitespace-only lines are not accumulated."""
    assert _texts([START, "a", "", "   ", "b", END]) == [("a", "b")]


def test_end_marker_outside_span_is_ignored() -> None:
    """A stray end marker does not open or close anything."""
    assert _texts([END, START, "x", END, END]) == [("x",)]


def test_nested_start_restarts_span() -> None:
    """A start marker inside an open span discards what was buffered."""
    assert _texts([START, "lost", START, "kept", END]) == [("kept",)]


def test_empty_span_is_emitted() -> None:
    """Adjacent start and end markers produce a span with no lines."""
    spans: list[Span] = extract_spans([START, "", END], MARKERS)
    assert len(spans) == 1
    assert spans[0].lines == ()
    assert spans[0].text == ""


def test_multiple_spans_in_order() -> None:
    """Spans are emitted in the order they close."""
    assert _texts([START, "x", END, "code", START, "y", END]) == [("x",), ("y",)]


def test_feed_reports_state_transitions() -> None:
    """`feed` returns a span only on the closing line."""
    extractor = SpanExtractor(MARKERS)
    assert extractor.state is ExtractorState.OUTSIDE
    assert extractor.feed(START) is None
    assert extractor.is_open
    assert extractor.feed("body") is None
    span: Span | None = extractor.feed(END)
    assert span is not None
    assert span.lines == ("body",)
    assert extractor.state is ExtractorState.OUTSIDE


def test_finish_discards_open_span() -> None:
    """`finish` closes the machine without emitting anything."""
    extractor = SpanExtractor(MARKERS)
    extractor.feed(START)
    extractor.feed("dangling")
    extractor.finish()
    assert not extractor.is_open
    # The discarded content must not leak into the next span.
    extractor.feed(START)
    span: Span | None = extractor.feed(END)
    assert span is not None
    assert span.lines == ()


def test_reset_starts_a_new_file() -> None:
    """`reset` clears the state, line numbering and source path."""
    extractor = SpanExtractor(MARKERS, path=Path("a.hh"))
    extractor.feed("x")
    extractor.feed(START)
    extractor.reset(path=Path("b.hh"))
    assert extractor.state is ExtractorState.OUTSIDE
    extractor.feed(START)
    span: Span | None = extractor.feed(END)
    assert span is not None
    assert span.path == Path("b.hh")
    assert (span.start_line, span.end_line) == (1, 2)


def test_custom_markers() -> None:
    """Any marker pair can drive the extractor."""
    markers: MarkerSet = MarkerSet.from_tokens("/*!doc", "*/")
    spans: list[Span] = extract_spans(["/*!doc", " * one", "*/"], markers)
    assert [s.lines for s in spans] == [(" * one",)]
