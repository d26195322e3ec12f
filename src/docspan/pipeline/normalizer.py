# topmark:header:start
#
#   project      : DocSpan
#   file         : normalizer.py
#   file_relpath : src/docspan/pipeline/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation normalizer for extracted spans.

Spans are usually indented to the level of the surrounding code. The normalizer
removes the indentation shared by all non-blank lines so the block starts at
column 0, and trims blank runs at both ends.

Tabs count as a single column: each tab is replaced by one space *before*
measuring indentation (no tab-stop expansion).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from docspan.pipeline.extractor import Span

_FIRST_NON_WS: Final[re.Pattern[str]] = re.compile(r"\S")
_LEADING_NEWLINES: Final[re.Pattern[str]] = re.compile(r"^[\r\n]+")


def min_indent(lines: list[str]) -> int | None:
    """Return the smallest leading-whitespace width among non-blank lines.

    Args:
        lines (list[str]): Lines to inspect.

    Returns:
        int | None: The minimum indentation, or None if no line has content.
    """
    widths: list[int] = []
    for line in lines:
        m: re.Match[str] | None = _FIRST_NON_WS.search(line)
        if m is not None:
            widths.append(m.start())
    return min(widths) if widths else None


def unindent(text: str) -> str:
    """Remove the indentation common to every non-blank line of ``text``.

    Trailing whitespace of the whole text is trimmed first and tabs become single
    spaces. Lines not longer than the common indentation (blank or
    whitespace-only) are kept as they are.

    Args:
        text (str): Block of text, lines separated by ``\\n``.

    Returns:
        str: The unindented block, lines joined with ``\\n``.
    """
    lines: list[str] = text.rstrip().replace("\t", " ").split("\n")
    indent: int | None = min_indent(lines)
    if indent:
        lines = [line[indent:] if len(line) > indent else line for line in lines]
    return "\n".join(lines)


def normalize_block(text: str) -> str:
    """Normalize a raw span block for inclusion in the document.

    Trailing whitespace is trimmed, then a leading run of newline characters is
    removed, then the block is [`unindent`][docspan.pipeline.normalizer.unindent]ed.

    Args:
        text (str): Raw span text.

    Returns:
        str: The normalized block; empty when the span holds no content.
    """
    return unindent(_LEADING_NEWLINES.sub("", text.rstrip()))


def normalize_span(span: Span) -> str:
    """Normalize the text of a closed span.

    Args:
        span (Span): The span to normalize.

    Returns:
        str: The normalized block.
    """
    return normalize_block(span.text)
