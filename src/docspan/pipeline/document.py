# topmark:header:start
#
#   project      : DocSpan
#   file         : document.py
#   file_relpath : src/docspan/pipeline/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document aggregation.

The `DocumentBuilder` is the running output buffer. It is created by the runner
and passed along explicitly; there is no module-level accumulator.
"""

from __future__ import annotations

from docspan.constants import SPAN_SEPARATOR


class DocumentBuilder:
    """Accumulate normalized blocks into the final document.

    Every appended block is followed by one blank line. `render()` trims the
    trailing whitespace and ends the document with exactly one newline.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, block: str) -> None:
        """Append a normalized block followed by a blank line."""
        self._parts.append(block + SPAN_SEPARATOR)

    def __len__(self) -> int:
        return len(self._parts)

    def render(self) -> str:
        """Return the document text.

        Returns:
            str: The concatenated blocks, trailing whitespace trimmed, with a
                single trailing newline (``"\\n"`` when empty).
        """
        return "".join(self._parts).rstrip() + "\n"
