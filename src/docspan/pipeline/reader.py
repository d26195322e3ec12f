# topmark:header:start
#
#   project      : DocSpan
#   file         : reader.py
#   file_relpath : src/docspan/pipeline/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Line-oriented file reader.

Files are decoded as UTF-8 with universal newline handling, so ``\r\n`` and
``\r`` terminated files yield the same lines as ``\n`` terminated ones. A UTF-8
BOM at the start of the file is dropped. In-memory text is split the same way,
so only ``\n``, ``\r\n`` and ``\r`` end a line; form feeds and other Unicode
line separators stay inside it.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from docspan.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from docspan.config.logging import DocspanLogger

logger: DocspanLogger = get_logger(__name__)


def iter_file_lines(path: Path) -> Iterator[str]:
    """Yield the lines of a text file without their terminators.

    The file is closed when the iterator is exhausted or garbage-collected.

    Args:
        path (Path): File to read.

    Yields:
        str: One line at a time, line terminator stripped.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    logger.trace("Reading %s", path)
    with path.open("r", encoding="utf-8-sig", newline=None) as fh:
        for line in fh:
            yield line.rstrip("\n")


def iter_text_lines(text: str) -> Iterator[str]:
    """Yield the lines of in-memory text exactly as `iter_file_lines` would.

    Args:
        text (str): Decoded file content.

    Yields:
        str: One line at a time, line terminator stripped.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    for line in io.StringIO(text, newline=None):
        yield line.rstrip("\n")
