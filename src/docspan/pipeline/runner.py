# topmark:header:start
#
#   project      : DocSpan
#   file         : runner.py
#   file_relpath : src/docspan/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the extraction pipeline over a list of files.

For each file, in the given order: read its lines, feed them to a fresh
[`SpanExtractor`][docspan.pipeline.extractor.SpanExtractor], normalize every
closed span and append it to one [`DocumentBuilder`][docspan.pipeline.document.DocumentBuilder].

A file that cannot be read (missing, no permission, not UTF-8) contributes
nothing to the document: it is logged, recorded in `ScanResult.skipped`, and the
run continues with the next file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docspan.config.logging import get_logger
from docspan.core.diagnostics import DiagnosticLog
from docspan.pipeline.document import DocumentBuilder
from docspan.pipeline.extractor import Span, extract_spans
from docspan.pipeline.normalizer import normalize_span
from docspan.pipeline.reader import iter_file_lines, iter_text_lines

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from docspan.config.logging import DocspanLogger
    from docspan.core.diagnostics import Diagnostic
    from docspan.pipeline.markers import MarkerSet

logger: DocspanLogger = get_logger(__name__)


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a scan.

    Attributes:
        document (str): The assembled document (always ends with one newline).
        spans (tuple[Span, ...]): Closed spans in document order.
        files (tuple[Path, ...]): Files that were read successfully.
        skipped (tuple[Path, ...]): Files that could not be read.
        diagnostics (tuple[Diagnostic, ...]): User-facing notes collected during the scan.
    """

    document: str
    spans: tuple[Span, ...]
    files: tuple[Path, ...]
    skipped: tuple[Path, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def span_count(self) -> int:
        """Number of spans in the document."""
        return len(self.spans)


def scan_lines(
    lines: Iterable[str],
    markers: MarkerSet,
    *,
    path: Path | None = None,
) -> list[Span]:
    """Return the closed spans found in a sequence of lines.

    Args:
        lines (Iterable[str]): Lines of one file.
        markers (MarkerSet): Marker patterns.
        path (Path | None): Source path recorded on the spans.

    Returns:
        list[Span]: Closed spans in line order.
    """
    return extract_spans(lines, markers, path=path)


def scan_file(path: Path, markers: MarkerSet) -> list[Span]:
    """Return the closed spans found in one file.

    Args:
        path (Path): File to scan.
        markers (MarkerSet): Marker patterns.

    Returns:
        list[Span]: Closed spans in line order.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    return scan_lines(iter_file_lines(path), markers, path=path)


def build_document(files: Sequence[Path], markers: MarkerSet) -> ScanResult:
    """Scan ``files`` in order and assemble the document.

    Args:
        files (Sequence[Path]): Files to scan, in output order.
        markers (MarkerSet): Marker patterns.

    Returns:
        ScanResult: The document and what went into it.
    """
    builder = DocumentBuilder()
    diagnostics = DiagnosticLog()
    spans: list[Span] = []
    scanned: list[Path] = []
    skipped: list[Path] = []

    for path in files:
        try:
            file_spans: list[Span] = scan_file(path, markers)
        except UnicodeDecodeError as exc:
            logger.warning("Skipping %s: not valid UTF-8 text (%s)", path, exc.reason)
            diagnostics.add_warning(f"Skipped {path}: not valid UTF-8 text")
            skipped.append(path)
            continue
        except OSError as exc:
            logger.warning("Skipping %s: %s", path, exc.strerror or exc)
            diagnostics.add_warning(f"Skipped {path}: {exc.strerror or exc}")
            skipped.append(path)
            continue

        scanned.append(path)
        logger.debug("%s: %d span(s)", path, len(file_spans))
        for span in file_spans:
            builder.append(normalize_span(span))
        spans.extend(file_spans)

    logger.info(
        "Scanned %d file(s), skipped %d, extracted %d span(s)",
        len(scanned),
        len(skipped),
        len(spans),
    )
    return ScanResult(
        document=builder.render(),
        spans=tuple(spans),
        files=tuple(scanned),
        skipped=tuple(skipped),
        diagnostics=tuple(diagnostics),
    )


def build_document_from_text(text: str, markers: MarkerSet) -> str:
    """Assemble the document for a single in-memory text.

    Lines are split like files are read, so the result matches scanning a file
    holding the same text.

    Args:
        text (str): File content.
        markers (MarkerSet): Marker patterns.

    Returns:
        str: The document.
    """
    builder = DocumentBuilder()
    for span in scan_lines(iter_text_lines(text), markers):
        builder.append(normalize_span(span))
    return builder.render()
