# topmark:header:start
#
#   project      : DocSpan
#   file         : api.py
#   file_relpath : src/docspan/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for DocSpan.

Typical use from a build script::

    from docspan import api

    result = api.extract(roots=["src/"], name_patterns=["*.hh"])
    Path("docs/api.js").write_text(result.document, encoding="utf-8")

The API never writes output itself; it returns a
[`ScanResult`][docspan.pipeline.runner.ScanResult].
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from docspan.config import Config, MutableConfig
from docspan.config.logging import get_logger
from docspan.core.diagnostics import DiagnosticLog
from docspan.file_resolver import resolve_file_list
from docspan.pipeline.markers import MarkerSet
from docspan.pipeline.normalizer import normalize_block, unindent
from docspan.pipeline.runner import ScanResult, build_document, build_document_from_text

if TYPE_CHECKING:
    from pathlib import Path

    from docspan.config.logging import DocspanLogger

logger: DocspanLogger = get_logger(__name__)

__all__ = [
    "Config",
    "MutableConfig",
    "ScanResult",
    "extract",
    "extract_files",
    "extract_text",
    "normalize_block",
    "unindent",
]


def extract(config: Config | None = None, **overrides: Any) -> ScanResult:
    """Resolve the files to scan and assemble the document.

    Args:
        config (Config | None): Frozen configuration. When None, built-in defaults
            are used (no config file discovery).
        **overrides (Any): Overrides applied on top of ``config`` using the keys of
            [`ArgKey`][docspan.config.keys.ArgKey] (``roots``, ``name_patterns``,
            ``exclude_patterns``, ``start_pattern``, ``end_pattern``).

    Returns:
        ScanResult: The document and scan details.

    Raises:
        MarkerPatternError: If an overriding marker pattern is invalid.
    """
    if config is None or overrides:
        draft: MutableConfig = (
            config.thaw() if config is not None else MutableConfig.from_defaults()
        )
        if overrides:
            draft.apply_cli_args(overrides)
        config = draft.freeze()

    diagnostics = DiagnosticLog(items=list(config.diagnostics))
    files: list[Path] = resolve_file_list(config, diagnostics=diagnostics)
    result: ScanResult = build_document(files, config.markers)

    diagnostics.extend(result.diagnostics)
    return replace(result, diagnostics=tuple(diagnostics))


def extract_files(
    files: list[Path],
    *,
    start_pattern: str | None = None,
    end_pattern: str | None = None,
) -> ScanResult:
    """Assemble the document from an explicit, ordered list of files.

    Args:
        files (list[Path]): Files to scan, in output order.
        start_pattern (str | None): Start marker regex (default: ``#if(0 && JSDOC)``).
        end_pattern (str | None): End marker regex (default: ``#endif``).

    Returns:
        ScanResult: The document and scan details.
    """
    return build_document(files, _markers(start_pattern, end_pattern))


def extract_text(
    text: str,
    *,
    start_pattern: str | None = None,
    end_pattern: str | None = None,
) -> str:
    """Assemble the document for a single in-memory text.

    Args:
        text (str): Source text.
        start_pattern (str | None): Start marker regex (default: ``#if(0 && JSDOC)``).
        end_pattern (str | None): End marker regex (default: ``#endif``).

    Returns:
        str: The document.
    """
    return build_document_from_text(text, _markers(start_pattern, end_pattern))


def _markers(start_pattern: str | None, end_pattern: str | None) -> MarkerSet:
    default: MarkerSet = MarkerSet.default()
    return MarkerSet.from_patterns(
        start_pattern or default.start.pattern,
        end_pattern or default.end.pattern,
    )
