# topmark:header:start
#
#   project      : DocSpan
#   file         : extract.py
#   file_relpath : src/docspan/cli/commands/extract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocSpan `extract` command.

Scans the configured roots (or the PATHS given on the command line) for
documentation spans and writes the assembled document to standard output or
to the file named by ``--output``.

Input parsing rules:
  * PATHS replace the configured ``[files].roots``.
  * ``--name`` / ``--exclude`` replace the configured patterns when given.
  * ``--config`` files are merged after discovered project configs.

Stdout carries the document only; warnings and the ``--stats`` summary go to
stderr.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from docspan.cli.cmd_common import get_console, get_effective_verbosity
from docspan.cli.errors import DocspanConfigError, DocspanFileNotFoundError, DocspanIOError
from docspan.cli.options import common_config_options, common_file_and_marker_options
from docspan.config import MutableConfig, TomlLoadError
from docspan.config.keys import ArgKey
from docspan.config.logging import get_logger
from docspan.core.diagnostics import DiagnosticLog
from docspan.file_resolver import resolve_file_list
from docspan.pipeline.markers import MarkerPatternError
from docspan.pipeline.runner import build_document

if TYPE_CHECKING:
    from docspan.cli.console import ClickConsole
    from docspan.config import Config
    from docspan.config.logging import DocspanLogger
    from docspan.pipeline.runner import ScanResult

logger: DocspanLogger = get_logger(__name__)


def _load_config(
    *,
    paths: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    overrides: dict[str, Any],
) -> Config:
    """Build the effective configuration, mapping failures to CLI errors."""
    for cfg in config_paths:
        if not Path(cfg).is_file():
            raise DocspanFileNotFoundError(f"Config file not found: {cfg}")

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except TomlLoadError as e:
        raise DocspanConfigError(str(e)) from e

    args: dict[str, Any] = dict(overrides)
    args[ArgKey.ROOTS] = list(paths)
    draft.apply_cli_args(args)

    try:
        return draft.freeze()
    except MarkerPatternError as e:
        raise DocspanConfigError(str(e)) from e


def _write_document(document: str, output: Path | None, console: ClickConsole) -> None:
    if output is None:
        console.print(document, nl=False)
        return
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(document, encoding="utf-8")
    except OSError as e:
        raise DocspanIOError(f"Cannot write {output}: {e.strerror or e}") from e
    logger.info("Wrote %d character(s) to %s", len(document), output)


def _print_stats(result: ScanResult, console: ClickConsole) -> None:
    console.note(
        console.styled(
            f"{len(result.files)} file(s) scanned, "
            f"{len(result.skipped)} skipped, "
            f"{result.span_count} span(s) extracted",
            bold=True,
        )
    )
    if result.diagnostics:
        console.note(f"{len(result.diagnostics)} warning(s)")


@click.command(
    name="extract",
    help="Extract documentation spans and write the assembled document.",
)
@click.argument(
    "paths",
    nargs=-1,
    metavar="[PATHS]...",
    type=click.Path(path_type=str),
)
@common_file_and_marker_options
@click.option(
    "--output",
    "-o",
    "output",
    metavar="FILE",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="Write the document to FILE instead of standard output.",
)
@common_config_options
@click.option(
    "--stats",
    "show_stats",
    is_flag=True,
    help="Print a scan summary on stderr.",
)
def extract_command(
    *,
    paths: tuple[str, ...],
    name_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    start_pattern: str | None,
    end_pattern: str | None,
    output: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    show_stats: bool,
) -> None:
    """Extract documentation spans and write the assembled document.

    Args:
        paths (tuple[str, ...]): Directories or files to scan (replace configured roots).
        name_patterns (tuple[str, ...]): File name patterns selecting files to scan.
        exclude_patterns (tuple[str, ...]): Patterns removing files from the scan.
        start_pattern (str | None): Start marker regular expression.
        end_pattern (str | None): End marker regular expression.
        output (str | None): Output file; standard output if None.
        config_paths (tuple[str, ...]): Extra config files to merge.
        no_config (bool): Skip config discovery.
        show_stats (bool): Print a scan summary on stderr.

    Raises:
        DocspanFileNotFoundError: If a ``--config`` file does not exist.
        DocspanConfigError: If a config file is invalid or a marker pattern does not compile.
        DocspanIOError: If the output file cannot be written.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = _load_config(
        paths=paths,
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            ArgKey.NAME_PATTERNS: list(name_patterns),
            ArgKey.EXCLUDE_PATTERNS: list(exclude_patterns),
            ArgKey.START_PATTERN: start_pattern,
            ArgKey.END_PATTERN: end_pattern,
            ArgKey.OUTPUT: output,
        },
    )
    logger.debug("Effective config: %s", config)

    diagnostics = DiagnosticLog(items=list(config.diagnostics))
    files: list[Path] = resolve_file_list(config, diagnostics=diagnostics)
    if vlevel > 1:
        for f in files:
            console.note(f"  {f}")

    result: ScanResult = build_document(files, config.markers)
    diagnostics.extend(result.diagnostics)

    if vlevel >= 0:
        for diag in diagnostics:
            console.warn(diag.render(color=console.enable_color))

    _write_document(result.document, config.output, console)

    if show_stats or vlevel > 0:
        _print_stats(result, console)
