# topmark:header:start
#
#   project      : DocSpan
#   file         : file_resolver.py
#   file_relpath : src/docspan/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the files to scan from the configured roots and patterns.

Each root is either a directory, walked recursively, or a single file. Within a
directory root, only regular files (no directories, no symlinks) whose
root-relative path matches a *name pattern* and no *exclude pattern* are kept.
Patterns follow ``.gitignore`` semantics (via `pathspec`): a pattern without a
slash, such as ``*.hh``, matches the file name at any depth.

The result is deterministic: roots are visited in the order given, files are
sorted within each root, and a file reachable from several roots is kept at its
first position only.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from docspan.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docspan.config import Config
    from docspan.config.logging import DocspanLogger
    from docspan.core.diagnostics import DiagnosticLog


logger: DocspanLogger = get_logger(__name__)


def _spec(patterns: Iterable[str]) -> PathSpec | None:
    """Return a PathSpec for ``patterns``, or None when there are none."""
    pats: list[str] = [p for p in patterns if p.strip()]
    if not pats:
        return None
    return PathSpec.from_lines(GitWildMatchPattern, pats)


def _is_regular_file(path: Path) -> bool:
    return path.is_file() and not path.is_symlink()


def walk_root(
    root: Path,
    *,
    name_patterns: Iterable[str],
    exclude_patterns: Iterable[str] = (),
) -> list[Path]:
    """Return the sorted regular files below ``root`` selected by the patterns.

    Args:
        root (Path): Directory to walk recursively.
        name_patterns (Iterable[str]): Patterns a root-relative path must match
            (any of them). An empty collection selects nothing.
        exclude_patterns (Iterable[str]): Patterns removing matching files.

    Returns:
        list[Path]: Matching files, sorted.
    """
    include_spec: PathSpec | None = _spec(name_patterns)
    if include_spec is None:
        logger.warning("No name patterns given for %s; nothing selected", root)
        return []
    exclude_spec: PathSpec | None = _spec(exclude_patterns)

    selected: list[Path] = []
    for p in root.rglob("*"):
        if not _is_regular_file(p):
            continue
        rel: str = p.relative_to(root).as_posix()
        if not include_spec.match_file(rel):
            continue
        if exclude_spec is not None and exclude_spec.match_file(rel):
            logger.trace("Excluded: %s", p)
            continue
        selected.append(p)
    return sorted(selected)


def resolve_file_list(config: Config, *, diagnostics: DiagnosticLog | None = None) -> list[Path]:
    """Return the files to scan, in output order.

    Semantics:
      1. Roots are visited in the configured order.
      2. A directory root is walked recursively and filtered with
         `name_patterns` / `exclude_patterns` (see `walk_root`).
      3. A file root is kept as is, without pattern filtering.
      4. A missing root logs a warning and contributes nothing.
      5. Duplicates keep their first position.

    Args:
        config (Config): Configuration with ``roots``, ``name_patterns`` and
            ``exclude_patterns``.
        diagnostics (DiagnosticLog | None): Optional log receiving a warning per
            missing root.

    Returns:
        list[Path]: Files selected for scanning.
    """
    logger.debug("resolve_file_list(): config: %s", config)

    roots: tuple[str, ...] = tuple(getattr(config, "roots", ()) or ())
    name_patterns: tuple[str, ...] = tuple(getattr(config, "name_patterns", ()) or ())
    exclude_patterns: tuple[str, ...] = tuple(getattr(config, "exclude_patterns", ()) or ())

    logger.trace(
        "roots: %s, name_patterns: %s, exclude_patterns: %s",
        roots,
        name_patterns,
        exclude_patterns,
    )

    out: list[Path] = []
    seen: set[Path] = set()

    def _add(p: Path) -> None:
        key: Path = p.resolve()
        if key in seen:
            return
        seen.add(key)
        out.append(p)

    for raw in roots:
        root = Path(raw)
        if root.is_dir():
            for p in walk_root(
                root,
                name_patterns=name_patterns,
                exclude_patterns=exclude_patterns,
            ):
                _add(p)
        elif root.is_file():
            _add(root)
        else:
            logger.warning("No such file or directory: %s", root)
            if diagnostics is not None:
                diagnostics.add_warning(f"No such file or directory: {root}")

    logger.trace("Files to scan: %d -- %s", len(out), out)
    return out
