# topmark:header:start
#
#   project      : DocSpan
#   file         : model.py
#   file_relpath : src/docspan/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the file resolver and
      the extraction pipeline.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Immutability:
    - `Config` stores tuples and is ``frozen=True`` to prevent accidental
      mutation at runtime. Use `Config.thaw` → edit → `MutableConfig.freeze`
      for safe updates.

Path semantics:
    - Roots and the output path declared in a config file are resolved against
      that config file's directory.
    - Roots and the output path given on the CLI are used as given (relative to
      the invocation CWD).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docspan.config.io import (
    TomlLoadError,
    get_string_list_value_checked,
    get_string_value_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from docspan.config.keys import ArgKey, Toml
from docspan.config.logging import get_logger
from docspan.constants import (
    DEFAULT_END_PATTERN,
    DEFAULT_NAME_PATTERNS,
    DEFAULT_ROOTS,
    DEFAULT_START_PATTERN,
    DOCSPAN_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from docspan.core.diagnostics import Diagnostic, DiagnosticLog
from docspan.pipeline.markers import MarkerSet

if TYPE_CHECKING:
    from docspan.config.io import TomlTable
    from docspan.config.logging import DocspanLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: DocspanLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for DocSpan.

    Attributes:
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        roots (tuple[str, ...]): Directories (walked recursively) or files to scan,
            in output order.
        name_patterns (tuple[str, ...]): Gitwildmatch patterns a file's root-relative
            path must match (``*.hh`` matches at any depth).
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns removing files.
        start_pattern (str): Regular expression opening a span.
        end_pattern (str): Regular expression closing a span.
        output (Path | None): Output file; None writes to standard output.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading config.
    """

    config_files: tuple[Path | str, ...]
    roots: tuple[str, ...]
    name_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    start_pattern: str
    end_pattern: str
    output: Path | None
    diagnostics: tuple[Diagnostic, ...]

    @property
    def markers(self) -> MarkerSet:
        """Compiled marker patterns (validated by `MutableConfig.freeze`)."""
        return MarkerSet.from_patterns(self.start_pattern, self.end_pattern)

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict.

        Returns:
            TomlTable: the TOML-serializable dict representing the Config
        """
        return {
            Toml.SECTION_FILES: {
                Toml.KEY_ROOTS: list(self.roots),
                Toml.KEY_NAME_PATTERNS: list(self.name_patterns),
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
            Toml.SECTION_MARKERS: {
                Toml.KEY_START_PATTERN: self.start_pattern,
                Toml.KEY_END_PATTERN: self.end_pattern,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_OUTPUT_PATH: str(self.output) if self.output is not None else "",
            },
        }

    def to_toml(self) -> str:
        """Render this Config as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            config_files=list(self.config_files),
            roots=list(self.roots),
            name_patterns=list(self.name_patterns),
            exclude_patterns=list(self.exclude_patterns),
            start_pattern=self.start_pattern,
            end_pattern=self.end_pattern,
            output=self.output,
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration draft used during discovery and merging.

    Unset values (empty lists, ``None``) inherit from the layer below when
    merged and fall back to built-in defaults when frozen.
    """

    config_files: list[Path | str] = field(default_factory=lambda: [])

    roots: list[str] = field(default_factory=lambda: [])
    name_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])

    start_pattern: str | None = None
    end_pattern: str | None = None

    output: Path | None = None

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Raises:
            MarkerPatternError: If a marker pattern is not a valid regular expression.
        """
        start_pattern: str = self.start_pattern or DEFAULT_START_PATTERN
        end_pattern: str = self.end_pattern or DEFAULT_END_PATTERN
        # Fail early on bad patterns rather than on the first scanned file.
        MarkerSet.from_patterns(start_pattern, end_pattern)

        return Config(
            config_files=tuple(self.config_files),
            roots=tuple(self.roots or DEFAULT_ROOTS),
            name_patterns=tuple(self.name_patterns or DEFAULT_NAME_PATTERNS),
            exclude_patterns=tuple(self.exclude_patterns),
            start_pattern=start_pattern,
            end_pattern=end_pattern,
            output=self.output,
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed TOML data (the ``[tool.docspan]`` table for
                ``pyproject.toml``).
            config_file (Path | None): Source TOML file; relative roots and output
                paths are resolved against its directory.

        Returns:
            MutableConfig: The resulting MutableConfig instance.
        """
        files_tbl: TomlTable = get_table_value(data, Toml.SECTION_FILES)
        logger.trace("TOML [files]: %s", files_tbl)

        markers_tbl: TomlTable = get_table_value(data, Toml.SECTION_MARKERS)
        logger.trace("TOML [markers]: %s", markers_tbl)

        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        logger.trace("TOML [output]: %s", output_tbl)

        draft = cls()
        diags: DiagnosticLog = draft.diagnostics
        if config_file is not None:
            draft.config_files = [config_file]

        cfg_dir: Path | None = config_file.parent.resolve() if config_file else None

        def _where(section: str) -> str:
            return f"{config_file}: [{section}]" if config_file else f"[{section}]"

        # ----- [files] -----
        roots: list[str] | None = get_string_list_value_checked(
            files_tbl, Toml.KEY_ROOTS, where=_where(Toml.SECTION_FILES), diagnostics=diags
        )
        if roots:
            draft.roots = [_resolve_against(r, cfg_dir) for r in roots]

        draft.name_patterns = (
            get_string_list_value_checked(
                files_tbl,
                Toml.KEY_NAME_PATTERNS,
                where=_where(Toml.SECTION_FILES),
                diagnostics=diags,
            )
            or []
        )
        draft.exclude_patterns = (
            get_string_list_value_checked(
                files_tbl,
                Toml.KEY_EXCLUDE_PATTERNS,
                where=_where(Toml.SECTION_FILES),
                diagnostics=diags,
            )
            or []
        )

        # ----- [markers] -----
        draft.start_pattern = (
            get_string_value_checked(
                markers_tbl,
                Toml.KEY_START_PATTERN,
                where=_where(Toml.SECTION_MARKERS),
                diagnostics=diags,
            )
            or None
        )
        draft.end_pattern = (
            get_string_value_checked(
                markers_tbl,
                Toml.KEY_END_PATTERN,
                where=_where(Toml.SECTION_MARKERS),
                diagnostics=diags,
            )
            or None
        )

        # ----- [output] -----
        out_raw: str | None = get_string_value_checked(
            output_tbl,
            Toml.KEY_OUTPUT_PATH,
            where=_where(Toml.SECTION_OUTPUT),
            diagnostics=diags,
        )
        if out_raw:
            draft.output = Path(_resolve_against(out_raw, cfg_dir))

        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``docspan.toml`` and ``pyproject.toml``; for the latter,
        the ``[tool.docspan]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft; None for a ``pyproject.toml`` without
                a ``[tool.docspan]`` table.

        Raises:
            TomlLoadError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, "tool"), PYPROJECT_TOOL_SECTION
            )
            if not tool_section:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Layered discovery semantics:
          * We traverse from the anchor directory up to the filesystem root and
            collect config files in **root-most → nearest** order.
          * In a given directory, ``pyproject.toml`` comes before ``docspan.toml``
            so that the tool file wins when merged.
          * If a discovered config sets ``root = true``, we stop traversing after
            collecting the current directory's files.

        Args:
            start (Path): The Path instance where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for stable merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_TOML_NAME, DOCSPAN_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    data: TomlTable = load_toml_dict(p)
                except TomlLoadError as e:
                    # Reported again (as a diagnostic) when the file is merged.
                    logger.debug("Ignoring unreadable config %s during discovery: %s", p, e)
                    dir_entries.append(p)
                    continue
                if name == PYPROJECT_TOML_NAME:
                    data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
                    if not data:
                        continue
                logger.debug("Discovered config file: %s", p)
                dir_entries.append(p)
                if data.get(Toml.KEY_ROOT) is True:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):  # root-most first
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Merge order (lowest → highest precedence):
            1) Built-in defaults
            2) Project configs discovered upward from ``anchor`` (root-most first)
            3) Extra config files passed explicitly via ``--config`` (in the order provided)

        A discovered config that cannot be parsed is skipped with a warning
        diagnostic; an explicit one raises.

        Args:
            anchor (Path | None): Discovery start directory (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit config files merged last.
            no_config (bool): If True, skip discovery.

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.

        Raises:
            TomlLoadError: If an explicit config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                try:
                    mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                except TomlLoadError as e:
                    draft.diagnostics.add_warning(f"Ignoring config file: {e}")
                    continue
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Scalars override when not None; lists override when non-empty.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        diagnostics = DiagnosticLog(items=list(self.diagnostics))
        diagnostics.extend(other.diagnostics.items)
        return MutableConfig(
            config_files=self.config_files + other.config_files,
            roots=other.roots or self.roots,
            name_patterns=other.name_patterns or self.name_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            start_pattern=other.start_pattern
            if other.start_pattern is not None
            else self.start_pattern,
            end_pattern=other.end_pattern if other.end_pattern is not None else self.end_pattern,
            output=other.output if other.output is not None else self.output,
            diagnostics=diagnostics,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Only keys that are present with a non-empty value override the draft.
        Config discovery flags (``--config``, ``--no-config``) are handled by
        `load_merged`, not here.

        Args:
            args (ArgsLike): Parsed arguments mapping (see `docspan.config.keys.ArgKey`).

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)

        self.config_files.append(CLI_OVERRIDE_STR)

        roots: Iterable[str] | None = args.get(ArgKey.ROOTS)
        if roots:
            self.roots = [str(r) for r in roots]
        name_patterns: Iterable[str] | None = args.get(ArgKey.NAME_PATTERNS)
        if name_patterns:
            self.name_patterns = list(name_patterns)
        exclude_patterns: Iterable[str] | None = args.get(ArgKey.EXCLUDE_PATTERNS)
        if exclude_patterns:
            self.exclude_patterns = list(exclude_patterns)
        if args.get(ArgKey.START_PATTERN):
            self.start_pattern = str(args[ArgKey.START_PATTERN])
        if args.get(ArgKey.END_PATTERN):
            self.end_pattern = str(args[ArgKey.END_PATTERN])
        if args.get(ArgKey.OUTPUT):
            self.output = Path(args[ArgKey.OUTPUT])

        return self


def _resolve_against(value: str, base: Path | None) -> str:
    """Resolve a relative path string against ``base`` (kept as-is when base is None)."""
    p = Path(value)
    if base is None or p.is_absolute():
        return value
    return str((base / p).resolve())
