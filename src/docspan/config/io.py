# topmark:header:start
#
#   project      : DocSpan
#   file         : io.py
#   file_relpath : src/docspan/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for DocSpan configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain `dict` structures.

Two families of getters exist:
- *Unchecked* getters: return defaults and only emit **debug** logs.
- *Checked* getters: validate the expected shape and record **warnings** in a
  `DiagnosticLog` (and also log a warning).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docspan.config.keys import Toml
from docspan.config.logging import get_logger
from docspan.constants import (
    DEFAULT_END_PATTERN,
    DEFAULT_NAME_PATTERNS,
    DEFAULT_ROOTS,
    DEFAULT_START_PATTERN,
)

if TYPE_CHECKING:
    from pathlib import Path

    from docspan.config.logging import DocspanLogger
    from docspan.core.diagnostics import DiagnosticLog

logger: DocspanLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class TomlLoadError(Exception):
    """Raised when a TOML file cannot be read or parsed."""


def load_defaults_dict() -> TomlTable:
    """Return DocSpan's runtime defaults as a Python dict.

    This function performs **no I/O**. The returned value is a new dict so
    callers can mutate it safely.
    """
    return {
        Toml.SECTION_FILES: {
            Toml.KEY_ROOTS: list(DEFAULT_ROOTS),
            Toml.KEY_NAME_PATTERNS: list(DEFAULT_NAME_PATTERNS),
            Toml.KEY_EXCLUDE_PATTERNS: [],
        },
        Toml.SECTION_MARKERS: {
            Toml.KEY_START_PATTERN: DEFAULT_START_PATTERN,
            Toml.KEY_END_PATTERN: DEFAULT_END_PATTERN,
        },
        Toml.SECTION_OUTPUT: {
            # Empty means standard output.
            Toml.KEY_OUTPUT_PATH: "",
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``docspan.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        TomlLoadError: If the file cannot be read, is not UTF-8 or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise TomlLoadError(f"Cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise TomlLoadError(f"Cannot read {path}: not valid UTF-8 text") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise TomlLoadError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists (TOML has no `null`)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


# --- Unchecked getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table, or ``{}`` when missing or not a table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.

    Returns:
        TomlTable: The sub-table or an empty dict.
    """
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %s, got %r; ignoring", key, value)
    return {}


# --- Checked getters ---


def get_string_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Extract an optional string, recording a warning when the type is incorrect.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. "[markers]").
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.

    Returns:
        str | None: The string value, or None when missing or of the wrong type.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Extract a list of strings, recording a warning for wrongly-typed values.

    Behavior:
        - If the key is missing, returns None.
        - If the value is not a list, returns None and records a warning.
        - Non-string items are dropped, each with a warning.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. "[files]").
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.

    Returns:
        list[str] | None: Filtered list containing only string entries, or None.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return None

    out: list[str] = []
    for v in cast("list[Any]", value):
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return out
