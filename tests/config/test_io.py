# topmark:header:start
#
#   project      : DocSpan
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers and value getters in `docspan.config.io`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from docspan.config.io import (
    TomlLoadError,
    get_string_list_value_checked,
    get_string_value_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from docspan.config.keys import Toml
from docspan.constants import DEFAULT_END_PATTERN, DEFAULT_START_PATTERN
from docspan.core.diagnostics import DiagnosticLevel, DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

    from docspan.config.io import TomlTable


def test_load_defaults_dict_is_a_fresh_copy() -> None:
    """Mutating the returned defaults does not affect later calls."""
    first: TomlTable = load_defaults_dict()
    first[Toml.SECTION_FILES][Toml.KEY_ROOTS].append("other")
    second: TomlTable = load_defaults_dict()
    assert second[Toml.SECTION_FILES][Toml.KEY_ROOTS] == ["."]
    assert second[Toml.SECTION_MARKERS][Toml.KEY_START_PATTERN] == DEFAULT_START_PATTERN


def test_to_toml_roundtrips_regex_strings() -> None:
    """Backslashes in marker patterns survive rendering and parsing."""
    rendered: str = to_toml(load_defaults_dict())
    parsed = tomlkit.parse(rendered).unwrap()
    assert parsed[Toml.SECTION_MARKERS][Toml.KEY_START_PATTERN] == DEFAULT_START_PATTERN
    assert parsed[Toml.SECTION_MARKERS][Toml.KEY_END_PATTERN] == DEFAULT_END_PATTERN


def test_to_toml_drops_none_values() -> None:
    """TOML has no null; None entries are omitted."""
    rendered: str = to_toml({"output": {"path": None, "keep": "x"}})
    assert "path" not in rendered
    assert 'keep = "x"' in rendered


def test_load_toml_dict_reads_file(tmp_path: Path) -> None:
    """A valid TOML file parses into plain dicts."""
    p: Path = tmp_path / "docspan.toml"
    p.write_text('[files]\nroots = ["src"]\n', encoding="utf-8")
    assert load_toml_dict(p) == {"files": {"roots": ["src"]}}


def test_load_toml_dict_invalid_toml(tmp_path: Path) -> None:
    """Malformed TOML raises `TomlLoadError` naming the file."""
    p: Path = tmp_path / "docspan.toml"
    p.write_text("[files\nroots = ", encoding="utf-8")
    with pytest.raises(TomlLoadError, match="docspan.toml"):
        load_toml_dict(p)


def test_load_toml_dict_not_utf8(tmp_path: Path) -> None:
    """A latin-1 encoded file raises `TomlLoadError` instead of a decode error."""
    p: Path = tmp_path / "docspan.toml"
    p.write_bytes("# caf\u00e9\n[files]\n".encode("latin-1"))
    with pytest.raises(TomlLoadError, match="not valid UTF-8"):
        load_toml_dict(p)


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """An unreadable file raises `TomlLoadError`."""
    with pytest.raises(TomlLoadError):
        load_toml_dict(tmp_path / "nope.toml")


def test_get_table_value() -> None:
    """Sub-tables are returned; missing or non-table values give ``{}``."""
    table: TomlTable = {"a": {"x": 1}, "b": 3}
    assert get_table_value(table, "a") == {"x": 1}
    assert get_table_value(table, "b") == {}
    assert get_table_value(table, "c") == {}


def test_get_string_value_checked() -> None:
    """Strings pass through; other types are reported and dropped."""
    diags = DiagnosticLog()
    table: TomlTable = {"ok": "v", "bad": 5}
    assert get_string_value_checked(table, "ok", where="[t]", diagnostics=diags) == "v"
    assert get_string_value_checked(table, "missing", where="[t]", diagnostics=diags) is None
    assert len(diags) == 0
    assert get_string_value_checked(table, "bad", where="[t]", diagnostics=diags) is None
    assert len(diags) == 1
    assert diags.items[0].level is DiagnosticLevel.WARNING
    assert "[t].bad" in diags.items[0].message


def test_get_string_list_value_checked() -> None:
    """Non-list values and non-string items are reported."""
    diags = DiagnosticLog()
    table: TomlTable = {"mixed": ["a", 1, "b"], "scalar": "a"}
    assert get_string_list_value_checked(table, "mixed", where="[t]", diagnostics=diags) == [
        "a",
        "b",
    ]
    assert len(diags) == 1
    assert get_string_list_value_checked(table, "scalar", where="[t]", diagnostics=diags) is None
    assert len(diags) == 2
    assert get_string_list_value_checked(table, "missing", where="[t]", diagnostics=diags) is None
    assert len(diags) == 2
