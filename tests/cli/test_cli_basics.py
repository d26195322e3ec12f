# topmark:header:start
#
#   project      : DocSpan
#   file         : test_cli_basics.py
#   file_relpath : tests/cli/test_cli_basics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the group options and the informational commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from docspan.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from docspan.constants import DEFAULT_START_PATTERN, DOCSPAN_VERSION
from docspan.core.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli

if TYPE_CHECKING:
    import pytest
    from click.testing import Result


def test_help() -> None:
    """``--help`` lists the subcommands."""
    result: Result = run_cli(["--help"])
    assert_SUCCESS(result)
    for name in ("extract", "show-defaults", "version"):
        assert name in result.output


def test_no_subcommand_prints_hint() -> None:
    """Invoking the group alone prints a hint and the help text."""
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "docspan extract" in result.stdout


def test_version() -> None:
    """`version` prints the installed version."""
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == DOCSPAN_VERSION


def test_version_verbose() -> None:
    """`-v version` adds a label."""
    result: Result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == f"DocSpan version: {DOCSPAN_VERSION}"


def test_show_defaults_is_valid_toml() -> None:
    """`show-defaults` prints the default configuration as TOML."""
    result: Result = run_cli(["show-defaults"])
    assert_SUCCESS(result)
    data = tomlkit.parse(result.stdout).unwrap()
    assert data["files"]["name_patterns"] == ["*.hh"]
    assert data["markers"]["start_pattern"] == DEFAULT_START_PATTERN
    assert data["output"]["path"] == ""


def test_verbose_and_quiet_conflict() -> None:
    """``-v`` and ``-q`` together are a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)


def test_resolve_verbosity() -> None:
    """Verbosity counts map to the program-output level."""
    assert resolve_verbosity(0, 0) == 0
    assert resolve_verbosity(2, 0) == 2
    assert resolve_verbosity(0, 1) == -1


def test_resolve_color_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit modes win over the environment; AUTO follows it."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stderr_isatty=False) is True
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stderr_isatty=True) is False
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stderr_isatty=True) is True
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stderr_isatty=True) is False
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stderr_isatty=False) is True


def test_log_level_env_writes_to_stderr_only(monkeypatch: pytest.MonkeyPatch) -> None:
    """With DOCSPAN_LOG_LEVEL set, log records never reach stdout."""
    monkeypatch.setenv("DOCSPAN_LOG_LEVEL", "DEBUG")
    result: Result = run_cli(["--no-color", "show-defaults"])
    assert_SUCCESS(result)
    tomlkit.parse(result.stdout)
