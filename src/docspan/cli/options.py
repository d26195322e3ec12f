# topmark:header:start
#
#   project      : DocSpan
#   file         : options.py
#   file_relpath : src/docspan/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the DocSpan CLI.

This module centralizes reusable options (verbosity, color, config) and their
resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from docspan.cli.errors import DocspanUsageError
from docspan.config.logging import get_logger

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: ``0`` by default, the ``-v`` count when positive, ``-1`` when quiet.

    Raises:
        DocspanUsageError: If both verbose and quiet flags are used simultaneously.
    """
    # They are mutually exclusive
    if verbose_count > 0 and quiet_count > 0:
        raise DocspanUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count > 0:
        return verbose_count
    if quiet_count > 0:
        return -1
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings on stderr.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stderr_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Color only ever decorates stderr messages; the document on stdout is never
    colored.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stderr_isatty (bool | None): Whether stderr is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stderr is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stderr_isatty is None:
        try:
            stderr_isatty = sys.stderr.isatty()
        except (AttributeError, ValueError):
            stderr_isatty = False
    return bool(stderr_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config`` options. Existence of ``--config``
    files is checked by the command so that a missing file maps to its own exit
    code.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore local project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(dir_okay=False),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_file_and_marker_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply file selection and marker options.

    Adds ``--name``, ``--exclude``, ``--start-pattern`` and ``--end-pattern``.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--name",
        "-n",
        "name_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Filter: scan only files matching these glob patterns (default: *.hh).",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Filter: skip files matching these glob patterns.",
    )(f)
    f = click.option(
        "--start-pattern",
        "start_pattern",
        metavar="REGEX",
        default=None,
        help="Regular expression for lines opening a span.",
    )(f)
    f = click.option(
        "--end-pattern",
        "end_pattern",
        metavar="REGEX",
        default=None,
        help="Regular expression for lines closing a span.",
    )(f)
    return f
