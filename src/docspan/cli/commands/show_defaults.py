# topmark:header:start
#
#   project      : DocSpan
#   file         : show_defaults.py
#   file_relpath : src/docspan/cli/commands/show_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocSpan `show-defaults` command.

Displays the built-in default configuration as TOML. Intended as a starting
point for a ``docspan.toml`` or a ``[tool.docspan]`` table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docspan.cli.cmd_common import get_console, get_effective_verbosity
from docspan.config import MutableConfig

if TYPE_CHECKING:
    from docspan.cli.console import ClickConsole


@click.command(
    name="show-defaults",
    help="Display the built-in default DocSpan configuration.",
)
def show_defaults_command() -> None:
    """Display the built-in default configuration."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    # Determine effective program-output verbosity for gating extra details
    vlevel = get_effective_verbosity(ctx)

    if vlevel > 0:
        console.note(console.styled("Default DocSpan Configuration (TOML):", bold=True))

    console.print(MutableConfig.from_defaults().freeze().to_toml(), nl=False)
