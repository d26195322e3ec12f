# topmark:header:start
#
#   project      : DocSpan
#   file         : version.py
#   file_relpath : src/docspan/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocSpan `version` command.

Prints the current DocSpan version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docspan.cli.cmd_common import get_console, get_effective_verbosity
from docspan.constants import DOCSPAN_VERSION

if TYPE_CHECKING:
    from docspan.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of DocSpan.",
)
def version_command() -> None:
    """Show the current version of DocSpan."""
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(f"DocSpan version: {DOCSPAN_VERSION}")
    else:
        console.print(DOCSPAN_VERSION)
