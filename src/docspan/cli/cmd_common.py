# topmark:header:start
#
#   project      : DocSpan
#   file         : cmd_common.py
#   file_relpath : src/docspan/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by the DocSpan subcommands. They hold no policy (exit
codes, messages) and only encapsulate plumbing.
"""

from __future__ import annotations

import click

from docspan.cli.console import ClickConsole


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (0 if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context, creating a plain one if needed.

    Commands invoked directly (without the group) have no initialized state.
    """
    ctx.ensure_object(dict)
    console: ClickConsole | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console
