# topmark:header:start
#
#   project      : DocSpan
#   file         : console.py
#   file_relpath : src/docspan/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output for DocSpan commands.

Only the assembled document goes to stdout. Warnings, notes and errors go to
stderr so that ``docspan extract > doc.js`` stays clean. Internal tracing uses
`logging` and never passes through the console.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Program-output console backed by `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styles.
        out (TextIO | None): Stream for the document; ``sys.stdout`` if None.
        err (TextIO | None): Stream for everything else; ``sys.stderr`` if None.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO | None = out
        self.err: TextIO | None = err

    def _echo(self, text: str, *, to_err: bool, nl: bool, **style: Any) -> None:
        stream: TextIO = (self.err or sys.stderr) if to_err else (self.out or sys.stdout)
        if style and self.enable_color:
            text = click.style(text, **style)
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write to stdout."""
        self._echo(text, to_err=False, nl=nl)

    def note(self, text: str, *, nl: bool = True) -> None:
        """Write an informational line to stderr."""
        self._echo(text, to_err=True, nl=nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr, in yellow."""
        self._echo(text, to_err=True, nl=nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr, in bright red."""
        self._echo(text, to_err=True, nl=nl, fg="bright_red")

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged without color."""
        return click.style(text, **style) if self.enable_color else text
