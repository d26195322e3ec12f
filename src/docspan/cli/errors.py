# topmark:header:start
#
#   project      : DocSpan
#   file         : errors.py
#   file_relpath : src/docspan/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DocSpan CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from docspan.core.exit_codes import ExitCode


class DocspanError(click.ClickException):
    """Base class for all DocSpan CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class DocspanUsageError(DocspanError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DocspanConfigError(DocspanError):
    """Error for configuration errors (invalid marker pattern, malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DocspanFileNotFoundError(DocspanError):
    """Error when an explicitly requested input does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DocspanIOError(DocspanError):
    """Error for I/O errors writing the document."""

    exit_code = ExitCode.IO_ERROR
