# topmark:header:start
#
#   project      : DocSpan
#   file         : diagnostics.py
#   file_relpath : src/docspan/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading configuration and scanning files.

Diagnostics are user-facing warnings: an unreadable file that was left out of
the document, a missing root, or a config value of the wrong type. Internal
tracing goes through `logging` instead.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics."""

    WARNING = "warning"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast("Callable[[str], str]", {DiagnosticLevel.WARNING: chalk.yellow}[self])


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return a one-line human-readable rendering.

        Args:
            color (bool): Whether to colorize the level tag.

        Returns:
            str: ``"[level] message"``, optionally colorized.
        """
        tag: str = f"[{self.level.value}]"
        if color:
            tag = self.level.color(tag)
        return f"{tag} {self.message}"


@dataclass
class DiagnosticLog:
    """Mutable, append-only collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, message: str) -> None:
        """Append a diagnostic."""
        self.items.append(Diagnostic(level=level, message=message))

    def add_warning(self, message: str) -> None:
        """Append a WARNING diagnostic."""
        self.add(DiagnosticLevel.WARNING, message)

    def extend(self, other: Sequence[Diagnostic]) -> None:
        """Append all diagnostics from ``other``, preserving order."""
        self.items.extend(other)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
