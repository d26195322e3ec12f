# topmark:header:start
#
#   project      : DocSpan
#   file         : keys.py
#   file_relpath : src/docspan/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DocSpan configuration.

Keys defined here are the external configuration API as it appears in
``docspan.toml`` and in ``[tool.docspan]`` inside ``pyproject.toml``. Renaming
or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DocSpan configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_ROOTS: Final[str] = "roots"
    KEY_NAME_PATTERNS: Final[str] = "name_patterns"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"

    # [markers]
    SECTION_MARKERS: Final[str] = "markers"

    KEY_START_PATTERN: Final[str] = "start_pattern"
    KEY_END_PATTERN: Final[str] = "end_pattern"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_OUTPUT_PATH: Final[str] = "path"


class ArgKey:
    """Keys of the arguments mapping accepted by `MutableConfig.apply_cli_args`."""

    ROOTS: Final[str] = "roots"
    NAME_PATTERNS: Final[str] = "name_patterns"
    EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"
    START_PATTERN: Final[str] = "start_pattern"
    END_PATTERN: Final[str] = "end_pattern"
    OUTPUT: Final[str] = "output"
