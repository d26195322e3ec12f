# topmark:header:start
#
#   project      : DocSpan
#   file         : constants.py
#   file_relpath : src/docspan/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocSpan Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCSPAN_VERSION: str = get_version("docspan")

# Config file names looked up in the working directory:
DOCSPAN_TOML_NAME: str = "docspan.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "docspan"

# Environment variable controlling the internal log level:
LOG_LEVEL_ENV_VAR: str = "DOCSPAN_LOG_LEVEL"

# Default span markers: `#if(0 && JSDOC)` ... `#endif` in C/C++ headers.
DEFAULT_START_PATTERN: str = r"^\s*?#if\s*?\(\s*?0\s*?&&\s*?JSDOC\s*?\)"
DEFAULT_END_PATTERN: str = r"^\s*?#endif\s*?$"

DEFAULT_ROOTS: tuple[str, ...] = (".",)
DEFAULT_NAME_PATTERNS: tuple[str, ...] = ("*.hh",)

# Separator appended after every normalized span in the document.
SPAN_SEPARATOR: str = "\n\n"
