# topmark:header:start
#
#   project      : DocSpan
#   file         : __init__.py
#   file_relpath : src/docspan/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for DocSpan.

Supports built-in defaults, layered discovery of ``docspan.toml`` and
``[tool.docspan]`` in ``pyproject.toml``, explicit ``--config`` files, and CLI
overrides. See [`docspan.config.model`][] for the merge policy.
"""

from __future__ import annotations

from docspan.config.io import TomlLoadError
from docspan.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
    "TomlLoadError",
]
