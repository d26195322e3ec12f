# topmark:header:start
#
#   project      : DocSpan
#   file         : __init__.py
#   file_relpath : src/docspan/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocSpan package.

DocSpan extracts documentation blocks embedded between marker lines in source
files (for instance ``#if(0 && JSDOC)`` ... ``#endif`` in C++ headers), removes
their common indentation and concatenates them into a single document. It
exposes both a CLI and a small typed API for build automation.
"""

from __future__ import annotations
