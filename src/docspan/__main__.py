# topmark:header:start
#
#   project      : DocSpan
#   file         : __main__.py
#   file_relpath : src/docspan/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DocSpan via ``python -m docspan``.

It delegates directly to :func:`docspan.cli.main.cli`, so the module interface
and the ``docspan`` console script behave identically.

Examples:
    Extract the documentation of a source tree::

        python -m docspan extract src/
"""

from __future__ import annotations

from docspan.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
