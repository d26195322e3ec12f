# topmark:header:start
#
#   project      : DocSpan
#   file         : __init__.py
#   file_relpath : src/docspan/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core types shared by the pipeline, the config layer and the CLI."""
