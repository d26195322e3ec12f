# topmark:header:start
#
#   project      : DocSpan
#   file         : __init__.py
#   file_relpath : src/docspan/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the DocSpan CLI."""
