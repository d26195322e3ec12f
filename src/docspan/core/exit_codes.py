# topmark:header:start
#
#   project      : DocSpan
#   file         : exit_codes.py
#   file_relpath : src/docspan/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DocSpan CLI.

DocSpan aligns with the BSD `sysexits` convention where practical, so that build
scripts can tell a bad invocation from an unwritable output file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DocSpan CLI.

    Attributes:
        SUCCESS: Successful execution. Unreadable input files are reported but
            do not change the exit code.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: An explicitly requested input (e.g. ``--config``) does not
            exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error writing the document. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (invalid marker pattern, malformed
            config). Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
