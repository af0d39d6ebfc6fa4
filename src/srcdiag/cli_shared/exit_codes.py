# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/srcdiag/cli_shared/exit_codes.py
#   project      : SrcDiag
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SrcDiag CLI.

SrcDiag aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SrcDiag CLI.

    Attributes:
        SUCCESS: Successful execution; a rendered diagnostic was a warning.
        FAILURE: A rendered diagnostic was an error, or a generic failure.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, position
            outside the file). Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding error (e.g., UnicodeDecodeError).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR

    UNEXPECTED_ERROR = 255
