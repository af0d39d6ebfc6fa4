# topmark:header:start
#
#   file         : formats.py
#   file_relpath : src/srcdiag/rendering/formats.py
#   project      : SrcDiag
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines the text output formats understood by styled strings.

A styled string renders either as plain text or with ANSI escape sequences,
depending on whether color output is enabled for the current report.
"""

from enum import Enum


class Format(Enum):
    """Styled text rendering formats."""

    PLAIN = "plain"
    ANSI = "ansi"

    @classmethod
    def from_color(cls, color: bool) -> "Format":
        """Return `ANSI` when ``color`` is enabled, `PLAIN` otherwise."""
        return cls.ANSI if color else cls.PLAIN
