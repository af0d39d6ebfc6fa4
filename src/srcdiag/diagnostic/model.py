# topmark:header:start
#
#   project      : SrcDiag
#   file         : model.py
#   file_relpath : src/srcdiag/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core positional types and severity levels for SrcDiag.

Sections:
    * SourcePosition: a 1-based (line, column) location in the original text.
    * Span: the start/end positions of one located error.
    * Severity: error or warning, with the terminal style of the report header.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial

import click

from srcdiag.rendering.colored_enum import ColoredStrEnum

#: Column value meaning "no column": the whole line is annotated.
NO_COLUMN: int = 0


@dataclass(frozen=True, order=True)
class SourcePosition:
    """A position in the original source text.

    Both fields are 1-based for user-facing messages. A ``column`` of
    `NO_COLUMN` (0) means the error is not attached to a column and the
    renderer annotates the whole line instead of drawing carets.

    Attributes:
        line (int): 1-based line number.
        column (int): 1-based character column, or 0.
    """

    line: int
    column: int

    @property
    def has_column(self) -> bool:
        """Return True unless the column is the "no column" sentinel."""
        return self.column != NO_COLUMN

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Span:
    """Start/end positions of a located error.

    The end column is expected to be greater than or equal to the start column
    when both are on the same line; this is a contract of the error producer and
    is not validated here.
    """

    start: SourcePosition
    end: SourcePosition

    @classmethod
    def on_line(cls, line: int, start_column: int, end_column: int) -> Span:
        """Build a single-line span.

        Args:
            line (int): 1-based line number.
            start_column (int): 1-based start column (0 for whole-line errors).
            end_column (int): 1-based end column, exclusive.

        Returns:
            Span: The span covering ``[start_column, end_column)`` on ``line``.
        """
        return cls(SourcePosition(line, start_column), SourcePosition(line, end_column))


class Severity(ColoredStrEnum):
    """Severity of a rendered diagnostic.

    The value is the literal token printed in the report header; the colorizer
    is applied only when color output is enabled.
    """

    ERROR = ("error", partial(click.style, fg="red", bold=True))
    WARNING = ("warning", partial(click.style, fg="yellow", bold=True))

    @classmethod
    def from_warning(cls, warning: bool) -> Severity:
        """Map a ``warning`` flag to a severity."""
        return cls.WARNING if warning else cls.ERROR
