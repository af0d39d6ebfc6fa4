# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for positions, spans and severities."""

from __future__ import annotations

import click

from srcdiag.diagnostic.model import NO_COLUMN, Severity, SourcePosition, Span


def test_position_column_sentinel() -> None:
    """Column 0 means "whole line"."""
    assert not SourcePosition(3, NO_COLUMN).has_column
    assert SourcePosition(3, 1).has_column
    assert str(SourcePosition(3, 7)) == "3:7"


def test_positions_order_by_line_then_column() -> None:
    """Positions sort in reading order."""
    assert SourcePosition(1, 9) < SourcePosition(2, 1) < SourcePosition(2, 3)


def test_span_on_line() -> None:
    """`Span.on_line` builds both ends on the same line."""
    span = Span.on_line(4, 2, 6)
    assert span == Span(SourcePosition(4, 2), SourcePosition(4, 6))


def test_severity_render() -> None:
    """The severity token is styled only when color is requested."""
    assert Severity.from_warning(False) is Severity.ERROR
    assert Severity.WARNING.render(False) == "warning"
    assert Severity.ERROR.render(True) == click.style("error", fg="red", bold=True)
    assert Severity.ERROR.value == "error"
