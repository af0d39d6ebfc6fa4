# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Located error primitives.

This package provides the positional types (`SourcePosition`, `Span`), the
report `Severity`, the structural `LocatedError` protocol consumed by the
renderer, and its two independent implementations:

    - `ParseError`: failures raised by the request-file parser.
    - `LintError`: style findings collected by the linter.
"""

from __future__ import annotations

from srcdiag.diagnostic.lint_error import LintError, LintErrorKind
from srcdiag.diagnostic.model import NO_COLUMN, Severity, SourcePosition, Span
from srcdiag.diagnostic.parse_error import ParseError, ParseErrorKind
from srcdiag.diagnostic.types import LocatedError

__all__ = [
    "NO_COLUMN",
    "LintError",
    "LintErrorKind",
    "LocatedError",
    "ParseError",
    "ParseErrorKind",
    "Severity",
    "SourcePosition",
    "Span",
]
