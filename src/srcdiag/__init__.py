# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag package.

SrcDiag renders located parser and linter errors as compiler-style reports:
a ``severity: description`` header, an optional ``--> file:line:column``
location, the offending source line with a line-number gutter, and a caret or
whole-line annotation carrying the suggested fix.

Typical usage:
    ```python
    from srcdiag import ParseError, ParseErrorKind, RenderConfig, Span, format_error

    config = RenderConfig.from_text(text, color=False, filename="api.hurl")
    error = ParseError(Span.on_line(1, 1, 5), ParseErrorKind.METHOD, "GETT")
    print(format_error(config, error), end="")
    ```
"""

from __future__ import annotations

from srcdiag.diagnostic import (
    NO_COLUMN,
    LintError,
    LintErrorKind,
    LocatedError,
    ParseError,
    ParseErrorKind,
    Severity,
    SourcePosition,
    Span,
)
from srcdiag.rendering.diagnostic import RenderConfig, format_error, log_error

__all__ = [
    "NO_COLUMN",
    "LintError",
    "LintErrorKind",
    "LocatedError",
    "ParseError",
    "ParseErrorKind",
    "RenderConfig",
    "Severity",
    "SourcePosition",
    "Span",
    "format_error",
    "log_error",
]
