# topmark:header:start
#
#   project      : SrcDiag
#   file         : types.py
#   file_relpath : src/srcdiag/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for SrcDiag diagnostics.

This module defines the `LocatedError` Protocol used to express "located,
describable, fixable" errors structurally. The renderer accepts any object
satisfying it, so parser and linter errors need no common base class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from srcdiag.diagnostic.model import Span
    from srcdiag.rendering.styled import StyledString


@runtime_checkable
class LocatedError(Protocol):
    """Structural interface for errors that can be rendered against their source."""

    def description(self) -> str:
        """Return the short human description printed in the report header."""
        ...

    def span(self) -> Span:
        """Return the start/end positions of the error."""
        ...

    def fixme(self, lines: Sequence[str]) -> StyledString:
        """Return the suggested correction.

        Args:
            lines (Sequence[str]): The full raw source lines (tabs not expanded).

        Returns:
            StyledString: A single fragment for column errors; may contain
            ``"\\n"`` for whole-line errors.
        """
        ...
