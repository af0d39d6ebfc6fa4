# topmark:header:start
#
#   project      : SrcDiag
#   file         : lint_error.py
#   file_relpath : src/srcdiag/diagnostic/lint_error.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style issues reported by the request-file linter.

`LintError` satisfies the [`LocatedError`][srcdiag.diagnostic.types.LocatedError]
protocol independently of the parser errors. Linter findings are usually rendered
as warnings; the fixme is a short cyan instruction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from srcdiag.core.enum_mixins import EnumIntrospectionMixin, KeyedStrEnum
from srcdiag.rendering.styled import Color, Style, StyledString

if TYPE_CHECKING:
    from collections.abc import Sequence

    from srcdiag.diagnostic.model import Span

FIXME_STYLE: Final[Style] = Style(fg=Color.CYAN)


class LintErrorKind(EnumIntrospectionMixin, KeyedStrEnum):
    """Kinds of linter findings; the label is the report header description."""

    UNNECESSARY_SPACE = ("unnecessary-space", "Unnecessary space")
    UNNECESSARY_JSON_ENCODING = ("unnecessary-json-encoding", "Unnecessary json encoding")
    ONE_SPACE = ("one-space", "One space")


_FIXMES: Final[dict[LintErrorKind, str]] = {
    LintErrorKind.UNNECESSARY_SPACE: "Remove space",
    LintErrorKind.UNNECESSARY_JSON_ENCODING: "Use Simple String",
    LintErrorKind.ONE_SPACE: "Use only one space",
}


@dataclass(frozen=True)
class LintError:
    """A located linter finding."""

    source_info: Span
    kind: LintErrorKind

    def description(self) -> str:
        """Return the kind's fixed description."""
        return self.kind.label

    def span(self) -> Span:
        """Return where the finding is located."""
        return self.source_info

    def fixme(self, lines: Sequence[str]) -> StyledString:
        """Return the suggested fix; linter fixes do not depend on ``lines``."""
        return StyledString.from_text(_FIXMES[self.kind], FIXME_STYLE)
