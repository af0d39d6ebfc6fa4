# topmark:header:start
#
#   project      : SrcDiag
#   file         : cli_types.py
#   file_relpath : src/srcdiag/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for SrcDiag.

`ErrorKindParam` parses the ``--kind`` option of ``srcdiag show``: a family prefix
(``parse`` or ``lint``) and a kind key, e.g. ``parse:url`` or ``lint:one-space``.
Keys are matched through `KeyedStrEnum.parse`, so member names and aliases work too.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NoReturn, Protocol

import click

from srcdiag.diagnostic.lint_error import LintErrorKind
from srcdiag.diagnostic.parse_error import ParseErrorKind

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

ErrorKind = ParseErrorKind | LintErrorKind

#: Family prefix → kind enum.
KIND_FAMILIES: Final[dict[str, type[ParseErrorKind] | type[LintErrorKind]]] = {
    "parse": ParseErrorKind,
    "lint": LintErrorKind,
}


def kind_choices() -> list[str]:
    """Return every accepted ``family:key`` spelling, parser kinds first."""
    return [
        f"{family}:{kind.key}" for family, enum_cls in KIND_FAMILIES.items() for kind in enum_cls
    ]


class ErrorKindParam(ParamTypeBase):
    """A Click parameter type converting ``family:key`` to an error kind member."""

    name: str = "kind"

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> ErrorKind:
        """Convert ``family:key`` (or an already converted member) to an error kind."""
        if isinstance(value, ParseErrorKind | LintErrorKind):
            return value
        text = str(value)
        family, sep, key = text.partition(":")
        enum_cls = KIND_FAMILIES.get(family.strip().lower()) if sep else None
        if enum_cls is None:
            self._fail_noreturn(
                f"Invalid kind '{text}'. Expected 'parse:<kind>' or 'lint:<kind>' "
                "(see 'srcdiag kinds').",
                param,
                ctx,
            )
        kind = enum_cls.parse(key)
        if kind is None:
            self._fail_noreturn(
                f"Unknown {family} kind '{key}'. Must be one of: "
                f"{', '.join(k.key for k in enum_cls)}",
                param,
                ctx,
            )
        return kind

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_SRCDIAG_COMPLETE=bash_source srcdiag)"`
        Zsh: `eval "$(_SRCDIAG_COMPLETE=zsh_source srcdiag)"`
        """
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in kind_choices() if c.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return "ErrorKindParam()"
