# topmark:header:start
#
#   project      : SrcDiag
#   file         : kinds.py
#   file_relpath : src/srcdiag/cli/commands/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag `kinds` command.

Lists every error kind accepted by ``srcdiag show --kind``, grouped by family
(parser, linter), along with the description printed in the report header.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from srcdiag.cli.cli_types import KIND_FAMILIES
from srcdiag.cli.cmd_common import get_effective_verbosity
from srcdiag.cli.keys import ArgKey, CliCmd

if TYPE_CHECKING:
    from srcdiag.cli_shared.console_api import ConsoleLike


@click.command(
    name=CliCmd.KINDS,
    help="List the error kinds accepted by 'srcdiag show --kind'.",
)
@click.option(
    "--family",
    "family",
    type=click.Choice(list(KIND_FAMILIES)),
    default=None,
    help="Only list kinds of this family.",
)
def kinds_command(*, family: str | None = None) -> None:
    """List error kinds as ``family:key  description``.

    With ``-v``, each family is preceded by a header line.

    Args:
        family (str | None): Restrict the listing to ``parse`` or ``lint``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]

    vlevel = get_effective_verbosity(ctx)

    for name, enum_cls in KIND_FAMILIES.items():
        if family is not None and name != family:
            continue
        if vlevel > 0:
            console.print(console.styled(f"{name} kinds:", bold=True, underline=True))
        members = list(enum_cls)
        width = len(name) + 1 + members[0].value_length
        for kind in members:
            ident = f"{name}:{kind.key}"
            console.print(f"{console.styled(ident.ljust(width), bold=True)}  {kind.label}")
        if vlevel > 0:
            console.print()
