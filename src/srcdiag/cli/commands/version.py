# topmark:header:start
#
#   project      : SrcDiag
#   file         : version.py
#   file_relpath : src/srcdiag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag `version` command.

Prints the current SrcDiag version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from srcdiag.cli.cmd_common import get_effective_verbosity
from srcdiag.cli.keys import ArgKey, CliCmd
from srcdiag.constants import SRCDIAG_VERSION

if TYPE_CHECKING:
    from srcdiag.cli_shared.console_api import ConsoleLike


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of SrcDiag.",
)
def version_command() -> None:
    """Show the current version of SrcDiag."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("SrcDiag version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SRCDIAG_VERSION, bold=True)}")
    else:
        console.print(console.styled(SRCDIAG_VERSION, bold=True))
