# topmark:header:start
#
#   project      : SrcDiag
#   file         : main.py
#   file_relpath : src/srcdiag/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag command-line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Internal logging is configured from ``SRCDIAG_LOG_LEVEL``, independently of ``-v``/``-q``.
- Subcommands read the shared state through [`srcdiag.cli.cmd_common`][].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from srcdiag.cli.commands.kinds import kinds_command
from srcdiag.cli.commands.show import show_command
from srcdiag.cli.commands.version import version_command
from srcdiag.cli.console import ClickConsole
from srcdiag.cli.keys import ArgKey
from srcdiag.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from srcdiag.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from srcdiag.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj[ArgKey.VERBOSITY_LEVEL] = resolve_verbosity(verbose, quiet)

    # Internal logging
    level_env = resolve_env_log_level()
    ctx.obj[ArgKey.LOG_LEVEL] = level_env
    setup_logging(level=level_env)

    override = ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else None)
    enable_color = resolve_color_mode(color_mode_override=override)
    ctx.obj[ArgKey.COLOR_ENABLED] = enable_color
    ctx.color = enable_color
    logger.debug("Color %s (override=%s)", "enabled" if enable_color else "disabled", override)

    ctx.obj[ArgKey.CONSOLE] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SrcDiag: render located parser and linter diagnostics against source text.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the SrcDiag CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'srcdiag show PATH --line N --kind KIND' to render a diagnostic.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(kinds_command)

cli.add_command(show_command)

if __name__ == "__main__":
    cli()
