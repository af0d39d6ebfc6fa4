# topmark:header:start
#
#   project      : SrcDiag
#   file         : console_helpers.py
#   file_relpath : src/srcdiag/cli/console_helpers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Utilities for obtaining a program-output console independent of Click.

This module exposes `get_console_safely` which returns the project's console
for user-facing output when running under a Click context, and a no-dependency
stdlib fallback ([`srcdiag.cli.console_std.StdConsole`][]) when no context is
active (e.g., when the renderer is called directly from library code or tests).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from srcdiag.cli.console_std import StdConsole
from srcdiag.cli.keys import ArgKey

if TYPE_CHECKING:
    from srcdiag.cli_shared.console_api import ConsoleLike


def get_console_safely() -> ConsoleLike:
    """Return a ConsoleLike using the active Click context when available.

    If an active Click context exists and a console instance is stored in
    ``ctx.obj["console"]``, that console is returned. Otherwise, a
    [`srcdiag.cli.console_std.StdConsole`][] bound to the current
    ``sys.stdout``/``sys.stderr`` is returned.
    """
    ctx = click.get_current_context(silent=True)
    obj = getattr(ctx, "obj", None) if ctx is not None else None
    if isinstance(obj, dict) and ArgKey.CONSOLE in obj:
        console: ConsoleLike = obj[ArgKey.CONSOLE]
        return console
    return StdConsole()
