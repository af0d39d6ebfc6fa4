# topmark:header:start
#
#   project      : SrcDiag
#   file         : options.py
#   file_relpath : src/srcdiag/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options for SrcDiag.

The group carries the verbosity and color options; `show` carries the source
position options. Each decorator applies its options in reverse so that
``--help`` lists them in reading order.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from srcdiag.cli.errors import SrcdiagUsageError
from srcdiag.cli.keys import CliOpt
from srcdiag.cli_shared.color import ColorMode, resolve_color_mode

P = ParamSpec("P")
R = TypeVar("R")

__all__ = [
    "ColorMode",
    "common_color_options",
    "common_verbose_options",
    "position_options",
    "resolve_color_mode",
    "resolve_verbosity",
]


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Combine the ``-v`` and ``-q`` counters into one signed level.

    Returns:
        ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        SrcdiagUsageError: If both counters are set.
    """
    if verbose_count and quiet_count:
        raise SrcdiagUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count or -quiet_count


def _apply(
    f: Callable[P, R],
    *decorators: Callable[[Callable[P, R]], Callable[P, R]],
) -> Callable[P, R]:
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counters)."""
    return _apply(
        f,
        click.option("-v", "--verbose", count=True, help="Echo what is being rendered."),
        click.option("-q", "--quiet", count=True, help="Suppress non-diagnostic output."),
    )


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color MODE`` and ``--no-color``."""
    return _apply(
        f,
        click.option(
            CliOpt.COLOR,
            "color_mode",
            type=click.Choice([m.value for m in ColorMode]),
            default=None,
            help="Color output: auto (default), always, or never.",
        ),
        click.option(
            CliOpt.NO_COLOR,
            "no_color",
            is_flag=True,
            help="Disable color output (same as --color=never).",
        ),
    )


def position_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--line``, ``--column`` and ``--end-column``."""
    return _apply(
        f,
        click.option(
            CliOpt.LINE,
            "line",
            type=click.IntRange(min=1),
            required=True,
            help="1-based line number of the error.",
        ),
        click.option(
            CliOpt.COLUMN,
            "column",
            type=click.IntRange(min=0),
            default=0,
            show_default=True,
            help="1-based start column; 0 annotates the whole line.",
        ),
        click.option(
            CliOpt.END_COLUMN,
            "end_column",
            type=click.IntRange(min=0),
            default=None,
            help="1-based end column, exclusive (defaults to COLUMN + 1).",
        ),
    )
