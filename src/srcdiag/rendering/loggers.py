# topmark:header:start
#
#   project      : SrcDiag
#   file         : loggers.py
#   file_relpath : src/srcdiag/rendering/loggers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-line status output that accompanies rendered diagnostics.

These helpers write to the diagnostic stream (stderr) like
[`log_error`][srcdiag.rendering.diagnostic.log_error], but carry no source
location:

    * `log_info`: a message, verbatim.
    * `log_verbose`: ``* message`` lines, only in verbose mode.
    * `log_error_message`: ``error: message`` / ``warning: message``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from srcdiag.cli.console_helpers import get_console_safely
from srcdiag.diagnostic.model import Severity

if TYPE_CHECKING:
    from srcdiag.cli_shared.console_api import ConsoleLike


def log_info(message: str, *, console: ConsoleLike | None = None) -> None:
    """Write ``message`` to the diagnostic stream."""
    (console or get_console_safely()).error(message)


def log_verbose(verbose: bool, message: str, *, console: ConsoleLike | None = None) -> None:
    """Write ``* message`` to the diagnostic stream when ``verbose`` is set.

    An empty message prints a lone ``*``.
    """
    if not verbose:
        return
    (console or get_console_safely()).error(f"* {message}" if message else "*")


def format_error_message(color: bool, warning: bool, message: str) -> str:
    """Return a ``<severity>: <message>`` status line.

    Args:
        color (bool): Whether to style the severity token.
        warning (bool): Use ``warning`` instead of ``error``.
        message (str): The message, passed through verbatim.

    Returns:
        str: The status line, without a trailing newline.
    """
    return f"{Severity.from_warning(warning).render(color)}: {message}"


def log_error_message(
    color: bool,
    warning: bool,
    message: str,
    *,
    console: ConsoleLike | None = None,
) -> None:
    """Write a ``<severity>: <message>`` status line to the diagnostic stream."""
    (console or get_console_safely()).error(format_error_message(color, warning, message))
