# topmark:header:start
#
#   project      : SrcDiag
#   file         : console.py
#   file_relpath : src/srcdiag/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for program output.

Rendered reports and status lines are program output, not log records: they go
through a `ClickConsole` bound to the CLI context. Reports already carry their
own ANSI styling, so `warn()` and `error()` write text as-is and rely on
`click.echo` to strip escape sequences when color is off.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

import click

from srcdiag.cli_shared.console_api import ConsoleLike

if TYPE_CHECKING:
    from typing import TextIO


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Attributes:
        enable_color (bool): Keep ANSI sequences on write and let `styled()` style.
        out (TextIO): Destination of `print()` (stdout by default).
        err (TextIO): Destination of `warn()` and `error()`, the diagnostic
            stream (stderr by default).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def _echo(self, stream: TextIO, text: str, nl: bool) -> None:
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        self._echo(self.out, text, nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the diagnostic stream."""
        self._echo(self.err, text, nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the diagnostic stream.

        `log_error` passes a whole report with ``nl=False`` in one call.
        """
        self._echo(self.err, text, nl)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Style ``text`` with `click.style`, or return it unchanged when color is off.

        ``style_kwargs`` are passed to `click.style` (``fg``, ``bold``, ``underline``...).
        """
        return click.style(text, **style_kwargs) if self.enable_color else text
