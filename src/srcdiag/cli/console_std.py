# topmark:header:start
#
#   project      : SrcDiag
#   file         : console_std.py
#   file_relpath : src/srcdiag/cli/console_std.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain stream console, used when the renderer runs outside the CLI."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from srcdiag.cli_shared.console_api import ConsoleLike

if TYPE_CHECKING:
    from typing import TextIO


class StdConsole(ConsoleLike):
    """Console writing verbatim to two text streams.

    Nothing is stripped or added: a report rendered with color keeps its ANSI
    sequences. ``enable_color`` is informational only and `styled()` never styles.
    """

    def __init__(
        self,
        *,
        enable_color: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    @staticmethod
    def _write(stream: TextIO, text: str, nl: bool) -> None:
        stream.write(f"{text}\n" if nl else text)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        self._write(self.out, text, nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the error stream."""
        self._write(self.err, text, nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to the error stream."""
        self._write(self.err, text, nl)

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` unchanged; this console never styles."""
        return text
