# topmark:header:start
#
#   project      : SrcDiag
#   file         : errors.py
#   file_relpath : src/srcdiag/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SrcDiag CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from srcdiag.cli.keys import ArgKey
from srcdiag.cli_shared.exit_codes import ExitCode
from srcdiag.rendering.loggers import format_error_message


class SrcdiagError(click.ClickException):
    """Base class for all SrcDiag CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error as an ``error: <message>`` status line.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get(ArgKey.CONSOLE) if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(format_error_message(console.enable_color, False, self.format_message()))


class SrcdiagUsageError(SrcdiagError):
    """Error for command-line invocation errors (invalid flags/args/positions)."""

    exit_code = ExitCode.USAGE_ERROR


class SrcdiagFileNotFoundError(SrcdiagError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SrcdiagIOError(SrcdiagError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class SrcdiagEncodingError(SrcdiagError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
