# topmark:header:start
#
#   project      : SrcDiag
#   file         : cmd_common.py
#   file_relpath : src/srcdiag/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for SrcDiag CLI commands.

Reads the state placed on ``click.Context.obj`` by the CLI group and loads
source files with the CLI's error mapping:

    FILE_NOT_FOUND → FileNotFoundError / IsADirectoryError
    ENCODING_ERROR → UnicodeDecodeError
    IO_ERROR       → any other OSError
"""

from __future__ import annotations

from pathlib import Path

import click

from srcdiag.cli.errors import SrcdiagEncodingError, SrcdiagFileNotFoundError, SrcdiagIOError
from srcdiag.cli.keys import ArgKey
from srcdiag.config.logging import get_logger

logger = get_logger(__name__)

#: Path argument meaning "read the source from standard input".
STDIN_PATH: str = "-"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the CLI group (0 when unset)."""
    obj = ctx.find_root().obj or {}
    return int(obj.get(ArgKey.VERBOSITY_LEVEL, 0))


def get_color_enabled(ctx: click.Context) -> bool:
    """Return the resolved color setting stored by the CLI group (False when unset)."""
    obj = ctx.find_root().obj or {}
    return bool(obj.get(ArgKey.COLOR_ENABLED, False))


def read_source(path: str) -> str:
    """Read a UTF-8 source file, or standard input for ``-``.

    Args:
        path (str): File path, or ``-``.

    Returns:
        str: The file content.

    Raises:
        SrcdiagFileNotFoundError: If the file does not exist or is a directory.
        SrcdiagEncodingError: If the content is not valid UTF-8.
        SrcdiagIOError: On any other I/O failure.
    """
    if path == STDIN_PATH:
        logger.debug("Reading source from STDIN")
        return click.get_text_stream("stdin").read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise SrcdiagFileNotFoundError(f"No such file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise SrcdiagEncodingError(f"Cannot decode {path} as UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise SrcdiagIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc


__all__ = ["STDIN_PATH", "get_color_enabled", "get_effective_verbosity", "read_source"]
