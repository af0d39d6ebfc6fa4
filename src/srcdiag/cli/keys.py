# topmark:header:start
#
#   project      : SrcDiag
#   file         : keys.py
#   file_relpath : src/srcdiag/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI command names, option spellings and context keys for SrcDiag.

Centralizing these values avoids string duplication between Click definitions
and the code reading ``click.Context.obj``. Neither class contains behavior;
they are pure namespaces for constants.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the SrcDiag CLI."""

    SHOW: Final[str] = "show"
    KINDS: Final[str] = "kinds"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings for the SrcDiag CLI."""

    LINE: Final[str] = "--line"
    COLUMN: Final[str] = "--column"
    END_COLUMN: Final[str] = "--end-column"
    KIND: Final[str] = "--kind"
    VALUE: Final[str] = "--value"
    WARNING: Final[str] = "--warning"
    NO_FILENAME: Final[str] = "--no-filename"
    COLOR: Final[str] = "--color"
    NO_COLOR: Final[str] = "--no-color"


class ArgKey:
    """Keys stored in ``click.Context.obj`` by the CLI group."""

    CONSOLE: Final[str] = "console"
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
    LOG_LEVEL: Final[str] = "log_level"
    COLOR_ENABLED: Final[str] = "color_enabled"
