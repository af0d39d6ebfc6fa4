# topmark:header:start
#
#   project      : SrcDiag
#   file         : logging.py
#   file_relpath : src/srcdiag/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for SrcDiag, with a TRACE level below DEBUG.

Logging is a developer aid only. Rendered diagnostics are program output and
always go through a console (see `srcdiag.cli_shared.console_api`); log records
go to stdout so they never interleave with reports on stderr.

The level comes from ``SRCDIAG_LOG_LEVEL`` (a level name or a number) and
defaults to CRITICAL, i.e. silent.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

import click

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Environment variable consulted by `resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "SRCDIAG_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; the first one at or below the record level wins.
_LEVEL_COLORS: Final[tuple[tuple[int, str], ...]] = (
    (logging.CRITICAL, "bright_red"),
    (logging.ERROR, "red"),
    (logging.WARNING, "yellow"),
    (logging.INFO, "green"),
    (logging.DEBUG, "bright_black"),
    (TRACE_LEVEL, "blue"),
)


class SrcdiagLogger(logging.Logger):
    """Logger class adding `trace()`."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(SrcdiagLogger)


class StyledLevelFormatter(logging.Formatter):
    """Formatter coloring each record with `click.style` according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color the whole line.

        Levels below TRACE are shown dimmed red.
        """
        message = super().format(record)
        for threshold, color in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return click.style(message, fg=color)
        return click.style(message, fg="red", dim=True)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``SRCDIAG_LOG_LEVEL``, or None.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``...) and
    plain numbers (``"10"``). Unknown names resolve to None.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stdout handler on the root logger.

    Args:
        level (int | None): Root level; when None, ``SRCDIAG_LOG_LEVEL`` is
            consulted and CRITICAL is used if it is unset.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        StyledLevelFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    root.addHandler(handler)


def get_logger(name: str) -> SrcdiagLogger:
    """Return the `SrcdiagLogger` named ``name`` (use ``__name__``)."""
    return cast("SrcdiagLogger", logging.getLogger(name))
