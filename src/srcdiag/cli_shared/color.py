# topmark:header:start
#
#   project      : SrcDiag
#   file         : color.py
#   file_relpath : src/srcdiag/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color decision for the diagnostic stream (Click-independent).

Precedence, highest first:

1. ``--color always`` / ``--color never`` (``--no-color`` maps to ``never``);
2. ``FORCE_COLOR`` set to anything but ``"0"`` enables color;
3. ``NO_COLOR`` set (even empty) disables it;
4. otherwise color follows ``sys.stderr.isatty()``, since reports go to stderr.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from srcdiag.config.logging import get_logger

if TYPE_CHECKING:
    from srcdiag.config.logging import SrcdiagLogger


logger: SrcdiagLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """Value of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _stderr_isatty() -> bool:
    try:
        return sys.stderr.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stream_isatty: bool | None = None,
) -> bool:
    """Return True if reports should carry ANSI styling.

    Args:
        color_mode_override (ColorMode | None): Mode from the command line;
            None and `ColorMode.AUTO` defer to the environment.
        stream_isatty (bool | None): TTY status to assume instead of probing stderr.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=ColorMode.ALWAYS, stream_isatty=False)
        True
    """
    if color_mode_override in (ColorMode.ALWAYS, ColorMode.NEVER):
        return color_mode_override is ColorMode.ALWAYS

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.debug("Color forced by FORCE_COLOR=%s", force_color)
        return True
    if "NO_COLOR" in os.environ:
        logger.debug("Color disabled by NO_COLOR")
        return False

    return _stderr_isatty() if stream_isatty is None else stream_isatty
