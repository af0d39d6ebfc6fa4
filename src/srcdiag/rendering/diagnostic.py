# topmark:header:start
#
#   project      : SrcDiag
#   file         : diagnostic.py
#   file_relpath : src/srcdiag/rendering/diagnostic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compiler-style rendering of located errors.

Given the source lines of a file and any
[`LocatedError`][srcdiag.diagnostic.types.LocatedError], this module renders a
multi-line report::

    error: Parsing URL
      --> api.hurl:1:5
       |
     1 | GET https//example.org
       |     ^ expecting http://, https:// or {{
       |

The report has two annotation modes:

    * **column mode** (start column > 0): one caret line under the offending
      span, followed by the single-line fixme.
    * **whole-line mode** (start column == 0): the fixme block, one gutter line
      per fixme line, indented by three spaces.

Tabs in the context line are expanded to four spaces for display; the caret
offset is shifted by three columns per tab preceding the start column so that
the carets stay under the intended character.

Rendering is stateless: the gutter width is recomputed on every call and the
source lines are never modified. A start line outside ``[1, len(lines)]`` is a
contract violation of the error producer and raises `IndexError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from srcdiag.cli.console_helpers import get_console_safely
from srcdiag.config.logging import get_logger
from srcdiag.diagnostic.model import Severity
from srcdiag.rendering.formats import Format

if TYPE_CHECKING:
    from collections.abc import Sequence
    from os import PathLike

    from srcdiag.cli_shared.console_api import ConsoleLike
    from srcdiag.config.logging import SrcdiagLogger
    from srcdiag.diagnostic.types import LocatedError

logger: SrcdiagLogger = get_logger(__name__)

#: Display width of a tab character in the context line.
TAB_WIDTH: Final[int] = 4

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")


@dataclass(frozen=True)
class RenderConfig:
    """Per-file render settings, built once and reused for every error of the file.

    Attributes:
        lines (Sequence[str]): Raw source lines (tabs not expanded, no line breaks).
        color (bool): Whether to emit ANSI styling.
        filename (Path | None): File shown in the location line; omitted when None.
    """

    lines: Sequence[str]
    color: bool = False
    filename: Path | None = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        color: bool = False,
        filename: str | PathLike[str] | None = None,
    ) -> RenderConfig:
        """Build a configuration from raw file content.

        The content is split on ``\\n`` and ``\\r\\n``; a trailing line break
        yields a final empty line.

        Args:
            text (str): The file content.
            color (bool): Whether to emit ANSI styling.
            filename (str | PathLike[str] | None): Optional file name for the location line.

        Returns:
            RenderConfig: The frozen configuration.
        """
        return cls(
            lines=tuple(_LINE_BREAK_RE.split(text)),
            color=color,
            filename=Path(filename) if filename is not None else None,
        )

    @property
    def format(self) -> Format:
        """Styled-text format matching the color setting."""
        return Format.from_color(self.color)


def gutter_width(total_lines: int) -> int:
    """Return the width of the line-number gutter for a file of ``total_lines`` lines.

    The width is 2 below 100 lines, 3 below 1000 lines and 4 otherwise.
    """
    if total_lines < 100:
        return 2
    if total_lines < 1000:
        return 3
    return 4


def expand_tabs(line: str) -> str:
    """Replace every tab of ``line`` by `TAB_WIDTH` spaces."""
    return line.replace("\t", " " * TAB_WIDTH)


def tab_shift(line: str, column: int) -> int:
    """Count the tabs of the raw ``line`` strictly before the 1-based ``column``.

    Args:
        line (str): The raw (non tab-expanded) source line.
        column (int): 1-based column of the first annotated character.

    Returns:
        int: Number of tab characters at 0-based indexes below ``column - 1``.
    """
    return line[: max(column - 1, 0)].count("\t")


def caret_offset(line: str, column: int) -> int:
    """Return the number of spaces to print before the carets.

    Each preceding tab occupies one character of the raw column count but
    `TAB_WIDTH` display columns once expanded.

    Args:
        line (str): The raw (non tab-expanded) source line.
        column (int): 1-based start column.

    Returns:
        int: The display offset of ``column`` in the tab-expanded line.
    """
    return column - 1 + tab_shift(line, column) * (TAB_WIDTH - 1)


def _source_line(lines: Sequence[str], line_number: int) -> str:
    if line_number < 1:
        # Negative indexes would silently wrap around to the end of the file.
        raise IndexError(f"line {line_number} is out of range (1..{len(lines)})")
    return lines[line_number - 1]


def format_error(config: RenderConfig, error: LocatedError, *, warning: bool = False) -> str:
    """Render ``error`` as a multi-line report.

    Args:
        config (RenderConfig): Source lines, color and filename settings.
        error (LocatedError): The error to render.
        warning (bool): Render with the ``warning`` severity instead of ``error``.

    Returns:
        str: The full report, ending with a gutter line and a blank line.

    Raises:
        IndexError: If the error's start line is not a valid line of
            ``config.lines``.
    """
    lines: Sequence[str] = config.lines
    width: int = gutter_width(len(lines))
    blank: str = " " * width
    fmt: Format = config.format
    span = error.span()
    start, end = span.start, span.end

    logger.trace(
        "Rendering %r at %s (%s mode, gutter=%d)",
        error.description(),
        start,
        "column" if start.has_column else "whole-line",
        width,
    )

    severity = Severity.from_warning(warning)
    out: list[str] = [f"{severity.render(config.color)}: {error.description()}"]
    if config.filename is not None:
        out.append(f"{blank}--> {config.filename}:{start.line}:{start.column}")
    out.append(f"{blank} |")

    raw_line: str = _source_line(lines, start.line)
    display_line: str = expand_tabs(raw_line)
    out.append(f"{start.line:>{width}} |" + (f" {display_line}" if display_line else ""))

    fixme = error.fixme(lines)
    if start.has_column:
        carets: str = "^" * max(1, end.column - start.column)
        padding: str = " " * caret_offset(raw_line, start.column)
        out.append(f"{blank} | {padding}{carets} {fixme.to_string(fmt)}")
    else:
        # No extra blank line after the block; the trailing gutter line separates it.
        out.extend(f"{blank} |   {piece.to_string(fmt)}" for piece in fixme.split("\n"))

    out.append(f"{blank} |")
    return "\n".join(out) + "\n\n"


def log_error(
    config: RenderConfig,
    error: LocatedError,
    *,
    warning: bool = False,
    console: ConsoleLike | None = None,
) -> None:
    """Write the report for ``error`` to the diagnostic stream.

    The report is emitted with a single console write so that concurrent
    callers sharing a stream only need to serialize whole calls.

    Args:
        config (RenderConfig): Source lines, color and filename settings.
        error (LocatedError): The error to render.
        warning (bool): Render with the ``warning`` severity instead of ``error``.
        console (ConsoleLike | None): Target console; defaults to the active
            CLI console or a stderr console.
    """
    text: str = format_error(config, error, warning=warning)
    (console or get_console_safely()).error(text, nl=False)
