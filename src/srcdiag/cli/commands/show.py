# topmark:header:start
#
#   project      : SrcDiag
#   file         : show.py
#   file_relpath : src/srcdiag/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag `show` command.

Renders one diagnostic of a chosen kind at a given position of a source file,
exactly as the parser or linter would report it. Useful to preview how an error
message reads against real content (tabs, long files, empty lines).

Exit status is `ExitCode.FAILURE` for an error and `ExitCode.SUCCESS` for a
warning (``--warning``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from srcdiag.cli.cli_types import ErrorKindParam
from srcdiag.cli.cmd_common import (
    STDIN_PATH,
    get_color_enabled,
    get_effective_verbosity,
    read_source,
)
from srcdiag.cli.errors import SrcdiagUsageError
from srcdiag.cli.keys import CliCmd, CliOpt
from srcdiag.cli.options import position_options
from srcdiag.cli_shared.exit_codes import ExitCode
from srcdiag.config.logging import get_logger
from srcdiag.diagnostic.lint_error import LintError, LintErrorKind
from srcdiag.diagnostic.model import SourcePosition, Span
from srcdiag.diagnostic.parse_error import ParseError
from srcdiag.rendering.diagnostic import RenderConfig, log_error
from srcdiag.rendering.loggers import log_verbose

if TYPE_CHECKING:
    from collections.abc import Sequence

    from srcdiag.cli.cli_types import ErrorKind
    from srcdiag.config.logging import SrcdiagLogger
    from srcdiag.diagnostic.types import LocatedError

logger: SrcdiagLogger = get_logger(__name__)


def build_error(kind: ErrorKind, span: Span, value: str | None) -> LocatedError:
    """Build the located error of ``kind`` at ``span``.

    Args:
        kind (ErrorKind): A parser or linter error kind.
        span (Span): The error position.
        value (str | None): Payload for parser kinds that take one; ignored for
            linter kinds.

    Returns:
        LocatedError: A `ParseError` or a `LintError`.
    """
    if isinstance(kind, LintErrorKind):
        return LintError(span, kind)
    return ParseError(span, kind, value)


def validate_position(lines: Sequence[str], line: int, column: int) -> None:
    """Reject positions the renderer must never receive.

    Raises:
        SrcdiagUsageError: If ``line`` is not a line of the file, or ``column``
            points past the end of the line (one past the end is accepted).
    """
    if not 1 <= line <= len(lines):
        raise SrcdiagUsageError(
            f"Line {line} is out of range: the source has {len(lines)} line(s)."
        )
    n_chars = len(lines[line - 1])
    if column > n_chars + 1:
        raise SrcdiagUsageError(
            f"Column {column} is out of range: line {line} has {n_chars} character(s)."
        )


@click.command(
    name=CliCmd.SHOW,
    help="Render a diagnostic of KIND at a position of PATH ('-' reads STDIN).",
)
@click.argument("path", type=str)
@position_options
@click.option(
    CliOpt.KIND,
    "kind",
    type=ErrorKindParam(),
    required=True,
    help="Error kind, 'parse:<kind>' or 'lint:<kind>' (see 'srcdiag kinds').",
)
@click.option(
    CliOpt.VALUE,
    "value",
    type=str,
    default=None,
    help="Payload for parser kinds (expected literal, method, section name, message).",
)
@click.option(
    CliOpt.WARNING,
    "warning",
    is_flag=True,
    default=False,
    help="Render as a warning instead of an error.",
)
@click.option(
    CliOpt.NO_FILENAME,
    "no_filename",
    is_flag=True,
    default=False,
    help="Omit the '--> file:line:column' location line.",
)
@click.pass_context
def show_command(
    ctx: click.Context,
    *,
    path: str,
    line: int,
    column: int,
    end_column: int | None,
    kind: ErrorKind,
    value: str | None,
    warning: bool,
    no_filename: bool,
) -> None:
    """Render one diagnostic to stderr.

    Args:
        ctx (click.Context): Click context holding the console and color state.
        path (str): Source file, or '-' for STDIN.
        line (int): 1-based line number.
        column (int): 1-based start column (0: whole-line annotation).
        end_column (int | None): 1-based end column, exclusive.
        kind (ErrorKind): Parser or linter error kind.
        value (str | None): Payload for parser kinds.
        warning (bool): Render as a warning.
        no_filename (bool): Omit the location line.
    """
    text: str = read_source(path)
    show_filename = not no_filename and path != STDIN_PATH
    config = RenderConfig.from_text(
        text,
        color=get_color_enabled(ctx),
        filename=path if show_filename else None,
    )
    validate_position(config.lines, line, column)

    if end_column is None:
        end_column = column + 1
    span = Span(SourcePosition(line, column), SourcePosition(line, end_column))
    error = build_error(kind, span, value)

    log_verbose(
        get_effective_verbosity(ctx) > 0,
        f"Rendering {kind.key} at {span.start}",
    )
    logger.debug("show: path=%s span=%s kind=%s warning=%s", path, span, kind, warning)
    log_error(config, error, warning=warning)

    ctx.exit(ExitCode.SUCCESS if warning else ExitCode.FAILURE)
