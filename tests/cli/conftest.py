# topmark:header:start
#
#   project      : SrcDiag
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SrcDiag through `click.testing.CliRunner`.

`result.output` is asserted on throughout: it carries stderr as well as stdout
on every supported Click version.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from srcdiag.cli.main import cli
from srcdiag.cli_shared.exit_codes import ExitCode
from srcdiag.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["kinds"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input, used
            with the ``-`` path argument.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    try:
        return runner.invoke(cli, argv, input=input_text)
    finally:
        # The CLI rebinds the root handler to the runner's (now closed) stdout.
        setup_logging(level=TRACE_LEVEL)


def write_source(tmp_path: Path, text: str, name: str = "api.hurl") -> Path:
    """Write ``text`` as UTF-8 to ``tmp_path / name`` and return the path."""
    path: Path = tmp_path / name
    path.write_text(text, encoding="utf-8", newline="")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1): an error was rendered.

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
