# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_show.py
#   file_relpath : tests/cli/test_show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI `show` command: rendered reports, exit codes and input validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import pytest

from srcdiag.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    write_source,
)
from tests.conftest import SAMPLE_SOURCE

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli


def test_show_renders_parse_error_and_fails(tmp_path: Path) -> None:
    """An error report goes to stderr and the command exits FAILURE (1)."""
    src: Path = write_source(tmp_path, SAMPLE_SOURCE)

    result: Result = run_cli(
        [
            "--no-color",
            "show",
            str(src),
            "--line",
            "1",
            "--column",
            "1",
            "--end-column",
            "4",
            "--kind",
            "parse:method",
            "--value",
            "GETT",
        ]
    )

    assert_FAILURE(result)
    assert (
        "error: Parsing method\n"
        f"  --> {src}:1:1\n"
        "   |\n"
        " 1 | GET http://localhost:8000/hello\n"
        "   | ^^^ the HTTP method <GETT> is not valid. Did you mean GET?\n"
        "   |\n"
    ) in result.output


def test_show_warning_exits_success(tmp_path: Path) -> None:
    """``--warning`` renders a warning header and exits 0."""
    src: Path = write_source(tmp_path, SAMPLE_SOURCE)

    result: Result = run_cli(
        ["show", str(src), "--line", "2", "--column", "5", "--kind", "lint:one-space", "--warning"]
    )

    assert_SUCCESS(result)
    assert "warning: One space" in result.output
    assert "   |     ^ Use only one space" in result.output


def test_show_whole_line_and_no_filename(tmp_path: Path) -> None:
    """Column 0 selects whole-line mode; ``--no-filename`` drops the location line."""
    src: Path = write_source(tmp_path, SAMPLE_SOURCE)

    result: Result = run_cli(
        [
            "show",
            str(src),
            "--line",
            "5",
            "--kind",
            "parse:variable",
            "--value",
            "undefined variable",
            "--no-filename",
        ]
    )

    assert_FAILURE(result)
    assert "-->" not in result.output
    assert " 5 | [Captrues]\n   |   undefined variable\n   |\n" in result.output
    assert "^" not in result.output


def test_show_reads_stdin(tmp_path: Path) -> None:
    """The ``-`` path reads the source from STDIN and omits the location line."""
    result: Result = run_cli(
        ["show", "-", "--line", "1", "--column", "5", "--kind", "parse:url"],
        input_text="GET htp://x\n",
    )

    assert_FAILURE(result)
    assert "-->" not in result.output
    assert "   |     ^ expecting a valid URL" in result.output


def test_show_forced_color(tmp_path: Path) -> None:
    """``--color always`` emits ANSI styling even when not attached to a terminal."""
    src: Path = write_source(tmp_path, SAMPLE_SOURCE)

    result: Result = run_cli(
        ["--color", "always", "show", str(src), "--line", "1", "--kind", "lint:one-space"]
    )

    assert_FAILURE(result)
    assert click.style("error", fg="red", bold=True) in result.output
    assert click.style("Use only one space", fg="cyan") in result.output


def test_show_no_color_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """``NO_COLOR`` disables styling in auto mode."""
    monkeypatch.setenv("NO_COLOR", "1")
    src: Path = write_source(tmp_path, SAMPLE_SOURCE)

    result: Result = run_cli(["show", str(src), "--line", "1", "--kind", "lint:one-space"])

    assert_FAILURE(result)
    assert "\x1b[" not in result.output


def test_show_tabs_are_expanded(tmp_path: Path) -> None:
    """Tabs in the context line are displayed as four spaces, carets aligned."""
    src: Path = write_source(tmp_path, SAMPLE_SOURCE)

    result: Result = run_cli(
        ["show", str(src), "--line", "4", "--column", "6", "--kind", "parse:url"]
    )

    assert_FAILURE(result)
    assert " 4 | POST    http://localhost:8000/data\n" in result.output
    assert "   |         ^ expecting a valid URL\n" in result.output


def test_show_verbose_echoes_what_is_rendered(tmp_path: Path) -> None:
    """``-v`` adds a ``* Rendering ...`` line before the report."""
    src: Path = write_source(tmp_path, SAMPLE_SOURCE)

    result: Result = run_cli(
        ["-v", "show", str(src), "--line", "2", "--column", "1", "--kind", "parse:status"]
    )

    assert_FAILURE(result)
    assert "* Rendering status at 2:1" in result.output


def test_show_line_out_of_range_is_usage_error(tmp_path: Path) -> None:
    """A line past the end of the file is rejected before rendering."""
    src: Path = write_source(tmp_path, "one line")

    result: Result = run_cli(["show", str(src), "--line", "3", "--kind", "parse:space"])

    assert_USAGE_ERROR(result)
    assert "Line 3 is out of range" in result.output


def test_show_column_out_of_range_is_usage_error(tmp_path: Path) -> None:
    """A column more than one past the end of the line is rejected."""
    src: Path = write_source(tmp_path, "abc")

    result: Result = run_cli(
        ["show", str(src), "--line", "1", "--column", "6", "--kind", "parse:space"]
    )

    assert_USAGE_ERROR(result)
    assert "Column 6 is out of range" in result.output


def test_show_unknown_kind_is_rejected(tmp_path: Path) -> None:
    """Click reports an invalid ``--kind`` as a bad parameter (exit 2)."""
    src: Path = write_source(tmp_path, SAMPLE_SOURCE)

    result: Result = run_cli(["show", str(src), "--line", "1", "--kind", "parse:nope"])

    assert result.exit_code == 2, result.output
    assert "Unknown parse kind 'nope'" in result.output


def test_show_missing_file(tmp_path: Path) -> None:
    """A missing source file exits FILE_NOT_FOUND (66)."""
    result: Result = run_cli(
        ["show", str(tmp_path / "missing.hurl"), "--line", "1", "--kind", "parse:space"]
    )

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "No such file" in result.output


def test_show_undecodable_file(tmp_path: Path) -> None:
    """A file that is not UTF-8 exits ENCODING_ERROR (65)."""
    src: Path = tmp_path / "latin1.hurl"
    src.write_bytes(b"GET \xff\xfe\n")

    result: Result = run_cli(["show", str(src), "--line", "1", "--kind", "parse:space"])

    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output
