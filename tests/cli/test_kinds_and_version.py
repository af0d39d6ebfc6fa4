# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_kinds_and_version.py
#   file_relpath : tests/cli/test_kinds_and_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI `kinds` and `version` commands, group help and global flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from srcdiag.cli.cli_types import kind_choices
from srcdiag.constants import SRCDIAG_VERSION
from srcdiag.diagnostic.lint_error import LintErrorKind
from srcdiag.diagnostic.parse_error import ParseErrorKind
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli

if TYPE_CHECKING:
    from click.testing import Result

pytestmark = pytest.mark.cli


def test_kinds_lists_every_kind() -> None:
    """Every ``family:key`` appears with its description."""
    result: Result = run_cli(["kinds"])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert len(lines) == len(ParseErrorKind) + len(LintErrorKind)
    assert [line.split()[0] for line in lines] == kind_choices()
    assert any(line.endswith("Parsing hexadecimal number") for line in lines)


def test_kinds_family_filter() -> None:
    """``--family lint`` lists linter kinds only."""
    result: Result = run_cli(["kinds", "--family", "lint"])

    assert_SUCCESS(result)
    assert result.output.splitlines()[0].startswith("lint:unnecessary-space")
    assert "parse:" not in result.output


def test_kinds_verbose_adds_headers() -> None:
    """``-v`` prefixes each family with a header."""
    result: Result = run_cli(["-v", "kinds"])

    assert_SUCCESS(result)
    assert "parse kinds:" in result.output
    assert "lint kinds:" in result.output


def test_version_prints_installed_version() -> None:
    """`version` prints the distribution version."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == SRCDIAG_VERSION


def test_verbose_and_quiet_flags_parse() -> None:
    """Verbosity and quietness flags are accepted on their own."""
    for args in (["-v", "version"], ["-vvv", "version"], ["-q", "version"], ["-qq", "version"]):
        assert_SUCCESS(run_cli(args))


def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    """Combining ``-v`` and ``-q`` is a usage error (64)."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_group_without_subcommand_prints_help() -> None:
    """Invoking the group alone prints a hint and the help text."""
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint: use 'srcdiag show" in result.output
    assert "Commands:" in result.output


def test_short_help_option() -> None:
    """``-h`` is an alias of ``--help``."""
    result: Result = run_cli(["show", "-h"])

    assert_SUCCESS(result)
    assert "--kind" in result.output
