# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_suggest.py
#   file_relpath : tests/diagnostic/test_suggest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for spelling suggestions."""

from __future__ import annotations

from srcdiag.diagnostic.suggest import did_you_mean

CANDIDATES = ("Captures", "Asserts")


def test_exact_match_is_not_suggested() -> None:
    """A valid name needs no correction."""
    assert did_you_mean(CANDIDATES, "Asserts") is None


def test_case_only_difference_is_suggested_with_canonical_case() -> None:
    """The candidate's own casing is returned."""
    assert did_you_mean(CANDIDATES, "asserts") == "Asserts"


def test_close_and_far_matches() -> None:
    """Near misses are suggested; unrelated words are not."""
    assert did_you_mean(CANDIDATES, "Assert") == "Asserts"
    assert did_you_mean(CANDIDATES, "Headers") is None
