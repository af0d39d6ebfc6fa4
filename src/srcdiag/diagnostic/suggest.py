# topmark:header:start
#
#   project      : SrcDiag
#   file         : suggest.py
#   file_relpath : src/srcdiag/diagnostic/suggest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Spelling suggestions for fixme messages ("Did you mean ...?")."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def did_you_mean(candidates: Iterable[str], actual: str, *, cutoff: float = 0.6) -> str | None:
    """Return the candidate closest to ``actual``, or None if nothing is close enough.

    Matching is case-insensitive; the candidate is returned with its own casing.
    An exact match is never suggested, a match differing only by case always is.
    """
    by_lower = {c.lower(): c for c in candidates}
    if actual in by_lower.values():
        return None
    if actual.lower() in by_lower:
        return by_lower[actual.lower()]
    matches = difflib.get_close_matches(actual.lower(), list(by_lower), n=1, cutoff=cutoff)
    return by_lower[matches[0]] if matches else None
