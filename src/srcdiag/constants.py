# topmark:header:start
#
#   project      : SrcDiag
#   file         : constants.py
#   file_relpath : src/srcdiag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SrcDiag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SRCDIAG_VERSION: str = get_version("srcdiag")
