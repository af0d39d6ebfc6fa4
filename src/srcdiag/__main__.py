# topmark:header:start
#
#   project      : SrcDiag
#   file         : __main__.py
#   file_relpath : src/srcdiag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SrcDiag via ``python -m srcdiag``.

Equivalent to running the ``srcdiag`` console script.

Examples:
    Preview a parser error::

        python -m srcdiag show api.hurl --line 3 --column 1 --kind parse:method --value GETT
"""

from __future__ import annotations

from srcdiag.cli.main import cli

if __name__ == "__main__":
    cli()
