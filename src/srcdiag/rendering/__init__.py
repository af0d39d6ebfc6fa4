# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for SrcDiag.

This package turns located errors into human-readable reports and provides the
styled-text primitive they are built from.

Public modules:
    - srcdiag.rendering.diagnostic
    - srcdiag.rendering.loggers
    - srcdiag.rendering.styled
    - srcdiag.rendering.formats
    - srcdiag.rendering.colored_enum

"""

from __future__ import annotations
