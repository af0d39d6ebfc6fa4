# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for SrcDiag.

SrcDiag owns no persisted configuration: the per-file render settings live in
[`srcdiag.rendering.diagnostic.RenderConfig`][srcdiag.rendering.diagnostic.RenderConfig]
and are supplied by the caller. This package only hosts the internal logging setup
(see [`srcdiag.config.logging`][srcdiag.config.logging]), which honors the
``SRCDIAG_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations
