# topmark:header:start
#
#   project      : SrcDiag
#   file         : __init__.py
#   file_relpath : src/srcdiag/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across SrcDiag.

The ``srcdiag.core`` package provides small, reusable building blocks that are
safe to import from anywhere in the codebase without pulling in rendering or
user-interface concerns.

Included modules:

- ``enum_mixins``
  Typing-friendly Enum utilities (keyed enums with labels and aliases,
  introspection for aligned listings).
"""

from __future__ import annotations
