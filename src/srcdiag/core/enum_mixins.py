# topmark:header:start
#
#   project      : SrcDiag
#   file         : enum_mixins.py
#   file_relpath : src/srcdiag/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum helpers for error kinds.

`KeyedStrEnum` members are strings whose value is a stable, hyphenated machine
key (used on the command line), with a human label (the report header
description) and optional aliases. `EnumIntrospectionMixin` adds the width of
the longest key, for aligned listings.

Example:
    ```python
    class Kind(EnumIntrospectionMixin, KeyedStrEnum):
        SPACE = ("space", "Parsing space")
        URL = ("url", "Parsing URL", ("uri",))

    assert Kind.parse("URI") is Kind.URL
    assert Kind.URL.value_length == 5
    ```
"""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_KS = TypeVar("_KS", bound="KeyedStrEnum")


class EnumIntrospectionMixin:
    """Mixin giving enum members the length of the longest value of their enum."""

    @cached_property
    def value_length(self) -> int:
        """Length of the longest ``.value`` among the members of this enum."""
        # Pyright doesn't know 'self' is an Enum member; runtime guarantees it.
        return max(len(member.value) for member in type(self))  # type: ignore[attr-defined]


def _normalize(token: str) -> str:
    return token.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """String enum built from ``(key, label[, aliases])`` tuples.

    Attributes:
        label (str): Human-readable description.
        aliases (tuple[str, ...]): Extra spellings accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """The machine key, i.e. ``.value``."""
        return str(self.value)

    def _spellings(self) -> Iterator[str]:
        yield self.value
        yield self.name
        yield from self.aliases

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Return the member spelled ``raw``, or None.

        The key, the member name and every alias are accepted. Case is ignored
        and ``-``, ``_`` and spaces are interchangeable.
        """
        if raw is None:
            return None
        wanted = _normalize(raw)
        for member in cls:
            if any(_normalize(s) == wanted for s in member._spellings()):
                return member
        return None
