# topmark:header:start
#
#   project      : SrcDiag
#   file         : test_enum_mixins.py
#   file_relpath : tests/core/test_enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `KeyedStrEnum` and `EnumIntrospectionMixin`."""

from __future__ import annotations

from srcdiag.core.enum_mixins import EnumIntrospectionMixin, KeyedStrEnum


class _Kind(EnumIntrospectionMixin, KeyedStrEnum):
    SPACE = ("space", "Parsing space")
    URL = ("url-start", "Parsing URL", ("uri",))


def test_members_are_strings_keyed_by_value() -> None:
    """The stable key is the string value; metadata lives on attributes."""
    assert _Kind.URL == "url-start"
    assert _Kind.URL.key == "url-start"
    assert _Kind.URL.label == "Parsing URL"
    assert _Kind.SPACE.aliases == ()


def test_parse_normalizes_tokens() -> None:
    """Keys, names and aliases match case-insensitively, ``-``/``_``/space alike."""
    assert _Kind.parse("URL_START") is _Kind.URL
    assert _Kind.parse(" url start ") is _Kind.URL
    assert _Kind.parse("Uri") is _Kind.URL
    assert _Kind.parse("space") is _Kind.SPACE
    assert _Kind.parse("tab") is None
    assert _Kind.parse(None) is None


def test_value_length_is_longest_value() -> None:
    """`value_length` is shared by all members of the enum."""
    assert _Kind.SPACE.value_length == len("url-start")
    assert _Kind.URL.value_length == _Kind.SPACE.value_length
