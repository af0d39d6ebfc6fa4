# topmark:header:start
#
#   project      : SrcDiag
#   file         : styled.py
#   file_relpath : src/srcdiag/rendering/styled.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styled text primitive.

A `StyledString` is an ordered run of `Token` fragments, each carrying a `Style`
(optional foreground color, bold flag). It is built once by an error's ``fixme``
operation and rendered later, either as plain text or with ANSI escape sequences
(see [`srcdiag.rendering.formats.Format`][srcdiag.rendering.formats.Format]).

ANSI sequences are produced by `click.style`, the same primitive the console uses
for program output.

Example:
    ```python
    s = StyledString()
    s.push("expecting ")
    s.push_with("'HTTP'", Style(fg=Color.RED, bold=True))
    s.to_string(Format.PLAIN)  # "expecting 'HTTP'"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

import click

from srcdiag.rendering.formats import Format

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Color(str, Enum):
    """Foreground colors available to styled text (values are click color names)."""

    BLUE = "blue"
    BRIGHT_BLACK = "bright_black"
    CYAN = "cyan"
    GREEN = "green"
    MAGENTA = "magenta"
    RED = "red"
    YELLOW = "yellow"


@dataclass(frozen=True)
class Style:
    """Display attributes of a text fragment.

    Attributes:
        fg (Color | None): Foreground color, or None for the terminal default.
        bold (bool): Whether the fragment is rendered in bold.
    """

    fg: Color | None = None
    bold: bool = False

    @property
    def is_plain(self) -> bool:
        """Return True if the style adds no attribute at all."""
        return self.fg is None and not self.bold


@dataclass(frozen=True)
class Token:
    """A text fragment with a single style."""

    content: str
    style: Style = Style()

    def to_string(self, fmt: Format) -> str:
        """Render the fragment in the given format."""
        if fmt is Format.PLAIN or self.style.is_plain:
            return self.content
        return click.style(
            self.content,
            fg=self.style.fg.value if self.style.fg is not None else None,
            # click emits a "normal intensity" sequence for bold=False; pass None instead.
            bold=True if self.style.bold else None,
        )


class StyledString:
    """Ordered sequence of styled text fragments.

    Adjacent fragments sharing the same style are merged when pushed, so two
    styled strings with the same visible text and styling compare equal
    regardless of how they were assembled.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: list[Token] = []
        for token in tokens:
            self._push_token(token)

    @classmethod
    def from_text(cls, text: str, style: Style | None = None) -> StyledString:
        """Build a styled string holding a single fragment.

        Args:
            text (str): The fragment text.
            style (Style | None): Optional style; plain when omitted.

        Returns:
            StyledString: The new styled string.
        """
        s = cls()
        s.push_with(text, style or Style())
        return s

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Return the fragments in order."""
        return tuple(self._tokens)

    def _push_token(self, token: Token) -> None:
        if not token.content:
            return
        if self._tokens and self._tokens[-1].style == token.style:
            last = self._tokens[-1]
            self._tokens[-1] = Token(last.content + token.content, last.style)
        else:
            self._tokens.append(token)

    def push(self, text: str) -> None:
        """Append unstyled text."""
        self._push_token(Token(text))

    def push_with(self, text: str, style: Style) -> None:
        """Append text rendered with ``style``."""
        self._push_token(Token(text, style))

    def append(self, other: StyledString) -> None:
        """Append all fragments of ``other``, keeping their styles."""
        for token in other._tokens:
            self._push_token(token)

    def split(self, sep: str) -> list[StyledString]:
        """Split on ``sep``, keeping the style of every piece.

        Behaves like `str.split` with an explicit separator: the result always
        has ``text.count(sep) + 1`` elements, some of which may be empty.

        Args:
            sep (str): Non-empty separator.

        Returns:
            list[StyledString]: The pieces, in order.

        Raises:
            ValueError: If ``sep`` is empty.
        """
        if not sep:
            raise ValueError("empty separator")
        parts: list[StyledString] = [StyledString()]
        for token in self._tokens:
            for i, piece in enumerate(token.content.split(sep)):
                if i > 0:
                    parts.append(StyledString())
                parts[-1].push_with(piece, token.style)
        return parts

    def to_string(self, fmt: Format) -> str:
        """Render as plain text or ANSI-escaped text.

        Args:
            fmt (Format): Target format.

        Returns:
            str: The rendered text.
        """
        return "".join(token.to_string(fmt) for token in self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return sum(len(token.content) for token in self._tokens)

    def __str__(self) -> str:
        return self.to_string(Format.PLAIN)

    def __repr__(self) -> str:
        return f"StyledString({self._tokens!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledString):
            return NotImplemented
        return self._tokens == other._tokens

    __hash__ = None  # type: ignore[assignment]
