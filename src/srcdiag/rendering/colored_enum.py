# topmark:header:start
#
#   project      : SrcDiag
#   file         : colored_enum.py
#   file_relpath : src/srcdiag/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums whose members know how to color themselves.

A `ColoredStrEnum` member is built from ``(text, colorizer)``: ``.value`` is the
plain text and the colorizer (any ``str -> str`` callable, typically a
`functools.partial` over `click.style`) is applied by `render()` on demand.

Example:
    ```python
    class Level(ColoredStrEnum):
        OK = ("ok", partial(click.style, fg="green"))

    Level.OK.render(False)  # "ok"
    Level.OK.render(True)   # "\\x1b[32mok\\x1b[0m"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """A ``str -> str`` decorator adding terminal styling."""

    def __call__(self, text: str) -> str: ...


class ColoredStrEnum(str, Enum):
    """`str` enum carrying a colorizer next to its text value."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        member: ColoredStrEnum = str.__new__(cls, text)
        member._value_ = text
        member._color = color
        return member

    @property
    def value(self) -> str:
        """The plain text of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The member's colorizer."""
        return self._color

    def render(self, color: bool) -> str:
        """Return the text, passed through the colorizer when ``color`` is set."""
        return self._color(self._value_) if color else self._value_
