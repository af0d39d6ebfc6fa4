# topmark:header:start
#
#   project      : SrcDiag
#   file         : parse_error.py
#   file_relpath : src/srcdiag/diagnostic/parse_error.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors raised by the request-file parser.

`ParseError` satisfies the [`LocatedError`][srcdiag.diagnostic.types.LocatedError]
protocol: each `ParseErrorKind` member carries the header description, and
`ParseError.fixme` builds the suggested correction (bold red), optionally using
the source lines to quote the offending character.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from srcdiag.core.enum_mixins import EnumIntrospectionMixin, KeyedStrEnum
from srcdiag.diagnostic.suggest import did_you_mean
from srcdiag.rendering.styled import Color, Style, StyledString

if TYPE_CHECKING:
    from collections.abc import Sequence

    from srcdiag.diagnostic.model import Span

HTTP_METHODS: Final[tuple[str, ...]] = (
    "GET",
    "HEAD",
    "POST",
    "PUT",
    "DELETE",
    "CONNECT",
    "OPTIONS",
    "TRACE",
    "PATCH",
)

REQUEST_SECTIONS: Final[tuple[str, ...]] = (
    "QueryStringParams",
    "Query",
    "FormParams",
    "Form",
    "MultipartFormData",
    "Multipart",
    "Cookies",
    "Options",
    "BasicAuth",
)

RESPONSE_SECTIONS: Final[tuple[str, ...]] = ("Captures", "Asserts")

FIXME_STYLE: Final[Style] = Style(fg=Color.RED, bold=True)


class ParseErrorKind(EnumIntrospectionMixin, KeyedStrEnum):
    """Kinds of parser failures; the label is the report header description."""

    EXPECTING = ("expecting", "Parsing literal", ("literal",))
    METHOD = ("method", "Parsing method")
    SPACE = ("space", "Parsing space")
    URL = ("url", "Parsing URL")
    URL_ILLEGAL_CHARACTER = ("url-illegal-character", "Parsing URL")
    URL_INVALID_START = ("url-invalid-start", "Parsing URL")
    VERSION = ("version", "Parsing version")
    STATUS = ("status", "Parsing status code")
    FILENAME = ("filename", "Parsing filename")
    JSON = ("json", "Parsing JSON")
    REQUEST_SECTION_NAME = ("request-section-name", "Parsing section name")
    RESPONSE_SECTION_NAME = ("response-section-name", "Parsing section name")
    DUPLICATE_SECTION = ("duplicate-section", "Parsing section")
    ESCAPE_CHAR = ("escape-char", "Parsing escape character")
    UNICODE = ("unicode", "Parsing unicode literal")
    HEX_DIGIT = ("hex-digit", "Parsing hexadecimal number")
    MULTILINE = ("multiline", "Parsing multiline")
    VARIABLE = ("variable", "Parsing variable")


@dataclass
class ParseError(Exception):
    """A located parser error.

    Attributes:
        source_info (Span): Where the parser failed.
        kind (ParseErrorKind): What failed.
        value (str | None): Kind-specific payload (expected literal, offending
            method or section name, free-form variable message).
        recoverable (bool): Whether the parser may try an alternative branch.
    """

    source_info: Span
    kind: ParseErrorKind
    value: str | None = None
    recoverable: bool = False

    def __str__(self) -> str:
        return f"{self.source_info.start}: {self.description()}"

    def description(self) -> str:
        """Return the description of the error kind."""
        return self.kind.label

    def span(self) -> Span:
        """Return the error's source span."""
        return self.source_info

    def fixme(self, lines: Sequence[str]) -> StyledString:
        """Return the suggested correction, styled bold red.

        Args:
            lines (Sequence[str]): Raw source lines, used to quote the offending
                character of illegal URL characters.

        Returns:
            StyledString: The correction message.
        """
        return StyledString.from_text(self._message(lines), FIXME_STYLE)

    def _message(self, lines: Sequence[str]) -> str:
        value = self.value or ""
        match self.kind:
            case ParseErrorKind.EXPECTING:
                return f"expecting '{value}'"
            case ParseErrorKind.METHOD:
                message = f"the HTTP method <{value}> is not valid."
                suggestion = did_you_mean(HTTP_METHODS, value)
                if suggestion:
                    message += f" Did you mean {suggestion}?"
                return message
            case ParseErrorKind.SPACE:
                return "expecting a space"
            case ParseErrorKind.URL:
                return "expecting a valid URL"
            case ParseErrorKind.URL_ILLEGAL_CHARACTER:
                return f"illegal character <{self._char_at(lines) or value}>"
            case ParseErrorKind.URL_INVALID_START:
                return "expecting http://, https:// or {{"
            case ParseErrorKind.VERSION:
                return "HTTP version must be HTTP, HTTP/1.0, HTTP/1.1 or HTTP/2"
            case ParseErrorKind.STATUS:
                return "expecting a valid status"
            case ParseErrorKind.FILENAME:
                return "expecting a filename"
            case ParseErrorKind.JSON:
                return "JSON error"
            case ParseErrorKind.REQUEST_SECTION_NAME:
                return _section_message(REQUEST_SECTIONS, value)
            case ParseErrorKind.RESPONSE_SECTION_NAME:
                return _section_message(RESPONSE_SECTIONS, value)
            case ParseErrorKind.DUPLICATE_SECTION:
                return "the section is already defined"
            case ParseErrorKind.ESCAPE_CHAR:
                return "the escaping sequence is not valid"
            case ParseErrorKind.UNICODE:
                return "expecting a valid unicode literal"
            case ParseErrorKind.HEX_DIGIT:
                return "expecting a valid hexadecimal number"
            case ParseErrorKind.MULTILINE:
                return "the multiline is not valid"
            case ParseErrorKind.VARIABLE:
                return value

    def _char_at(self, lines: Sequence[str]) -> str | None:
        """Return the source character at the start position, if there is one."""
        start = self.source_info.start
        if not 1 <= start.line <= len(lines) or not start.has_column:
            return None
        line = lines[start.line - 1]
        if start.column > len(line):
            return None
        return line[start.column - 1]


def _section_message(sections: Sequence[str], name: str) -> str:
    message = "the section is not valid."
    suggestion = did_you_mean(sections, name)
    if suggestion:
        message += f" Did you mean [{suggestion}]?"
    return message
