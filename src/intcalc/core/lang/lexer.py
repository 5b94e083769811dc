"""
Lexer for the intcalc expression language.

Scans a line of text into tokens one at a time. Problems (unknown
characters, numbers that do not fit in 32 bits) are reported to the
diagnostics sink and scanning continues.
"""

from __future__ import annotations

import logging
import re

from intcalc.core.diagnostics import DiagnosticBag
from intcalc.core.ir.syntax import (
    END_OF_INPUT_TEXT,
    INT32_MAX,
    INT32_MIN,
    SyntaxKind,
    SyntaxToken,
)

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"\d+")
_WHITESPACE_RE = re.compile(r"\s+")

_SINGLE_CHAR_KINDS: dict[str, SyntaxKind] = {
    "+": SyntaxKind.PLUS_TOKEN,
    "-": SyntaxKind.MINUS_TOKEN,
    "*": SyntaxKind.STAR_TOKEN,
    "/": SyntaxKind.SLASH_TOKEN,
    "(": SyntaxKind.OPEN_PAREN_TOKEN,
    ")": SyntaxKind.CLOSE_PAREN_TOKEN,
}


def decode_int32(text: str) -> int | None:
    """
    Decode a run of digits, or None if it is not a signed 32-bit integer.

    Any Unicode decimal digit starts a number token, but only ASCII digits decode.
    """
    if not text.isascii():
        return None
    try:
        value = int(text)
    except ValueError:
        return None
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


class Lexer:
    """
    On-demand scanner over a single line of text.

    Each call to ``next_token`` returns exactly one token. Once the text is
    exhausted every further call returns an end-of-input token at the
    terminal position.
    """

    def __init__(self, text: str, diagnostics: DiagnosticBag | None = None) -> None:
        self._text = text
        self._position = 0
        self._diagnostics = diagnostics if diagnostics is not None else DiagnosticBag()

    @property
    def diagnostics(self) -> DiagnosticBag:
        return self._diagnostics

    def next_token(self) -> SyntaxToken:
        """Scan and return the next token."""
        start = self._position

        if start >= len(self._text):
            return SyntaxToken(
                kind=SyntaxKind.END_OF_INPUT_TOKEN, position=start, text=END_OF_INPUT_TEXT
            )

        m = _NUMBER_RE.match(self._text, start)
        if m:
            self._position = m.end()
            text = m.group(0)
            value = decode_int32(text)
            if value is None:
                self._diagnostics.report_invalid_number(self._text)
            return SyntaxToken(kind=SyntaxKind.NUMBER_TOKEN, position=start, text=text, value=value)

        m = _WHITESPACE_RE.match(self._text, start)
        if m:
            self._position = m.end()
            return SyntaxToken(kind=SyntaxKind.WHITESPACE_TOKEN, position=start, text=m.group(0))

        c = self._text[start]
        self._position += 1

        kind = _SINGLE_CHAR_KINDS.get(c)
        if kind is not None:
            return SyntaxToken(kind=kind, position=start, text=c)

        logger.debug("Bad character %r at position %d", c, start)
        self._diagnostics.report_bad_character(c)
        return SyntaxToken(kind=SyntaxKind.BAD_TOKEN, position=start, text=c)

    def tokens(self) -> list[SyntaxToken]:
        """Scan the remaining text, ending with (and including) the end-of-input token."""
        result: list[SyntaxToken] = []
        while True:
            token = self.next_token()
            result.append(token)
            if token.kind == SyntaxKind.END_OF_INPUT_TOKEN:
                return result


def tokenize(text: str) -> list[SyntaxToken]:
    """Tokenize a whole line, including whitespace and bad tokens."""
    return Lexer(text).tokens()
