"""
Token and syntax tree types for intcalc.

This module defines the immutable lexical unit (``SyntaxToken``) and the
closed set of expression nodes produced by the parser:

- NumberExpression: a single number token, e.g. ``42``
- ParenthesizedExpression: ``( expression )``
- BinaryExpression: ``left op right`` for ``+ - * /``

Tokens are themselves nodes (leaves), so the debug printer and the
leaf-order traversal can walk a tree without special cases.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

END_OF_INPUT_TEXT = "\0"


def wrap_int32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range with two's-complement wraparound."""
    return (value - INT32_MIN) % 2**32 + INT32_MIN


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------


class SyntaxKind(StrEnum):
    """Lexical categories and node kinds."""

    # Tokens
    NUMBER_TOKEN = "NumberToken"
    WHITESPACE_TOKEN = "WhiteSpaceToken"
    PLUS_TOKEN = "PlusToken"
    MINUS_TOKEN = "MinusToken"
    STAR_TOKEN = "StarToken"
    SLASH_TOKEN = "SlashToken"
    OPEN_PAREN_TOKEN = "OpenParenthesisToken"
    CLOSE_PAREN_TOKEN = "CloseParenthesisToken"
    BAD_TOKEN = "BadToken"
    END_OF_INPUT_TOKEN = "EndOfInputToken"

    # Expressions
    NUMBER_EXPRESSION = "NumberExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"
    BINARY_EXPRESSION = "BinaryExpression"


# ---------------------------------------------------------------------------
# Token
# ---------------------------------------------------------------------------


class SyntaxToken(BaseModel):
    """
    A single lexical unit.

    ``value`` holds the decoded integer and is only ever present on a
    ``NumberToken`` whose digits fit in 32 bits.
    """

    kind: SyntaxKind
    position: int = Field(description="0-based offset where scanning started")
    text: str = Field(description="Exact source slice")
    value: int | None = Field(default=None, description="Decoded Int32 for number tokens")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_value(self) -> SyntaxToken:
        """Only in-range number tokens may carry a value."""
        if self.value is None:
            return self
        if self.kind != SyntaxKind.NUMBER_TOKEN:
            raise ValueError(f"{self.kind} cannot carry a value")
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise ValueError(f"{self.value} is outside the Int32 range")
        return self

    def __str__(self) -> str:
        return self.text

    def get_children(self) -> list[SyntaxNode]:
        return []


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


class NumberExpression(BaseModel):
    """A literal number."""

    number_token: SyntaxToken

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NUMBER_EXPRESSION

    def get_children(self) -> list[SyntaxNode]:
        return [self.number_token]

    def __str__(self) -> str:
        return self.number_token.text


class ParenthesizedExpression(BaseModel):
    """A grouped expression: ( expression )."""

    open_paren_token: SyntaxToken
    expression: Expression
    close_paren_token: SyntaxToken

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.PARENTHESIZED_EXPRESSION

    def get_children(self) -> list[SyntaxNode]:
        return [self.open_paren_token, self.expression, self.close_paren_token]

    def __str__(self) -> str:
        return f"({self.expression})"


class BinaryExpression(BaseModel):
    """Binary operation: left op right."""

    left: Expression
    operator_token: SyntaxToken
    right: Expression

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.BINARY_EXPRESSION

    def get_children(self) -> list[SyntaxNode]:
        return [self.left, self.operator_token, self.right]

    def __str__(self) -> str:
        return f"({self.left} {self.operator_token.text} {self.right})"


# ---------------------------------------------------------------------------
# Union types
# ---------------------------------------------------------------------------

Expression = NumberExpression | ParenthesizedExpression | BinaryExpression
SyntaxNode = SyntaxToken | NumberExpression | ParenthesizedExpression | BinaryExpression

# Rebuild models for recursive forward references
ParenthesizedExpression.model_rebuild()
BinaryExpression.model_rebuild()


def iter_tokens(node: SyntaxNode) -> Iterator[SyntaxToken]:
    """Yield the leaf tokens of a subtree in source order."""
    stack: list[SyntaxNode] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, SyntaxToken):
            yield current
        else:
            stack.extend(reversed(current.get_children()))


# ---------------------------------------------------------------------------
# Parse result
# ---------------------------------------------------------------------------


class SyntaxTree(BaseModel):
    """
    Result of parsing one line of input.

    Bundles the root expression, the end-of-input token and every
    diagnostic reported while lexing and parsing that line.
    """

    root: Expression
    end_of_input_token: SyntaxToken
    diagnostics: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics)

    @classmethod
    def parse(cls, text: str) -> SyntaxTree:
        """Lex and parse ``text`` into a tree."""
        from intcalc.core.lang.parser import Parser

        return Parser(text).parse()


SyntaxTree.model_rebuild()
