"""
Recursive descent parser for the intcalc expression language.

Grammar (precedence low to high, all binary operators left-associative):
    expression  → term
    term        → factor (("+" | "-") factor)*
    factor      → primary (("*" | "/") primary)*
    primary     → "(" expression ")"
                | NUMBER

The parser never raises on malformed input. A missing token is reported
as a diagnostic and replaced by an empty synthetic token of the expected
kind, without consuming the token that was actually found.
"""

from __future__ import annotations

import logging

from intcalc.core.diagnostics import DiagnosticBag
from intcalc.core.ir.syntax import (
    BinaryExpression,
    Expression,
    NumberExpression,
    ParenthesizedExpression,
    SyntaxKind,
    SyntaxToken,
    SyntaxTree,
)
from intcalc.core.lang.lexer import Lexer

logger = logging.getLogger(__name__)

_SKIPPED_KINDS = frozenset({SyntaxKind.WHITESPACE_TOKEN, SyntaxKind.BAD_TOKEN})

_TERM_OPERATORS = frozenset({SyntaxKind.PLUS_TOKEN, SyntaxKind.MINUS_TOKEN})
_FACTOR_OPERATORS = frozenset({SyntaxKind.STAR_TOKEN, SyntaxKind.SLASH_TOKEN})

# Each level of parentheses costs several Python frames in the descent
MAX_NESTING_DEPTH = 128


class Parser:
    """Builds one syntax tree from one line of text."""

    def __init__(self, text: str) -> None:
        self._diagnostics = DiagnosticBag()
        lexer = Lexer(text, self._diagnostics)

        tokens: list[SyntaxToken] = []
        while True:
            token = lexer.next_token()
            if token.kind not in _SKIPPED_KINDS:
                tokens.append(token)
            if token.kind == SyntaxKind.END_OF_INPUT_TOKEN:
                break

        self._tokens = tokens
        self._position = 0
        self._depth = 0
        logger.debug(
            "Lexed %d tokens with %d diagnostics", len(tokens), len(self._diagnostics)
        )

    @property
    def diagnostics(self) -> DiagnosticBag:
        return self._diagnostics

    @property
    def tokens(self) -> list[SyntaxToken]:
        return list(self._tokens)

    @property
    def current(self) -> SyntaxToken:
        return self.peek(0)

    def peek(self, offset: int = 0) -> SyntaxToken:
        idx = self._position + offset
        if idx >= len(self._tokens):
            return self._tokens[-1]  # EndOfInput
        return self._tokens[idx]

    def advance(self) -> SyntaxToken:
        tok = self.current
        self._position += 1
        return tok

    def match(self, kind: SyntaxKind) -> SyntaxToken:
        """Consume a token of ``kind``, or report it missing and synthesize one."""
        tok = self.current
        if tok.kind == kind:
            return self.advance()

        self._diagnostics.report_unexpected_token(tok.kind, kind)
        return SyntaxToken(kind=kind, position=tok.position, text="")

    # -- Grammar rules --

    def parse(self) -> SyntaxTree:
        """Parse the whole line: one term followed by end of input."""
        expression = self.parse_term()
        end_of_input = self.match(SyntaxKind.END_OF_INPUT_TOKEN)
        logger.debug(
            "Parsed %d tokens with %d diagnostics", len(self._tokens), len(self._diagnostics)
        )
        return SyntaxTree(
            root=expression,
            end_of_input_token=end_of_input,
            diagnostics=self._diagnostics.to_tuple(),
        )

    def parse_expression(self) -> Expression:
        """expression → term"""
        return self.parse_term()

    def parse_term(self) -> Expression:
        """factor (('+' | '-') factor)*"""
        left = self.parse_factor()
        while self.current.kind in _TERM_OPERATORS:
            operator_token = self.advance()
            right = self.parse_factor()
            left = BinaryExpression(left=left, operator_token=operator_token, right=right)
        return left

    def parse_factor(self) -> Expression:
        """primary (('*' | '/') primary)*"""
        left = self.parse_primary()
        while self.current.kind in _FACTOR_OPERATORS:
            operator_token = self.advance()
            right = self.parse_primary()
            left = BinaryExpression(left=left, operator_token=operator_token, right=right)
        return left

    def parse_primary(self) -> Expression:
        """'(' expression ')' | NUMBER"""
        if self.current.kind == SyntaxKind.OPEN_PAREN_TOKEN:
            if self._depth >= MAX_NESTING_DEPTH:
                return self._skip_nested_group()

            open_paren = self.advance()
            self._depth += 1
            expression = self.parse_expression()
            self._depth -= 1
            close_paren = self.match(SyntaxKind.CLOSE_PAREN_TOKEN)
            return ParenthesizedExpression(
                open_paren_token=open_paren,
                expression=expression,
                close_paren_token=close_paren,
            )

        number_token = self.match(SyntaxKind.NUMBER_TOKEN)
        return NumberExpression(number_token=number_token)

    def _skip_nested_group(self) -> ParenthesizedExpression:
        """
        Report a group nested past the limit and skip to its closing paren.

        The skipped tokens are left out of the tree; the group's content is
        replaced by an empty synthetic number.
        """
        open_paren = self.advance()
        self._diagnostics.report_nesting_too_deep(open_paren.position, MAX_NESTING_DEPTH)
        placeholder = SyntaxToken(
            kind=SyntaxKind.NUMBER_TOKEN, position=self.current.position, text=""
        )

        balance = 1
        while self.current.kind != SyntaxKind.END_OF_INPUT_TOKEN:
            if self.current.kind == SyntaxKind.OPEN_PAREN_TOKEN:
                balance += 1
            elif self.current.kind == SyntaxKind.CLOSE_PAREN_TOKEN:
                balance -= 1
                if balance == 0:
                    break
            self.advance()

        close_paren = self.match(SyntaxKind.CLOSE_PAREN_TOKEN)
        return ParenthesizedExpression(
            open_paren_token=open_paren,
            expression=NumberExpression(number_token=placeholder),
            close_paren_token=close_paren,
        )


def parse(text: str) -> SyntaxTree:
    """Parse a line of text into a syntax tree.

    Args:
        text: One line of input, not pre-trimmed.

    Returns:
        The tree with every lexical and syntactic diagnostic attached.
        Never raises for malformed input.
    """
    return Parser(text).parse()
