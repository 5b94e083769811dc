"""
Intermediate representation for intcalc: tokens and syntax trees.
"""

from intcalc.core.ir.syntax import (
    END_OF_INPUT_TEXT,
    INT32_MAX,
    INT32_MIN,
    BinaryExpression,
    Expression,
    NumberExpression,
    ParenthesizedExpression,
    SyntaxKind,
    SyntaxNode,
    SyntaxToken,
    SyntaxTree,
    iter_tokens,
    wrap_int32,
)

__all__ = [
    "END_OF_INPUT_TEXT",
    "INT32_MAX",
    "INT32_MIN",
    "BinaryExpression",
    "Expression",
    "NumberExpression",
    "ParenthesizedExpression",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxToken",
    "SyntaxTree",
    "iter_tokens",
    "wrap_int32",
]
