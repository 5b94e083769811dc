"""
Expression evaluator for the intcalc expression language.

Walks a syntax tree and computes a signed 32-bit integer. Pure evaluation,
no I/O, no side effects. Only trees without diagnostics may be evaluated:
synthetic tokens produced during error recovery carry no value.
"""

from __future__ import annotations

import logging

from intcalc.core.errors import (
    DivideByZeroError,
    UnsupportedNodeError,
    UnsupportedOperatorError,
)
from intcalc.core.ir.syntax import (
    BinaryExpression,
    Expression,
    NumberExpression,
    ParenthesizedExpression,
    SyntaxKind,
    wrap_int32,
)

logger = logging.getLogger(__name__)


class Evaluator:
    """Tree-walking interpreter over one expression."""

    def __init__(self, root: Expression) -> None:
        self._root = root

    def evaluate(self) -> int:
        """
        Evaluate the root expression.

        Raises:
            DivideByZeroError: If a divisor evaluates to zero.
            ContractViolationError: If the tree holds a node or operator
                the parser never produces.
        """
        result = _interpret(self._root)
        logger.debug("Evaluated %s = %d", self._root.kind, result)
        return result


def evaluate(expr: Expression) -> int:
    """Evaluate an expression tree to an integer."""
    return Evaluator(expr).evaluate()


def _interpret(root: Expression) -> int:
    """
    Post-order walk with an explicit stack.

    Long operator chains build left-leaning trees as deep as the chain is
    long, so the walk must not recurse.
    """
    stack: list[tuple[Expression, bool]] = [(root, False)]
    values: list[int] = []

    while stack:
        expr, visited = stack.pop()

        if isinstance(expr, NumberExpression):
            values.append(_interpret_number(expr))
        elif isinstance(expr, ParenthesizedExpression):
            stack.append((expr.expression, False))
        elif isinstance(expr, BinaryExpression):
            if visited:
                right = values.pop()
                left = values.pop()
                values.append(_apply_binary(expr, left, right))
            else:
                stack.append((expr, True))
                stack.append((expr.right, False))
                stack.append((expr.left, False))
        else:
            kind = getattr(expr, "kind", type(expr).__name__)
            raise UnsupportedNodeError(str(kind))

    return values.pop()


def _interpret_number(expr: NumberExpression) -> int:
    value = expr.number_token.value
    if value is None:
        raise UnsupportedNodeError(f"{expr.kind} without a decoded value")
    return value


def _apply_binary(expr: BinaryExpression, left: int, right: int) -> int:
    """Combine evaluated operands with Int32 wraparound."""
    op = expr.operator_token.kind

    if op == SyntaxKind.PLUS_TOKEN:
        return wrap_int32(left + right)
    if op == SyntaxKind.MINUS_TOKEN:
        return wrap_int32(left - right)
    if op == SyntaxKind.STAR_TOKEN:
        return wrap_int32(left * right)
    if op == SyntaxKind.SLASH_TOKEN:
        if right == 0:
            raise DivideByZeroError(expr.operator_token.position)
        return wrap_int32(_truncating_divide(left, right))

    raise UnsupportedOperatorError(str(op))


def _truncating_divide(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient
