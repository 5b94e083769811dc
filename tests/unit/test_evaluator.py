"""Tests for the intcalc evaluator."""

from __future__ import annotations

import pytest

from intcalc.core.errors import (
    ContractViolationError,
    DivideByZeroError,
    EvaluationError,
    UnsupportedNodeError,
    UnsupportedOperatorError,
)
from intcalc.core.ir.syntax import (
    INT32_MAX,
    INT32_MIN,
    BinaryExpression,
    NumberExpression,
    SyntaxKind,
    SyntaxToken,
    wrap_int32,
)
from intcalc.core.lang.evaluator import Evaluator, evaluate
from intcalc.core.lang.parser import parse


def _eval(source: str) -> int:
    tree = parse(source)
    assert tree.diagnostics == ()
    return evaluate(tree.root)


def _number(value: int, position: int = 0) -> NumberExpression:
    token = SyntaxToken(
        kind=SyntaxKind.NUMBER_TOKEN, position=position, text=str(value), value=value
    )
    return NumberExpression(number_token=token)


class TestArithmetic:
    """Operator semantics, precedence and associativity."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("42", 42),
            ("1+2", 3),
            ("5-8", -3),
            ("6*7", 42),
            ("1+2*3", 7),
            ("(1+2)*3", 9),
            ("1-2-3", -4),
            ("100/10/5", 2),
            ("2*3+4/2", 8),
            ("((((5))))", 5),
            (" 10 - ( 2 + 3 ) * 2 ", 0),
        ],
    )
    def test_expression(self, source: str, expected: int) -> None:
        assert _eval(source) == expected

    def test_evaluator_class(self) -> None:
        tree = parse("3*(4+5)")
        assert Evaluator(tree.root).evaluate() == 27


class TestDivision:
    """Integer division truncates toward zero."""

    def test_truncates(self) -> None:
        assert _eval("7/2") == 3

    def test_negative_dividend_truncates_toward_zero(self) -> None:
        # 0-7 is -7; -7 / 2 truncates to -3, not floor -4
        assert _eval("(0-7)/2") == -3

    def test_negative_divisor_truncates_toward_zero(self) -> None:
        assert _eval("7/(0-2)") == -3

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivideByZeroError) as exc_info:
            _eval("1/0")
        assert exc_info.value.position == 1
        assert isinstance(exc_info.value, EvaluationError)

    def test_divide_by_zero_from_subexpression(self) -> None:
        with pytest.raises(DivideByZeroError):
            _eval("10/(3-3)")


class TestInt32Semantics:
    """Arithmetic wraps like a signed 32-bit integer."""

    def test_addition_overflow_wraps(self) -> None:
        assert _eval("2147483647+1") == INT32_MIN

    def test_multiplication_overflow_wraps(self) -> None:
        assert _eval("65536*65536") == 0

    def test_min_divided_by_minus_one_wraps(self) -> None:
        expr = BinaryExpression(
            left=_number(INT32_MIN),
            operator_token=SyntaxToken(kind=SyntaxKind.SLASH_TOKEN, position=1, text="/"),
            right=_number(-1, 2),
        )
        assert evaluate(expr) == INT32_MIN

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, 0), (INT32_MAX, INT32_MAX), (INT32_MAX + 1, INT32_MIN), (INT32_MIN - 1, INT32_MAX), (2**32, 0)],
    )
    def test_wrap_int32(self, value: int, expected: int) -> None:
        assert wrap_int32(value) == expected


class TestContractViolations:
    """Trees the parser never produces fail loudly."""

    def test_unsupported_operator(self) -> None:
        expr = BinaryExpression(
            left=_number(1),
            operator_token=SyntaxToken(kind=SyntaxKind.OPEN_PAREN_TOKEN, position=1, text="("),
            right=_number(2, 2),
        )
        with pytest.raises(UnsupportedOperatorError) as exc_info:
            evaluate(expr)
        assert exc_info.value.kind == "OpenParenthesisToken"
        assert isinstance(exc_info.value, ContractViolationError)

    def test_unsupported_node(self) -> None:
        token = SyntaxToken(kind=SyntaxKind.PLUS_TOKEN, position=0, text="+")
        with pytest.raises(UnsupportedNodeError) as exc_info:
            evaluate(token)  # type: ignore[arg-type]
        assert exc_info.value.kind == "PlusToken"

    def test_synthetic_number_token(self) -> None:
        tree = parse("1+")
        assert tree.diagnostics
        with pytest.raises(ContractViolationError):
            evaluate(tree.root)

    def test_contract_violation_is_not_an_evaluation_error(self) -> None:
        assert not issubclass(ContractViolationError, EvaluationError)


class TestDeepTrees:
    """Tree depth is bounded by memory, not the interpreter stack."""

    def test_long_addition_chain(self) -> None:
        assert _eval("+".join(["1"] * 1000)) == 1000

    def test_long_mixed_chain(self) -> None:
        source = "2" + "*3/3" * 600 + "-1" * 400
        assert _eval(source) == 2 - 400

    def test_deep_parentheses(self) -> None:
        assert _eval("(" * 100 + "6/2" + ")" * 100) == 3

    def test_deep_right_leaning_tree(self) -> None:
        plus = SyntaxToken(kind=SyntaxKind.PLUS_TOKEN, position=0, text="+")
        expr = _number(0)
        for _ in range(5000):
            expr = BinaryExpression(left=_number(1), operator_token=plus, right=expr)
        assert evaluate(expr) == 5000
