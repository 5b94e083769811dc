"""Tests for the token and syntax tree model."""

from __future__ import annotations

import pydantic
import pytest

from intcalc.core.ir.syntax import (
    INT32_MAX,
    BinaryExpression,
    NumberExpression,
    SyntaxKind,
    SyntaxToken,
    iter_tokens,
)
from intcalc.core.lang.parser import parse


class TestSyntaxToken:
    """Token construction rules."""

    def test_number_token_with_value(self) -> None:
        token = SyntaxToken(kind=SyntaxKind.NUMBER_TOKEN, position=0, text="5", value=5)
        assert token.value == 5
        assert token.get_children() == []

    def test_value_rejected_on_non_number_token(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            SyntaxToken(kind=SyntaxKind.PLUS_TOKEN, position=0, text="+", value=1)

    def test_value_outside_int32_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            SyntaxToken(kind=SyntaxKind.NUMBER_TOKEN, position=0, text="x", value=INT32_MAX + 1)

    def test_tokens_are_immutable(self) -> None:
        token = SyntaxToken(kind=SyntaxKind.NUMBER_TOKEN, position=0, text="5", value=5)
        with pytest.raises(pydantic.ValidationError):
            token.value = 6  # type: ignore[misc]


class TestNodes:
    """Children and kinds of expression nodes."""

    def test_binary_children(self) -> None:
        tree = parse("1*2")
        root = tree.root
        assert isinstance(root, BinaryExpression)
        assert root.kind == SyntaxKind.BINARY_EXPRESSION
        children = root.get_children()
        assert children[0] is root.left
        assert children[1] is root.operator_token
        assert children[2] is root.right

    def test_number_children(self) -> None:
        tree = parse("9")
        assert isinstance(tree.root, NumberExpression)
        assert tree.root.kind == SyntaxKind.NUMBER_EXPRESSION
        assert tree.root.get_children() == [tree.root.number_token]

    def test_iter_tokens_order(self) -> None:
        tree = parse("(1+2)*3")
        assert [t.text for t in iter_tokens(tree.root)] == ["(", "1", "+", "2", ")", "*", "3"]

    def test_iter_tokens_long_chain(self) -> None:
        tree = parse("*".join(["2"] * 1000))
        tokens = list(iter_tokens(tree.root))
        assert len(tokens) == 1999
        assert tokens[-1].position == 1998

    def test_tree_is_immutable(self) -> None:
        tree = parse("1")
        with pytest.raises(pydantic.ValidationError):
            tree.diagnostics = ("x",)  # type: ignore[misc]
