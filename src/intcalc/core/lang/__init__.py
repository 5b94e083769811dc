"""
intcalc expression language.

Lexer, parser, evaluator and debug printer for integer arithmetic
expressions with ``+ - * /`` and parentheses.

Usage:
    from intcalc.core.lang import parse, evaluate

    tree = parse("1 + 2 * 3")
    if not tree.diagnostics:
        result = evaluate(tree.root)
        # result == 7
"""

from intcalc.core.lang.evaluator import Evaluator, evaluate
from intcalc.core.lang.lexer import Lexer, tokenize
from intcalc.core.lang.parser import Parser, parse
from intcalc.core.lang.pipeline import LineResult, interpret
from intcalc.core.lang.printer import format_tree

__all__ = [
    "Evaluator",
    "Lexer",
    "LineResult",
    "Parser",
    "evaluate",
    "format_tree",
    "interpret",
    "parse",
    "tokenize",
]
