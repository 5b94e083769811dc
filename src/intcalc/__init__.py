"""
intcalc - integer arithmetic expression interpreter with precise diagnostics.

A lexer, precedence-climbing parser and tree-walking evaluator for
``+ - * /`` over signed 32-bit integers, with parenthesized grouping.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core.errors import (
    ConfigError,
    ContractViolationError,
    DivideByZeroError,
    EvaluationError,
    IntcalcError,
    UnsupportedNodeError,
    UnsupportedOperatorError,
)
from .core.ir import SyntaxKind, SyntaxToken, SyntaxTree
from .core.lang import LineResult, evaluate, format_tree, interpret, parse


def _get_version() -> str:
    """Get version from installed metadata."""
    try:
        return _metadata_version("intcalc")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "ConfigError",
    "ContractViolationError",
    "DivideByZeroError",
    "EvaluationError",
    "IntcalcError",
    "LineResult",
    "SyntaxKind",
    "SyntaxToken",
    "SyntaxTree",
    "UnsupportedNodeError",
    "UnsupportedOperatorError",
    "__version__",
    "evaluate",
    "format_tree",
    "interpret",
    "parse",
]
