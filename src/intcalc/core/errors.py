"""
Error types for intcalc evaluation and configuration.

Lexical and syntactic problems are not raised: they are collected as
diagnostics (see ``intcalc.core.diagnostics``). The exceptions below cover
evaluation faults, parser/evaluator contract violations and bad configuration.
"""

from __future__ import annotations


class IntcalcError(Exception):
    """Base exception for all intcalc errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EvaluationError(IntcalcError):
    """
    Raised when a well-formed expression cannot be evaluated.

    Examples:
    - Division by zero
    """

    pass


class DivideByZeroError(EvaluationError):
    """Raised when the right operand of ``/`` evaluates to zero."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"ERR: Division by zero at position {position}")


class ContractViolationError(IntcalcError):
    """
    Raised when the evaluator meets a tree the parser should never produce.

    These indicate a defect, not malformed user input.
    """

    pass


class UnsupportedNodeError(ContractViolationError):
    """Raised for a node kind the evaluator does not handle."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unexpected node: {kind}")


class UnsupportedOperatorError(ContractViolationError):
    """Raised for a binary operator token outside ``+ - * /``."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unexpected binary operator {kind}")


class ConfigError(IntcalcError):
    """Raised when a configuration file holds invalid values."""

    pass
