"""
Line-level pipeline: text → tokens → syntax tree → (gated) integer result.

Evaluation only runs when lexing and parsing reported no diagnostics.
Arithmetic faults such as division by zero are captured on the result;
contract violations between parser and evaluator propagate.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from intcalc.core.errors import EvaluationError
from intcalc.core.ir.syntax import SyntaxTree
from intcalc.core.lang.evaluator import evaluate
from intcalc.core.lang.parser import parse

logger = logging.getLogger(__name__)


class LineResult(BaseModel):
    """Outcome of running one line through the pipeline."""

    tree: SyntaxTree
    value: int | None = Field(default=None, description="Result when evaluation succeeded")
    error: str | None = Field(default=None, description="Evaluation failure message")

    model_config = ConfigDict(frozen=True)

    @property
    def diagnostics(self) -> tuple[str, ...]:
        return self.tree.diagnostics

    @property
    def ok(self) -> bool:
        return self.value is not None


def interpret(text: str) -> LineResult:
    """Parse ``text`` and evaluate it when it is well formed."""
    tree = parse(text)
    if tree.diagnostics:
        logger.debug("Skipping evaluation: %d diagnostics", len(tree.diagnostics))
        return LineResult(tree=tree)

    try:
        value = evaluate(tree.root)
    except EvaluationError as e:
        logger.debug("Evaluation failed: %s", e.message)
        return LineResult(tree=tree, error=e.message)

    return LineResult(tree=tree, value=value)
