"""Expression evaluation over measurements.

Components:
    ExpressionEvaluator: Two-stack operator-precedence evaluator.
    Operator: ``+ - * /`` with their precedence.
    Precedence: Binding strength levels.
    evaluate: Shortcut for ``ExpressionEvaluator().evaluate``.
"""

from .evaluator import ExpressionEvaluator, evaluate
from .operator import Operator, Precedence

__all__ = ["ExpressionEvaluator", "Operator", "Precedence", "evaluate"]
