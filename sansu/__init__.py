from sansu.engine import evaluate, evaluate_isolated, format_result
from sansu.errors import (
    ExpressionError,
    TokenizationError,
    ParseError,
    EvaluateError,
    EvaluationTimeoutError,
)

__all__ = [
    "evaluate",
    "evaluate_isolated",
    "format_result",
    "ExpressionError",
    "TokenizationError",
    "ParseError",
    "EvaluateError",
    "EvaluationTimeoutError",
]
