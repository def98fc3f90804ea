"""Typed failures raised by the expression pipeline.

One error kind per stage: the lexer raises ``TokenizationError``, the parser
``ParseError`` and the evaluator ``EvaluateError``. Callers catch by kind, or
catch ``ExpressionError`` and read ``code`` to translate into their own
taxonomy.
"""

from typing import Any, Dict, Optional


class ExpressionError(Exception):
    """Base for all expression engine errors."""

    code = "EXPRESSION_ERROR"
    default_message = "Expression error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        diagnostic: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        # Caret rendering of the failing position, when one is known
        self.diagnostic = diagnostic
        super().__init__(self.message)

    def __reduce__(self):
        return type(self), (self.message, self.details, self.diagnostic)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "error_class": type(self).__name__,
        }


class TokenizationError(ExpressionError):
    """Raised when a character is outside the lexical alphabet."""

    code = "TOKENIZATION_ERROR"
    default_message = "Tokenization error"


class ParseError(ExpressionError):
    """Raised when the token sequence does not match the grammar."""

    code = "PARSE_ERROR"
    default_message = "Parse error"


class EvaluateError(ExpressionError):
    """Raised when a well-formed tree cannot be reduced to a number."""

    code = "EVALUATE_ERROR"
    default_message = "Evaluate error"


class EvaluationTimeoutError(ExpressionError):
    code = "EVALUATION_TIMEOUT"
    default_message = "Evaluation timed out"
