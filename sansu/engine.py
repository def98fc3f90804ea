import logging
import multiprocessing
from typing import Optional

from sansu.config import Settings, get_settings
from sansu.errors import ExpressionError, EvaluationTimeoutError
from sansu.evaluator import Number, evaluate_tree
from sansu.parse import parse
from sansu.tokenize import tokenize

logger = logging.getLogger(__name__)


def evaluate(expression: str, settings: Optional[Settings] = None) -> Number:
    """Tokenize, parse and reduce ``expression``.

    Raises ``TokenizationError``, ``ParseError`` or ``EvaluateError`` from the
    stage that failed; nothing is retried and no partial result is returned.
    """
    settings = settings or get_settings()
    try:
        tokens = tokenize(expression, max_length=settings.max_length)
        node = parse(tokens, max_depth=settings.max_depth)
        result = evaluate_tree(node)
    except ExpressionError as e:
        logger.debug("expression rejected", extra={"code": e.code, "reason": e.message})
        raise
    logger.debug("expression evaluated", extra={"result": result})
    return result


def evaluate_isolated(
    expression: str,
    timeout: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> Number:
    """Run ``evaluate`` in a single worker process.

    The worker is terminated when ``timeout`` seconds pass without a result.
    Pipeline errors raised in the worker are re-raised here unchanged.
    """
    settings = settings or get_settings()
    with multiprocessing.Pool(processes=1) as pool:
        pending = pool.apply_async(evaluate, (expression, settings))
        try:
            return pending.get(timeout=timeout)
        except multiprocessing.TimeoutError:
            logger.warning("evaluation timed out", extra={"timeout": timeout})
            raise EvaluationTimeoutError(
                f"Evaluation did not finish within {timeout} seconds",
                details={"timeout": timeout},
            ) from None


def format_result(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
