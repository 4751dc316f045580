"""Public API for the calculator - returns structured objects without side effects."""

from __future__ import annotations

import math

from . import config
from .evaluator import evaluate_tokens
from .logging_config import get_logger
from .tokenizer import tokenize
from .types import CalculatorError, EvalResult, LexErrorToken, ValidationError

logger = get_logger("api")


def format_result(value: float) -> str:
    """Render a result the way it is shown and stored in the history file.

    Integral values lose the trailing ``.0``; everything else uses the
    shortest representation that parses back to the same float.

    Example:
        >>> format_result(8.0)
        '8'
        >>> format_result(0.1 + 0.2)
        '0.30000000000000004'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer() and abs(value) < 1e16:
        if value == 0.0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def _check_length(expression: str) -> None:
    if len(expression) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long ({len(expression)} characters, maximum is {config.MAX_INPUT_LENGTH})",
            code="TOO_LONG",
        )


def evaluate(expression: str) -> EvalResult:
    """Evaluate an arithmetic expression.

    Args:
        expression: Expression string (e.g., "5 + 3", "s 9", "(1 + 2) ^ 2")

    Returns:
        EvalResult holding the value and its rendering, or the error message
        and error code.

    Example:
        >>> from calculator_pkg.api import evaluate
        >>> evaluate("5 + 3 * 2").result
        '11'
        >>> evaluate("10 / 0").error_code
        'DIVISION_BY_ZERO'
    """
    try:
        _check_length(expression)
        value = evaluate_tokens(tokenize(expression))
    except (CalculatorError, ValidationError) as e:
        logger.debug(f"Evaluation of {expression!r} failed: [{e.code}] {e}")
        return EvalResult(ok=False, error=str(e), error_code=e.code)
    return EvalResult(ok=True, value=value, result=format_result(value))


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check that an expression consists of known characters only.

    Structural problems (missing operands, unbalanced parentheses) are only
    detected by ``evaluate``.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        _check_length(expression)
    except ValidationError as e:
        return False, str(e)
    tokens = tokenize(expression)
    if len(tokens) == 1 and isinstance(tokens[0], LexErrorToken):
        return False, tokens[0].message
    return True, None
