"""Type definitions: tokens, result dataclasses and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from .operators import Operator


@dataclass(frozen=True)
class NumberToken:
    """Numeric literal exactly as it appeared in the input."""

    text: str


@dataclass(frozen=True)
class OperatorToken:
    """Operator taken from the operator registry."""

    operator: Operator


@dataclass(frozen=True)
class OpenParenToken:
    pass


@dataclass(frozen=True)
class CloseParenToken:
    pass


@dataclass(frozen=True)
class LexErrorToken:
    """Marker for an unrecognised character; always the only token produced."""

    message: str
    char: str


Token = Union[NumberToken, OperatorToken, OpenParenToken, CloseParenToken, LexErrorToken]


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    value: float | None = None
    result: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        return f"EvalResult(ok=True, result={self.result!r})"


class CalculatorError(Exception):
    """Base class for every failure of a single evaluation."""

    default_code = "CALCULATOR_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class LexicalError(CalculatorError):
    """Raised when the input contains a character outside the alphabet."""

    default_code = "LEXICAL_ERROR"


class InvalidNumber(CalculatorError):
    """Raised when a numeric literal cannot be parsed as a float."""

    default_code = "INVALID_NUMBER"


class MissingOperand(CalculatorError):
    """Raised when an operator is applied to too few operands."""

    default_code = "MISSING_OPERAND"


class DivisionByZero(CalculatorError):
    default_code = "DIVISION_BY_ZERO"


class UnknownOperator(CalculatorError):
    default_code = "UNKNOWN_OPERATOR"


class IncorrectInput(CalculatorError):
    """Raised when evaluation does not end with exactly one operand."""

    default_code = "INCORRECT_INPUT"


class UnbalancedParentheses(CalculatorError):
    default_code = "UNBALANCED_PARENTHESES"


class ValidationError(Exception):
    """Raised when input validation fails before tokenizing."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class HistoryError(Exception):
    """Raised when the history file cannot be written."""

    def __init__(self, message: str, code: str = "HISTORY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
