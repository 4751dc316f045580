"""Two-stack operator-precedence evaluator.

Tokens are consumed left to right. Numbers go to the operand stack;
operators wait on the operator stack until an operator of lower precedence,
a closing parenthesis or the end of input forces them to be applied. No
syntax tree is built: each application immediately replaces its operands
with the result.
"""

from __future__ import annotations

from typing import Iterable, Union

from .operators import Operator, is_registered
from .tokenizer import tokenize
from .types import (
    CloseParenToken,
    IncorrectInput,
    InvalidNumber,
    LexErrorToken,
    LexicalError,
    MissingOperand,
    NumberToken,
    OpenParenToken,
    OperatorToken,
    Token,
    UnbalancedParentheses,
    UnknownOperator,
)

# Operator stack entries: a registered operator or the open-paren barrier
_OPEN_PAREN = OpenParenToken()
StackEntry = Union[Operator, OpenParenToken]


def _pop_operand(operands: list[float], operator: Operator) -> float:
    if not operands:
        raise MissingOperand(f"Missing operand for '{operator.symbol}'")
    return operands.pop()


def apply_operator(operands: list[float], operators: list[StackEntry]) -> None:
    """Pop the top operator, apply it to its operands and push the result.

    Raises:
        IncorrectInput: the operator stack is empty
        UnbalancedParentheses: the top of the stack is an open-paren marker
        UnknownOperator: the operator is not registered
        MissingOperand: too few operands for the operator's arity
        DivisionByZero: division with a zero right operand
    """
    if not operators:
        raise IncorrectInput("No operator to apply")
    operator = operators.pop()
    if operator is _OPEN_PAREN:
        raise UnbalancedParentheses("Missing ')'")
    if not is_registered(operator):
        raise UnknownOperator(f"Unknown operator: {operator.symbol}")

    if operator.arity == 1:
        a = _pop_operand(operands, operator)
        operands.append(operator.func(a))
    else:
        b = _pop_operand(operands, operator)
        a = _pop_operand(operands, operator)
        operands.append(operator.func(a, b))


def _parse_number(token: NumberToken) -> float:
    try:
        return float(token.text)
    except ValueError:
        raise InvalidNumber(f"Invalid number: {token.text}") from None


def evaluate_tokens(tokens: Iterable[Token]) -> float:
    """Evaluate a token sequence produced by ``tokenize``.

    Returns:
        The value of the expression.

    Raises:
        CalculatorError: one of its subclasses, describing the first problem
            encountered.
    """
    operands: list[float] = []
    operators: list[StackEntry] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            operands.append(_parse_number(token))
        elif isinstance(token, OperatorToken):
            op = token.operator
            if not op.is_prefix:
                while (
                    operators
                    and operators[-1] is not _OPEN_PAREN
                    and operators[-1].precedence >= op.precedence
                ):
                    apply_operator(operands, operators)
            operators.append(op)
        elif isinstance(token, OpenParenToken):
            operators.append(_OPEN_PAREN)
        elif isinstance(token, CloseParenToken):
            while True:
                if not operators:
                    raise UnbalancedParentheses("Missing '('")
                if operators[-1] is _OPEN_PAREN:
                    operators.pop()
                    break
                apply_operator(operands, operators)
        elif isinstance(token, LexErrorToken):
            raise LexicalError(token.message)
        else:
            raise IncorrectInput(f"Unknown token: {token!r}")

    while operators:
        apply_operator(operands, operators)

    if len(operands) != 1:
        raise IncorrectInput("Incorrect input")
    return operands[0]


def evaluate_expression(text: str) -> float:
    """Tokenize and evaluate ``text``.

    Example:
        >>> evaluate_expression("(5 + 3) * 2")
        16.0
    """
    return evaluate_tokens(tokenize(text))
