"""Operator registry.

Every operator the calculator understands is described by an ``Operator``
record: its lexer symbol, precedence, arity and the function that applies
it. The tokenizer and the evaluator only consult this table, so adding an
operator means registering it here.

Arithmetic follows IEEE-754 conventions: invalid operations produce NaN and
overflow produces an infinity instead of raising. The single exception is
``/`` with a zero divisor, which raises ``DivisionByZero``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from .types import DivisionByZero


@dataclass(frozen=True)
class Operator:
    """A registered operator."""

    name: str
    symbol: str
    precedence: int
    arity: int
    func: Callable[..., float]

    @property
    def is_prefix(self) -> bool:
        return self.arity == 1


def _add(a: float, b: float) -> float:
    return a + b


def _subtract(a: float, b: float) -> float:
    return a - b


def _multiply(a: float, b: float) -> float:
    return a * b


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        raise DivisionByZero("Division by zero")
    return a / b


def _modulo(a: float, b: float) -> float:
    """Truncated remainder with the sign of ``a`` (C ``fmod``)."""
    # math.fmod raises where C fmod returns NaN
    if b == 0.0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _is_odd_integer(x: float) -> bool:
    return x.is_integer() and x % 2 == 1


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        # pow(+-0, negative) is a pole; negative base with fractional exponent is NaN
        if a == 0.0:
            if _is_odd_integer(b):
                return math.copysign(math.inf, a)
            return math.inf
        return math.nan


def _square_root(a: float) -> float:
    if a < 0:
        return math.nan
    return math.sqrt(a)


def _negate(a: float) -> float:
    return -a


ADD = Operator("add", "+", 1, 2, _add)
SUBTRACT = Operator("subtract", "-", 1, 2, _subtract)
MULTIPLY = Operator("multiply", "*", 2, 2, _multiply)
DIVIDE = Operator("divide", "/", 2, 2, _divide)
MODULO = Operator("modulo", "%", 2, 2, _modulo)
POWER = Operator("power", "^", 3, 2, _power)
SQUARE_ROOT = Operator("sqrt", "s", 4, 1, _square_root)
# Produced by the tokenizer for a minus in prefix position; has no symbol of its own
NEGATE = Operator("negate", "-", 4, 1, _negate)

# Lexer symbol -> operator. "√" is an alias of "s".
OPERATORS: dict[str, Operator] = {
    "+": ADD,
    "-": SUBTRACT,
    "*": MULTIPLY,
    "/": DIVIDE,
    "%": MODULO,
    "^": POWER,
    "s": SQUARE_ROOT,
    "√": SQUARE_ROOT,
}

REGISTERED = frozenset(OPERATORS.values()) | {NEGATE}


def get_operator(symbol: str) -> Operator | None:
    """Return the operator registered for ``symbol`` or None."""
    return OPERATORS.get(symbol)


def is_registered(operator: Operator) -> bool:
    return operator in REGISTERED
