"""Tokenizer: raw expression text to a tuple of tokens.

The tokenizer is total. An unrecognised character does not raise; it turns
the whole result into a single ``LexErrorToken`` which the evaluator reports.
"""

from __future__ import annotations

from functools import lru_cache

from .config import CACHE_SIZE_TOKENIZE
from .operators import NEGATE, get_operator
from .types import (
    CloseParenToken,
    LexErrorToken,
    NumberToken,
    OpenParenToken,
    OperatorToken,
    Token,
)

NUMBER_CHARS = frozenset("0123456789.")


def _is_prefix_minus_position(previous: str | None) -> bool:
    """A minus is unary at the start of input or right after an operator or '('."""
    if previous is None:
        return True
    return previous == "(" or get_operator(previous) is not None


@lru_cache(maxsize=CACHE_SIZE_TOKENIZE)
def tokenize(text: str) -> tuple[Token, ...]:
    """Split ``text`` into tokens in a single left-to-right pass.

    Args:
        text: Expression such as ``"(5 + 3) * -2"``

    Returns:
        Tuple of tokens, or a one-element tuple holding a ``LexErrorToken``
        when ``text`` contains a character outside the alphabet.
    """
    tokens: list[Token] = []
    current: list[str] = []
    previous: str | None = None  # last non-whitespace character

    def flush() -> None:
        if current:
            tokens.append(NumberToken("".join(current)))
            current.clear()

    for ch in text:
        if ch in NUMBER_CHARS:
            current.append(ch)
        elif ch.isspace():
            flush()
            continue
        elif ch == "(":
            flush()
            tokens.append(OpenParenToken())
        elif ch == ")":
            flush()
            tokens.append(CloseParenToken())
        elif ch == "-" and _is_prefix_minus_position(previous):
            flush()
            tokens.append(OperatorToken(NEGATE))
        else:
            operator = get_operator(ch)
            if operator is None:
                return (LexErrorToken(f"Invalid character '{ch}'", ch),)
            flush()
            tokens.append(OperatorToken(operator))
        previous = ch

    flush()
    return tuple(tokens)


def clear_caches() -> None:
    """Drop memoised token sequences."""
    tokenize.cache_clear()
