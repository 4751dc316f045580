"""Unit tests for the tokenizer."""

import unittest

from calculator_pkg.operators import ADD, NEGATE, SQUARE_ROOT, SUBTRACT
from calculator_pkg.tokenizer import clear_caches, tokenize
from calculator_pkg.types import (
    CloseParenToken,
    LexErrorToken,
    NumberToken,
    OpenParenToken,
    OperatorToken,
)


class TestTokenize(unittest.TestCase):
    """Test splitting text into tokens."""

    def test_simple_binary(self):
        self.assertEqual(
            tokenize("5 + 3"),
            (NumberToken("5"), OperatorToken(ADD), NumberToken("3")),
        )

    def test_no_whitespace_needed(self):
        self.assertEqual(
            tokenize("12.5-3"),
            (NumberToken("12.5"), OperatorToken(SUBTRACT), NumberToken("3")),
        )

    def test_parentheses(self):
        tokens = tokenize("(1)")
        self.assertEqual(
            tokens, (OpenParenToken(), NumberToken("1"), CloseParenToken())
        )

    def test_whitespace_splits_literals(self):
        self.assertEqual(tokenize("1 2"), (NumberToken("1"), NumberToken("2")))

    def test_empty_input(self):
        self.assertEqual(tokenize(""), ())
        self.assertEqual(tokenize("   "), ())

    def test_square_root_symbols(self):
        self.assertEqual(tokenize("s9"), (OperatorToken(SQUARE_ROOT), NumberToken("9")))
        self.assertEqual(tokenize("√9"), (OperatorToken(SQUARE_ROOT), NumberToken("9")))

    def test_consecutive_operators_are_kept(self):
        tokens = tokenize("+*")
        self.assertEqual(len(tokens), 2)
        self.assertTrue(all(isinstance(t, OperatorToken) for t in tokens))


class TestMinusDisambiguation(unittest.TestCase):
    """A minus is negation at the start, after an operator or after '('."""

    def test_leading_minus(self):
        self.assertEqual(tokenize("-5")[0], OperatorToken(NEGATE))

    def test_leading_minus_after_whitespace(self):
        self.assertEqual(tokenize("  -5")[0], OperatorToken(NEGATE))

    def test_minus_after_operator(self):
        self.assertEqual(
            tokenize("3 * -2")[2:],
            (OperatorToken(NEGATE), NumberToken("2")),
        )

    def test_minus_after_power(self):
        self.assertEqual(tokenize("2^-1")[2], OperatorToken(NEGATE))

    def test_minus_after_open_paren(self):
        self.assertEqual(tokenize("(-1)")[1], OperatorToken(NEGATE))

    def test_minus_after_square_root(self):
        self.assertEqual(tokenize("s -4")[1], OperatorToken(NEGATE))

    def test_minus_after_number_is_binary(self):
        self.assertEqual(tokenize("5 -3")[1], OperatorToken(SUBTRACT))

    def test_minus_after_close_paren_is_binary(self):
        self.assertEqual(tokenize("(5) - 3")[3], OperatorToken(SUBTRACT))

    def test_double_minus(self):
        self.assertEqual(
            tokenize("5 - -3"),
            (
                NumberToken("5"),
                OperatorToken(SUBTRACT),
                OperatorToken(NEGATE),
                NumberToken("3"),
            ),
        )


class TestLexicalErrors(unittest.TestCase):
    """Test rejection of characters outside the alphabet."""

    def test_letter_is_rejected(self):
        tokens = tokenize("abc + 3")
        self.assertEqual(len(tokens), 1)
        self.assertIsInstance(tokens[0], LexErrorToken)
        self.assertEqual(tokens[0].char, "a")
        self.assertIn("'a'", tokens[0].message)

    def test_no_partial_sequence(self):
        tokens = tokenize("1 + 2 = 3")
        self.assertEqual(tokens, (LexErrorToken("Invalid character '='", "="),))

    def test_unsupported_symbols(self):
        self.assertEqual(len(tokenize("2 ** 3")), 4)
        self.assertIsInstance(tokenize("2 & 3")[0], LexErrorToken)


class TestPurity(unittest.TestCase):
    def test_same_text_same_tokens(self):
        first = tokenize("(1 + 2) * -3")
        clear_caches()
        second = tokenize("(1 + 2) * -3")
        self.assertEqual(first, second)

    def test_tokens_are_immutable(self):
        token = tokenize("7")[0]
        with self.assertRaises(AttributeError):
            token.text = "8"


if __name__ == "__main__":
    unittest.main()
