"""Test error codes returned for each kind of failure."""

import unittest

from calculator_pkg.api import evaluate
from calculator_pkg.evaluator import evaluate_expression
from calculator_pkg.types import CalculatorError, MissingOperand


class TestErrorCodes(unittest.TestCase):
    """Test that every failure maps to one code of the closed taxonomy."""

    CASES = {
        "abc + 3": "LEXICAL_ERROR",
        "1.2.3": "INVALID_NUMBER",
        "5 +": "MISSING_OPERAND",
        "10 / 0": "DIVISION_BY_ZERO",
        "": "INCORRECT_INPUT",
        "5 3": "INCORRECT_INPUT",
        "(5 + 3": "UNBALANCED_PARENTHESES",
        "5 + 3)": "UNBALANCED_PARENTHESES",
    }

    def test_api_error_codes(self):
        for expression, code in self.CASES.items():
            with self.subTest(expression=expression):
                result = evaluate(expression)
                self.assertFalse(result.ok)
                self.assertEqual(result.error_code, code)
                self.assertTrue(result.error)

    def test_exceptions_share_base_class(self):
        for expression, code in self.CASES.items():
            with self.subTest(expression=expression):
                with self.assertRaises(CalculatorError) as ctx:
                    evaluate_expression(expression)
                self.assertEqual(ctx.exception.code, code)
                self.assertEqual(str(ctx.exception), ctx.exception.message)

    def test_lexical_error_names_character(self):
        result = evaluate("2 + 2 = 4")
        self.assertEqual(result.error, "Invalid character '='")

    def test_explicit_code_overrides_default(self):
        err = MissingOperand("custom", code="CUSTOM")
        self.assertEqual(err.code, "CUSTOM")


if __name__ == "__main__":
    unittest.main()
