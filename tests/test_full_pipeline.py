"""
End-to-end tests for calcparse.

Tests the full pipeline from source text through tokens and tree to an
evaluated result, using only the top-level package API.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import calcparse
from calcparse import (
    ParserConfig, tokenize_string, parse, parse_string, evaluate, to_infix,
    ParseError, UnexpectedTokenError, UnmatchedParenError, TrailingTokensError,
    NestingTooDeepError, DivisionByZeroError, LexerError,
)


class TestFullPipeline(unittest.TestCase):
    """Test the full text-to-value pipeline."""

    def _run(self, source: str) -> int:
        tokens = tokenize_string(source)
        tree = parse(tokens)
        return evaluate(tree)

    def test_well_formed_expressions(self):
        """Test that well-formed inputs parse completely and evaluate."""
        cases = {
            "42": 42,
            "1 + 2 * 3": 7,
            "(1 + 2) * 3": 9,
            "1 - 2 - 3": -4,
            "12 / 3 / 2": 2,
            "2 * (3 + 4) - 10 / 5": 12,
            "((((((1 + 1))))))": 2,
            "(8 - 2) / (1 + 2) * 5": 10,
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                self.assertEqual(self._run(source), expected)

    def test_round_trip_value(self):
        """Test that printed trees re-evaluate to the original value."""
        for source in ["1 + 2 * 3", "(1 + 2) * 3", "1 - (2 - 3)", "(9 - 1) / (1 + 1) / 2"]:
            with self.subTest(source=source):
                tree = parse_string(source)
                self.assertEqual(evaluate(parse_string(to_infix(tree))), evaluate(tree))

    def test_error_cases(self):
        """Test the error kind reported for each malformed input."""
        cases = {
            "1 + ": UnexpectedTokenError,
            "(1 + 2": UnmatchedParenError,
            "1 2": TrailingTokensError,
            "": UnexpectedTokenError,
            ")": UnexpectedTokenError,
            "1 + 2)": TrailingTokensError,
        }
        for source, error_type in cases.items():
            with self.subTest(source=source):
                with self.assertRaises(error_type):
                    parse_string(source)

    def test_all_parse_errors_share_a_base(self):
        for source in ["1 +", "(1", "1 1"]:
            with self.subTest(source=source):
                with self.assertRaises(ParseError):
                    parse_string(source)

    def test_lexer_errors_surface_before_parsing(self):
        with self.assertRaises(LexerError):
            parse_string("1 + x")

    def test_division_by_zero(self):
        """Test that 1 / 0 fails instead of returning a value."""
        with self.assertRaises(DivisionByZeroError):
            self._run("1 / 0")

    def test_deep_nesting(self):
        """Test nesting at and beyond a configured limit."""
        config = ParserConfig(max_nesting_depth=40)

        for depth in (1, 20, 40):
            with self.subTest(depth=depth):
                source = "(" * depth + "3" + ")" * depth
                self.assertEqual(evaluate(parse_string(source, config=config)), 3)

        with self.assertRaises(NestingTooDeepError):
            parse_string("(" * 41 + "3" + ")" * 41, config=config)

    def test_package_metadata(self):
        self.assertEqual(calcparse.__version__, "0.1.0")
        for name in calcparse.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(calcparse, name))


if __name__ == "__main__":
    unittest.main()
