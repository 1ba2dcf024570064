"""
Test suite for the calcparse printers.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calcparse.evaluator import evaluate
from calcparse.parser import BinaryOp, BinaryOperator, Literal, parse_string
from calcparse.printer import to_infix, to_sexpr


class TestInfixPrinter(unittest.TestCase):
    """Test cases for minimal-parenthesis infix output."""

    def test_minimal_parentheses(self):
        """Test that only necessary parentheses are kept."""
        cases = {
            "1": "1",
            "((1))": "1",
            "1 + 2 * 3": "1 + 2 * 3",
            "1 + (2 * 3)": "1 + 2 * 3",
            "(1 + 2) * 3": "(1 + 2) * 3",
            "(1 - 2) - 3": "1 - 2 - 3",
            "1 - (2 - 3)": "1 - (2 - 3)",
            "1 + (2 + 3)": "1 + (2 + 3)",
            "8 / (4 / 2)": "8 / (4 / 2)",
            "2 * (6 / 3)": "2 * (6 / 3)",
            "(2 * 3) / 4": "2 * 3 / 4",
            "(1+2)*(3-4)/5": "(1 + 2) * (3 - 4) / 5",
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                self.assertEqual(to_infix(parse_string(source)), expected)

    def test_negative_literal(self):
        """Test that negative literals print as a subtraction from zero."""
        tree = BinaryOp(BinaryOperator.MUL, Literal(-3), Literal(2))
        self.assertEqual(to_infix(tree), "(0 - 3) * 2")
        self.assertEqual(evaluate(parse_string(to_infix(tree))), -6)

    def test_round_trip(self):
        """Test that printing then re-parsing keeps the tree and value."""
        sources = [
            "1 + 2 * 3",
            "(1 + 2) * 3",
            "1 - 2 - 3",
            "1 - (2 - 3)",
            "100 / 10 / 5",
            "100 / (10 / 5)",
            "((7 - 3) * (2 + 8)) / (9 - 4 * 2)",
            "2 * (3 * (4 * (5 + 1)))",
            "(0 - 7) / 2 + 3",
        ]
        for source in sources:
            with self.subTest(source=source):
                tree = parse_string(source)
                reparsed = parse_string(to_infix(tree))
                self.assertEqual(reparsed, tree)
                self.assertEqual(evaluate(reparsed), evaluate(tree))

    def test_long_chain(self):
        """Test printing a left-deep chain without recursion."""
        source = " - ".join(["1"] * 3000)
        self.assertEqual(to_infix(parse_string(source)), source)


class TestSexprPrinter(unittest.TestCase):
    """Test cases for prefix debug output."""

    def test_grouping_is_explicit(self):
        self.assertEqual(to_sexpr(parse_string("1 + 2 * 3")), "(+ 1 (* 2 3))")
        self.assertEqual(to_sexpr(parse_string("1 - 2 - 3")), "(- (- 1 2) 3)")
        self.assertEqual(to_sexpr(parse_string("(5)")), "5")


if __name__ == "__main__":
    unittest.main()
