"""
Test suite for the calcparse evaluator.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calcparse.config import DivisionMode, EvaluatorConfig
from calcparse.evaluator import Evaluator, evaluate, EvalError, DivisionByZeroError
from calcparse.parser import BinaryOp, BinaryOperator, Literal, parse_string


class TestEvaluator(unittest.TestCase):
    """Test cases for tree evaluation."""

    def _eval(self, source: str, config=None) -> int:
        return evaluate(parse_string(source), config)

    def test_literal(self):
        self.assertEqual(evaluate(Literal(42)), 42)

    def test_basic_operators(self):
        """Test each operator on its own."""
        self.assertEqual(self._eval("6 + 3"), 9)
        self.assertEqual(self._eval("6 - 3"), 3)
        self.assertEqual(self._eval("6 * 3"), 18)
        self.assertEqual(self._eval("6 / 3"), 2)

    def test_precedence(self):
        """Test that 1 + 2 * 3 is 7, not 9."""
        self.assertEqual(self._eval("1 + 2 * 3"), 7)

    def test_parentheses(self):
        """Test that (1 + 2) * 3 is 9."""
        self.assertEqual(self._eval("(1 + 2) * 3"), 9)

    def test_subtraction_associativity(self):
        """Test that 1 - 2 - 3 is -4, not 2."""
        self.assertEqual(self._eval("1 - 2 - 3"), -4)

    def test_division_associativity(self):
        """Test that 100 / 10 / 5 is 2, not 50."""
        self.assertEqual(self._eval("100 / 10 / 5"), 2)

    def test_truncating_division(self):
        """Test that the default division rounds toward zero."""
        self.assertEqual(self._eval("7 / 2"), 3)
        self.assertEqual(self._eval("(0 - 7) / 2"), -3)
        self.assertEqual(self._eval("7 / (0 - 2)"), -3)
        self.assertEqual(self._eval("(0 - 7) / (0 - 2)"), 3)

    def test_floor_division(self):
        """Test the floor division mode."""
        config = EvaluatorConfig(division_mode=DivisionMode.FLOOR)
        self.assertEqual(self._eval("7 / 2", config), 3)
        self.assertEqual(self._eval("(0 - 7) / 2", config), -4)
        self.assertEqual(self._eval("7 / (0 - 2)", config), -4)

    def test_large_integers(self):
        """Test that values are not limited to machine words."""
        self.assertEqual(self._eval("99999999999 * 99999999999"), 99999999999 ** 2)

    def test_division_by_zero(self):
        """Test that 1 / 0 raises DivisionByZeroError."""
        tree = parse_string("1 / 0")

        with self.assertRaises(DivisionByZeroError) as ctx:
            evaluate(tree)

        error = ctx.exception
        self.assertIsInstance(error, EvalError)
        self.assertIs(error.node, tree)
        self.assertEqual(error.dividend, 1)
        self.assertEqual(error.diagnostic.code, "E001")
        self.assertIn("<string>:1:1", str(error))

    def test_division_by_computed_zero(self):
        """Test that a right operand evaluating to 0 is caught."""
        with self.assertRaises(DivisionByZeroError) as ctx:
            self._eval("2 + 5 / (3 - 3)")
        self.assertEqual(ctx.exception.dividend, 5)

    def test_zero_dividend_is_fine(self):
        self.assertEqual(self._eval("0 / 5"), 0)

    def test_hand_built_tree(self):
        """Test evaluation of trees built without the parser."""
        tree = BinaryOp(
            BinaryOperator.MUL,
            Literal(-3),
            BinaryOp(BinaryOperator.ADD, Literal(2), Literal(5)),
        )
        self.assertEqual(evaluate(tree), -21)

    def test_visitor_entry_point(self):
        """Test that accept() dispatches to the evaluator."""
        tree = parse_string("2 * (3 + 4)")
        self.assertEqual(tree.accept(Evaluator()), 14)

    def test_long_chain(self):
        """Test that a left-deep chain evaluates without recursion."""
        source = " + ".join(["1"] * 5000)
        self.assertEqual(self._eval(source), 5000)

    def test_invalid_config(self):
        with self.assertRaises(ValueError):
            EvaluatorConfig(division_mode="floor")


if __name__ == "__main__":
    unittest.main()
