"""
Expression tree evaluator.

Reduces a parsed expression tree to an integer. Traversal is a post-order
walk over an explicit stack, so long operator chains (which the parser
folds into left-deep trees) evaluate without deep recursion.

Author: xwest
"""

import logging
from typing import Any, List, Optional

from ..config import DivisionMode, EvaluatorConfig
from ..parser.ast_nodes import ASTNode, ASTVisitor, BinaryOp, BinaryOperator, Literal
from .errors import DivisionByZeroError

logger = logging.getLogger(__name__)


class Evaluator(ASTVisitor):
    """Evaluates expression trees to integers."""

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self.config = config or EvaluatorConfig()

    def evaluate(self, node: ASTNode) -> int:
        """
        Evaluate an expression tree.

        Raises:
            DivisionByZeroError: If a division's right operand is 0
        """
        result = node.accept(self)
        logger.debug("Evaluated %s node to %d", node.node_type.value, result)
        return result

    def visit(self, node: ASTNode) -> Any:
        values: List[int] = []

        for current in node.walk():
            if isinstance(current, Literal):
                values.append(current.value)
            elif isinstance(current, BinaryOp):
                right = values.pop()
                left = values.pop()
                values.append(self._apply(current, left, right))
            else:
                raise TypeError(f"Cannot evaluate {type(current).__name__}")

        return values.pop()

    def _apply(self, node: BinaryOp, left: int, right: int) -> int:
        operator = node.operator
        if operator == BinaryOperator.ADD:
            return left + right
        elif operator == BinaryOperator.SUB:
            return left - right
        elif operator == BinaryOperator.MUL:
            return left * right
        elif operator == BinaryOperator.DIV:
            if right == 0:
                raise DivisionByZeroError(node, left)
            return self._divide(left, right)
        raise ValueError(f"Unknown operator {operator!r}")

    def _divide(self, left: int, right: int) -> int:
        if self.config.division_mode == DivisionMode.FLOOR:
            return left // right
        # Round toward zero
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(node: ASTNode, config: Optional[EvaluatorConfig] = None) -> int:
    """
    Convenience function to evaluate an expression tree.

    Raises:
        DivisionByZeroError: If a division's right operand is 0
    """
    return Evaluator(config).evaluate(node)
