"""
Evaluation error handling for calcparse.

Author: xwest
"""

from typing import Optional, List

from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import ASTNode


class EvalError(Exception):
    """
    Exception raised when an expression tree cannot be reduced to a value.
    """

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        node: Optional[ASTNode] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.node = node
        span = getattr(node, "span", None)
        self.diagnostic = Diagnostic(
            message=message,
            location=span.start if span else None,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class DivisionByZeroError(EvalError):
    """The right operand of a division evaluated to zero."""

    code = "E001"

    def __init__(self, node: ASTNode, dividend: int):
        self.dividend = dividend
        super().__init__(
            message=f"Division by zero: {dividend} / 0",
            node=node,
            help_text="The right operand of '/' evaluated to 0."
        )


EVALUATOR_ERROR_CODES = {
    "E001": "Division by zero",
}
