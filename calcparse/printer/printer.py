"""
Expression tree printers.

to_infix() renders the minimal parentheses needed for the text to parse
back into the same tree; to_sexpr() renders a fully parenthesized prefix
form that is handy when debugging grouping.

Author: xwest
"""

from typing import List, Tuple

from ..parser.ast_nodes import ASTNode, BinaryOp, Literal

# Precedence given to text that never needs wrapping
ATOMIC = 100


def _literal_text(node: Literal) -> str:
    # The grammar has no unary minus
    if node.value < 0:
        return f"(0 - {-node.value})"
    return str(node.value)


def to_infix(node: ASTNode) -> str:
    """
    Render an expression tree as infix text with minimal parentheses.

    Operators are left-associative, so a left operand is wrapped only when
    it binds looser than its parent and a right operand when it binds
    looser or equally: (1 - 2) - 3 prints as 1 - 2 - 3, while 1 - (2 - 3)
    keeps its parentheses.
    """
    rendered: List[Tuple[str, int]] = []

    for current in node.walk():
        if isinstance(current, Literal):
            rendered.append((_literal_text(current), ATOMIC))
        elif isinstance(current, BinaryOp):
            right, right_prec = rendered.pop()
            left, left_prec = rendered.pop()
            prec = current.operator.precedence
            if left_prec < prec:
                left = f"({left})"
            if right_prec <= prec:
                right = f"({right})"
            rendered.append((f"{left} {current.operator.symbol} {right}", prec))
        else:
            raise TypeError(f"Cannot print {type(current).__name__}")

    return rendered.pop()[0]


def to_sexpr(node: ASTNode) -> str:
    """Render an expression tree as a prefix s-expression, e.g. (+ 1 (* 2 3))."""
    rendered: List[str] = []

    for current in node.walk():
        if isinstance(current, Literal):
            rendered.append(str(current.value))
        elif isinstance(current, BinaryOp):
            right = rendered.pop()
            left = rendered.pop()
            rendered.append(f"({current.operator.symbol} {left} {right})")
        else:
            raise TypeError(f"Cannot print {type(current).__name__}")

    return rendered.pop()
