"""
calcparse Parser Package

Implements a recursive descent parser for four-operator integer
arithmetic with parentheses, producing immutable expression trees.

Key Features:
- One method per grammar rule (expr, term, factor)
- Left-associative operator chains folded iteratively
- Configurable maximum parenthesis nesting depth
- Structured parse errors with source locations

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, BinaryOp, BinaryOperator,
    Expression, Literal, SourceSpan, node_count
)
from .parser import Parser, ParseResult, parse, parse_string
from .errors import (
    ParseError, UnexpectedTokenError, UnexpectedEndOfInputError,
    UnmatchedParenError, TrailingTokensError, NestingTooDeepError
)

__all__ = [
    # Core parser
    "Parser", "ParseResult", "parse", "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Expression",
    "BinaryOp", "BinaryOperator", "Literal", "SourceSpan", "node_count",

    # Error handling
    "ParseError", "UnexpectedTokenError", "UnexpectedEndOfInputError",
    "UnmatchedParenError", "TrailingTokensError", "NestingTooDeepError",
]
