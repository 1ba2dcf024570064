"""
calcparse

A recursive descent parser for integer arithmetic with the four basic
operators and parentheses, plus a companion evaluator and printer.

Architecture:
    calcparse/
    ├── lexer/           # Tokenization (text -> token stream)
    ├── parser/          # Syntax analysis and expression trees
    ├── evaluator/       # Tree reduction to integers
    ├── printer/         # Tree serialization back to text
    └── config.py        # Parser and evaluator settings

Author: xwest
License: MIT
"""

import logging

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@calcparse.org"
__license__ = "MIT"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import ParserConfig, EvaluatorConfig, DivisionMode
from .lexer import Lexer, Token, TokenType, make_tokens, tokenize_string, LexerError
from .parser import (
    Parser, ParseResult, parse, parse_string,
    Expression, Literal, BinaryOp, BinaryOperator,
    ParseError, UnexpectedTokenError, UnexpectedEndOfInputError,
    UnmatchedParenError, TrailingTokensError, NestingTooDeepError,
)
from .evaluator import Evaluator, evaluate, EvalError, DivisionByZeroError
from .printer import to_infix, to_sexpr

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Evaluator",

    # Functions
    "make_tokens", "tokenize_string", "parse", "parse_string",
    "evaluate", "to_infix", "to_sexpr",

    # Data model
    "Token", "TokenType", "ParseResult",
    "Expression", "Literal", "BinaryOp", "BinaryOperator",

    # Configuration
    "ParserConfig", "EvaluatorConfig", "DivisionMode",

    # Errors
    "LexerError", "ParseError", "UnexpectedTokenError",
    "UnexpectedEndOfInputError", "UnmatchedParenError",
    "TrailingTokensError", "NestingTooDeepError",
    "EvalError", "DivisionByZeroError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
