"""
calcparse Lexer Package

Tokenizer for the arithmetic grammar. The parser consumes the token stream
it produces but does not depend on it; token lists may equally be built by
hand with make_tokens().

Key Features:
- Decimal integer literals and the operators + - * / ( )
- Source location tracking for diagnostics
- Error collection for invalid characters

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, make_tokens
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "make_tokens",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
]
