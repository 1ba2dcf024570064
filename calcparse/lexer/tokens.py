"""
Token definitions for the calcparse lexer.

This module defines the closed set of token types consumed by the parser:
- Integer literals
- The four arithmetic operators
- Parentheses
- The end-of-input sentinel

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, List, Optional, Union


class TokenType(Enum):
    """
    Enumeration of all token types in the arithmetic grammar.
    """

    # Special tokens
    EOF = auto()                    # End of input (sentinel, exactly one per stream)

    # Literals
    INTEGER = auto()                # 42

    # Operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /

    # Grouping
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting and debugging information.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), semantic value and an
    optional source location. Tokens built by hand (without a lexer) may
    leave the location unset.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any = None               # int for INTEGER, None otherwise
    location: Optional[SourceLocation] = None

    def __post_init__(self):
        if self.type == TokenType.INTEGER and (
                isinstance(self.value, bool) or not isinstance(self.value, int)):
            raise ValueError(f"INTEGER token {self.lexeme!r} needs an int value, got {self.value!r}")

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return "EOF"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_operator(self) -> bool:
        """Check if this token is a binary operator."""
        return self.type in OPERATOR_TYPES

    @classmethod
    def integer(cls, value: int, location: Optional[SourceLocation] = None) -> "Token":
        """Build an INTEGER token."""
        return cls(TokenType.INTEGER, str(value), value, location)

    @classmethod
    def symbol(cls, token_type: TokenType, location: Optional[SourceLocation] = None) -> "Token":
        """Build an operator or parenthesis token from its type."""
        if token_type not in SYMBOL_TEXT:
            raise ValueError(f"{token_type.name} is not a symbol token type")
        return cls(token_type, SYMBOL_TEXT[token_type], None, location)

    @classmethod
    def eof(cls, location: Optional[SourceLocation] = None) -> "Token":
        """Build the end-of-input sentinel."""
        return cls(TokenType.EOF, "", None, location)


# Lookup tables for token recognition

OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

SYMBOL_TEXT = {token_type: text for text, token_type in OPERATORS.items()}

OPERATOR_TYPES = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY, TokenType.DIVIDE,
})


def make_tokens(*items: Union[int, str, TokenType, Token]) -> List[Token]:
    """
    Build a token stream without going through the lexer.

    Integers become INTEGER tokens, operator strings and token types become
    symbol tokens, and Token instances pass through. A single EOF sentinel
    is appended.

    Example:
        make_tokens(1, "+", 2, "*", 3)
    """
    tokens = []
    for item in items:
        if isinstance(item, Token):
            tokens.append(item)
        elif isinstance(item, bool):
            raise TypeError("booleans are not integer tokens")
        elif isinstance(item, int):
            tokens.append(Token.integer(item))
        elif isinstance(item, TokenType):
            tokens.append(Token.symbol(item))
        elif isinstance(item, str) and item in OPERATORS:
            tokens.append(Token.symbol(OPERATORS[item]))
        else:
            raise ValueError(f"Cannot build a token from {item!r}")
    tokens.append(Token.eof())
    return tokens
