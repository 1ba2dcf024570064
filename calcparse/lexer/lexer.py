"""
calcparse Lexer - turns arithmetic source text into a token stream.

The parser itself never sees raw text; this lexer exists so callers (and
the test suite) can go from a string to a token list ending in exactly one
EOF sentinel.

xwest
"""

import re
from typing import List, Optional

from .tokens import Token, TokenType, SourceLocation, OPERATORS
from .errors import LexerError, create_invalid_character_error


class Lexer:
    """
    Arithmetic lexical analyzer.

    Converts source text into tokens, tracking line and column for every
    token. Invalid characters are collected as errors and skipped so that
    all of them can be reported in one pass.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source text.

        Args:
            source: Source text
            filename: Name used in source locations
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        self.decimal_pattern = re.compile(r'\d+')
        self.whitespace_pattern = re.compile(r'[ \t\r\n]+')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens including the EOF token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens.clear()
        self.errors.clear()

        while self.pos < len(self.source):
            try:
                self._skip_whitespace()

                if self.pos >= len(self.source):
                    break

                self.tokens.append(self._next_token())

            except LexerError as e:
                self.errors.append(e)
                # Recover by skipping the problematic character
                self._advance()

        self.tokens.append(Token.eof(self._location()))

        return self.tokens

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        location = self._location()
        char = self.source[self.pos]

        match = self.decimal_pattern.match(self.source, self.pos)
        if match:
            lexeme = match.group()
            self._advance_by(len(lexeme))
            return Token(TokenType.INTEGER, lexeme, int(lexeme), location)

        token_type = OPERATORS.get(char)
        if token_type is not None:
            self._advance()
            return Token(token_type, char, None, location)

        raise create_invalid_character_error(char, location)

    def _skip_whitespace(self):
        match = self.whitespace_pattern.match(self.source, self.pos)
        if match:
            self._advance_by(len(match.group()))

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source text
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str, encoding: Optional[str] = 'utf-8') -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding=encoding) as f:
        source = f.read()

    return tokenize_string(source, filepath)
