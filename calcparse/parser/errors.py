"""
Error handling for the calcparse parser.

Every parse error is terminal for the current parse: there is no
backtracking and no recovery. Each error carries a Diagnostic with the
offending token's location, an error code and help text.

Author: xwest
"""

from typing import FrozenSet, Iterable, List, Optional, Sequence

from ..lexer.tokens import Token, TokenType, SourceLocation, SYMBOL_TEXT
from ..lexer.errors import Diagnostic


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P010": "Unexpected end of input",
    "P012": "Mismatched parentheses",
    "P013": "Trailing tokens after expression",
    "P014": "Parentheses nested too deeply",
}


def describe_token_type(token_type: TokenType) -> str:
    """Human readable name of a token kind."""
    if token_type == TokenType.INTEGER:
        return "integer"
    if token_type == TokenType.EOF:
        return "end of input"
    return f"'{SYMBOL_TEXT[token_type]}'"


def describe_token(token: Token) -> str:
    if token.type == TokenType.INTEGER:
        return f"integer {token.value}"
    return describe_token_type(token.type)


def _describe_expected(expected: Iterable[TokenType]) -> str:
    names = sorted(describe_token_type(t) for t in expected)
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + f" or {names[-1]}"


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        token: Optional[Token] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnexpectedTokenError(ParseError):
    """A rule's leading token matches none of the alternatives it recognizes."""

    code = "P001"

    def __init__(self, found: Token, expected: Iterable[TokenType]):
        self.found = found
        self.expected: FrozenSet[TokenType] = frozenset(expected)
        expected_str = _describe_expected(self.expected)
        super().__init__(
            message=f"Expected {expected_str}, found {describe_token(found)}",
            location=found.location,
            token=found,
            help_text=f"The parser expected to see {expected_str} at this position.",
            suggestions=_operand_suggestions(found)
        )


class UnexpectedEndOfInputError(UnexpectedTokenError):
    """An UnexpectedTokenError whose offending token is the EOF sentinel."""

    code = "P010"

    def __init__(self, found: Token, expected: Iterable[TokenType]):
        super().__init__(found, expected)
        expected_str = _describe_expected(self.expected)
        self.message = f"Unexpected end of input, expected {expected_str}"
        self.args = (self.message,)
        self.diagnostic.message = self.message
        self.diagnostic.help_text = f"The input ended while expecting {expected_str}."
        self.diagnostic.suggestions = [f"Add the missing {expected_str}",
                                       "Check for a trailing operator"]


class UnmatchedParenError(ParseError):
    """A parenthesized expression is not followed by ')'."""

    code = "P012"

    def __init__(self, open_token: Token, found: Token):
        self.open_token = open_token
        self.found = found
        opened_at = f" opened at {open_token.location}" if open_token.location else ""
        super().__init__(
            message=f"Expected ')' to close '('{opened_at}, found {describe_token(found)}",
            location=found.location,
            token=found,
            help_text="Every '(' must be matched by a ')' after the inner expression.",
            suggestions=["Add a closing parenthesis ')'"]
        )


class TrailingTokensError(ParseError):
    """A complete expression was parsed but input remains before EOF."""

    code = "P013"

    def __init__(self, remaining: Sequence[Token]):
        self.remaining: List[Token] = list(remaining)
        first = self.remaining[0]
        super().__init__(
            message=f"Unexpected {describe_token(first)} after complete expression",
            location=first.location,
            token=first,
            help_text=f"{_count_before_eof(self.remaining)} token(s) remain after the expression ends.",
            suggestions=["Insert an operator between operands",
                         "Remove the unmatched ')'" if first.type == TokenType.RIGHT_PAREN
                         else "Remove the extra tokens"]
        )


class NestingTooDeepError(ParseError):
    """More parentheses are open at once than the configured maximum."""

    code = "P014"

    def __init__(self, depth: int, limit: int, token: Token):
        self.depth = depth
        self.limit = limit
        super().__init__(
            message=f"Parentheses nested {depth} deep, maximum is {limit}",
            location=token.location,
            token=token,
            help_text="Raise ParserConfig.max_nesting_depth or simplify the expression."
        )


def _count_before_eof(tokens: Sequence[Token]) -> int:
    return sum(1 for token in tokens if token.type != TokenType.EOF)


def _operand_suggestions(found: Token) -> List[str]:
    if found.type == TokenType.RIGHT_PAREN:
        return ["Put an expression inside the parentheses"]
    if found.is_operator:
        return ["Ensure all operators have operands",
                "Negative numbers must be written as (0 - n)"]
    return []
