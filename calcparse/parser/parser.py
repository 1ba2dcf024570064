"""
calcparse Recursive Descent Parser

One method per grammar rule:

    expr   : term   ((PLUS | MINUS)       term)*
    term   : factor ((MULTIPLY | DIVIDE)  factor)*
    factor : INTEGER | LEFT_PAREN expr RIGHT_PAREN

Same-precedence operator chains are folded iteratively into left-deep
trees, so only parenthesis nesting grows the call stack. Every path from
expr back into expr consumes a '(' first, which is what keeps the mutual
recursion finite.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config import ParserConfig
from ..lexer.tokens import Token, TokenType
from .ast_nodes import BinaryOp, BinaryOperator, Expression, Literal, SourceSpan
from .errors import (
    ParseError, UnexpectedTokenError, UnexpectedEndOfInputError,
    UnmatchedParenError, TrailingTokensError, NestingTooDeepError
)

logger = logging.getLogger(__name__)


# Tokens that can start a factor
FACTOR_START = frozenset({TokenType.INTEGER, TokenType.LEFT_PAREN})

# Operators folded by each precedence level
TERM_OPERATORS = frozenset({TokenType.MULTIPLY, TokenType.DIVIDE})
EXPR_OPERATORS = frozenset({TokenType.PLUS, TokenType.MINUS})


@dataclass(frozen=True)
class ParseResult:
    """A parsed node plus the position of the first unconsumed token."""
    node: Expression
    position: int
    tokens: Sequence[Token]

    @property
    def remaining(self) -> List[Token]:
        """The unconsumed suffix of the stream, always ending in EOF."""
        return list(self.tokens[self.position:])

    @property
    def is_complete(self) -> bool:
        """True when only the EOF sentinel is left."""
        return self.tokens[self.position].type == TokenType.EOF


class Parser:
    """
    Recursive descent parser for integer arithmetic.

    The parser threads a cursor (self.current) through the rule methods
    instead of slicing the token list; each rule advances it past what it
    consumed.
    """

    def __init__(self, tokens: Sequence[Token], config: Optional[ParserConfig] = None):
        """
        Initialize parser with a token stream.

        Args:
            tokens: Tokens ending in exactly one EOF token
            config: Parser limits, defaults to ParserConfig()

        Raises:
            ValueError: If the stream is not terminated by exactly one EOF
        """
        _validate_stream(tokens)
        self.tokens = tokens
        self.config = config or ParserConfig()
        self.current = 0
        self.depth = 0

    def parse(self) -> Expression:
        """
        Parse the whole token stream into an expression tree.

        Returns:
            The root Expression node

        Raises:
            ParseError: If the tokens do not form exactly one expression
        """
        result = self.parse_partial()
        if not result.is_complete:
            error = TrailingTokensError(result.remaining)
            logger.debug("Parse failed: %s", error.message)
            raise error

        logger.debug("Parsed %d tokens", len(self.tokens))
        return result.node

    def parse_partial(self) -> ParseResult:
        """
        Parse one expression from the start of the stream, leaving any
        trailing tokens unconsumed.

        Raises:
            ParseError: If no expression can be parsed at the start
        """
        self.current = 0
        self.depth = 0
        try:
            node = self._parse_expr()
        except RecursionError:
            # The recursion limit was lowered after the config was validated
            error = NestingTooDeepError(self.depth, self.config.max_nesting_depth,
                                        self.tokens[self.current])
            logger.debug("Parse failed: %s", error.message)
            raise error from None
        except ParseError as e:
            logger.debug("Parse failed: %s", e.message)
            raise
        return ParseResult(node, self.current, self.tokens)

    # Grammar rules

    def _parse_expr(self) -> Expression:
        """expr : term ((PLUS | MINUS) term)*"""
        left = self._parse_term()

        while self._peek().type in EXPR_OPERATORS:
            operator = BinaryOperator.from_token_type(self._advance().type)
            right = self._parse_term()
            left = BinaryOp(operator, left, right, _join(left, right))

        return left

    def _parse_term(self) -> Expression:
        """term : factor ((MULTIPLY | DIVIDE) factor)*"""
        left = self._parse_factor()

        while self._peek().type in TERM_OPERATORS:
            operator = BinaryOperator.from_token_type(self._advance().type)
            right = self._parse_factor()
            left = BinaryOp(operator, left, right, _join(left, right))

        return left

    def _parse_factor(self) -> Expression:
        """factor : INTEGER | LEFT_PAREN expr RIGHT_PAREN"""
        token = self._peek()

        if token.type == TokenType.INTEGER:
            self._advance()
            return Literal(token.value, SourceSpan(token.location, token.location))

        if token.type == TokenType.LEFT_PAREN:
            return self._parse_grouping()

        if token.type == TokenType.EOF:
            raise UnexpectedEndOfInputError(token, FACTOR_START)
        raise UnexpectedTokenError(token, FACTOR_START)

    def _parse_grouping(self) -> Expression:
        """Parse a parenthesized expression; no node is made for the parens."""
        open_token = self._advance()  # Consume (

        if self.depth >= self.config.max_nesting_depth:
            raise NestingTooDeepError(self.depth + 1, self.config.max_nesting_depth, open_token)

        self.depth += 1
        expr = self._parse_expr()
        self.depth -= 1

        if self._peek().type != TokenType.RIGHT_PAREN:
            raise UnmatchedParenError(open_token, self._peek())
        self._advance()  # Consume )

        return expr

    # Utility methods

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]

    def _advance(self) -> Token:
        """Consume and return the current token; never moves past EOF."""
        token = self.tokens[self.current]
        if token.type != TokenType.EOF:
            self.current += 1
        return token


def _validate_stream(tokens: Sequence[Token]):
    """Check that EOF appears exactly once, as the last token."""
    if not tokens:
        raise ValueError("Token stream is empty; it must end with an EOF token")
    if tokens[-1].type != TokenType.EOF:
        raise ValueError(f"Token stream must end with EOF, last token is {tokens[-1]}")
    for index, token in enumerate(tokens[:-1]):
        if token.type == TokenType.EOF:
            raise ValueError(f"EOF token at position {index} before the end of the stream")


def _join(left: Expression, right: Expression) -> Optional[SourceSpan]:
    start = left.span.start if left.span else None
    end = right.span.end if right.span else None
    return SourceSpan(start, end)


def parse(tokens: Sequence[Token], config: Optional[ParserConfig] = None) -> Expression:
    """
    Parse a token stream into an expression tree.

    Raises:
        ParseError: If parsing fails
        ValueError: If the stream is not terminated by exactly one EOF
    """
    return Parser(tokens, config).parse()


def parse_string(source: str, filename: str = "<string>",
                 config: Optional[ParserConfig] = None) -> Expression:
    """
    Convenience function to tokenize and parse a source string.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    return Parser(tokens, config).parse()
