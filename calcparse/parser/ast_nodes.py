"""
Abstract Syntax Tree node definitions for calcparse.

The expression tree is a tagged variant of two node kinds: integer
literals and binary operations. Each BinaryOp exclusively owns its two
children; nodes keep no parent references, so the tree is acyclic and
can be shared or discarded freely. Nodes are immutable and compare
structurally (source spans are ignored by equality).

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from ..lexer.tokens import SourceLocation, TokenType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    BINARY_OP = "BinaryOp"


class BinaryOperator(Enum):
    """The four arithmetic operators, valued by their source text."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        """Binding strength; higher binds tighter."""
        return OPERATOR_PRECEDENCE[self]

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> "BinaryOperator":
        try:
            return TOKEN_OPERATORS[token_type]
        except KeyError:
            raise ValueError(f"{token_type.name} is not a binary operator token") from None


OPERATOR_PRECEDENCE: Dict[BinaryOperator, int] = {
    BinaryOperator.ADD: 1,
    BinaryOperator.SUB: 1,
    BinaryOperator.MUL: 2,
    BinaryOperator.DIV: 2,
}

TOKEN_OPERATORS: Dict[TokenType, BinaryOperator] = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.MULTIPLY: BinaryOperator.MUL,
    TokenType.DIVIDE: BinaryOperator.DIV,
}


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source text (start and end locations)."""
    start: Optional[SourceLocation]
    end: Optional[SourceLocation]

    def __str__(self) -> str:
        if self.start is None or self.end is None:
            return "<unknown>"
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    @property
    @abstractmethod
    def node_type(self) -> ASTNodeType:
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def walk(self) -> Iterator['ASTNode']:
        """
        Yield every node of the subtree in post-order (children before
        their parent, left before right).

        Uses an explicit stack so arbitrarily deep trees can be traversed.
        """
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            for child in reversed(node.children()):
                stack.append((child, False))


class Expression(ASTNode):
    """Base class for expressions."""
    pass


@dataclass(frozen=True)
class Literal(Expression):
    """Integer literal expression."""
    value: int
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.LITERAL

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operation expression."""
    operator: BinaryOperator
    left: Expression
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    @property
    def node_type(self) -> ASTNodeType:
        return ASTNodeType.BINARY_OP

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


def node_count(node: ASTNode) -> int:
    """Number of nodes in the subtree rooted at node."""
    return sum(1 for _ in node.walk())
