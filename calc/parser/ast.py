"""
Abstract Syntax Tree (AST) node definitions for arithmetic expressions.

The node set is closed: a tree is made of Number leaves and BinaryOp
nodes whose operator is either ADD or MULTIPLY. Nodes are immutable and
own their children; operations over a tree are written as visitors.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class Operator(Enum):
    """Binary operators, valued by their symbol."""

    ADD = "+"
    MULTIPLY = "*"

    @property
    def symbol(self) -> str:
        return self.value


class ASTVisitor(Protocol):
    """
    Visitor protocol for traversing AST nodes.

    Implementations provide evaluation, infix rendering and tree dumps.
    """

    def visit_number(self, node: "Number") -> Any:
        ...

    def visit_binary_op(self, node: "BinaryOp") -> Any:
        ...


class ASTNode(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor for traversal."""
        pass


@dataclass(frozen=True)
class Number(ASTNode):
    """
    Represents a numeric literal.

    Examples: 42, 3.14, 007
    """

    value: float

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number(self)

    def __repr__(self) -> str:
        return f"Number({self.value})"


@dataclass(frozen=True)
class BinaryOp(ASTNode):
    """
    Represents a binary operation.

    Examples: 2 + 3, (1 + 2) * 4
    """

    op: Operator
    left: ASTNode
    right: ASTNode

    def __post_init__(self) -> None:
        if not isinstance(self.op, Operator):
            raise TypeError(f"BinaryOp operator must be an Operator, got {self.op!r}")

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_op(self)

    def __repr__(self) -> str:
        return f"BinaryOp('{self.op.symbol}', {self.left!r}, {self.right!r})"
