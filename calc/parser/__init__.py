"""
Calculator Parser Package

Tokenization, AST construction and tree traversals for arithmetic
expressions over '+', '*' and parentheses.
"""

from .ast import ASTNode, ASTVisitor, BinaryOp, Number, Operator
from .tokenizer import Token, TokenType, Tokenizer
from .parser import Parser, parse
from .visitors import (
    EvalVisitor,
    InfixVisitor,
    TreeVisitor,
    evaluate,
    format_number,
    render_infix,
    render_tree,
)

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "BinaryOp",
    "Number",
    "Operator",
    "Token",
    "TokenType",
    "Tokenizer",
    "Parser",
    "parse",
    "EvalVisitor",
    "InfixVisitor",
    "TreeVisitor",
    "evaluate",
    "format_number",
    "render_infix",
    "render_tree",
]
