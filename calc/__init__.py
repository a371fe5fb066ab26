"""
calc - an interactive calculator for '+', '*' and parentheses.

Each input line is tokenized, parsed into an AST, and printed back as an
infix rendering, a tree dump and a numeric result.
"""

from .core.errors import (
    CalcError,
    ExpectedFactorError,
    NestingTooDeepError,
    LexError,
    NumericConversionError,
    ParseError,
    UnexpectedTokenError,
)
from .models import Calculation
from .parser import ASTNode, BinaryOp, Number, Operator, Parser, Tokenizer, parse
from .service import Calculator

__version__ = "1.0.0"

__all__ = [
    "CalcError",
    "ExpectedFactorError",
    "NestingTooDeepError",
    "LexError",
    "NumericConversionError",
    "ParseError",
    "UnexpectedTokenError",
    "Calculation",
    "ASTNode",
    "BinaryOp",
    "Number",
    "Operator",
    "Parser",
    "Tokenizer",
    "parse",
    "Calculator",
]
