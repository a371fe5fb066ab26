"""
Calculator exceptions.

Every failure of the lex -> parse -> evaluate pipeline is a CalcError.
Errors abort the current line only; the read loop catches them, prints
the message and moves on to the next line.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..parser.tokenizer import Token, TokenType


class CalcError(Exception):
    """Base exception for calculator errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class LexError(CalcError):
    """Raised when the tokenizer meets a character it does not support"""

    def __init__(self, char: str, pos: int):
        self.char = char
        self.pos = pos
        super().__init__(
            message=f"Invalid character '{char}' at position {pos}",
            details={"char": char, "pos": pos},
        )


class NumericConversionError(LexError):
    """Raised when a scanned number literal is not a valid float"""

    def __init__(self, literal: str, pos: int):
        self.literal = literal
        self.char = literal
        self.pos = pos
        CalcError.__init__(
            self,
            message=f"Invalid number literal '{literal}' at position {pos}",
            details={"literal": literal, "pos": pos},
        )


class ParseError(CalcError):
    """Raised when the token stream does not match the grammar"""

    def __init__(self, message: str, found: "Token", details: Optional[Dict[str, Any]] = None):
        self.found = found
        details = {"found": found.type.name, "pos": found.pos, **(details or {})}
        super().__init__(message=f"{message} at position {found.pos}", details=details)


class UnexpectedTokenError(ParseError):
    """Raised by consume() when the lookahead is not the expected token"""

    def __init__(self, expected: "TokenType", found: "Token"):
        self.expected = expected
        super().__init__(
            f"Expected {expected.name}, found {found.type.name}",
            found,
            details={"expected": expected.name},
        )


class ExpectedFactorError(ParseError):
    """Raised when a factor position holds neither a number nor '('"""

    def __init__(self, found: "Token"):
        super().__init__(f"Expected number or '(', found {found.type.name}", found)


class NestingTooDeepError(ParseError):
    """Raised when parentheses nest deeper than the parser can recurse"""

    def __init__(self, found: "Token"):
        super().__init__("Expression nested too deeply", found)
