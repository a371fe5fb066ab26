"""
Tokenizer for arithmetic expressions.

Tokens are produced lazily: the parser pulls one token at a time through
Tokenizer.next_token(), which is the only way to move the cursor.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from ..core.errors import LexError, NumericConversionError


class TokenType(Enum):
    """Token types for arithmetic expressions."""

    NUMBER = auto()
    PLUS = auto()  # +
    MULTIPLY = auto()  # *
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """
    Represents a single token in the expression.

    Attributes:
        type: The token type
        value: Numeric value (NUMBER tokens only)
        pos: Position in the source string (for error reporting)
    """

    type: TokenType
    value: float | None = None
    pos: int = 0

    def __repr__(self) -> str:
        if self.type == TokenType.NUMBER:
            return f"Token({self.type.name}, {self.value!r}, pos={self.pos})"
        return f"Token({self.type.name}, pos={self.pos})"


class Tokenizer:
    """
    Scans one input line into tokens on demand.

    - Whitespace is skipped between tokens
    - A digit starts a number: the maximal run of digits and '.' characters
    - '+', '*', '(' and ')' are single-character tokens
    - Anything else is a LexError
    """

    PATTERNS = {
        "WHITESPACE": r"\s+",
        "NUMBER": r"\d[\d.]*",
        "PLUS": r"\+",
        "MULTIPLY": r"\*",
        "LPAREN": r"\(",
        "RPAREN": r"\)",
    }

    _pattern = re.compile("|".join(f"(?P<{name}>{p})" for name, p in PATTERNS.items()))

    def __init__(self, text: str):
        """
        Initialize tokenizer over a single line of input.

        Args:
            text: The expression to scan
        """
        self.text = text
        self._pos = 0

    @property
    def pos(self) -> int:
        """Index of the next unscanned character."""
        return self._pos

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns EOF once the input is exhausted, on every subsequent call.

        Raises:
            LexError: If the next character is not part of the grammar
            NumericConversionError: If a number literal cannot be converted
        """
        while True:
            if self._pos >= len(self.text):
                return Token(TokenType.EOF, pos=len(self.text))

            match = self._pattern.match(self.text, self._pos)
            if not match:
                raise LexError(self.text[self._pos], self._pos)

            kind = match.lastgroup
            start = self._pos
            self._pos = match.end()

            if kind == "WHITESPACE":
                continue

            if kind == "NUMBER":
                return Token(TokenType.NUMBER, self._convert(match.group(), start), start)

            return Token(TokenType[kind], pos=start)

    def tokenize(self) -> Iterator[Token]:
        """Lazily yield the remaining tokens, ending with a single EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    @staticmethod
    def _convert(literal: str, pos: int) -> float:
        try:
            return float(literal)
        except ValueError:
            raise NumericConversionError(literal, pos) from None
