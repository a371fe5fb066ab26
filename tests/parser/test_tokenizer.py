"""Tests for the expression tokenizer."""

import pytest

from calc.core.errors import LexError, NumericConversionError
from calc.parser.tokenizer import Token, TokenType, Tokenizer


def token_types(text: str) -> list[TokenType]:
    return [token.type for token in Tokenizer(text)]


class TestTokenizerBasics:
    """Test classification of single tokens."""

    def test_integer(self):
        """Test a run of digits becomes one NUMBER token."""
        token = Tokenizer("42").next_token()
        assert token.type == TokenType.NUMBER
        assert token.value == 42.0

    def test_decimal(self):
        """Test a literal with a decimal point."""
        token = Tokenizer("3.25").next_token()
        assert token.value == 3.25

    def test_trailing_point(self):
        """Test a literal ending in a point converts."""
        assert Tokenizer("7.").next_token().value == 7.0

    def test_operators_and_parens(self):
        """Test single-character tokens."""
        assert token_types("+*()") == [
            TokenType.PLUS,
            TokenType.MULTIPLY,
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.EOF,
        ]

    def test_positions(self):
        """Test tokens record where they start."""
        tokens = list(Tokenizer(" 12 +(3"))
        assert [t.pos for t in tokens] == [1, 4, 5, 6, 7]

    def test_number_stops_at_operator(self):
        """Test number scanning is maximal but stops at non-digits."""
        tokens = list(Tokenizer("1.5*2"))
        assert tokens[0] == Token(TokenType.NUMBER, 1.5, 0)
        assert tokens[1].type == TokenType.MULTIPLY
        assert tokens[2] == Token(TokenType.NUMBER, 2.0, 4)


class TestTokenizerWhitespace:
    """Test whitespace handling."""

    def test_spaces_and_tabs_skipped(self):
        """Test whitespace between tokens is ignored."""
        assert token_types(" 1\t+ \t2 ") == [
            TokenType.NUMBER,
            TokenType.PLUS,
            TokenType.NUMBER,
            TokenType.EOF,
        ]

    def test_whitespace_only(self):
        """Test a blank line yields just EOF."""
        assert token_types("   \t") == [TokenType.EOF]


class TestTokenizerEnd:
    """Test behaviour at end of input."""

    def test_empty_input(self):
        """Test empty input returns EOF at position 0."""
        tokenizer = Tokenizer("")
        token = tokenizer.next_token()
        assert token.type == TokenType.EOF
        assert token.pos == 0

    def test_eof_is_idempotent(self):
        """Test repeated calls at end keep returning EOF without advancing."""
        tokenizer = Tokenizer("1")
        tokenizer.next_token()
        for _ in range(3):
            assert tokenizer.next_token().type == TokenType.EOF
            assert tokenizer.pos == 1

    def test_iteration_stops_after_eof(self):
        """Test iterating yields exactly one EOF."""
        tokens = list(Tokenizer("1 + 2"))
        assert [t.type for t in tokens].count(TokenType.EOF) == 1

    def test_tokenize_is_lazy(self):
        """Test tokens are scanned only as they are requested."""
        tokenizer = Tokenizer("1 + $")
        stream = tokenizer.tokenize()
        assert next(stream).type == TokenType.NUMBER
        assert next(stream).type == TokenType.PLUS
        with pytest.raises(LexError):
            next(stream)


class TestTokenizerErrors:
    """Test rejected input."""

    @pytest.mark.parametrize("char", ["-", "/", "x", "^", "%", ","])
    def test_unsupported_character(self, char):
        """Test characters outside the grammar raise LexError."""
        with pytest.raises(LexError) as exc_info:
            list(Tokenizer(f"3 {char} 2"))
        assert exc_info.value.char == char
        assert exc_info.value.pos == 2

    def test_leading_point_rejected(self):
        """Test a literal cannot start with a point."""
        with pytest.raises(LexError) as exc_info:
            Tokenizer(".5").next_token()
        assert exc_info.value.char == "."

    def test_malformed_literal(self):
        """Test a literal with two points fails conversion."""
        with pytest.raises(NumericConversionError) as exc_info:
            list(Tokenizer("1 + 1.2.3"))
        assert exc_info.value.literal == "1.2.3"

    def test_conversion_error_position(self):
        """Test the conversion error reports where the literal starts."""
        tokenizer = Tokenizer("1 + 1.2.3")
        tokenizer.next_token()
        tokenizer.next_token()
        with pytest.raises(NumericConversionError) as exc_info:
            tokenizer.next_token()
        assert exc_info.value.pos == 4
        assert "1.2.3" in str(exc_info.value)

    def test_conversion_error_is_lex_error(self):
        """Test conversion failures are caught as lex errors."""
        with pytest.raises(LexError):
            list(Tokenizer("4..2"))
