"""
Recursive descent parser for arithmetic expressions.

Grammar, one routine per rule:

    expr   := term ('+' term)*
    term   := factor ('*' factor)*
    factor := NUMBER | '(' expr ')'

Precedence and associativity come from the nesting of the rules: '*'
binds tighter than '+' because term() is called from expr()'s loop, and
both operators fold to the left.
"""

from .ast import ASTNode, BinaryOp, Number, Operator
from .tokenizer import Token, TokenType, Tokenizer
from ..core.errors import ExpectedFactorError, NestingTooDeepError, UnexpectedTokenError
from ..core.logging import get_logger

logger = get_logger(__name__)


class Parser:
    """
    Recursive descent parser with a single token of lookahead.

    The lookahead is filled once on construction; tokens are then pulled
    from the tokenizer only as consume() advances past them.
    """

    def __init__(self, source: Tokenizer | str, allow_trailing: bool = False):
        """
        Initialize parser over a tokenizer or raw text.

        Args:
            source: Tokenizer to pull from, or the line to tokenize
            allow_trailing: Accept tokens left over after a complete expression
        """
        self.tokenizer = Tokenizer(source) if isinstance(source, str) else source
        self.allow_trailing = allow_trailing
        self.current: Token = self.tokenizer.next_token()

    def parse(self) -> ASTNode:
        """
        Parse the whole input line to an AST.

        Returns:
            Root AST node

        Raises:
            ParseError: If the input does not match the grammar or nests too deeply
            LexError: If the tokenizer rejects the input
        """
        try:
            ast = self.expr()
        except RecursionError:
            # Each level of parentheses costs a few interpreter frames.
            raise NestingTooDeepError(self.current) from None

        if not self.allow_trailing and self.current.type != TokenType.EOF:
            raise UnexpectedTokenError(TokenType.EOF, self.current)

        logger.debug("Parsed %d characters", self.tokenizer.pos)
        return ast

    def consume(self, expected: TokenType) -> Token:
        """
        Advance past the current token if it has the expected type.

        Raises:
            UnexpectedTokenError: If the current token has another type
        """
        token = self.current
        if token.type != expected:
            raise UnexpectedTokenError(expected, token)
        self.current = self.tokenizer.next_token()
        return token

    def expr(self) -> ASTNode:
        node = self.term()

        while self.current.type == TokenType.PLUS:
            self.consume(TokenType.PLUS)
            node = BinaryOp(Operator.ADD, node, self.term())

        return node

    def term(self) -> ASTNode:
        node = self.factor()

        while self.current.type == TokenType.MULTIPLY:
            self.consume(TokenType.MULTIPLY)
            node = BinaryOp(Operator.MULTIPLY, node, self.factor())

        return node

    def factor(self) -> ASTNode:
        token = self.current

        if token.type == TokenType.NUMBER:
            self.consume(TokenType.NUMBER)
            return Number(token.value)

        if token.type == TokenType.LPAREN:
            self.consume(TokenType.LPAREN)
            node = self.expr()
            self.consume(TokenType.RPAREN)
            return node

        raise ExpectedFactorError(token)


def parse(text: str, allow_trailing: bool = False) -> ASTNode:
    """Parse a single line of text to an AST."""
    return Parser(text, allow_trailing=allow_trailing).parse()
