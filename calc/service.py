"""
Calculator service.

Runs one line of text through the tokenizer, parser and visitors and
collects the three outputs into a Calculation. Nothing is produced for a
line that fails: errors propagate as CalcError subclasses.
"""

from typing import Optional

from .core.config import Settings, get_settings
from .core.logging import get_logger
from .models import Calculation
from .parser import ASTNode, Parser, evaluate, format_number, render_infix, render_tree

logger = get_logger(__name__)


class Calculator:
    """Evaluates expressions according to the active settings"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def parse(self, text: str) -> ASTNode:
        """Parse a line into an AST"""
        return Parser(text, allow_trailing=self.settings.ALLOW_TRAILING).parse()

    def calculate(self, text: str) -> Calculation:
        """
        Parse and evaluate a line.

        Args:
            text: One line of input

        Returns:
            Calculation holding the infix rendering, tree dump and result

        Raises:
            CalcError: If the line cannot be tokenized or parsed
        """
        ast = self.parse(text)
        precision = self.settings.PRECISION

        value = evaluate(ast)
        calculation = Calculation(
            expression=text,
            infix=render_infix(ast, precision),
            tree=render_tree(ast, precision=precision),
            value=value,
            result=format_number(value, precision),
        )

        logger.debug("Evaluated %r = %s", text, calculation.result)
        return calculation
