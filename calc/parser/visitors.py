"""
AST Visitor implementations.

- EvalVisitor: Evaluate the tree to a float
- InfixVisitor: Render the tree as a fully parenthesized infix string
- TreeVisitor: Dump the tree structure as indented lines

Each visitor is a pure traversal; the same tree can be visited any number
of times with identical results.
"""

import math

from .ast import ASTNode, BinaryOp, Number, Operator


def format_number(value: float, precision: int | None = None) -> str:
    """
    Format a number for display.

    Args:
        value: The number to format
        precision: Significant digits ('%g' style); None for shortest round-trip

    Returns:
        "6" rather than "6.0" for integral values, repr() otherwise
    """
    if precision is not None:
        return f"{value:.{precision}g}"
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class EvalVisitor:
    """
    Evaluate an AST with IEEE-754 double arithmetic.

    Overflow and NaN propagate as Python floats produce them. Operations are
    walked in post-order with an explicit stack, so a long chain such as
    1 + 1 + ... + 1 evaluates no matter how deep the tree is.
    """

    def visit_number(self, node: Number) -> float:
        return node.value

    def visit_binary_op(self, node: BinaryOp) -> float:
        values: list[float] = []
        stack: list[tuple[ASTNode, bool]] = [(node, False)]

        while stack:
            current, children_done = stack.pop()

            if not isinstance(current, BinaryOp):
                values.append(current.accept(self))
            elif children_done:
                right = values.pop()
                left = values.pop()
                values.append(left + right if current.op is Operator.ADD else left * right)
            else:
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))

        return values.pop()


class InfixVisitor:
    """
    Convert AST to infix notation with every operation parenthesized.

    Examples:
    - BinaryOp('+', Number(1), Number(2)) → "(1 + 2)"
    - 2 + 3 * 4 → "(2 + (3 * 4))"
    """

    def __init__(self, precision: int | None = None):
        self.precision = precision

    def visit_number(self, node: Number) -> str:
        return format_number(node.value, self.precision)

    def visit_binary_op(self, node: BinaryOp) -> str:
        # Items are nodes still to render or literal text already decided.
        parts: list[str] = []
        stack: list[ASTNode | str] = [node]

        while stack:
            item = stack.pop()

            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, BinaryOp):
                stack.extend((")", item.right, f" {item.op.symbol} ", item.left, "("))
            else:
                parts.append(item.accept(self))

        return "".join(parts)


class TreeVisitor:
    """
    Dump the tree one node per line, children indented two spaces deeper.

    Example for 1 + 2:

        BinaryOp(+)
          Number(1)
          Number(2)
    """

    INDENT = "  "

    def __init__(self, indent: int = 0, precision: int | None = None):
        self.indent = indent
        self.precision = precision

    def visit_number(self, node: Number) -> list[str]:
        return [self._line(f"Number({format_number(node.value, self.precision)})", self.indent)]

    def visit_binary_op(self, node: BinaryOp) -> list[str]:
        lines: list[str] = []
        stack: list[tuple[ASTNode, int]] = [(node, self.indent)]

        while stack:
            current, depth = stack.pop()

            if isinstance(current, BinaryOp):
                lines.append(self._line(f"BinaryOp({current.op.symbol})", depth))
                # Right is pushed first so the left subtree is printed first.
                stack.append((current.right, depth + 1))
                stack.append((current.left, depth + 1))
            else:
                lines.append(self._line(f"Number({format_number(current.value, self.precision)})", depth))

        return lines

    def _line(self, text: str, depth: int) -> str:
        return f"{self.INDENT * depth}{text}"


def evaluate(node: ASTNode) -> float:
    """Evaluate an AST to a float."""
    return node.accept(EvalVisitor())


def render_infix(node: ASTNode, precision: int | None = None) -> str:
    """Render an AST in fully parenthesized infix notation."""
    return node.accept(InfixVisitor(precision))


def render_tree(node: ASTNode, indent: int = 0, precision: int | None = None) -> list[str]:
    """Render an AST as indented structure lines."""
    return node.accept(TreeVisitor(indent, precision))
