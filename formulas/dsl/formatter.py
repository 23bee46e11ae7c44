import math

from .ast_nodes import NumberNode, VarNode, UnaryOpNode, BinaryOpNode, FunctionCallNode
from .exceptions import ExpressionTooDeepError
from .operators import symbol_for


def format_number(value):
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class Formatter:
    """Renders a tree as a canonical, fully parenthesized string."""

    def format(self, node):
        try:
            return self._format(node)
        except RecursionError:
            raise ExpressionTooDeepError() from None

    def _format(self, node):
        if isinstance(node, NumberNode):
            return format_number(node.value)

        if isinstance(node, VarNode):
            return f"${node.name}"

        if isinstance(node, UnaryOpNode):
            return f"{symbol_for(node.op)}{self._format(node.operand)}"

        if isinstance(node, BinaryOpNode):
            return f"({self._format(node.left)} {symbol_for(node.op)} {self._format(node.right)})"

        if isinstance(node, FunctionCallNode):
            args = ", ".join(self._format(arg) for arg in node.args)
            return f"{node.name}({args})"

        raise TypeError(f"Invalid AST node: {node!r}")
