import numpy as np

from .ast_nodes import NumberNode, VarNode, UnaryOpNode, BinaryOpNode, FunctionCallNode
from .exceptions import ExpressionTooDeepError, EvalError, UnboundVariableError, UnknownFunctionError, ArityMismatchError
from .functions import ALLOWED_FUNCTIONS
from .operators import OperatorKind, symbol_for


class Evaluator:
    def __init__(self, context=None):
        self.context = context or {}  # {"a": 7.0, "rate": 0.25}

    def eval(self, node):
        # IEEE-754 results (inf, nan) instead of warnings or exceptions
        with np.errstate(all="ignore"):
            try:
                return float(self._eval(node))
            except RecursionError:
                raise ExpressionTooDeepError() from None

    def _eval(self, node):
        if isinstance(node, NumberNode):
            return np.float64(node.value)

        if isinstance(node, VarNode):
            if node.name not in self.context:
                raise UnboundVariableError(node.name)
            return np.float64(self.context[node.name])

        if isinstance(node, UnaryOpNode):
            operand = self._eval(node.operand)
            if node.op == OperatorKind.PLUS:
                return operand
            if node.op == OperatorKind.MINUS:
                return -operand

            raise EvalError(f"Unsupported operator {symbol_for(node.op)}")

        if isinstance(node, BinaryOpNode):
            if node.op == OperatorKind.COMMA:
                raise EvalError("Unsupported operator , outside a function call")

            left = self._eval(node.left)
            right = self._eval(node.right)

            op = node.op
            if op == OperatorKind.ADD: return left + right
            if op == OperatorKind.SUB: return left - right
            if op == OperatorKind.MUL: return left * right
            if op == OperatorKind.DIV: return left / right

            raise EvalError(f"Unsupported operator {symbol_for(op)}")

        if isinstance(node, FunctionCallNode):
            if node.name not in ALLOWED_FUNCTIONS:
                raise UnknownFunctionError(node.name)
            func, arity = ALLOWED_FUNCTIONS[node.name]
            if len(node.args) != arity:
                raise ArityMismatchError(node.name, arity, len(node.args))
            args = [self._eval(a) for a in node.args]
            return np.float64(func(*args))

        raise TypeError(f"Invalid AST node: {node!r}")


def evaluate(node, context=None):
    return Evaluator(context).eval(node)
