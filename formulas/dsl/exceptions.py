"""
Errors raised while parsing or evaluating formulas.

Every error aborts the whole call; nothing is returned partially.
"""


class FormulaError(Exception):
    """Base class for all formula DSL errors."""


class ExpressionTooDeepError(FormulaError):
    def __init__(self, message="Expression is nested too deeply"):
        super().__init__(message)


class ParseError(FormulaError):
    """The expression text could not be turned into a tree."""


class MismatchedParensError(ParseError):
    def __init__(self, message="Mismatched parens"):
        super().__init__(message)


class UnexpectedTokenError(ParseError):
    def __init__(self, token=None, message=None):
        self.token = token
        if message is None:
            message = f"Unexpected token: {token}"
        super().__init__(message)


class EvalError(FormulaError):
    """The tree could not be reduced to a number."""


class UnboundVariableError(EvalError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown variable '{name}'")


class UnknownFunctionError(EvalError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown function '{name}'")


class ArityMismatchError(EvalError):
    def __init__(self, name, expected, received):
        self.name = name
        self.expected = expected
        self.received = received
        super().__init__(
            f"Function '{name}' takes {expected} argument(s), got {received}"
        )
