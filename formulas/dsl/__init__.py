"""
Domain Specific Language for formula evaluation.

Infix expressions are parsed with a shunting-yard engine into an immutable
tree, which can then be formatted back to canonical text or evaluated
against a table of variable bindings without using eval().
"""

from .tokens import Token, TokenType
from .tokenizer import Tokenizer
from .parser import Parser, parse
from .formatter import Formatter
from .evaluator import Evaluator, evaluate
from .exceptions import (
    FormulaError, ExpressionTooDeepError, ParseError, MismatchedParensError, UnexpectedTokenError,
    EvalError, UnboundVariableError, UnknownFunctionError, ArityMismatchError,
)

__all__ = [
    'Token', 'TokenType', 'Tokenizer', 'Parser', 'parse', 'Formatter',
    'Evaluator', 'evaluate',
    'FormulaError', 'ExpressionTooDeepError', 'ParseError', 'MismatchedParensError', 'UnexpectedTokenError',
    'EvalError', 'UnboundVariableError', 'UnknownFunctionError', 'ArityMismatchError',
]
