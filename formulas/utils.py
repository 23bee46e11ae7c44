"""
Helpers for evaluating formulas from application code.
"""
from typing import Dict, Optional
import logging

from .dsl import Tokenizer, Parser, Formatter, Evaluator, FormulaError

logger = logging.getLogger(__name__)


def parse_formula(formula: str):
    """
    Parse a formula string into an expression tree.

    Args:
        formula: Infix expression, e.g. "sqrt(abs(a - 64)) * 2"

    Returns:
        Root node of the parsed tree

    Raises:
        ParseError: if the formula is malformed
    """
    try:
        return Parser(Tokenizer(formula)).parse()
    except FormulaError as e:
        logger.debug(f"Formula parse error: {str(e)} for formula: {formula}")
        raise


def format_formula(formula: str) -> str:
    """Return the canonical, fully parenthesized form of a formula."""
    return Formatter().format(parse_formula(formula))


def evaluate_tree(tree, variables: Optional[Dict[str, float]] = None) -> float:
    """
    Evaluate an already parsed tree.

    Args:
        tree: Root node returned by parse_formula
        variables: Dictionary mapping variable names to their values

    Returns:
        Computed result as float (inf/nan for division by zero)

    Raises:
        EvalError: for unbound variables, unknown functions or wrong arity
    """
    try:
        return Evaluator(variables or {}).eval(tree)
    except FormulaError as e:
        logger.debug(f"Formula evaluation error: {str(e)} for tree: {type(tree).__name__}")
        raise


def evaluate_formula(formula: str, variables: Optional[Dict[str, float]] = None) -> float:
    """
    Parse and evaluate a formula in one step.

    Examples:
    - evaluate_formula("1 * a+3", {"a": 7}) == 10.0
    - evaluate_formula("max(-1, abs(-4))") == 4.0
    """
    return evaluate_tree(parse_formula(formula), variables)
