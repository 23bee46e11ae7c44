import pytest

from formulas.dsl import operators
from formulas.dsl.operators import (
    DESCRIPTORS, SYMBOLS, Associativity, OperatorKind, longest_first, lookup, match_operator, symbol_for,
)


@pytest.mark.parametrize("symbol,unary,kind,precedence,assoc", [
    ("+", False, OperatorKind.ADD, 2, Associativity.LEFT),
    ("-", False, OperatorKind.SUB, 2, Associativity.LEFT),
    ("*", False, OperatorKind.MUL, 3, Associativity.LEFT),
    ("/", False, OperatorKind.DIV, 3, Associativity.LEFT),
    (",", False, OperatorKind.COMMA, 1000, Associativity.NONE),
    ("+", True, OperatorKind.PLUS, 2000, Associativity.RIGHT),
    ("-", True, OperatorKind.MINUS, 2000, Associativity.RIGHT),
])
def test_lookup(symbol, unary, kind, precedence, assoc):
    desc = lookup(symbol, unary)
    assert desc.kind == kind
    assert desc.precedence == precedence
    assert desc.associativity == assoc
    assert desc.unary is unary


def test_paren_sentinel():
    desc = DESCRIPTORS[OperatorKind.LEFT_PAREN]
    assert desc.precedence == 5
    assert desc.is_sentinel
    assert DESCRIPTORS[OperatorKind.COMMA].is_sentinel
    assert not DESCRIPTORS[OperatorKind.ADD].is_sentinel


def test_lookup_missing_arity():
    with pytest.raises(KeyError):
        lookup("*", True)


def test_match_operator():
    assert match_operator("a+b", 1) == "+"
    assert match_operator("a+b", 0) is None
    assert match_operator("f(1", 1) == "("
    assert match_operator("", 0) is None


def test_symbol_for():
    assert symbol_for(OperatorKind.MINUS) == "-"
    assert symbol_for(OperatorKind.DIV) == "/"


def test_symbols_ordered_longest_first():
    lengths = [len(symbol) for symbol in SYMBOLS]
    assert lengths == sorted(lengths, reverse=True)


def test_longest_first_puts_longer_symbol_before_its_prefix():
    ordered = longest_first(["*", "**", "+", "*"])
    assert ordered.index("**") < ordered.index("*")
    assert sorted(ordered) == ["*", "**", "+"]


def test_match_operator_prefers_longest_symbol(monkeypatch):
    monkeypatch.setattr(operators, "SYMBOLS", longest_first(SYMBOLS + ("**",)))
    assert match_operator("2**3", 1) == "**"
    assert match_operator("2*3", 1) == "*"
