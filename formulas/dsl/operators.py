"""
Operator table for the formula DSL.

Each symbol maps to one descriptor per arity, so ``-`` has a binary
(subtraction) and a unary (negation) entry. ``(`` and ``,`` are sentinels:
they sit on the operator stack to bound reductions.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Tuple


class Associativity(Enum):
    NONE = auto()
    LEFT = auto()
    RIGHT = auto()


class OperatorKind(Enum):
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    PLUS = auto()
    MINUS = auto()
    LEFT_PAREN = auto()
    COMMA = auto()


@dataclass(frozen=True)
class OperatorDescriptor:
    kind: OperatorKind
    symbol: str
    precedence: int
    associativity: Associativity = Associativity.NONE
    unary: bool = False

    @property
    def is_sentinel(self) -> bool:
        return self.kind in (OperatorKind.LEFT_PAREN, OperatorKind.COMMA)


DESCRIPTORS: Dict[OperatorKind, OperatorDescriptor] = {
    OperatorKind.ADD: OperatorDescriptor(OperatorKind.ADD, "+", 2, Associativity.LEFT),
    OperatorKind.SUB: OperatorDescriptor(OperatorKind.SUB, "-", 2, Associativity.LEFT),

    OperatorKind.MUL: OperatorDescriptor(OperatorKind.MUL, "*", 3, Associativity.LEFT),
    OperatorKind.DIV: OperatorDescriptor(OperatorKind.DIV, "/", 3, Associativity.LEFT),

    OperatorKind.PLUS: OperatorDescriptor(OperatorKind.PLUS, "+", 2000, Associativity.RIGHT, unary=True),
    OperatorKind.MINUS: OperatorDescriptor(OperatorKind.MINUS, "-", 2000, Associativity.RIGHT, unary=True),

    OperatorKind.LEFT_PAREN: OperatorDescriptor(OperatorKind.LEFT_PAREN, "(", 5),
    OperatorKind.COMMA: OperatorDescriptor(OperatorKind.COMMA, ",", 1000),
}

# (symbol, unary) -> descriptor
_BY_SYMBOL: Dict[Tuple[str, bool], OperatorDescriptor] = {
    (desc.symbol, desc.unary): desc for desc in DESCRIPTORS.values()
}

def longest_first(symbols):
    """Order symbols so a longer one is always tried before its prefix."""
    return tuple(sorted(set(symbols), key=len, reverse=True))


SYMBOLS = longest_first(desc.symbol for desc in DESCRIPTORS.values())


def lookup(symbol: str, unary: bool) -> OperatorDescriptor:
    """Return the descriptor for ``symbol`` with the given arity.

    Raises KeyError when the symbol has no form of that arity.
    """
    return _BY_SYMBOL[(symbol, unary)]


def match_operator(text: str, pos: int) -> Optional[str]:
    """Return the longest operator symbol starting at ``pos``, if any."""
    for symbol in SYMBOLS:
        if text.startswith(symbol, pos):
            return symbol
    return None


def symbol_for(kind: OperatorKind) -> str:
    return DESCRIPTORS[kind].symbol
