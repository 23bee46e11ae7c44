from dataclasses import dataclass
from typing import Tuple, Union

from .operators import OperatorKind


@dataclass(frozen=True)
class NumberNode:
    value: float


@dataclass(frozen=True)
class VarNode:
    name: str


@dataclass(frozen=True)
class UnaryOpNode:
    op: OperatorKind
    operand: "Node"


@dataclass(frozen=True)
class BinaryOpNode:
    left: "Node"
    op: OperatorKind
    right: "Node"


@dataclass(frozen=True)
class FunctionCallNode:
    name: str
    args: Tuple["Node", ...] = ()


Node = Union[NumberNode, VarNode, UnaryOpNode, BinaryOpNode, FunctionCallNode]
