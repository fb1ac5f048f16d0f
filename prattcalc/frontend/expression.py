from __future__ import annotations
from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True)
class Literal:
    value: int

@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: Expression

@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: Expression
    right: Expression

Expression = Union[Literal, UnaryOp, BinaryOp]

def render(expr: Expression) -> str:
    """Prints a tree as a prefix s-expression, e.g. `(+ 1 (* 2 3))`."""
    parts = []
    stack = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            parts.append(node)
        elif isinstance(node, Literal):
            parts.append(str(node.value))
        elif isinstance(node, UnaryOp):
            parts.append(f'({node.op} ')
            stack.extend([')', node.operand])
        elif isinstance(node, BinaryOp):
            parts.append(f'({node.op} ')
            stack.extend([')', node.right, ' ', node.left])
        else:
            parts.append(repr(node))
    return ''.join(parts)
