#!/usr/bin/env python3

from __future__ import annotations
from prattcalc.frontend.expression import Expression, Literal, UnaryOp, BinaryOp
from prattcalc.frontend.parser import parse_source
from prattcalc.errors import DivisionByZeroError, InternalInvariantViolationError

def divide(x: int, y: int) -> int:
    if y == 0:
        raise DivisionByZeroError(f'cannot divide {x} by zero')
    # Truncates toward zero, unlike `//`
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient

op_map = {
    '+': lambda x, y: x + y,
    '-': lambda x, y: x - y,
    '*': lambda x, y: x * y,
    '/': divide,
}

unary_op_map = {
    '+': lambda x: +x,
    '-': lambda x: -x,
}

def evaluate(expr: Expression) -> int:
    """Walks the tree with an explicit stack so long operator chains cannot
    exhaust the interpreter's recursion limit."""
    values = []
    stack = [(expr, False)]
    while stack:
        node, children_done = stack.pop()
        if isinstance(node, Literal):
            values.append(node.value)
        elif isinstance(node, UnaryOp):
            if node.op not in unary_op_map:
                raise InternalInvariantViolationError(f'unknown prefix operator {node.op!r}')
            if children_done:
                values.append(unary_op_map[node.op](values.pop()))
            else:
                stack.extend([(node, True), (node.operand, False)])
        elif isinstance(node, BinaryOp):
            if node.op not in op_map:
                raise InternalInvariantViolationError(f'unknown infix operator {node.op!r}')
            if children_done:
                rhs = values.pop()
                lhs = values.pop()
                values.append(op_map[node.op](lhs, rhs))
            else:
                # Left operand is popped, hence evaluated, first
                stack.extend([(node, True), (node.right, False), (node.left, False)])
        else:
            raise InternalInvariantViolationError(f'cannot evaluate {node!r}')
    return values.pop()

def interpret(src: str) -> int:
    return evaluate(parse_source(src))
