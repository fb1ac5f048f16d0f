#!/usr/bin/env python3

from __future__ import annotations
from typing import Dict, List, Tuple
from prattcalc.frontend.utils import Token, TokenId, TokenCursor, tokenize
from prattcalc.frontend.expression import Expression, Literal, UnaryOp, BinaryOp
from prattcalc.errors import (EmptyInputError, MissingOperatorError,
    UnexpectedLeadingTokenError, UnknownOperatorBindingPowerError)

# Binding powers, higher binds tighter. A left power lower than the right one
# makes the operator left-associative.
INFIX_BINDING_POWER: Dict[str, Tuple[int, int]] = {
    '+': (1, 2),
    '-': (1, 2),
    '*': (3, 4),
    '/': (3, 4),
}

PREFIX_BINDING_POWER: Dict[str, int] = {
    '+': 5,
    '-': 5,
}

def parse_prefix(cursor: TokenCursor) -> Expression:
    prefix_ops = []
    tok = cursor.next()
    while tok.token_id is TokenId.OPERATOR and tok.value in PREFIX_BINDING_POWER:
        prefix_ops.append(tok.value)
        tok = cursor.next()
    if tok.token_id is not TokenId.NUMBER:
        raise UnexpectedLeadingTokenError(
            f'expression should start with an integer or a prefix operator, got {tok}', tok)

    # Innermost operator first, each one closing over what its binding power admits
    lhs = Literal(tok.value)
    for op in reversed(prefix_ops):
        lhs = UnaryOp(op, parse_infix(cursor, lhs, PREFIX_BINDING_POWER[op]))
    return lhs

def parse_infix(cursor: TokenCursor, lhs: Expression, min_bp: int) -> Expression:
    while (tok := cursor.peek()) is not None:
        if tok.token_id is not TokenId.OPERATOR:
            raise MissingOperatorError(f'expected an operator before {tok}', tok)
        if tok.value not in INFIX_BINDING_POWER:
            raise UnknownOperatorBindingPowerError(
                f'no infix binding power for {tok.value!r}', tok)

        l_bp, r_bp = INFIX_BINDING_POWER[tok.value]
        if l_bp < min_bp:
            break # Belongs to an outer call
        cursor.next()

        rhs = parse(cursor, r_bp)
        lhs = BinaryOp(tok.value, lhs, rhs)

    return lhs

def parse(cursor: TokenCursor, min_bp: int = 0) -> Expression:
    return parse_infix(cursor, parse_prefix(cursor), min_bp)

def parse_tokens(tokens: List[Token]) -> Expression:
    if not tokens:
        raise EmptyInputError('nothing to parse')
    return parse(TokenCursor(tokens), 0)

def parse_source(src: str) -> Expression:
    return parse_tokens(tokenize(src))
