from __future__ import annotations
from enum import Enum, auto
from typing import List, NamedTuple, Tuple
import re

from prattcalc.errors import EndOfInputError

class TokenId(Enum):
    NUMBER = auto()
    OPERATOR = auto()

class Token(NamedTuple):
    token_id: TokenId
    value: int|str

    def __str__(self) -> str:
        return f'({self.token_id.name}, {self.value})'

# Patterns are tried in order against a single character. A `None` token id
# means the character is recognized but produces no token.
_token_map = {
    re.compile(r'[ \t\r\n]'): None,
    re.compile(r'[0-9]'): TokenId.NUMBER,
    re.compile(r'[-+*/]'): TokenId.OPERATOR,
}

def _classify(char: str, token_map=_token_map) -> Tuple[bool, TokenId|None]:
    for pattern, token_id in token_map.items():
        if pattern.fullmatch(char):
            return True, token_id
    return False, None

def tokenize(src: str, token_map=_token_map) -> List[Token]:
    tokens = []
    for char in src:
        _, token_id = _classify(char, token_map)
        if token_id is TokenId.NUMBER:
            tokens.append(Token(token_id, int(char)))
        elif token_id is TokenId.OPERATOR:
            tokens.append(Token(token_id, char))
        # Anything else is dropped without complaint
    return tokens

def unrecognized_characters(src: str, token_map=_token_map) -> List[Tuple[int, str]]:
    """Lists the (index, character) pairs that `tokenize` silently drops."""
    return [(i, char) for i, char in enumerate(src)
            if not _classify(char, token_map)[0]]

class TokenCursor:
    tokens: List[Token]
    position: int

    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens
        self.position = 0

    def peek(self) -> Token|None:
        if self.position >= len(self.tokens):
            return None
        return self.tokens[self.position]

    def next(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise EndOfInputError(f'expected a token after position {self.position}')
        self.position += 1
        return tok

    def exhausted(self) -> bool:
        return self.position >= len(self.tokens)
