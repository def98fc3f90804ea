from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from sansu.errors import ParseError
from sansu.utils import Peekable


class TokenType(IntEnum):
    Number = 1
    Operator = 2
    Parenthesis = 3


class Operator(str, Enum):
    Add = "+"
    Sub = "-"
    Mul = "*"
    Div = "/"

    @property
    def binding_power(self) -> int:
        return BINDING_POWERS[self]


BINDING_POWERS = {
    Operator.Add: 1,
    Operator.Sub: 1,
    Operator.Mul: 2,
    Operator.Div: 2,
}

# Unary minus binds tighter than any binary operator: -2*3 is (-2)*3
PREFIX_BINDING_POWER = 3

OPEN_PAREN = "("
CLOSE_PAREN = ")"
PARENTHESES = frozenset({OPEN_PAREN, CLOSE_PAREN})
OPERATORS = frozenset(operator.value for operator in Operator)


@dataclass(frozen=True)
class Token:
    kind: TokenType
    text: str


def new_token(token_type: TokenType, text: str) -> Token:
    return Token(token_type, text)


def equal(token: Optional[Token], text: str) -> bool:
    return token is not None and token.text == text


def skip(tokens: Peekable[Token], text: str) -> Token:
    token = tokens.peek(None)
    if not equal(token, text):
        found = "end of expression" if token is None else repr(token.text)
        raise ParseError(f"Expected {text!r}, found {found}")
    return next(tokens)


def infix_operator(token: Optional[Token]) -> Optional[Operator]:
    if token is None or token.kind != TokenType.Operator:
        return None
    return Operator(token.text)
