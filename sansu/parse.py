import logging
from typing import Iterable, Optional

from sansu.config import get_settings
from sansu.errors import ParseError
from sansu.node import Node, new_binary, new_number, new_unary
from sansu.token import (
    Token,
    TokenType,
    Operator,
    PREFIX_BINDING_POWER,
    OPEN_PAREN,
    CLOSE_PAREN,
    infix_operator,
    skip,
)
from sansu.utils import Peekable

logger = logging.getLogger(__name__)


class Parse:
    """Pratt parser over one token sequence.

    An instance owns its cursor and is good for a single parse; build a new
    one per expression.
    """

    tokens: Peekable[Token]
    depth: int
    max_depth: int

    def __init__(self, tokens: Iterable[Token], max_depth: Optional[int] = None) -> None:
        self.tokens = Peekable(tokens)
        self.depth = 0
        self.max_depth = max_depth if max_depth is not None else get_settings().max_depth

    def parse(self) -> Node:
        """Parse a complete expression, rejecting anything left over."""
        if not self.tokens:
            raise ParseError("Empty expression")
        try:
            node = self.parse_expression()
        except RecursionError:
            # max_depth set above what the interpreter's stack allows
            raise ParseError(
                "Expression nested too deeply to parse",
                details={"max_depth": self.max_depth},
            ) from None
        token = self.tokens.peek(None)
        if token is not None:
            raise ParseError(
                f"Unexpected token: {token.text}",
                details={"token": token.text, "kind": token.kind.name},
            )
        return node

    def parse_expression(self, min_binding_power: int = 0) -> Node:
        node = self.prefix_token()
        while True:
            operator = infix_operator(self.tokens.peek(None))
            if operator is None or operator.binding_power <= min_binding_power:
                return node
            next(self.tokens)
            # Same power, not power + 1: equal operators associate to the left
            right = self.parse_expression(operator.binding_power)
            node = new_binary(operator, node, right)

    def prefix_token(self) -> Node:
        token = self.tokens.peek(None)
        if token is None:
            raise ParseError("Unexpected end of expression")
        self.depth += 1
        if self.depth > self.max_depth:
            raise ParseError(
                f"Expression nested too deeply, limit is {self.max_depth}",
                details={"max_depth": self.max_depth},
            )
        try:
            match (token.kind, token.text):
                case (TokenType.Number, _):
                    return self.number_literal()
                case (TokenType.Operator, Operator.Sub.value):
                    return self.prefix_expression()
                case (TokenType.Parenthesis, "("):
                    return self.grouped_expression()
            raise ParseError(
                f"No prefix parse function for {token.text}",
                details={"token": token.text, "kind": token.kind.name},
            )
        finally:
            self.depth -= 1

    def number_literal(self) -> Node:
        token = next(self.tokens)
        try:
            value = int(token.text)
        except ValueError:
            # int() refuses digit strings beyond sys.get_int_max_str_digits()
            raise ParseError(
                f"Number literal too long: {len(token.text)} digits",
                details={"digits": len(token.text)},
            ) from None
        return new_number(value)

    def prefix_expression(self) -> Node:
        token = next(self.tokens)
        operand = self.parse_expression(PREFIX_BINDING_POWER)
        return new_unary(Operator(token.text), operand)

    def grouped_expression(self) -> Node:
        skip(self.tokens, OPEN_PAREN)
        node = self.parse_expression()
        if self.tokens.peek(None) is None:
            raise ParseError("Expected closing parenthesis")
        skip(self.tokens, CLOSE_PAREN)
        return node


def parse(tokens: Iterable[Token], max_depth: Optional[int] = None) -> Node:
    node = Parse(tokens, max_depth).parse()
    logger.debug("parsed expression", extra={"root": type(node).__name__})
    return node
