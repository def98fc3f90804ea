import logging
from typing import Optional

from sansu.errors import TokenizationError
from sansu.helper import error_message, strip_whitespace
from sansu.token import Token, TokenType, new_token, OPERATORS, PARENTHESES

logger = logging.getLogger(__name__)


def is_digit(char: str) -> bool:
    # str.isdigit also accepts superscripts and other scripts' digits
    return ord("0") <= ord(char) <= ord("9")


def read_number(expression: str, index: int) -> tuple[Token, int]:
    end = index
    while end < len(expression) and is_digit(expression[end]):
        end += 1
    return new_token(TokenType.Number, expression[index:end]), end


def tokenize(expression: str, max_length: Optional[int] = None) -> list[Token]:
    expression = strip_whitespace(expression)
    if max_length is not None and len(expression) > max_length:
        raise TokenizationError(
            f"Expression too long: {len(expression)} characters, limit is {max_length}",
            details={"length": len(expression), "max_length": max_length},
        )
    index = 0
    tokens = []
    while index < len(expression):
        char = expression[index]
        if is_digit(char):
            token, index = read_number(expression, index)
            tokens.append(token)
            continue
        if char in OPERATORS:
            tokens.append(new_token(TokenType.Operator, char))
            index += 1
            continue
        if char in PARENTHESES:
            tokens.append(new_token(TokenType.Parenthesis, char))
            index += 1
            continue
        raise TokenizationError(
            f"Tokenization error: {expression}",
            details={"expression": expression, "position": index, "character": char},
            diagnostic=error_message(expression, index, "invalid token"),
        )
    logger.debug("tokenized expression", extra={"token_count": len(tokens)})
    return tokens
