from dataclasses import dataclass

from sansu.token import Operator


@dataclass(frozen=True)
class Literal:
    value: int


@dataclass(frozen=True)
class PrefixExpression:
    operator: Operator
    operand: "Node"


@dataclass(frozen=True)
class BinaryExpression:
    left: "Node"
    operator: Operator
    right: "Node"


Node = Literal | PrefixExpression | BinaryExpression


def new_number(value: int) -> Literal:
    return Literal(value)


def new_unary(operator: Operator, operand: Node) -> PrefixExpression:
    return PrefixExpression(operator, operand)


def new_binary(operator: Operator, left: Node, right: Node) -> BinaryExpression:
    return BinaryExpression(left, operator, right)
