import math

from sansu.errors import EvaluateError
from sansu.node import Node, Literal, PrefixExpression, BinaryExpression
from sansu.token import Operator

Number = int | float


def symbol(operator: Operator | str) -> str:
    return getattr(operator, "value", str(operator))


def divide(left: Number, right: Number) -> Number:
    if right == 0:
        raise EvaluateError("Division by zero", details={"dividend": left})
    if isinstance(left, int) and isinstance(right, int) and left % right == 0:
        return left // right
    return left / right


def apply_binary(operator: Operator, left: Number, right: Number) -> Number:
    match operator:
        case Operator.Add:
            return left + right
        case Operator.Sub:
            return left - right
        case Operator.Mul:
            return left * right
        case Operator.Div:
            return divide(left, right)
    raise EvaluateError(
        f"Unknown operator: {symbol(operator)}", details={"operator": symbol(operator)}
    )


def evaluate_prefix(node: PrefixExpression) -> Number:
    value = evaluate_node(node.operand)
    if node.operator == Operator.Sub:
        return -value
    raise EvaluateError(
        f"Unknown prefix operator: {symbol(node.operator)}",
        details={"operator": symbol(node.operator)},
    )


def evaluate_binary(node: BinaryExpression) -> Number:
    # Left-associative chains nest down the left side, as deep as the
    # operator count; walk that spine in a loop and fold back up in order.
    spine = []
    while isinstance(node, BinaryExpression):
        spine.append(node)
        node = node.left
    value = evaluate_node(node)
    for current in reversed(spine):
        value = combine(current, value, evaluate_node(current.right))
    return value


def combine(node: BinaryExpression, left: Number, right: Number) -> Number:
    try:
        result = apply_binary(node.operator, left, right)
    except OverflowError:
        raise EvaluateError(
            "Numeric overflow", details={"operator": symbol(node.operator)}
        ) from None
    if isinstance(result, float) and not math.isfinite(result):
        raise EvaluateError("Numeric overflow", details={"operator": symbol(node.operator)})
    return result


def evaluate_node(node: Node) -> Number:
    match node:
        case Literal(value=value):
            return value
        case PrefixExpression():
            return evaluate_prefix(node)
        case BinaryExpression():
            return evaluate_binary(node)
    raise EvaluateError(f"Unknown object: {node!r}")


def evaluate_tree(node: Node) -> Number:
    """Reduce ``node`` to a number.

    Left chains are folded iteratively, so only nesting on the right or under
    a prefix operator recurses. A tree nested past the interpreter's
    recursion limit that way is reported as ``EvaluateError`` rather than
    escaping as ``RecursionError``.
    """
    try:
        return evaluate_node(node)
    except RecursionError:
        raise EvaluateError("Expression too deeply nested to evaluate") from None
