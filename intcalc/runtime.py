import operator
from typing import Callable

from intcalc.environment import Environment
from intcalc.errors import DivisionByZero, ExpressionTooDeep, ResultTooLarge
from intcalc.expression import Assignment, BinaryOperation, BinaryOperator, Expression, Literal, Sequence, Variable
from intcalc.utils import MAX_NUMBER_DIGITS

RESULT_LIMIT = 10**MAX_NUMBER_DIGITS


def evaluate(expression: Expression, environment: Environment) -> int:
    """Evaluates the tree left to right, first operands (and their assignments) before second ones

    Bindings made before a fault stay in the environment.
    """
    try:
        return _evaluate(expression, environment)
    except RecursionError:
        raise ExpressionTooDeep() from None


def _evaluate(expression: Expression, environment: Environment) -> int:
    if isinstance(expression, Literal):
        return expression.value
    elif isinstance(expression, Variable):
        return environment.get(expression.name)
    elif isinstance(expression, Assignment):
        value = _evaluate(expression.value, environment)
        environment.set(expression.name, value)
        return value
    elif isinstance(expression, (BinaryOperation, Sequence)):
        return _evaluate_chain(expression, environment)
    else:
        raise TypeError(f"Unexpected expression type: {expression!r}")


def _evaluate_chain(expression: BinaryOperation | Sequence, environment: Environment) -> int:
    # left-associative chains ("1 + 2 + ... + n", "a; b; ...; z") are as deep as they are long,
    # so the left spine is walked in a loop instead of recursively
    spine: list[BinaryOperation | Sequence] = []
    node: Expression = expression
    while isinstance(node, (BinaryOperation, Sequence)):
        spine.append(node)
        node = node.left if isinstance(node, BinaryOperation) else node.first

    result = _evaluate(node, environment)
    for node in reversed(spine):
        if isinstance(node, BinaryOperation):
            right_res = _evaluate(node.right, environment)
            result = eval_binary_operation(node.operator, result, right_res)
        else:
            result = _evaluate(node.second, environment)
    return result


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, unlike Python's floor division"""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


BINARY_OPERATION_IMPLS: dict[BinaryOperator, Callable[[int, int], int]] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: truncating_div,
}


def eval_binary_operation(op: BinaryOperator, a: int, b: int) -> int:
    if op is BinaryOperator.DIV and b == 0:
        raise DivisionByZero()
    result = BINARY_OPERATION_IMPLS[op](a, b)
    if abs(result) >= RESULT_LIMIT:
        raise ResultTooLarge()
    return result
