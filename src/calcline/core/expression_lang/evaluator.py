"""
Expression evaluator for calcline.

Reduces a parsed tree to a float. Pure evaluation, no I/O, no error channel:
any tree produced by a successful parse evaluates. Division follows IEEE-754
instead of raising ZeroDivisionError.

Operator chains parse into left-deep trees as tall as the line is long, so
the walk uses an explicit stack rather than Python recursion.
"""

from __future__ import annotations

import math

from calcline.core.ir.expressions import BinaryExpr, BinaryOp, Expr, NumberLiteral


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value. May be inf, -inf or nan.
    """
    return _interpret(expr)


def _interpret(expr: Expr) -> float:
    """Post-order walk: left operand, right operand, then the operator."""
    values: list[float] = []
    # (node, operands already evaluated)
    stack: list[tuple[Expr, bool]] = [(expr, False)]

    while stack:
        node, ready = stack.pop()

        if isinstance(node, NumberLiteral):
            values.append(node.value)
            continue

        if isinstance(node, BinaryExpr):
            if ready:
                right = values.pop()
                left = values.pop()
                values.append(_interpret_binary(node.op, left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
            continue

        raise AssertionError(f"unreachable: unknown expression type {type(node).__name__}")

    return values.pop()


def _interpret_binary(op: BinaryOp, left: float, right: float) -> float:
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right
    if op == BinaryOp.MUL:
        return left * right
    if op == BinaryOp.DIV:
        return _divide(left, right)

    raise AssertionError(f"unreachable: unknown binary op {op!r}")


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 and nan/0 are nan."""
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)
