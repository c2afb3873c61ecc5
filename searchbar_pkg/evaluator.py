"""Stack evaluation of RPN sequences."""

from __future__ import annotations

import math

from .types import EvaluationError, Operator, RPNItem


def apply_operator(operator: Operator, a: float, b: float) -> float:
    """Apply ``a <operator> b``. Division by zero yields NaN."""
    if operator is Operator.ADD:
        return a + b
    if operator is Operator.SUB:
        return a - b
    if operator is Operator.MUL:
        return a * b
    if operator is Operator.DIV:
        return math.nan if b == 0 else a / b
    raise TypeError(f"Unknown operator: {operator!r}")


def evaluate_rpn(rpn: list[RPNItem]) -> float:
    """Evaluate an RPN sequence.

    Raises:
        EvaluationError: On stack underflow, leftover operands, or a
            non-finite result (division by zero, overflow).
    """
    stack: list[float] = []

    for item in rpn:
        if not isinstance(item, Operator):
            stack.append(item)
            continue
        if len(stack) < 2:
            raise EvaluationError(
                f"Operator {item.value!r} needs two operands", "STACK_UNDERFLOW"
            )
        b = stack.pop()
        a = stack.pop()
        stack.append(apply_operator(item, a, b))

    if len(stack) != 1:
        raise EvaluationError(
            f"Expected one result, got {len(stack)} values", "LEFTOVER_OPERANDS"
        )
    result = stack[0]
    if not math.isfinite(result):
        raise EvaluationError(f"Result is not finite: {result}", "NON_FINITE")
    return result
