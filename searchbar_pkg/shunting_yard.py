"""Infix to reverse Polish notation conversion (shunting-yard)."""

from __future__ import annotations

from typing import NamedTuple, Union

from .types import (
    ConversionError,
    LeftParen,
    Number,
    Operator,
    OperatorRole,
    OperatorToken,
    PrevKind,
    RightParen,
    RPNItem,
    Token,
)

# Unary minus binds tighter than any binary operator: 3*-2 is 3*(0-2).
UNARY_PRECEDENCE = 3

_UNARY_CONTEXT = (PrevKind.NONE, PrevKind.LEFT_PAREN, PrevKind.OPERATOR)
_NO_LEFT_OPERAND = (PrevKind.NONE, PrevKind.OPERATOR)


class _Pending(NamedTuple):
    operator: Operator
    precedence: int


_StackEntry = Union[_Pending, LeftParen]


def operator_role(prev: PrevKind, operator: Operator) -> OperatorRole:
    """Decide how an operator is read given the kind of the preceding token."""
    if operator in (Operator.ADD, Operator.SUB) and prev in _UNARY_CONTEXT:
        return OperatorRole.UNARY_MINUS if operator is Operator.SUB else OperatorRole.UNARY_PLUS
    if prev in _NO_LEFT_OPERAND:
        return OperatorRole.INVALID
    return OperatorRole.BINARY


def next_kind(token: Token) -> PrevKind:
    """Kind recorded after ``token`` has been accepted."""
    if isinstance(token, Number):
        return PrevKind.NUMBER
    if isinstance(token, OperatorToken):
        return PrevKind.OPERATOR
    if isinstance(token, LeftParen):
        return PrevKind.LEFT_PAREN
    if isinstance(token, RightParen):
        return PrevKind.RIGHT_PAREN
    raise TypeError(f"Unknown token kind: {token!r}")


def _push_binary(operator: Operator, stack: list[_StackEntry], output: list[RPNItem]) -> None:
    precedence = operator.precedence
    while stack:
        top = stack[-1]
        if isinstance(top, LeftParen) or top.precedence < precedence:
            break
        output.append(stack.pop().operator)
    stack.append(_Pending(operator, precedence))


def _close_paren(stack: list[_StackEntry], output: list[RPNItem]) -> None:
    while stack and not isinstance(stack[-1], LeftParen):
        output.append(stack.pop().operator)
    if not stack:
        raise ConversionError("Closing parenthesis without a match", "UNBALANCED_PARENS")
    stack.pop()


def to_rpn(tokens: list[Token]) -> list[RPNItem]:
    """Convert an infix token stream to an RPN sequence.

    A ``+`` or ``-`` with no left operand is unary: unary minus becomes
    ``0 - x`` (a literal ``0`` is emitted first), unary plus is dropped.

    Args:
        tokens: Output of ``tokenize``

    Returns:
        Sequence of floats and ``Operator`` values in postfix order

    Raises:
        ConversionError: On unbalanced parentheses or an operator without a
            left operand.
    """
    output: list[RPNItem] = []
    stack: list[_StackEntry] = []
    prev = PrevKind.NONE

    for token in tokens:
        if isinstance(token, Number):
            output.append(token.value)
        elif isinstance(token, LeftParen):
            stack.append(token)
        elif isinstance(token, RightParen):
            _close_paren(stack, output)
        elif isinstance(token, OperatorToken):
            role = operator_role(prev, token.operator)
            if role is OperatorRole.UNARY_PLUS:
                continue
            if role is OperatorRole.INVALID:
                raise ConversionError(
                    f"Operator {token.operator.value!r} has no left operand",
                    "MISSING_OPERAND",
                )
            if role is OperatorRole.UNARY_MINUS:
                output.append(0.0)
                stack.append(_Pending(Operator.SUB, UNARY_PRECEDENCE))
            else:
                _push_binary(token.operator, stack, output)
        else:
            raise TypeError(f"Unknown token kind: {token!r}")
        prev = next_kind(token)

    while stack:
        entry = stack.pop()
        if isinstance(entry, LeftParen):
            raise ConversionError("Unclosed parenthesis", "UNBALANCED_PARENS")
        output.append(entry.operator)

    return output
