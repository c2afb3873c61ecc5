"""Lexical scanning of arithmetic input into tokens."""

from __future__ import annotations

from .types import (
    OPERATOR_CHARS,
    LeftParen,
    Number,
    Operator,
    OperatorToken,
    RightParen,
    Token,
    TokenizeError,
)

DIGITS = frozenset("0123456789")


def is_number_literal(text: str) -> bool:
    """Return True if ``text`` is a decimal literal such as ``12``, ``.5``, ``3.`` or ``1.25``.

    A literal is digits with at most one decimal point and at least one digit.
    """
    seen_digit = False
    seen_point = False
    for char in text:
        if char in DIGITS:
            seen_digit = True
        elif char == "." and not seen_point:
            seen_point = True
        else:
            return False
    return seen_digit


def _flush(buffer: list[str], tokens: list[Token], position: int) -> None:
    if not buffer:
        return
    text = "".join(buffer)
    if not is_number_literal(text):
        raise TokenizeError(
            f"Malformed number {text!r} before position {position}",
            "MALFORMED_NUMBER",
            position,
        )
    tokens.append(Number(float(text), text))
    buffer.clear()


def tokenize(text: str) -> list[Token]:
    """Split arithmetic input into tokens.

    Args:
        text: Raw input, e.g. ``"(1 + 2) * 3"``

    Returns:
        Tokens in input order. Empty when the input is empty or whitespace only.

    Raises:
        TokenizeError: On a malformed number literal or any character other
            than digits, ``.``, whitespace and ``+ - * / ( )``.
    """
    tokens: list[Token] = []
    buffer: list[str] = []

    for position, char in enumerate(text):
        if char in DIGITS or char == ".":
            if char == "." and "." in buffer:
                raise TokenizeError(
                    f"Second decimal point at position {position}",
                    "DUPLICATE_DECIMAL",
                    position,
                )
            buffer.append(char)
        elif char.isspace():
            _flush(buffer, tokens, position)
        elif char in OPERATOR_CHARS:
            _flush(buffer, tokens, position)
            tokens.append(OperatorToken(Operator.from_char(char)))
        elif char == "(":
            _flush(buffer, tokens, position)
            tokens.append(LeftParen())
        elif char == ")":
            _flush(buffer, tokens, position)
            tokens.append(RightParen())
        else:
            raise TokenizeError(
                f"Illegal character {char!r} at position {position}",
                "ILLEGAL_CHARACTER",
                position,
            )

    _flush(buffer, tokens, len(text))
    return tokens
