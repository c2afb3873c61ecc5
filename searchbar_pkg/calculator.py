"""Arithmetic preview: decides whether input is worth calculating and formats the result.

This module handles:
- Pre-filtering of input that should not show a preview
- Running tokenize -> to_rpn -> evaluate_rpn
- Rounding away binary floating-point noise and formatting the result
- Suppressing previews that merely echo the input
"""

from __future__ import annotations

from decimal import Decimal

from . import config
from .evaluator import evaluate_rpn
from .logging_config import get_logger
from .shunting_yard import to_rpn
from .tokenizer import tokenize
from .types import OPERATOR_CHARS, ExpressionError, Operator

logger = get_logger("calculator")


def format_number(value: float) -> str:
    """Format a calculation result for display.

    The value is rounded to ``ROUND_SIGNIFICANT_DIGITS`` significant digits.
    Integers are shown without a fractional part; other values keep at most
    ``MAX_FRACTION_DIGITS`` fractional digits, without trailing zeros.

    Args:
        value: Finite float

    Returns:
        Display string, e.g. ``"0.3"`` for ``0.1 + 0.2``
    """
    rounded = float(f"{value:.{config.ROUND_SIGNIFICANT_DIGITS}g}")
    if rounded.is_integer():
        if abs(rounded) >= config.EXPONENT_THRESHOLD:
            return f"{rounded:.{config.ROUND_SIGNIFICANT_DIGITS}g}"
        if rounded == 0:
            return "0"
        # shortest round-trip digits, not the exact binary value
        return format(Decimal(repr(rounded)).to_integral_value(), "f")
    text = f"{rounded:.{config.MAX_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def calculate(text: str) -> str:
    """Compute the preview for ``text``, raising on any reason not to show one.

    Args:
        text: Raw input as typed, trailing whitespace included

    Returns:
        Formatted result

    Raises:
        ExpressionError: With ``code`` one of EMPTY, TRAILING_WHITESPACE,
            TOO_LONG, NO_OPERATOR, NO_OPERATION, ECHO, or a code raised by the
            tokenizer, converter or evaluator.
    """
    if not text:
        raise ExpressionError("Empty input", "EMPTY")
    if text[-1].isspace():
        raise ExpressionError("Input ends in whitespace", "TRAILING_WHITESPACE")
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ExpressionError(
            f"Input too long (>{config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )

    trimmed = text.strip()
    if not any(char in OPERATOR_CHARS for char in trimmed):
        raise ExpressionError("No operator in input", "NO_OPERATOR")

    rpn = to_rpn(tokenize(trimmed))
    if not any(isinstance(item, Operator) for item in rpn):
        raise ExpressionError("Nothing left to calculate", "NO_OPERATION")

    formatted = format_number(evaluate_rpn(rpn))
    if formatted == trimmed:
        raise ExpressionError("Result repeats the input", "ECHO")
    return formatted


def classify_arithmetic(text: str) -> str | None:
    """Return the formatted result if ``text`` is an arithmetic expression, else None.

    Never raises for any input string.
    """
    try:
        return calculate(text)
    except ExpressionError as e:
        logger.debug(
            "Not arithmetic: %r (%s)", text, e.message, extra={"code": e.code}
        )
        return None
