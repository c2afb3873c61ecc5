"""Public API for the search bar - returns structured objects without side effects."""

from __future__ import annotations

from . import config
from .calculator import calculate
from .calculator import classify_arithmetic as _classify_arithmetic
from .router import route, submit
from .types import ClassificationOutcome, ExpressionError, PreviewResult
from .url import is_navigable_address as _is_navigable_address


def classify_arithmetic(text: str) -> str | None:
    """Formatted result of ``text`` if it is an arithmetic expression, else None.

    Example:
        >>> classify_arithmetic("2 + 2")
        '4'
        >>> classify_arithmetic("5/0") is None
        True
    """
    return _classify_arithmetic(text)


def is_navigable_address(text: str) -> bool:
    """Whether ``text`` can be opened directly instead of searched.

    Example:
        >>> is_navigable_address("localhost:8080")
        True
        >>> is_navigable_address("javascript:alert(1)")
        False
    """
    return _is_navigable_address(text)


def classify(text: str) -> ClassificationOutcome:
    """Arithmetic, Address or SearchQuery for ``text``."""
    return route(text)


def preview(text: str) -> PreviewResult:
    """Arithmetic preview with the reason it was declined.

    Example:
        >>> preview("(1+2")
        PreviewResult(ok=False, error='Unclosed parenthesis', code='UNBALANCED_PARENS')
    """
    try:
        return PreviewResult(ok=True, value=calculate(text))
    except ExpressionError as e:
        return PreviewResult(ok=False, error=e.message, code=e.code)


def navigate(text: str, engine_key: str | None = None) -> str | None:
    """URL opened on submit of ``text`` using the engine ``engine_key``.

    Unknown or missing keys fall back to ``config.DEFAULT_ENGINE``.
    """
    engines = config.SEARCH_ENGINES
    engine = engines.get(engine_key or "") or engines[config.DEFAULT_ENGINE]
    return submit(text, engine)
