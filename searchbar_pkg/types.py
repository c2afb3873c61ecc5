"""Type definitions: tokens, operators, classification outcomes and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Operator(Enum):
    """Binary arithmetic operator. All operators are left-associative."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        return 2 if self in (Operator.MUL, Operator.DIV) else 1

    @classmethod
    def from_char(cls, char: str) -> Operator:
        return cls(char)


OPERATOR_CHARS = frozenset(op.value for op in Operator)


@dataclass(frozen=True)
class Number:
    """Numeric literal token."""

    value: float
    text: str


@dataclass(frozen=True)
class OperatorToken:
    operator: Operator


@dataclass(frozen=True)
class LeftParen:
    pass


@dataclass(frozen=True)
class RightParen:
    pass


Token = Union[Number, OperatorToken, LeftParen, RightParen]
RPNItem = Union[float, Operator]


class PrevKind(Enum):
    """Kind of the token accepted just before the current one."""

    NONE = "none"
    NUMBER = "number"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    OPERATOR = "operator"


class OperatorRole(Enum):
    """How an operator token is read at its position."""

    BINARY = "binary"
    UNARY_MINUS = "unary_minus"
    UNARY_PLUS = "unary_plus"
    INVALID = "invalid"


@dataclass(frozen=True)
class Arithmetic:
    """Input is an arithmetic expression; ``value`` is the formatted result."""

    value: str
    kind: str = "arithmetic"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "value": self.value}


@dataclass(frozen=True)
class Address:
    """Input is safe to open directly."""

    address: str
    kind: str = "address"

    @property
    def url(self) -> str:
        """Address with ``https://`` prefixed when it carries no scheme."""
        from .url import navigation_url

        return navigation_url(self.address)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "address": self.address, "url": self.url}


@dataclass(frozen=True)
class SearchQuery:
    """Input goes to the selected search engine."""

    query: str
    kind: str = "search"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "query": self.query}


ClassificationOutcome = Union[Arithmetic, Address, SearchQuery]


@dataclass(frozen=True)
class SearchEngine:
    """A search destination: form action endpoint plus query parameter name."""

    key: str
    name: str
    action: str
    param: str


@dataclass
class PreviewResult:
    """Result of computing the arithmetic preview for an input."""

    ok: bool
    value: str | None = None
    error: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = self.value
        if self.error is not None:
            result_dict["error"] = self.error
        if self.code is not None:
            result_dict["code"] = self.code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"PreviewResult(ok=False, error={self.error!r}, code={self.code!r})"
        return f"PreviewResult(ok=True, value={self.value!r})"


class ExpressionError(Exception):
    """Raised when an input cannot be read as an arithmetic expression."""

    def __init__(self, message: str, code: str = "EXPRESSION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class TokenizeError(ExpressionError):
    """Raised on a lexical failure: bad number literal or illegal character."""

    def __init__(self, message: str, code: str = "TOKENIZE_ERROR", position: int | None = None):
        self.position = position
        super().__init__(message, code)


class ConversionError(ExpressionError):
    """Raised on a structural failure: unbalanced parentheses or missing operand."""

    def __init__(self, message: str, code: str = "CONVERSION_ERROR"):
        super().__init__(message, code)


class EvaluationError(ExpressionError):
    """Raised on a numeric failure: stack underflow or non-finite result."""

    def __init__(self, message: str, code: str = "EVALUATION_ERROR"):
        super().__init__(message, code)
