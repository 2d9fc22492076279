"""Errors raised by the monetary domain.

Each error subclasses `MoneyError` and the closest builtin (`ValueError` or
`ZeroDivisionError`), so callers may catch either.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from suite_money.domain.monetary.currency import Currency


class MoneyError(Exception):
    """Base class of all errors raised by suite_money."""


class UnknownCurrencyError(MoneyError, ValueError):
    """Raised when a currency code is not registered."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Currency with code '{code}' is not registered")


class MoneyParseError(MoneyError, ValueError):
    """Raised when text does not match the expected monetary pattern.

    Attributes:
        text: The text that failed to parse.
        pattern: The pattern the text was matched against (None for plain decimals).
        position: Index of the first offending character in $text, when known.
        detail: Optional human-readable explanation.
    """

    def __init__(self, text: str, pattern: str | None = None, position: int | None = None, detail: str | None = None):
        self.text = text
        self.pattern = pattern
        self.position = position
        self.detail = detail

        message = f"Cannot parse '{text}'"
        if pattern is not None:
            message += f" with pattern '{pattern}'"
        if position is not None and 0 <= position < len(text):
            message += f": unexpected character '{text[position]}' at position {position}"
        if detail:
            message += f" - {detail}"

        super().__init__(message)


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when a binary operation mixes two different currencies."""

    def __init__(self, first: Currency, second: Currency, operation: str | None = None):
        self.first = first
        self.second = second
        self.operation = operation

        target = f"`{operation}`" if operation else "operation"
        super().__init__(f"Cannot call {target} on different currencies: {first.code} (scale {first.scale}) and {second.code} (scale {second.scale})")


class InvalidAllocationError(MoneyError, ValueError):
    """Raised when ratios or target count cannot describe an allocation."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Cannot allocate because {reason}")


class MoneyDivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when dividing a monetary or fixed-point amount by zero."""

    def __init__(self, operation: str = "divide"):
        self.operation = operation
        super().__init__(f"Cannot call `{operation}` because $divisor is zero")


class InvalidScaleError(MoneyError, ValueError):
    """Raised when a scale is negative or not an integer."""

    def __init__(self, scale: object):
        self.scale = scale
        super().__init__(f"$scale must be a non-negative integer, but provided value is: {scale!r}")
