from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise
    (`1.005` becomes `Decimal("1.005")`, not its binary approximation).

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a bool or an unsupported type.
        ValueError: If $value cannot be converted or is not finite.
    """
    # Raise: bool is an int subclass, but True/False are never amounts
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, str, float)):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided type is: '{type(value).__name__}'")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"$value ({value!r}) cannot be converted to Decimal") from e

    # Raise: NaN and Infinity have no fixed-point representation
    if not result.is_finite():
        raise ValueError(f"$value must be finite, but provided value is: {value!r}")

    return result


def divide_round_half_away(numerator: int, denominator: int) -> int:
    """Divides two integers and rounds half away from zero ("schoolbook" rounding).

    Examples:
        >>> divide_round_half_away(5, 2)
        3
        >>> divide_round_half_away(-5, 2)
        -3
        >>> divide_round_half_away(7, 3)
        2

    Raises:
        ZeroDivisionError: If $denominator is zero.
    """
    if denominator == 0:
        raise ZeroDivisionError("$denominator must not be zero")

    negative = (numerator < 0) != (denominator < 0)
    quotient, remainder = divmod(abs(numerator), abs(denominator))
    if remainder * 2 >= abs(denominator):
        quotient += 1

    return -quotient if negative else quotient
