from __future__ import annotations

import re
from decimal import Decimal
from typing import Sequence

from suite_money.domain.allocation import allocate_minor_units
from suite_money.domain.monetary.errors import InvalidScaleError, MoneyDivisionByZeroError, MoneyParseError
from suite_money.utils.numeric_tools import DecimalLike, as_decimal, divide_round_half_away

# Scale of a quotient when the caller of `FixedDecimal.divide` does not ask for one
DEFAULT_DIVISION_SCALE = 16

_PLAIN_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")
_PLAIN_DECIMAL_CHARS = set("+-0123456789.")


def _validate_scale(scale: object) -> int:
    # Raise: scale counts implied decimal digits, so it is a non-negative int
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
        raise InvalidScaleError(scale)
    return scale


class FixedDecimal:
    """Fixed-point decimal number: an arbitrary-precision integer of minor units plus a scale.

    The represented value is `minor_units * 10 ** -scale`, so `FixedDecimal(1005, 2)` is 10.05.
    Instances are immutable; every operation returns a new value. Whenever digits have to be
    dropped, they are rounded half away from zero ("schoolbook" rounding), which is symmetric
    for negative values: 0.125 -> 0.13 and -0.125 -> -0.13.

    Attributes:
        minor_units (int): Signed number of units of the last decimal digit.
        scale (int): Number of implied decimal digits (>= 0).
    """

    __slots__ = ("_minor_units", "_scale")

    def __init__(self, minor_units: int, scale: int = 0):
        """Initialize from minor units and scale.

        Args:
            minor_units: Signed integer amount in units of `10 ** -scale`.
            scale: Number of implied decimal digits.

        Raises:
            TypeError: If $minor_units is not an int.
            InvalidScaleError: If $scale is negative or not an int.
        """
        # Raise: minor units are whole numbers; use `from_num` or `from_decimal` for fractions
        if isinstance(minor_units, bool) or not isinstance(minor_units, int):
            raise TypeError(f"$minor_units must be an int, but provided value is: {minor_units!r}. Use `FixedDecimal.from_num` for fractional values")

        self._minor_units = minor_units
        self._scale = _validate_scale(scale)

    # region Factories

    @classmethod
    def from_int(cls, minor_units: int, scale: int = 0) -> FixedDecimal:
        """Create from a count of minor units (e.g. cents when $scale is 2)."""
        return cls(minor_units, scale)

    @classmethod
    def from_decimal(cls, value: DecimalLike, scale: int | None = None) -> FixedDecimal:
        """Create from a decimal value expressed in major units.

        Args:
            value: Decimal-like scalar. Floats are converted via `str` first.
            scale: Target scale. If None, the number of fractional digits of $value is kept.

        Returns:
            FixedDecimal at $scale, rounded half away from zero if $value has more digits.

        Raises:
            ValueError: If $value cannot be converted or is not finite.
            InvalidScaleError: If $scale is invalid.
        """
        decimal_value = as_decimal(value)
        sign, digits, exponent = decimal_value.as_tuple()

        coefficient = int("".join(str(d) for d in digits)) if digits else 0
        if sign:
            coefficient = -coefficient

        if scale is None:
            scale = max(0, -exponent)
        scale = _validate_scale(scale)

        shift = exponent + scale
        if shift >= 0:
            return cls(coefficient * 10**shift, scale)
        return cls(divide_round_half_away(coefficient, 10**-shift), scale)

    @classmethod
    def from_num(cls, value: DecimalLike, scale: int | None = None) -> FixedDecimal:
        """Create from an int, float, Decimal or numeric string in major units.

        Same as `from_decimal`; kept as the name callers reach for with plain numbers.
        """
        return cls.from_decimal(value, scale)

    @classmethod
    def parse(cls, text: str, scale: int | None = None) -> FixedDecimal:
        """Parse plain decimal text such as '-12.345'.

        Raises:
            MoneyParseError: If $text is not a plain decimal number.
        """
        if not isinstance(text, str):
            raise TypeError(f"$text must be a str, but provided value is: {text!r}")

        stripped = text.strip()
        if not _PLAIN_DECIMAL_RE.fullmatch(stripped):
            position = next((i for i, ch in enumerate(text) if ch not in _PLAIN_DECIMAL_CHARS and not ch.isspace()), None)
            raise MoneyParseError(text, position=position, detail="expected a plain decimal number")

        return cls.from_decimal(Decimal(stripped), scale)

    # endregion

    # region Properties

    @property
    def minor_units(self) -> int:
        """Get the signed amount in minor units."""
        return self._minor_units

    @property
    def scale(self) -> int:
        """Get the number of implied decimal digits."""
        return self._scale

    @property
    def sign(self) -> int:
        """Return -1, 0 or 1 following the sign of the amount."""
        return (self._minor_units > 0) - (self._minor_units < 0)

    @property
    def is_zero(self) -> bool:
        return self._minor_units == 0

    @property
    def is_positive(self) -> bool:
        """True when strictly greater than zero."""
        return self._minor_units > 0

    @property
    def is_negative(self) -> bool:
        return self._minor_units < 0

    @property
    def integer_part(self) -> int:
        """Digits before the decimal point, signed and truncated toward zero."""
        magnitude = abs(self._minor_units) // 10**self._scale
        return -magnitude if self._minor_units < 0 else magnitude

    @property
    def decimal_part(self) -> int:
        """Digits after the decimal point as a non-negative int (10.05 -> 5)."""
        return abs(self._minor_units) % 10**self._scale

    # endregion

    # region Scale

    def rescale(self, scale: int) -> FixedDecimal:
        """Return the same value expressed with $scale decimal digits.

        Growing the scale is exact. Shrinking it rounds the dropped digits half away from zero.

        Raises:
            InvalidScaleError: If $scale is negative or not an int.
        """
        scale = _validate_scale(scale)
        if scale == self._scale:
            return self
        if scale > self._scale:
            return FixedDecimal(self._minor_units * 10 ** (scale - self._scale), scale)
        return FixedDecimal(divide_round_half_away(self._minor_units, 10 ** (self._scale - scale)), scale)

    def _aligned(self, other: FixedDecimal) -> tuple[int, int, int]:
        """Return both minor units expressed at the larger of the two scales, plus that scale."""
        scale = max(self._scale, other._scale)
        return (
            self._minor_units * 10 ** (scale - self._scale),
            other._minor_units * 10 ** (scale - other._scale),
            scale,
        )

    @staticmethod
    def _coerce(value: object) -> FixedDecimal:
        """Convert an operand into FixedDecimal without losing digits."""
        if isinstance(value, FixedDecimal):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return FixedDecimal(value, 0)
        if isinstance(value, (Decimal, float, str)):
            return FixedDecimal.from_decimal(value)
        raise TypeError(f"Unsupported operand type for FixedDecimal: '{type(value).__name__}'")

    # endregion

    # region Arithmetic

    def __add__(self, other) -> FixedDecimal:
        try:
            operand = self._coerce(other)
        except TypeError:
            return NotImplemented
        a, b, scale = self._aligned(operand)
        return FixedDecimal(a + b, scale)

    def __radd__(self, other) -> FixedDecimal:
        return self.__add__(other)

    def __sub__(self, other) -> FixedDecimal:
        try:
            operand = self._coerce(other)
        except TypeError:
            return NotImplemented
        a, b, scale = self._aligned(operand)
        return FixedDecimal(a - b, scale)

    def __rsub__(self, other) -> FixedDecimal:
        try:
            operand = self._coerce(other)
        except TypeError:
            return NotImplemented
        return operand - self

    def __neg__(self) -> FixedDecimal:
        return FixedDecimal(-self._minor_units, self._scale)

    def __pos__(self) -> FixedDecimal:
        return self

    def __abs__(self) -> FixedDecimal:
        return FixedDecimal(abs(self._minor_units), self._scale)

    def multiply(self, multiplier: FixedDecimal | DecimalLike) -> FixedDecimal:
        """Return the exact product.

        An int $multiplier keeps the scale; any other multiplier adds its own number of
        fractional digits to the scale, so nothing is rounded here. Callers rescale afterwards.
        """
        operand = self._coerce(multiplier)
        return FixedDecimal(self._minor_units * operand._minor_units, self._scale + operand._scale)

    def __mul__(self, other) -> FixedDecimal:
        try:
            return self.multiply(other)
        except TypeError:
            return NotImplemented

    def __rmul__(self, other) -> FixedDecimal:
        return self.__mul__(other)

    def divide(self, divisor: FixedDecimal | DecimalLike, scale: int | None = None) -> FixedDecimal:
        """Return the quotient rounded once, half away from zero, to $scale digits.

        The quotient is computed from the exact rational value of both operands, so rounding
        happens only at $scale.

        Args:
            divisor: Non-zero FixedDecimal or Decimal-like scalar.
            scale: Scale of the result. Defaults to `max(self.scale, DEFAULT_DIVISION_SCALE)`.

        Raises:
            MoneyDivisionByZeroError: If $divisor is zero.
        """
        operand = self._coerce(divisor)

        # Raise: no finite quotient exists
        if operand.is_zero:
            raise MoneyDivisionByZeroError("divide")

        target_scale = max(self._scale, DEFAULT_DIVISION_SCALE) if scale is None else _validate_scale(scale)
        numerator = self._minor_units * 10 ** (operand._scale + target_scale)
        denominator = operand._minor_units * 10**self._scale
        return FixedDecimal(divide_round_half_away(numerator, denominator), target_scale)

    def __truediv__(self, other) -> FixedDecimal:
        try:
            operand = self._coerce(other)
        except TypeError:
            return NotImplemented
        return self.divide(operand)

    def __rtruediv__(self, other) -> FixedDecimal:
        try:
            operand = self._coerce(other)
        except TypeError:
            return NotImplemented
        return operand.divide(self)

    def modulo(self, divisor: FixedDecimal | DecimalLike) -> FixedDecimal:
        """Return the exact remainder of truncated division; it takes the sign of self.

        Raises:
            MoneyDivisionByZeroError: If $divisor is zero.
        """
        operand = self._coerce(divisor)

        # Raise: remainder of division by zero is undefined
        if operand.is_zero:
            raise MoneyDivisionByZeroError("modulo")

        a, b, scale = self._aligned(operand)
        remainder = abs(a) % abs(b)
        return FixedDecimal(-remainder if a < 0 else remainder, scale)

    def __mod__(self, other) -> FixedDecimal:
        try:
            operand = self._coerce(other)
        except TypeError:
            return NotImplemented
        return self.modulo(operand)

    def allocate(self, ratios: Sequence[int]) -> list[FixedDecimal]:
        """Split into parts proportional to $ratios; parts keep the scale and sum exactly to self."""
        return [FixedDecimal(part, self._scale) for part in allocate_minor_units(self._minor_units, ratios)]

    # endregion

    # region Comparison

    def _compare(self, other: FixedDecimal) -> int:
        a, b, _ = self._aligned(other)
        return (a > b) - (a < b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return False
        return self._compare(other) == 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._compare(other) >= 0

    def __hash__(self) -> int:
        # Equal values may differ in scale (1.0 == 1.00), so hash the normalized pair
        minor_units, scale = self._minor_units, self._scale
        while scale > 0 and minor_units % 10 == 0:
            minor_units //= 10
            scale -= 1
        return hash((minor_units, scale))

    # endregion

    # region Conversions

    def to_decimal(self) -> Decimal:
        """Return the exact value as Decimal, keeping trailing zeros."""
        return Decimal(str(self))

    def __float__(self) -> float:
        return float(self.to_decimal())

    def __int__(self) -> int:
        return self.integer_part

    def __bool__(self) -> bool:
        return not self.is_zero

    def __str__(self) -> str:
        """Return plain decimal text with exactly $scale fractional digits, e.g. '-10.05'."""
        digits = str(abs(self._minor_units)).rjust(self._scale + 1, "0")
        sign = "-" if self._minor_units < 0 else ""
        if self._scale == 0:
            return f"{sign}{digits}"
        return f"{sign}{digits[: -self._scale]}.{digits[-self._scale :]}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._minor_units}, {self._scale})"

    # endregion
