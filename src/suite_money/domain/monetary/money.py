from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence

from suite_money.codec.pattern_decoder import PatternDecoder
from suite_money.codec.pattern_encoder import PatternEncoder
from suite_money.domain.allocation import even_ratios
from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import currencies
from suite_money.domain.monetary.errors import CurrencyMismatchError, MoneyDivisionByZeroError
from suite_money.domain.monetary.money_data import MoneyData
from suite_money.utils.numeric_tools import DecimalLike

if TYPE_CHECKING:
    from suite_money.codec.protocol import MoneyDecoder, MoneyEncoder
    from suite_money.domain.monetary.exchange_rate import ExchangeRateProvider

logger = logging.getLogger(__name__)

CurrencyLike = Currency | str


def resolve_currency(currency: CurrencyLike) -> Currency:
    """Return $currency itself, or the currency registered under that code.

    Raises:
        UnknownCurrencyError: If $currency is a code that is not registered.
        TypeError: If $currency is neither Currency nor str.
    """
    if isinstance(currency, Currency):
        return currency
    if isinstance(currency, str):
        return currencies.get(currency)
    raise TypeError(f"$currency must be a Currency instance or a currency code, but provided value is: {currency!r}")


class Money:
    """Represents a monetary amount with currency.

    The amount is a `FixedDecimal` (arbitrary-precision minor units plus scale), so no
    floating-point drift can occur. The scale is the currency's unless a factory was given an
    explicit $scale; it never changes afterwards except through arithmetic that rescales
    results back to `currency.scale`.

    Build instances through the factories (`from_int`, `from_num`, `from_decimal`,
    `from_fixed`, `parse`, `decoding`). Every binary operation between two Money values
    requires the same currency and raises `CurrencyMismatchError` otherwise.

    Examples:
        >>> price = Money.from_int(1000, "AUD")
        >>> str(price * 1.1)
        '$11.00'
        >>> [part.minor_units for part in Money.from_int(100, "AUD").allocate_to(3)]
        [34, 33, 33]
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: FixedDecimal, currency: Currency):
        """Initialize Money from an already-built amount and currency.

        Args:
            amount (FixedDecimal): Amount at its final scale.
            currency (Currency): Currency object.

        Raises:
            TypeError: If $amount is not FixedDecimal or $currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: conversions belong to the factories, keep the constructor exact
        if not isinstance(amount, FixedDecimal):
            raise TypeError(f"$amount must be a FixedDecimal, but provided value is: {amount!r}. Use `Money.from_num` or `Money.from_int` to convert")

        self._amount = amount
        self._currency = currency

    # region Factories

    @classmethod
    def from_int(cls, minor_units: int, currency: CurrencyLike, scale: int | None = None) -> Money:
        """Create Money from an integer count of minor units (e.g. cents).

        Args:
            minor_units: Amount in minor units; 500 is 5.00 for a scale-2 currency.
            currency: Currency or registered currency code.
            scale: Overrides `currency.scale` for this value.

        Raises:
            UnknownCurrencyError: If $currency is an unregistered code.
        """
        resolved = resolve_currency(currency)
        return cls(FixedDecimal(minor_units, resolved.scale if scale is None else scale), resolved)

    @classmethod
    def from_num(cls, amount: DecimalLike, currency: CurrencyLike, scale: int | None = None) -> Money:
        """Create Money from an amount in major units (10.50 means ten and a half).

        Floats are converted through their shortest text form, but prefer `str` or `Decimal`
        for transporting money. Extra digits are rounded half away from zero.

        Raises:
            UnknownCurrencyError: If $currency is an unregistered code.
            ValueError: If $amount cannot be converted to Decimal.
        """
        resolved = resolve_currency(currency)
        return cls(FixedDecimal.from_num(amount, resolved.scale if scale is None else scale), resolved)

    @classmethod
    def from_decimal(cls, amount: Decimal, currency: CurrencyLike, scale: int | None = None) -> Money:
        """Create Money from a Decimal in major units, rounded half away from zero to the scale."""
        if not isinstance(amount, Decimal):
            raise TypeError(f"$amount must be a Decimal, but provided value is: {amount!r}")

        resolved = resolve_currency(currency)
        return cls(FixedDecimal.from_decimal(amount, resolved.scale if scale is None else scale), resolved)

    @classmethod
    def from_fixed(cls, amount: FixedDecimal, currency: CurrencyLike, scale: int | None = None) -> Money:
        """Create Money from a FixedDecimal, rescaled to the currency (or $scale)."""
        if not isinstance(amount, FixedDecimal):
            raise TypeError(f"$amount must be a FixedDecimal, but provided value is: {amount!r}")

        resolved = resolve_currency(currency)
        return cls(amount.rescale(resolved.scale if scale is None else scale), resolved)

    @classmethod
    def parse(cls, text: str, currency: CurrencyLike, pattern: str | None = None, scale: int | None = None) -> Money:
        """Parse $text written in $pattern (default: `currency.pattern`).

        Symbol and code are optional in $text. Fraction digits beyond the target scale are
        rounded half away from zero.

        Raises:
            UnknownCurrencyError: If $currency is an unregistered code.
            MoneyParseError: If $text does not match the pattern.
        """
        resolved = resolve_currency(currency)
        data = PatternDecoder(resolved, pattern).decode(text)
        return cls(data.amount.rescale(resolved.scale if scale is None else scale), resolved)

    @classmethod
    def try_parse(cls, text: str, currency: CurrencyLike, pattern: str | None = None, scale: int | None = None) -> Money | None:
        """Same as `parse`, but returns None when the currency is unknown or $text does not match."""
        resolved = currencies.find(currency) if isinstance(currency, str) else currency
        if resolved is None:
            logger.debug(f"`try_parse` returned None for $text '{text}': currency code '{currency}' is not registered")
            return None

        data = PatternDecoder(resolved, pattern).try_decode(text)
        if data is None:
            logger.debug(f"`try_parse` returned None for $text '{text}': it does not match pattern '{pattern or resolved.pattern}'")
            return None

        return cls(data.amount.rescale(resolved.scale if scale is None else scale), resolved)

    @classmethod
    def decoding(cls, value: Any, decoder: MoneyDecoder) -> Money:
        """Create Money from $value using $decoder; the amount is rescaled to the decoded currency."""
        data = decoder.decode(value)
        return cls(data.amount.rescale(data.currency.scale), data.currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> FixedDecimal:
        """Get the fixed-point amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def minor_units(self) -> int:
        """Get the amount in minor units ($10.10 is 1010)."""
        return self._amount.minor_units

    @property
    def scale(self) -> int:
        return self._amount.scale

    @property
    def integer_part(self) -> int:
        """Digits before the decimal point."""
        return self._amount.integer_part

    @property
    def decimal_part(self) -> int:
        """Digits after the decimal point."""
        return self._amount.decimal_part

    @property
    def sign(self) -> int:
        return self._amount.sign

    @property
    def is_zero(self) -> bool:
        return self._amount.is_zero

    @property
    def is_positive(self) -> bool:
        """True when strictly greater than zero. Use `not money.is_negative` for >= 0."""
        return self._amount.is_positive

    @property
    def is_negative(self) -> bool:
        return self._amount.is_negative

    # endregion

    # region Currency checks

    def is_in_currency(self, currency: CurrencyLike) -> bool:
        """Return True if this money is in $currency (Currency or code).

        Unknown codes simply return False.
        """
        if isinstance(currency, str):
            return self._currency == currencies.find(currency)
        return self._currency == currency

    def is_in_same_currency_as(self, other: Money) -> bool:
        return self._currency == other.currency

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Args:
            other (Money): The other Money object.
            operation (str): Name of the operation, used in the error message.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if not self.is_in_same_currency_as(other):
            raise CurrencyMismatchError(self._currency, other.currency, operation)

    def _with_amount(self, amount: FixedDecimal) -> Money:
        return Money(amount, self._currency)

    def exchange_to(self, exchange_rate: ExchangeRateProvider) -> Money:
        """Convert into another currency through $exchange_rate (see `ExchangeRate.apply_rate`)."""
        return exchange_rate.apply_rate(self)

    # endregion

    # region Comparison operators (same currency required)

    def __eq__(self, other) -> bool:
        """Check equality with another Money object; different currencies are never equal."""
        if not isinstance(other, Money):
            return False
        if not self.is_in_same_currency_as(other):
            return False
        return self._amount == other.amount

    def __lt__(self, other) -> bool:
        """Check if this Money is less than another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "<")
        return self._amount < other.amount

    def __le__(self, other) -> bool:
        """Check if this Money is less than or equal to another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "<=")
        return self._amount <= other.amount

    def __gt__(self, other) -> bool:
        """Check if this Money is greater than another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, ">")
        return self._amount > other.amount

    def __ge__(self, other) -> bool:
        """Check if this Money is greater than or equal to another Money object."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, ">=")
        return self._amount >= other.amount

    def __hash__(self) -> int:
        """Hash based on amount and currency identity."""
        return hash((self._amount, self._currency))

    # endregion

    # region Arithmetic operations

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "+")
        return self._with_amount(self._amount + other.amount)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "-")
        return self._with_amount(self._amount - other.amount)

    def __mul__(self, other):
        """Multiply Money by number; the result is rounded to `currency.scale`."""
        # Money * Money doesn't make sense
        if isinstance(other, (Money, FixedDecimal)) or isinstance(other, bool) or not isinstance(other, (int, float, Decimal, str)):
            return NotImplemented
        return self._with_amount(self._amount.multiply(other).rescale(self._currency.scale))

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money) or Money by Money (returns float)."""
        if isinstance(other, Money):
            return self.divided_by(other)
        if isinstance(other, FixedDecimal) or isinstance(other, bool) or not isinstance(other, (int, float, Decimal, str)):
            return NotImplemented
        return self._with_amount(self._amount.divide(other, scale=self._currency.scale))

    def __rtruediv__(self, other):
        """Right division: number / Money (not supported)."""
        return NotImplemented

    def divided_by(self, divisor: Money) -> float:
        """Return the ratio of two amounts in the same currency as float.

        Raises:
            CurrencyMismatchError: If currencies differ.
            MoneyDivisionByZeroError: If $divisor is zero.
        """
        if not isinstance(divisor, Money):
            raise TypeError(f"$divisor must be Money, but provided value is: {divisor!r}")

        self._check_same_currency(divisor, "divided_by")

        # Raise: ratio to zero money is undefined
        if divisor.is_zero:
            raise MoneyDivisionByZeroError("divided_by")

        scale = max(self.scale, divisor.scale)
        return self._amount.rescale(scale).minor_units / divisor.amount.rescale(scale).minor_units

    def multiply_by_fixed(self, multiplier: FixedDecimal) -> Money:
        """Multiply by a FixedDecimal; exact product rounded to `currency.scale`."""
        return Money.from_fixed(self._amount * multiplier, self._currency)

    def divide_by_fixed(self, divisor: FixedDecimal) -> Money:
        """Divide by a FixedDecimal; quotient rounded once to `currency.scale`.

        Raises:
            MoneyDivisionByZeroError: If $divisor is zero.
        """
        return self._with_amount(self._amount.divide(divisor, scale=self._currency.scale))

    def modulo_fixed(self, divisor: FixedDecimal) -> Money:
        """Remainder of dividing by a FixedDecimal, rounded to `currency.scale`.

        Raises:
            MoneyDivisionByZeroError: If $divisor is zero.
        """
        return Money.from_fixed(self._amount % divisor, self._currency)

    def __neg__(self):
        return self._with_amount(-self._amount)

    def __pos__(self):
        return self

    def __abs__(self):
        return self._with_amount(abs(self._amount))

    # endregion

    # region Allocation

    def allocate(self, ratios: Sequence[int]) -> list[Money]:
        """Split into parts proportional to $ratios that sum exactly to this amount.

        Args:
            ratios: Non-empty list of non-negative integers with a positive sum.

        Returns:
            One Money per ratio, same currency and scale.

        Raises:
            InvalidAllocationError: If $ratios are empty, negative, or sum to zero.
        """
        return [self._with_amount(part) for part in self._amount.allocate(ratios)]

    def allocate_to(self, targets: int) -> list[Money]:
        """Split evenly into $targets parts; earlier parts receive leftover minor units.

        Raises:
            InvalidAllocationError: If $targets < 1.
        """
        return self.allocate(even_ratios(targets))

    # endregion

    # region Encoding

    def encoded_by(self, encoder: MoneyEncoder) -> Any:
        """Return this money encoded by $encoder."""
        return encoder.encode(MoneyData(self._amount, self._currency))

    def format(self, pattern: str) -> str:
        """Format with $pattern, e.g. 'S#,##0.00' -> '$1,234.50'. See `PatternEncoder`."""
        return self.encoded_by(PatternEncoder(pattern))

    def __str__(self) -> str:
        """Return text in the currency's default pattern, like '$1000.50'."""
        return self.format(self._currency.pattern)

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion
