from __future__ import annotations

import logging
from typing import Protocol

from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CurrencyMismatchError
from suite_money.domain.monetary.money import CurrencyLike, Money, resolve_currency
from suite_money.utils.numeric_tools import DecimalLike

logger = logging.getLogger(__name__)


# region Interface


class ExchangeRateProvider(Protocol):
    """Anything that converts Money into another currency; used by `Money.exchange_to`."""

    def apply_rate(self, money: Money) -> Money:
        """Return $money converted into the target currency."""
        ...


# endregion


class ExchangeRate:
    """Fixed conversion rate from one currency into another.

    Converting multiplies the amount by $rate exactly and rounds the product half away from
    zero to $to_scale (default: scale of $to_currency).

    Example:
        1 AUD = 0.68 USD, so 10.00 AUD converts to 6.80 USD:
        >>> rate = ExchangeRate.from_num("0.68", "AUD", "USD")
        >>> Money.from_int(1000, "AUD").exchange_to(rate)
        Money(6.80, USD)
    """

    __slots__ = ("_from_currency", "_to_currency", "_rate", "_to_scale")

    def __init__(self, from_currency: Currency, to_currency: Currency, rate: FixedDecimal, to_scale: int | None = None):
        """Initialize the exchange rate.

        Args:
            from_currency: Currency of the amounts being converted.
            to_currency: Currency of the converted amounts.
            rate: Units of $to_currency per one unit of $from_currency.
            to_scale: Scale of converted amounts. Defaults to `to_currency.scale`.

        Raises:
            TypeError: If currencies are not Currency or $rate is not FixedDecimal.
            ValueError: If $rate is not positive.
        """
        if not isinstance(from_currency, Currency) or not isinstance(to_currency, Currency):
            raise TypeError(f"$from_currency and $to_currency must be Currency instances, but provided values are: {from_currency!r}, {to_currency!r}")

        if not isinstance(rate, FixedDecimal):
            raise TypeError(f"$rate must be a FixedDecimal, but provided value is: {rate!r}")

        # Raise: a zero or negative rate turns any amount into nonsense
        if not rate.is_positive:
            raise ValueError(f"Cannot call `ExchangeRate.__init__` because $rate ({rate}) is not positive")

        self._from_currency = from_currency
        self._to_currency = to_currency
        self._rate = rate
        self._to_scale = to_currency.scale if to_scale is None else to_scale

    @classmethod
    def from_fixed(cls, rate: FixedDecimal, from_currency: CurrencyLike, to_currency: CurrencyLike, to_scale: int | None = None) -> ExchangeRate:
        """Create from a FixedDecimal rate; currencies may be given by code.

        Raises:
            UnknownCurrencyError: If a currency code is not registered.
        """
        return cls(resolve_currency(from_currency), resolve_currency(to_currency), rate, to_scale)

    @classmethod
    def from_num(cls, rate: DecimalLike, from_currency: CurrencyLike, to_currency: CurrencyLike, scale: int | None = None, to_scale: int | None = None) -> ExchangeRate:
        """Create from a numeric rate; $scale limits the digits kept from $rate (default: all)."""
        return cls.from_fixed(FixedDecimal.from_num(rate, scale), from_currency, to_currency, to_scale)

    @property
    def from_currency(self) -> Currency:
        return self._from_currency

    @property
    def to_currency(self) -> Currency:
        return self._to_currency

    @property
    def rate(self) -> FixedDecimal:
        return self._rate

    @property
    def to_scale(self) -> int:
        return self._to_scale

    def apply_rate(self, money: Money) -> Money:
        """Convert $money into $to_currency.

        Raises:
            CurrencyMismatchError: If $money is not in $from_currency.
        """
        if not money.is_in_currency(self._from_currency):
            raise CurrencyMismatchError(money.currency, self._from_currency, "apply_rate")

        converted = Money((money.amount * self._rate).rescale(self._to_scale), self._to_currency)
        logger.debug(f"Exchanged {money!r} at rate {self._rate} into {converted!r}")
        return converted

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExchangeRate):
            return False
        return (
            self._from_currency == other.from_currency
            and self._to_currency == other.to_currency
            and self._rate == other.rate
            and self._to_scale == other.to_scale
        )

    def __hash__(self) -> int:
        return hash((self._from_currency, self._to_currency, self._rate, self._to_scale))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._from_currency.code}->{self._to_currency.code}, {self._rate})"
