from __future__ import annotations

import logging
from typing import Iterable, Iterator

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.errors import UnknownCurrencyError

logger = logging.getLogger(__name__)


class CurrencyRegistry:
    """Lookup of currencies by code.

    Populate it at start-up; lookups afterwards are plain dictionary reads.
    """

    __slots__ = ("_currencies_by_code",)

    def __init__(self, currencies: Iterable[Currency] = ()):
        self._currencies_by_code: dict[str, Currency] = {}
        self.register_all(currencies)

    def register(self, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        existing = self._currencies_by_code.get(currency.code)
        if existing is not None:
            if not overwrite:
                raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")
            logger.warning(f"Overwriting registered currency {existing!r} with {currency!r}")

        self._currencies_by_code[currency.code] = currency
        logger.debug(f"Registered currency {currency!r}")

    def register_all(self, currencies: Iterable[Currency], overwrite: bool = False) -> None:
        """Register every currency from $currencies (see `register`)."""
        for currency in currencies:
            self.register(currency, overwrite=overwrite)

    def find(self, code: str) -> Currency | None:
        """Return the currency registered under $code, or None.

        The lookup ignores case and surrounding whitespace.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        return self._currencies_by_code.get(code.upper().strip())

    def get(self, code: str) -> Currency:
        """Return the currency registered under $code.

        Raises:
            UnknownCurrencyError: If $code is not registered.
        """
        currency = self.find(code)
        if currency is None:
            raise UnknownCurrencyError(code)
        return currency

    @property
    def codes(self) -> list[str]:
        """Registered currency codes, in registration order."""
        return list(self._currencies_by_code)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.find(code) is not None

    def __iter__(self) -> Iterator[Currency]:
        return iter(list(self._currencies_by_code.values()))

    def __len__(self) -> int:
        return len(self._currencies_by_code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.codes})"


# Fiat currencies
USD = Currency("USD", 2, "US Dollar", symbol="$", currency_type=CurrencyType.FIAT)
EUR = Currency("EUR", 2, "Euro", symbol="€", pattern="0,00S", currency_type=CurrencyType.FIAT, invert_separators=True)
GBP = Currency("GBP", 2, "British Pound", symbol="£", currency_type=CurrencyType.FIAT)
JPY = Currency("JPY", 0, "Japanese Yen", symbol="¥", currency_type=CurrencyType.FIAT)
AUD = Currency("AUD", 2, "Australian Dollar", symbol="$", currency_type=CurrencyType.FIAT)
CAD = Currency("CAD", 2, "Canadian Dollar", symbol="$", currency_type=CurrencyType.FIAT)
NZD = Currency("NZD", 2, "New Zealand Dollar", symbol="$", currency_type=CurrencyType.FIAT)
CHF = Currency("CHF", 2, "Swiss Franc", symbol="Fr", pattern="C0.00", currency_type=CurrencyType.FIAT)

# Crypto currencies
BTC = Currency("BTC", 8, "Bitcoin", symbol="₿", currency_type=CurrencyType.CRYPTO)
ETH = Currency("ETH", 18, "Ethereum", symbol="Ξ", currency_type=CurrencyType.CRYPTO)
USDT = Currency("USDT", 6, "Tether", symbol="₮", currency_type=CurrencyType.CRYPTO)

# Commodities
XAU = Currency("XAU", 4, "Gold", symbol="", pattern="0.0000 CCC", currency_type=CurrencyType.COMMODITY)
XAG = Currency("XAG", 4, "Silver", symbol="", pattern="0.0000 CCC", currency_type=CurrencyType.COMMODITY)

COMMON_CURRENCIES = (USD, EUR, GBP, JPY, AUD, CAD, NZD, CHF, BTC, ETH, USDT, XAU, XAG)

# Default registry used by `Money` factories when a currency is given by code
currencies = CurrencyRegistry(COMMON_CURRENCIES)
