__version__ = "0.1.0"

from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.currency_registry import CurrencyRegistry, currencies
from suite_money.domain.monetary.errors import (
    CurrencyMismatchError,
    InvalidAllocationError,
    InvalidScaleError,
    MoneyDivisionByZeroError,
    MoneyError,
    MoneyParseError,
    UnknownCurrencyError,
)
from suite_money.domain.monetary.exchange_rate import ExchangeRate
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.money_data import MoneyData

__all__ = [
    "Currency",
    "CurrencyMismatchError",
    "CurrencyRegistry",
    "CurrencyType",
    "ExchangeRate",
    "FixedDecimal",
    "InvalidAllocationError",
    "InvalidScaleError",
    "Money",
    "MoneyData",
    "MoneyDivisionByZeroError",
    "MoneyError",
    "MoneyParseError",
    "UnknownCurrencyError",
    "currencies",
]
