from __future__ import annotations

# Tabular codec: Money values to/from pandas DataFrame rows.
# One row per Money with columns: amount, currency (+ minor_units, scale when encoding).

import logging
from decimal import Decimal
from typing import Any, Iterable, Mapping

import pandas as pd

from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.currency_registry import CurrencyRegistry, currencies
from suite_money.domain.monetary.errors import MoneyParseError
from suite_money.domain.monetary.money import Money
from suite_money.domain.monetary.money_data import MoneyData

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("amount", "currency")


class MoneyRowEncoder:
    """Encodes `MoneyData` into a row mapping with amount, currency, minor_units and scale."""

    def encode(self, data: MoneyData) -> dict[str, Any]:
        return {
            "amount": data.amount.to_decimal(),
            "currency": data.currency.code,
            "minor_units": data.amount.minor_units,
            "scale": data.amount.scale,
        }


class MoneyRowDecoder:
    """Decodes a row (`pd.Series` or mapping) with 'amount' and 'currency' into `MoneyData`.

    The 'amount' cell may hold Decimal, int, str or float (floats go through `str`).
    Currency codes are resolved through $registry.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: CurrencyRegistry | None = None):
        self._registry = currencies if registry is None else registry

    def decode(self, value: pd.Series | Mapping[str, Any]) -> MoneyData:
        """Decode one row.

        Raises:
            UnknownCurrencyError: If the row's currency code is not registered.
            MoneyParseError: If the amount cell is missing or not numeric.
        """
        currency = self._registry.get(str(value["currency"]))

        cell = value["amount"]
        # Raise: empty cells are missing data, not zero
        if cell is None or (isinstance(cell, float) and pd.isna(cell)):
            raise MoneyParseError(str(cell), detail="amount cell is empty")

        try:
            amount = FixedDecimal.from_decimal(cell if isinstance(cell, (Decimal, int, float, str)) else str(cell))
        except (ValueError, TypeError) as e:
            raise MoneyParseError(str(cell), detail="amount cell is not numeric") from e

        return MoneyData(amount, currency)


def moneys_to_dataframe(moneys: Iterable[Money]) -> pd.DataFrame:
    """Return a DataFrame with one row per Money (columns: amount, currency, minor_units, scale).

    The 'amount' column holds exact `Decimal` values (object dtype).
    """
    encoder = MoneyRowEncoder()
    rows = [money.encoded_by(encoder) for money in moneys]
    return pd.DataFrame(rows, columns=["amount", "currency", "minor_units", "scale"])


def moneys_from_dataframe(df: pd.DataFrame, registry: CurrencyRegistry | None = None) -> list[Money]:
    """Decode every row of $df into Money, in row order.

    Raises:
        ValueError: If $df is not a DataFrame or lacks the 'amount'/'currency' columns.
        UnknownCurrencyError: If a row has an unregistered currency code.
        MoneyParseError: If a row's amount is missing or not numeric.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}")

    # Check: required columns present
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"The provided DataFrame is missing required columns: {', '.join(missing)}. Please ensure your DataFrame contains these columns: {', '.join(REQUIRED_COLUMNS)}")

    decoder = MoneyRowDecoder(registry)
    result = [Money.decoding(row, decoder) for _, row in df.iterrows()]
    logger.debug(f"Decoded {len(result)} Money value(s) from DataFrame")
    return result
