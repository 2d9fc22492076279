from __future__ import annotations

from typing import Protocol, TypeVar

from suite_money.domain.monetary.money_data import MoneyData

T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


# region Interface


class MoneyEncoder(Protocol[T_co]):
    """Converts a `MoneyData` into an external representation (text, row, dict, ...).

    Used by `Money.encoded_by`, so `Money` never depends on a concrete format.
    """

    def encode(self, data: MoneyData) -> T_co:
        """Return the encoded form of $data."""
        ...


class MoneyDecoder(Protocol[T_contra]):
    """Converts an external representation into a `MoneyData`.

    Used by `Money.decoding`. Implementations raise `MoneyParseError` or
    `UnknownCurrencyError` when $value cannot be decoded.
    """

    def decode(self, value: T_contra) -> MoneyData:
        """Return amount and currency decoded from $value."""
        ...


# endregion
