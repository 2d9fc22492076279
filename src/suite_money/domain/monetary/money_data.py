from __future__ import annotations

from dataclasses import dataclass

from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.currency import Currency


@dataclass(frozen=True)
class MoneyData:
    """Amount and currency as exchanged with encoders and decoders.

    Unlike `Money`, the amount is taken as-is: decoders may return any scale and
    `Money.decoding` rescales it to the currency.

    Attributes:
        amount (FixedDecimal): The monetary amount.
        currency (Currency): The currency of $amount.
    """

    amount: FixedDecimal
    currency: Currency

    def __post_init__(self):
        # Raise: keep encoders and decoders typed at the boundary
        if not isinstance(self.amount, FixedDecimal):
            raise TypeError(f"$amount must be a FixedDecimal, but provided type is: '{type(self.amount).__name__}'")
        if not isinstance(self.currency, Currency):
            raise TypeError(f"$currency must be a Currency, but provided type is: '{type(self.currency).__name__}'")
