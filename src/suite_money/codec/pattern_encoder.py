from __future__ import annotations

from suite_money.codec.pattern import PatternParts, code_for_token, iter_literal_tokens, split_pattern
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money_data import MoneyData


class PatternEncoder:
    """Formats `MoneyData` as text following a display pattern (see `suite_money.codec.pattern`).

    Examples (USD, amount 1234.5):
        'S0.00'      -> '$1234.50'
        'S#,##0.00'  -> '$1,234.50'
        'CCC 0.##'   -> 'USD 1234.5'
        'SCCC0'      -> '$USD1235'

    Negative amounts are prefixed with '-'. Digits beyond the pattern's decimal places are
    rounded half away from zero.
    """

    __slots__ = ("_pattern",)

    def __init__(self, pattern: str):
        if not isinstance(pattern, str) or not pattern:
            raise ValueError(f"$pattern must be a non-empty string, but provided value is: {pattern!r}")
        self._pattern = pattern

    @property
    def pattern(self) -> str:
        return self._pattern

    def encode(self, data: MoneyData) -> str:
        parts = split_pattern(self._pattern, data.currency)

        amount = data.amount
        if amount.scale > parts.max_decimals:
            amount = amount.rescale(parts.max_decimals)

        number = self._format_integer(abs(amount.integer_part), parts)
        decimals = self._format_decimals(amount.decimal_part, amount.scale, parts)
        if decimals:
            number += parts.decimal_separator + decimals

        sign = "-" if amount.is_negative else ""
        prefix = self._format_literal(parts.prefix, data.currency)
        suffix = self._format_literal(parts.suffix, data.currency)
        return f"{sign}{prefix}{number}{suffix}"

    @staticmethod
    def _format_integer(value: int, parts: PatternParts) -> str:
        digits = str(value).rjust(max(parts.min_integer_digits, 1), "0")
        if not parts.uses_grouping:
            return digits

        size = parts.group_size
        groups = []
        while len(digits) > size:
            groups.insert(0, digits[-size:])
            digits = digits[:-size]
        groups.insert(0, digits)
        return parts.group_separator.join(groups)

    @staticmethod
    def _format_decimals(decimal_part: int, scale: int, parts: PatternParts) -> str:
        digits = str(decimal_part).rjust(scale, "0") if scale > 0 else ""
        digits = digits.ljust(parts.min_decimals, "0")
        # Optional '#' places drop trailing zeros
        while len(digits) > parts.min_decimals and digits.endswith("0"):
            digits = digits[:-1]
        return digits

    @staticmethod
    def _format_literal(section: str, currency: Currency) -> str:
        result = []
        for token in iter_literal_tokens(section):
            if token == "S":
                result.append(currency.symbol)
            elif token.startswith("C"):
                result.append(code_for_token(token, currency))
            else:
                result.append(token)
        return "".join(result)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._pattern}')"
