from __future__ import annotations

import re

from suite_money.codec.pattern import PatternParts, code_for_token, iter_literal_tokens, split_pattern
from suite_money.domain.fixed_decimal import FixedDecimal
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import MoneyParseError
from suite_money.domain.monetary.money_data import MoneyData


class PatternDecoder:
    """Parses text written in a display pattern back into `MoneyData`.

    The symbol (`S`) and code (`C...`) parts of the pattern are optional in the text, grouping
    separators are ignored, and a leading '-' may stand before or after the symbol/code.
    The decoded amount keeps every fractional digit found in the text; `Money.parse` rescales it.
    """

    __slots__ = ("_currency", "_pattern", "_parts", "_regex")

    def __init__(self, currency: Currency, pattern: str | None = None):
        """Initialize the decoder.

        Args:
            currency: Currency of the decoded amounts; provides symbol, code and separators.
            pattern: Display pattern. Defaults to `currency.pattern`.

        Raises:
            ValueError: If $pattern has no digit placeholder.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        self._currency = currency
        self._pattern = currency.pattern if pattern is None else pattern
        self._parts = split_pattern(self._pattern, currency)
        self._regex = self._build_regex(self._parts, currency)

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def pattern(self) -> str:
        return self._pattern

    def decode(self, value: str) -> MoneyData:
        """Decode $value into amount and currency.

        Raises:
            MoneyParseError: If $value does not match the pattern.
        """
        data = self.try_decode(value)
        if data is None:
            raise MoneyParseError(value, self._pattern, self._first_unexpected_position(value))
        return data

    def try_decode(self, value: str) -> MoneyData | None:
        """Same as `decode`, but returns None when $value does not match the pattern."""
        if not isinstance(value, str):
            raise TypeError(f"$value must be a str, but provided type is: '{type(value).__name__}'")

        match = self._regex.fullmatch(value)
        if match is None or not (match.group("integer") or match.group("fraction")):
            return None

        integer_digits = (match.group("integer") or "").replace(self._parts.group_separator, "")
        fraction_digits = match.group("fraction") or ""

        minor_units = int((integer_digits + fraction_digits) or "0")
        if match.group("sign_before") or match.group("sign_after"):
            minor_units = -minor_units

        return MoneyData(FixedDecimal(minor_units, len(fraction_digits)), self._currency)

    # region Utilities

    @classmethod
    def _build_regex(cls, parts: PatternParts, currency: Currency) -> re.Pattern:
        group = re.escape(parts.group_separator)
        decimal = re.escape(parts.decimal_separator)

        if parts.uses_grouping:
            integer = rf"(?P<integer>\d(?:\d|{group}(?=\d))*)?"
        else:
            integer = r"(?P<integer>\d+)?"

        return re.compile(
            r"\s*(?P<sign_before>-)?\s*"
            + cls._literal_regex(parts.prefix, currency)
            + r"\s*(?P<sign_after>-)?"
            + integer
            + rf"(?:{decimal}(?P<fraction>\d+))?"
            + cls._literal_regex(parts.suffix, currency)
            + r"\s*"
        )

    @staticmethod
    def _literal_regex(section: str, currency: Currency) -> str:
        result = []
        for token in iter_literal_tokens(section):
            if token == "S":
                if currency.symbol:
                    result.append(f"(?:{re.escape(currency.symbol)})?")
            elif token.startswith("C"):
                result.append(f"(?:{re.escape(code_for_token(token, currency))})?")
            elif token.isspace():
                result.append(r"\s*")
            else:
                result.append(re.escape(token))
        return "".join(result)

    def _first_unexpected_position(self, value: str) -> int | None:
        """Return the index of the first character that cannot belong to the pattern, if any."""
        allowed = set("0123456789-")
        allowed.update(self._parts.decimal_separator, self._parts.group_separator)
        allowed.update(self._currency.symbol, self._currency.code)
        allowed.update(ch for ch in self._parts.prefix + self._parts.suffix if ch != "S" and ch != "C")

        for index, ch in enumerate(value):
            if ch not in allowed and not ch.isspace():
                return index
        return None

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._currency.code}, '{self._pattern}')"
