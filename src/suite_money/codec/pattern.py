"""Splitting of display patterns shared by `PatternEncoder` and `PatternDecoder`.

Pattern characters:
- `S`: currency symbol (e.g. '$')
- `C`, `CC`, `CCC`: first one or two characters of the currency code, or the full code
- `#`: optional digit
- `0`: required digit (zero-padded)
- `,`: grouping separator
- `.`: decimal separator
- anything else: literal text

When `Currency.invert_separators` is True, the meaning of ',' and '.' is swapped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from suite_money.domain.monetary.currency import Currency

DIGIT_CHARS = "#0"
DEFAULT_GROUP_SIZE = 3


@dataclass(frozen=True)
class PatternParts:
    """A pattern cut into literal prefix, numeric part and literal suffix.

    Attributes:
        prefix (str): Pattern text before the first digit placeholder.
        integer_pattern (str): Digit placeholders (and grouping separators) before the decimal separator.
        decimal_pattern (str | None): Digit placeholders after the decimal separator, None if absent.
        suffix (str): Pattern text after the numeric part.
        decimal_separator (str): Character used as decimal separator.
        group_separator (str): Character used as grouping separator.
    """

    prefix: str
    integer_pattern: str
    decimal_pattern: str | None
    suffix: str
    decimal_separator: str
    group_separator: str

    @property
    def uses_grouping(self) -> bool:
        return self.group_separator in self.integer_pattern

    @property
    def group_size(self) -> int:
        """Number of digit placeholders after the last grouping separator (3 for '#,##0')."""
        if not self.uses_grouping:
            return 0
        tail = self.integer_pattern.rsplit(self.group_separator, 1)[1]
        return sum(1 for ch in tail if ch in DIGIT_CHARS) or DEFAULT_GROUP_SIZE

    @property
    def min_integer_digits(self) -> int:
        return self.integer_pattern.count("0")

    @property
    def max_decimals(self) -> int:
        if self.decimal_pattern is None:
            return 0
        return sum(1 for ch in self.decimal_pattern if ch in DIGIT_CHARS)

    @property
    def min_decimals(self) -> int:
        if self.decimal_pattern is None:
            return 0
        return self.decimal_pattern.count("0")


def split_pattern(pattern: str, currency: Currency) -> PatternParts:
    """Cut $pattern into prefix, numeric part and suffix using the separators of $currency.

    Raises:
        ValueError: If $pattern is empty or has no digit placeholder.
    """
    # Raise: a pattern must say where digits go
    if not isinstance(pattern, str) or not pattern:
        raise ValueError(f"$pattern must be a non-empty string, but provided value is: {pattern!r}")

    start = next((i for i, ch in enumerate(pattern) if ch in DIGIT_CHARS), None)
    if start is None:
        raise ValueError(f"$pattern ('{pattern}') contains no digit placeholder ('#' or '0')")

    decimal_separator = currency.decimal_separator
    group_separator = currency.group_separator
    numeric_chars = DIGIT_CHARS + decimal_separator + group_separator

    end = start
    while end < len(pattern) and pattern[end] in numeric_chars:
        end += 1

    # A trailing separator belongs to the suffix unless digits follow it
    numeric = pattern[start:end]
    while numeric and numeric[-1] not in DIGIT_CHARS and not numeric.endswith(decimal_separator):
        numeric = numeric[:-1]
        end -= 1

    if decimal_separator in numeric:
        integer_pattern, decimal_pattern = numeric.split(decimal_separator, 1)
        if decimal_separator in decimal_pattern or group_separator in decimal_pattern:
            raise ValueError(f"$pattern ('{pattern}') has separators after the decimal separator")
    else:
        integer_pattern, decimal_pattern = numeric, None

    return PatternParts(
        prefix=pattern[:start],
        integer_pattern=integer_pattern,
        decimal_pattern=decimal_pattern,
        suffix=pattern[end:],
        decimal_separator=decimal_separator,
        group_separator=group_separator,
    )


def iter_literal_tokens(section: str) -> Iterator[str]:
    """Yield symbol/code tokens ('S', 'C', 'CC', 'CCC...') and single literal characters of $section."""
    index = 0
    while index < len(section):
        ch = section[index]
        if ch == "C":
            run_end = index
            while run_end < len(section) and section[run_end] == "C":
                run_end += 1
            yield section[index:run_end]
            index = run_end
        else:
            yield ch
            index += 1


def code_for_token(token: str, currency: Currency) -> str:
    """Return the part of the currency code a 'C' run stands for."""
    return currency.code if len(token) >= 3 else currency.code[: len(token)]
