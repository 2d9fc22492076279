from __future__ import annotations

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.currency_registry import CurrencyRegistry


def create_aud() -> Currency:
    """Create an Australian dollar with the default 'S0.00' pattern."""
    return Currency("AUD", 2, "Australian Dollar", symbol="$")


def create_euro_inverted() -> Currency:
    """Create a euro using ',' as decimal separator and '.' for grouping."""
    return Currency("EUR", 2, "Euro", symbol="€", pattern="#.##0,00 S", invert_separators=True)


def create_kwd() -> Currency:
    """Create a Kuwaiti dinar (scale 3) with a code-based pattern."""
    return Currency("KWD", 3, "Kuwaiti Dinar", symbol="KD", pattern="CCC 0.000")


def create_token(code: str = "TOK", scale: int = 6) -> Currency:
    """Create a crypto-like currency that is not part of the default registry."""
    return Currency(code, scale, "Test Token", symbol="T", currency_type=CurrencyType.CRYPTO)


def create_registry(*currencies: Currency) -> CurrencyRegistry:
    """Create an isolated registry so tests never touch the default one."""
    return CurrencyRegistry(currencies)
