from enum import Enum

MAX_SCALE = 18


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


def default_pattern(scale: int) -> str:
    """Return the display pattern used when a currency does not define one ('S0.00' for scale 2)."""
    return "S0" if scale == 0 else f"S0.{'0' * scale}"


class Currency:
    """Represents a currency with code, scale, and formatting metadata.

    Two currencies are interchangeable when they share code and scale; object identity
    does not matter.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC").
        scale (int): Number of decimal digits of the minor unit (0-18).
        name (str): Full currency name.
        symbol (str): Symbol written by the `S` pattern character (e.g., "$").
        pattern (str): Default display pattern (e.g., "S0.00").
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
        invert_separators (bool): When True, ',' is the decimal separator and '.' groups digits.
    """

    __slots__ = ("_code", "_scale", "_name", "_symbol", "_pattern", "_currency_type", "_invert_separators")

    def __init__(
        self,
        code: str,
        scale: int,
        name: str | None = None,
        symbol: str = "$",
        pattern: str | None = None,
        currency_type: CurrencyType = CurrencyType.FIAT,
        invert_separators: bool = False,
    ):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD", "BTC").
            scale (int): Number of decimal digits (0-18).
            name (str | None): Full currency name. Defaults to $code.
            symbol (str): Currency symbol used when formatting.
            pattern (str | None): Default display pattern. Defaults to `default_pattern(scale)`.
            currency_type (CurrencyType): Type of currency.
            invert_separators (bool): Swap the meaning of ',' and '.' in patterns.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If currency_type is not CurrencyType instance.
        """
        # Validate inputs
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0 or scale > MAX_SCALE:
            raise ValueError(f"$scale must be an integer between 0 and {MAX_SCALE}, but provided value is: {scale}")

        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(symbol, str):
            raise ValueError(f"$symbol must be a string, but provided value is: {symbol!r}")

        if pattern is not None and (not isinstance(pattern, str) or not pattern):
            raise ValueError(f"$pattern must be a non-empty string, but provided value is: {pattern!r}")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code.upper().strip()
        self._scale = scale
        self._name = self._code if name is None else name.strip()
        self._symbol = symbol
        self._pattern = default_pattern(scale) if pattern is None else pattern
        self._currency_type = currency_type
        self._invert_separators = bool(invert_separators)

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def scale(self) -> int:
        """Get the number of decimal digits of the minor unit."""
        return self._scale

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def pattern(self) -> str:
        """Get the default display pattern."""
        return self._pattern

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def invert_separators(self) -> bool:
        return self._invert_separators

    @property
    def decimal_separator(self) -> str:
        return "," if self._invert_separators else "."

    @property
    def group_separator(self) -> str:
        return "." if self._invert_separators else ","

    @property
    def scale_factor(self) -> int:
        """Number of minor units in one major unit (100 for scale 2)."""
        return 10**self._scale

    @property
    def is_fiat(self) -> bool:
        """Check if currency is fiat.

        Returns:
            bool: True if currency is fiat.
        """
        return self._currency_type == CurrencyType.FIAT

    @property
    def is_crypto(self) -> bool:
        """Check if currency is cryptocurrency.

        Returns:
            bool: True if currency is cryptocurrency.
        """
        return self._currency_type == CurrencyType.CRYPTO

    @property
    def is_commodity(self) -> bool:
        """Check if currency is commodity.

        Returns:
            bool: True if currency is commodity.
        """
        return self._currency_type == CurrencyType.COMMODITY

    def __eq__(self, other) -> bool:
        """Check equality with another Currency by code and scale."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code and self.scale == other.scale

    def __hash__(self) -> int:
        """Hash based on currency code and scale."""
        return hash((self.code, self.scale))

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.scale}, '{self.name}', {self.currency_type})"
