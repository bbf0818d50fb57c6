from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from money_utils.config import (
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_THOUSANDS_SEPARATOR,
)


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


class SymbolPosition(Enum):
    """Where the currency symbol is placed relative to the amount."""

    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class CurrencyConfig:
    """Formatting and precision metadata for one currency or token.

    Configs are immutable. Re-registering a code replaces the registered object, it never
    mutates an existing one, so a `Money` holding a config is unaffected by later changes.

    Attributes:
        code (str): Unique identifier (e.g., "USD", "BTC").
        name (str): Display name (e.g., "United States Dollar").
        symbol (str): Display glyph (e.g., "$", "₿").
        symbol_position (SymbolPosition): Whether the symbol goes before or after the amount.
        decimal_separator (str): Single character between integer and fractional digits.
        thousands_separator (str): Single character between groups of three integer digits.
        decimals (int): Canonical precision of the currency.
        minor_units (int): Minor units per major unit; derived as `10 ** decimals` when omitted.
        currency_type (CurrencyType): FIAT, CRYPTO or COMMODITY.
    """

    code: str
    name: str
    symbol: str
    symbol_position: SymbolPosition = SymbolPosition.PREFIX
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR
    decimals: int = DEFAULT_DECIMAL_PLACES
    minor_units: int | None = None
    currency_type: CurrencyType = CurrencyType.FIAT

    def __post_init__(self) -> None:
        # Raise: $decimals must be a non-negative integer
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int) or self.decimals < 0:
            raise ValueError(f"$decimals must be a non-negative integer, but provided value is: {self.decimals!r}")

        if self.minor_units is None:
            object.__setattr__(self, "minor_units", 10**self.decimals)

        # Raise: $minor_units must be a positive integer
        if isinstance(self.minor_units, bool) or not isinstance(self.minor_units, int) or self.minor_units <= 0:
            raise ValueError(f"$minor_units must be a positive integer, but provided value is: {self.minor_units!r}")

        # Raise: separators are single characters
        for field_name in ("decimal_separator", "thousands_separator"):
            separator = getattr(self, field_name)
            if not isinstance(separator, str) or len(separator) != 1:
                raise ValueError(f"${field_name} must be a single character, but provided value is: '{separator}'")

        if not isinstance(self.symbol_position, SymbolPosition):
            raise TypeError(f"$symbol_position must be a SymbolPosition instance, but provided value is: {self.symbol_position!r}")

        if not isinstance(self.currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {self.currency_type!r}")

    @property
    def is_fiat(self) -> bool:
        """Check if currency is fiat."""
        return self.currency_type == CurrencyType.FIAT

    @property
    def is_crypto(self) -> bool:
        """Check if currency is cryptocurrency.

        Crypto currencies skip locale-aware formatting, because locale data does not know their codes.
        """
        return self.currency_type == CurrencyType.CRYPTO

    @property
    def is_commodity(self) -> bool:
        """Check if currency is commodity."""
        return self.currency_type == CurrencyType.COMMODITY

    def __str__(self) -> str:
        """Return the currency code."""
        return self.code
