from __future__ import annotations

INVALID_AMOUNT_MESSAGE = "Invalid amount provided"
INVALID_CURRENCY_CONFIG_MESSAGE = "Invalid currency configuration"
EMPTY_RATIOS_MESSAGE = "Cannot allocate to empty ratios"
DIVISION_BY_ZERO_MESSAGE = "Division by zero is not allowed"


class MoneyError(ValueError):
    """Base class for failures raised by `Money` operations."""


class InvalidAmountError(MoneyError):
    """Value does not parse to a finite decimal."""

    def __init__(self, message: str = INVALID_AMOUNT_MESSAGE):
        super().__init__(message)


class CurrencyMismatchError(MoneyError):
    """Binary operation attempted across two different currency codes."""

    def __init__(self, current: str, other: str, operation: str = "operate"):
        self.current = current
        self.other = other
        super().__init__(f"Cannot {operation} on different currencies (current: '{current}', other: '{other}')")


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Scalar division by exactly zero."""

    def __init__(self, message: str = DIVISION_BY_ZERO_MESSAGE):
        super().__init__(message)


class EmptyRatiosError(MoneyError):
    """`allocate` was called without any ratio."""

    def __init__(self, message: str = EMPTY_RATIOS_MESSAGE):
        super().__init__(message)


class InvalidRatiosError(MoneyError):
    """Ratios are negative, non-finite, or sum to zero."""


class InvalidExchangeRateError(MoneyError):
    """Exchange rate is zero or negative."""


class CurrencyError(ValueError):
    """Base class for failures raised by the currency registry."""


class CurrencyNotFoundError(CurrencyError):
    """Currency code is not registered."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Currency config for '{code}' not found. Config can be registered with `Currency.register(<CurrencyConfig>)`")


class InvalidCurrencyConfigError(CurrencyError):
    """Currency config misses its code, symbol or name."""

    def __init__(self, message: str = INVALID_CURRENCY_CONFIG_MESSAGE):
        super().__init__(message)
