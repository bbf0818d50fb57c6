__version__ = "1.0.0"

from money_utils.config import MoneySettings, configure, get_settings, reset_settings
from money_utils.domain.monetary.currency import CurrencyConfig, CurrencyType, SymbolPosition
from money_utils.domain.monetary.money import Money, MoneyComparisonResult
from money_utils.domain.monetary.registry import Currency, CurrencyRegistry, get_default_registry
from money_utils.domain.monetary.rounding import RoundingMode
from money_utils.errors import (
    CurrencyError,
    CurrencyMismatchError,
    CurrencyNotFoundError,
    DivisionByZeroError,
    EmptyRatiosError,
    InvalidAmountError,
    InvalidCurrencyConfigError,
    InvalidExchangeRateError,
    InvalidRatiosError,
    MoneyError,
)
from money_utils.utils.guards import is_currency_config, is_money, is_valid_currency_code
from money_utils.utils.validation import MoneyValidationResult, validate_money_input

__all__ = [
    "Money",
    "MoneyComparisonResult",
    "Currency",
    "CurrencyConfig",
    "CurrencyRegistry",
    "CurrencyType",
    "SymbolPosition",
    "RoundingMode",
    "get_default_registry",
    "MoneySettings",
    "configure",
    "get_settings",
    "reset_settings",
    "MoneyError",
    "InvalidAmountError",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "EmptyRatiosError",
    "InvalidRatiosError",
    "InvalidExchangeRateError",
    "CurrencyError",
    "CurrencyNotFoundError",
    "InvalidCurrencyConfigError",
    "MoneyValidationResult",
    "validate_money_input",
    "is_money",
    "is_currency_config",
    "is_valid_currency_code",
]
