from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from typing import Any

from money_utils.config import get_settings
from money_utils.domain.monetary.allocation import allocate_amount
from money_utils.domain.monetary.currency import CurrencyConfig
from money_utils.domain.monetary.formatting import abbreviate, decorate, format_locale_currency, format_number
from money_utils.domain.monetary.registry import CurrencyRegistry, get_default_registry
from money_utils.domain.monetary.rounding import RoundingMode, round_decimal
from money_utils.errors import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidAmountError,
    InvalidExchangeRateError,
)
from money_utils.utils.numeric_tools import EXACT_CONTEXT, DecimalLike, as_decimal, to_plain_string


@dataclass(frozen=True)
class MoneyComparisonResult:
    """Outcome of `Money.compare`."""

    equal: bool
    greater_than: bool
    less_than: bool


def _check_places(name: str, value: int | None) -> None:
    # Raise: precision options are non-negative whole numbers
    if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
        raise ValueError(f"${name} must be a non-negative integer, but provided value is: {value!r}")


class Money:
    """Represents an exact monetary amount in a registered currency.

    The amount is a `Decimal` that is never rounded implicitly; only `round`, `divide` and
    the formatting methods round, each as documented. The currency config is resolved in
    the registry once, at construction, and kept by the instance. Derived values reuse it,
    so later registry changes never affect existing values.

    Instances are immutable; every operation returns a new `Money`.

    Examples:
        >>> price = Money("99.99", "USD")
        >>> str(price.add(price.multiply("0.2")))
        '$119.99'
        >>> [str(share) for share in Money("100.01", "USD").allocate([1, 1, 1])]
        ['$33.34', '$33.34', '$33.33']
    """

    __slots__ = (
        "_amount",
        "_currency",
        "_symbol",
        "_decimals",
        "_display_decimals",
        "_rounding_mode",
    )

    def __init__(
        self,
        value: DecimalLike,
        currency: str | CurrencyConfig,
        *,
        symbol: str | None = None,
        decimals: int | None = None,
        display_decimals: int | None = None,
        rounding_mode: RoundingMode | None = None,
        registry: CurrencyRegistry | None = None,
    ) -> None:
        """Initialize Money with value and currency.

        Args:
            value: Numeric value or decimal literal string (e.g. "100.50", 100.5, Decimal("1e3")).
            currency: Currency code (or a config, whose code is looked up) registered in $registry.
            symbol: Overrides the config symbol.
            decimals: Calculation precision; defaults to the config decimals.
            display_decimals: Display precision; defaults to the config decimals.
            rounding_mode: Defaults to `get_settings().default_rounding_mode`.
            registry: Registry to resolve $currency in; defaults to the process-wide registry.

        Raises:
            InvalidAmountError: If $value is not a finite decimal.
            CurrencyNotFoundError: If $currency is not registered.
            ValueError: If a precision option is negative or $symbol is empty.
            TypeError: If $currency or $rounding_mode has the wrong type.
        """
        amount = as_decimal(value)

        code = currency.code if isinstance(currency, CurrencyConfig) else currency
        # Raise: currency is identified by its code
        if not isinstance(code, str):
            raise TypeError(f"$currency must be a currency code string, but provided value is: {currency!r}")

        config = (registry if registry is not None else get_default_registry()).require_currency(code)

        _check_places("decimals", decimals)
        _check_places("display_decimals", display_decimals)

        # Raise: an explicit symbol must be renderable
        if symbol is not None and (not isinstance(symbol, str) or not symbol):
            raise ValueError(f"$symbol must be a non-empty string, but provided value is: {symbol!r}")

        # Raise: rounding mode must be a RoundingMode member
        if rounding_mode is not None and not isinstance(rounding_mode, RoundingMode):
            raise TypeError(f"$rounding_mode must be a RoundingMode, but provided value is: {rounding_mode!r}")

        self._amount = amount
        self._currency = config
        self._symbol = config.symbol if symbol is None else symbol
        self._decimals = config.decimals if decimals is None else decimals
        self._display_decimals = config.decimals if display_decimals is None else display_decimals
        self._rounding_mode = get_settings().default_rounding_mode if rounding_mode is None else rounding_mode

    @classmethod
    def _from_snapshot(
        cls,
        amount: Decimal,
        currency: CurrencyConfig,
        symbol: str,
        decimals: int,
        display_decimals: int,
        rounding_mode: RoundingMode,
    ) -> Money:
        # Raise: results must stay finite
        if not amount.is_finite():
            raise InvalidAmountError(f"Cannot create `Money` because the computed amount ({amount}) is not finite")

        result = cls.__new__(cls)
        result._amount = amount
        result._currency = currency
        result._symbol = symbol
        result._decimals = decimals
        result._display_decimals = display_decimals
        result._rounding_mode = rounding_mode
        return result

    def _with_amount(self, amount: Decimal) -> Money:
        return self._from_snapshot(amount, self._currency, self._symbol, self._decimals, self._display_decimals, self._rounding_mode)

    # Constructors

    @classmethod
    def zero(cls, currency: str | CurrencyConfig, **options) -> Money:
        """Create a zero amount in $currency. Accepts the same keyword options as `Money()`."""
        return cls("0", currency, **options)

    @classmethod
    def from_value(cls, value: DecimalLike, currency: str | CurrencyConfig, **options) -> Money:
        """Create Money from a value and a currency; same as calling `Money()`."""
        return cls(value, currency, **options)

    @classmethod
    def from_str(cls, value_str: str, **options) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Args:
            value_str (str): Value and currency code separated by whitespace.

        Returns:
            Money: Money object.

        Raises:
            TypeError: If $value_str is not a string.
            InvalidAmountError: If the string is empty, malformed, or its value part is invalid.
            CurrencyNotFoundError: If the currency part is not registered.
        """
        # Raise: only strings can be parsed
        if not isinstance(value_str, str):
            raise TypeError(f"$value_str must be a string, but provided value is: {value_str!r}")

        value_str = value_str.strip()
        if not value_str:
            raise InvalidAmountError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise InvalidAmountError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, currency_part = parts
        return cls(value_part, currency_part, **options)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], registry: CurrencyRegistry | None = None) -> Money:
        """Rebuild Money from a `to_dict` snapshot.

        The `negative` flag restores negative zero, which the plain `value` string drops.

        Raises:
            KeyError: If `value` or `currency` is missing.
            InvalidAmountError: If `value` is not a finite decimal.
            CurrencyNotFoundError: If `currency` is not registered.
        """
        value = data["value"]
        if data.get("negative") and isinstance(value, str) and not value.startswith("-") and as_decimal(value).is_zero():
            value = f"-{value}"

        return cls(
            value,
            data["currency"],
            symbol=data.get("symbol"),
            decimals=data.get("decimals"),
            display_decimals=data.get("displayDecimals"),
            registry=registry,
        )

    # Properties

    @property
    def amount(self) -> Decimal:
        """Exact decimal amount."""
        return self._amount

    @property
    def currency(self) -> CurrencyConfig:
        """Currency config resolved at construction."""
        return self._currency

    @property
    def currency_code(self) -> str:
        return self._currency.code

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def decimals(self) -> int:
        """Calculation precision."""
        return self._decimals

    @property
    def display_decimals(self) -> int:
        """Display precision."""
        return self._display_decimals

    @property
    def rounding_mode(self) -> RoundingMode:
        return self._rounding_mode

    @property
    def minor_unit(self) -> Decimal:
        """Smallest denomination of the currency, e.g. `Decimal("0.01")` for USD."""
        with localcontext(Context(prec=get_settings().division_precision, rounding=ROUND_HALF_EVEN)):
            return Decimal(1) / Decimal(self._currency.minor_units)

    # Guards

    def _require_money(self, other: object, method: str) -> Money:
        # Raise: binary operations are defined between Money values only
        if not isinstance(other, Money):
            raise TypeError(f"Cannot call `Money.{method}` because $other is not Money (got type '{type(other).__name__}')")
        return other

    def _check_same_currency(self, other: Money, method: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            CurrencyMismatchError: If currency codes differ.
        """
        if self._currency.code != other._currency.code:
            raise CurrencyMismatchError(self._currency.code, other._currency.code, f"call `Money.{method}`")

    @staticmethod
    def _as_scalar(value: DecimalLike, method: str, name: str) -> Decimal:
        # Raise: scalar operands must not be Money
        if isinstance(value, Money):
            raise TypeError(f"Cannot call `Money.{method}` because ${name} must be a number, not Money")
        try:
            return as_decimal(value)
        except InvalidAmountError as e:
            raise InvalidAmountError(f"Cannot call `Money.{method}` because ${name} ({value!r}) is not a finite number") from e

    # Arithmetic

    def add(self, other: Money) -> Money:
        """Return self + $other. Result keeps the configuration of self.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        other = self._require_money(other, "add")
        self._check_same_currency(other, "add")
        with localcontext(EXACT_CONTEXT):
            return self._with_amount(self._amount + other._amount)

    def subtract(self, other: Money) -> Money:
        """Return self - $other. Result keeps the configuration of self.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        other = self._require_money(other, "subtract")
        self._check_same_currency(other, "subtract")
        with localcontext(EXACT_CONTEXT):
            return self._with_amount(self._amount - other._amount)

    def multiply(self, factor: DecimalLike) -> Money:
        """Return self * $factor, exactly."""
        factor_value = self._as_scalar(factor, "multiply", "factor")
        with localcontext(EXACT_CONTEXT):
            return self._with_amount(self._amount * factor_value)

    def divide(self, divisor: DecimalLike) -> Money:
        """Return self / $divisor.

        The quotient keeps `get_settings().division_precision` significant digits (half-even).

        Raises:
            DivisionByZeroError: If $divisor is zero.
        """
        divisor_value = self._as_scalar(divisor, "divide", "divisor")

        # Raise: division by zero is undefined
        if divisor_value.is_zero():
            raise DivisionByZeroError()

        with localcontext(Context(prec=get_settings().division_precision, rounding=ROUND_HALF_EVEN)):
            return self._with_amount(self._amount / divisor_value)

    def allocate(self, ratios: Sequence[DecimalLike]) -> list[Money]:
        """Split the amount into shares proportional to $ratios.

        Shares sum exactly to the original amount. Every share is its exact proportional
        value truncated to the calculation precision, plus at most one minor unit; units
        go to the largest truncated remainders first, ties to the earliest ratio.

        Args:
            ratios: Non-negative weights, one per share.

        Returns:
            One Money per ratio, in input order, with the configuration of self.

        Raises:
            EmptyRatiosError: If $ratios is empty.
            InvalidRatiosError: If a ratio is negative or not finite, or all ratios are zero.
        """
        return [self._with_amount(share) for share in allocate_amount(self._amount, ratios, self._decimals)]

    def round(self, decimals: int | None = None) -> Money:
        """Round to $decimals places (default: calculation precision) with the instance rounding mode."""
        _check_places("decimals", decimals)
        places = self._decimals if decimals is None else decimals
        return self._with_amount(round_decimal(self._amount, places, self._rounding_mode))

    def convert_to(self, rate: Money) -> Money:
        """Convert into the currency of $rate.

        $rate states how much one unit of this currency is worth in the target currency.
        The result uses the target currency config and the precision and rounding mode of $rate.

        Examples:
            >>> str(Money("100.00", "USD").convert_to(Money("0.85", "EUR")))
            '€85.00'

        Raises:
            InvalidExchangeRateError: If $rate is zero or negative.
        """
        rate = self._require_money(rate, "convert_to")

        # Raise: exchange rate must be strictly positive
        if rate._amount <= 0:
            raise InvalidExchangeRateError(f"Cannot call `Money.convert_to` because exchange rate ({rate.value()} {rate.currency_code}) must be greater than zero")

        with localcontext(EXACT_CONTEXT):
            converted = self._amount * rate._amount

        target = rate._currency
        return self._from_snapshot(converted, target, target.symbol, rate._decimals, rate._display_decimals, rate._rounding_mode)

    def to_minor_units(self) -> int:
        """Return the amount as a whole number of minor units (e.g. cents).

        Raises:
            InvalidAmountError: If the amount is not a whole number of minor units.
        """
        with localcontext(EXACT_CONTEXT):
            units = self._amount * self._currency.minor_units

        # Raise: fractions of a minor unit cannot be expressed as an integer count
        if units != units.to_integral_value():
            raise InvalidAmountError(f"Cannot call `Money.to_minor_units` because {self.value()} {self.currency_code} is not a whole number of minor units")
        return int(units)

    # Comparison

    def equals(self, other: Money) -> bool:
        """Exact equality of amounts.

        Raises:
            CurrencyMismatchError: If currencies differ (unlike `==`, which returns False).
        """
        other = self._require_money(other, "equals")
        self._check_same_currency(other, "equals")
        return self._amount == other._amount

    def greater_than(self, other: Money) -> bool:
        other = self._require_money(other, "greater_than")
        self._check_same_currency(other, "greater_than")
        return self._amount > other._amount

    def less_than(self, other: Money) -> bool:
        other = self._require_money(other, "less_than")
        self._check_same_currency(other, "less_than")
        return self._amount < other._amount

    def greater_than_or_equal(self, other: Money) -> bool:
        other = self._require_money(other, "greater_than_or_equal")
        self._check_same_currency(other, "greater_than_or_equal")
        return self._amount >= other._amount

    def less_than_or_equal(self, other: Money) -> bool:
        other = self._require_money(other, "less_than_or_equal")
        self._check_same_currency(other, "less_than_or_equal")
        return self._amount <= other._amount

    def compare(self, other: Money) -> MoneyComparisonResult:
        """Compare with $other in one call.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        other = self._require_money(other, "compare")
        self._check_same_currency(other, "compare")
        return MoneyComparisonResult(
            equal=self._amount == other._amount,
            greater_than=self._amount > other._amount,
            less_than=self._amount < other._amount,
        )

    def is_zero(self) -> bool:
        """True for zero, including negative zero."""
        return self._amount.is_zero()

    def is_positive(self) -> bool:
        """True for amounts >= 0. Zero (of either sign) counts as positive."""
        return self._amount >= 0

    def is_negative(self) -> bool:
        """True for amounts < 0. Zero (of either sign) is never negative."""
        return self._amount < 0

    def _has_negative_sign(self) -> bool:
        # Sign bit, so "-0" keeps its minus when formatted
        return self._amount.is_signed()

    # Values and formatting

    def value(self) -> str:
        """Canonical string of the exact amount, e.g. "100.5" for "100.50". Zero is "0"."""
        return to_plain_string(self._amount)

    def absolute_value(self) -> str:
        return to_plain_string(self._amount.copy_abs())

    def negated_value(self) -> str:
        return to_plain_string(self._amount.copy_negate())

    def formatted_value(self) -> str:
        """Amount at display precision with separators and sign, e.g. "-1,234.50"."""
        text = format_number(self._amount, self._currency, self._display_decimals, self._rounding_mode)
        return decorate(text, self._has_negative_sign(), None, self._currency.symbol_position)

    def formatted_value_with_symbol(self) -> str:
        """Like `formatted_value`, with the symbol placed per config and the sign outside it, e.g. "-$1,234.50"."""
        text = format_number(self._amount, self._currency, self._display_decimals, self._rounding_mode)
        return decorate(text, self._has_negative_sign(), self._symbol, self._currency.symbol_position)

    def to_locale_string(self, locale: str | None = None, **options) -> str:
        """Format for $locale using Babel.

        Crypto currencies are not known to locale data, so they fall back to
        `formatted_value_with_symbol`.

        Args:
            locale: Locale identifier such as "en-US" or "de_DE"; defaults to `get_settings().default_locale`.
            **options: `currency_display="code"` or Babel `format_currency` options.

        Examples:
            >>> Money("1234567.89", "USD").to_locale_string("de-DE")
            '1.234.567,89\\xa0$'
        """
        if self._currency.is_crypto:
            return self.formatted_value_with_symbol()

        return format_locale_currency(self._amount, self._currency.code, locale or get_settings().default_locale, **options)

    def abbreviated_value(self, max_decimals: int = 1, with_symbol: bool = False) -> str:
        """Short form with K/M/B/T suffix, e.g. "1.2M" or "-$1.2M".

        Args:
            max_decimals: Decimal places kept after scaling.
            with_symbol: Whether to affix the currency symbol.
        """
        _check_places("max_decimals", max_decimals)
        text = abbreviate(self._amount, max_decimals, self._display_decimals, self._rounding_mode)
        return decorate(text, self._has_negative_sign(), self._symbol if with_symbol else None, self._currency.symbol_position)

    def to_dict(self) -> dict[str, Any]:
        """Structured snapshot.

        Keys: `currency`, `symbol`, `decimals`, `displayDecimals`, `value` (exact, unformatted),
        `prettyValue` (as `formatted_value_with_symbol`), `negative` (sign bit, so true for "-0").
        """
        return {
            "currency": self._currency.code,
            "symbol": self._symbol,
            "decimals": self._decimals,
            "displayDecimals": self._display_decimals,
            "value": self.value(),
            "prettyValue": self.formatted_value_with_symbol(),
            "negative": self._has_negative_sign(),
        }

    def to_json(self) -> str:
        """`to_dict` as JSON text."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    # Operators

    def __add__(self, other):
        """Add two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        """Subtract two Money objects (same currency)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number (returns Money)."""
        if isinstance(other, bool) or not isinstance(other, (Decimal, int, float, str)):
            return NotImplemented  # Money * Money doesn't make sense
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number (returns Money) or Money by Money (returns Decimal ratio)."""
        if isinstance(other, Money):
            self._check_same_currency(other, "divide")
            if other._amount.is_zero():
                raise DivisionByZeroError("Cannot divide by zero Money")
            with localcontext(Context(prec=get_settings().division_precision, rounding=ROUND_HALF_EVEN)):
                return self._amount / other._amount
        return self.divide(other)

    def __neg__(self) -> Money:
        return self._with_amount(self._amount.copy_negate())

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return self._with_amount(self._amount.copy_abs())

    def __eq__(self, other) -> bool:
        """Check equality with another Money object. Different currencies are never equal."""
        if not isinstance(other, Money):
            return False
        if self._currency.code != other._currency.code:
            return False
        return self._amount == other._amount

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __hash__(self) -> int:
        """Hash based on value and currency code."""
        return hash((self._amount, self._currency.code))

    def __str__(self) -> str:
        """Return string like '$1,000.50'."""
        return self.formatted_value_with_symbol()

    def __repr__(self) -> str:
        """Return string like 'Money(1000.5, USD)'."""
        return f"{self.__class__.__name__}({self.value()}, {self._currency.code})"
