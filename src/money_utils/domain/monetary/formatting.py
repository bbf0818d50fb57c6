from __future__ import annotations

from decimal import Decimal

from babel import Locale
from babel.numbers import format_currency

from money_utils.domain.monetary.currency import CurrencyConfig, SymbolPosition
from money_utils.domain.monetary.rounding import RoundingMode, round_decimal
from money_utils.utils.numeric_tools import EXACT_CONTEXT, to_plain_string

# (power of ten, suffix), largest first
ABBREVIATION_SCALES: tuple[tuple[int, str], ...] = (
    (12, "T"),
    (9, "B"),
    (6, "M"),
    (3, "K"),
)


def format_number(amount: Decimal, config: CurrencyConfig, places: int, rounding_mode: RoundingMode) -> str:
    """Render |$amount| with $places decimals and the separators of $config. No sign, no symbol.

    Examples:
        >>> format_number(Decimal("-1234567.891"), USD, 2, RoundingMode.ROUND_HALF_EVEN)
        '1,234,567.89'
    """
    rounded = round_decimal(amount, places, rounding_mode).copy_abs()
    # Decimal groups the digits; int() rejects strings over 4300 digits
    integer_part, _, fraction_part = format(rounded, ",f").partition(".")

    grouped = integer_part.replace(",", config.thousands_separator)
    if not fraction_part:
        return grouped
    return f"{grouped}{config.decimal_separator}{fraction_part}"


def decorate(text: str, negative: bool, symbol: str | None, position: SymbolPosition) -> str:
    """Affix $symbol (if given) and the sign. The sign always goes outside the symbol: `-$1.00`."""
    if symbol is not None:
        text = f"{symbol}{text}" if position == SymbolPosition.PREFIX else f"{text}{symbol}"
    return f"-{text}" if negative else text


def abbreviate(amount: Decimal, max_decimals: int, fallback_places: int, rounding_mode: RoundingMode) -> str:
    """Render |$amount| scaled to the largest fitting K/M/B/T suffix.

    The value is rounded to $max_decimals before the scale is picked, and a scaled value
    that rounds up to 1000 moves to the next scale, so `999_999.96` renders as `1M`
    rather than `1000K`. Values below 1000 are rounded to $fallback_places.

    Rounding applies to the signed value, so `ROUND_FLOOR` turns -1250 into -1.3K
    and `ROUND_CEIL` into -1.2K. Only the returned text is unsigned.
    """
    rounded = round_decimal(amount, max_decimals, rounding_mode)
    magnitude = rounded.copy_abs()

    for index, (exponent, suffix) in enumerate(ABBREVIATION_SCALES):
        if magnitude < Decimal(1).scaleb(exponent):
            continue

        scaled = round_decimal(rounded.scaleb(-exponent, EXACT_CONTEXT), max_decimals, rounding_mode)
        if scaled.copy_abs() >= 1000 and index > 0:
            exponent, suffix = ABBREVIATION_SCALES[index - 1]
            scaled = round_decimal(rounded.scaleb(-exponent, EXACT_CONTEXT), max_decimals, rounding_mode)
        return f"{to_plain_string(scaled.copy_abs())}{suffix}"

    return to_plain_string(round_decimal(rounded, min(max_decimals, fallback_places), rounding_mode).copy_abs())


def format_locale_currency(amount: Decimal, code: str, locale: str, currency_display: str = "symbol", **options) -> str:
    """Format $amount for $locale with Babel.

    Args:
        amount: Value to format.
        code: ISO 4217 currency code.
        locale: Locale identifier; both "de-DE" and "de_DE" are accepted.
        currency_display: "symbol" (default) or "code" to render the ISO code instead of the symbol.
        **options: Passed to `babel.numbers.format_currency` (e.g. `format`, `currency_digits`,
            `format_type`, `decimal_quantization`, `group_separator`).

    Raises:
        ValueError: If $currency_display is unknown or $locale cannot be parsed.
    """
    babel_locale = Locale.parse(locale.replace("-", "_"))

    if currency_display == "code":
        if "format" not in options:
            pattern = babel_locale.currency_formats["standard"].pattern
            options["format"] = pattern.replace("¤", "¤¤")
    elif currency_display != "symbol":
        raise ValueError(f"$currency_display must be 'symbol' or 'code', but provided value is: '{currency_display}'")

    return format_currency(amount, code, locale=babel_locale, **options)
