from decimal import Decimal

import pytest

from money_utils import Currency, CurrencyConfig, Money, RoundingMode, SymbolPosition
from money_utils.domain.monetary.formatting import abbreviate, decorate, format_number

CUSTOM_FORMAT = CurrencyConfig("CFT", "Custom Format", "¤", decimal_separator=",", thousands_separator=".")
SWEDISH_KRONA = CurrencyConfig("SEK", "Swedish Krona", " kr", SymbolPosition.SUFFIX, decimal_separator=",", thousands_separator=" ")


@pytest.fixture
def custom_currencies():
    Currency.register([CUSTOM_FORMAT, SWEDISH_KRONA])


# Plain formatting


def test_formatted_value():
    money = Money("1234567.89", "USD")
    assert money.formatted_value() == "1,234,567.89"
    assert money.formatted_value_with_symbol() == "$1,234,567.89"
    assert str(money) == "$1,234,567.89"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0", "$0.00"),
        ("1234", "$1,234.00"),
        ("999.999", "$1,000.00"),
        ("-1234.5", "-$1,234.50"),
        ("-0.001", "-$0.00"),
        ("999999999999.99", "$999,999,999,999.99"),
    ],
)
def test_formatted_value_with_symbol(value, expected):
    assert Money(value, "USD").formatted_value_with_symbol() == expected


def test_formatting_uses_display_decimals():
    assert str(Money("1234.5", "USD", display_decimals=0)) == "$1,234"
    assert str(Money("1234.5", "USD", display_decimals=4)) == "$1,234.5000"
    assert str(Money("0.00000001", "BTC")) == "₿0.00000001"
    assert str(Money("1.5", "ETH", display_decimals=2)) == "Ξ1.50"


def test_formatting_uses_custom_separators(custom_currencies):
    assert Money("1234567.89", "CFT").formatted_value() == "1.234.567,89"
    assert str(Money("-1234567.89", "CFT")) == "-¤1.234.567,89"


def test_formatting_places_suffix_symbol(custom_currencies):
    assert str(Money("1234.5", "SEK")) == "1 234,50 kr"
    assert str(Money("-1234.5", "SEK")) == "-1 234,50 kr"
    assert Money("12", "SEK").formatted_value() == "12,00"


# Locale formatting


def test_to_locale_string():
    money = Money("1234567.89", "USD")
    assert money.to_locale_string("en-US") == "$1,234,567.89"
    assert money.to_locale_string("en_US") == "$1,234,567.89"
    assert money.to_locale_string("de-DE") == "1.234.567,89\xa0$"


def test_to_locale_string_uses_default_locale():
    assert Money("1", "USD").to_locale_string() == "$1.00"
    assert Money("-1234.5", "EUR").to_locale_string() == "-€1,234.50"


def test_to_locale_string_with_currency_code():
    formatted = Money("1234567.89", "USD").to_locale_string("en-US", currency_display="code")
    assert "USD" in formatted
    assert "$" not in formatted
    assert "1,234,567.89" in formatted


def test_to_locale_string_passes_babel_options():
    assert Money("1234.5", "USD").to_locale_string("en-US", format="¤#,##0", currency_digits=False) == "$1,234"


def test_to_locale_string_falls_back_for_crypto():
    assert Money("1.23456789", "BTC").to_locale_string("en-US") == "₿1.23456789"
    assert Money("-2", "ETH").to_locale_string("de-DE") == "-Ξ2.000000000000000000"


def test_to_locale_string_rejects_unknown_currency_display():
    with pytest.raises(ValueError):
        Money("1", "USD").to_locale_string("en-US", currency_display="name")


# Abbreviation


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1234", "$1.2K"),
        ("1234567", "$1.2M"),
        ("1234567890", "$1.2B"),
        ("1234567890123", "$1.2T"),
        ("-1234567", "-$1.2M"),
        ("1000", "$1K"),
        ("999.5", "$999.5"),
        ("12.34", "$12.3"),
    ],
)
def test_abbreviated_value_with_symbol(value, expected):
    assert Money(value, "USD").abbreviated_value(with_symbol=True) == expected


def test_abbreviated_value_without_symbol():
    assert Money("1234567", "USD").abbreviated_value() == "1.2M"
    assert Money("-1234", "USD").abbreviated_value() == "-1.2K"


def test_abbreviated_value_max_decimals():
    assert Money("1234567", "USD").abbreviated_value(max_decimals=2) == "1.23M"
    assert Money("1234567", "USD").abbreviated_value(max_decimals=0) == "1M"


def test_abbreviated_value_moves_to_next_scale():
    assert Money("999950", "USD").abbreviated_value() == "1M"
    assert Money("999999.96", "USD").abbreviated_value() == "1M"
    assert Money("999949", "USD").abbreviated_value() == "999.9K"


def test_abbreviated_value_rejects_negative_max_decimals():
    with pytest.raises(ValueError):
        Money("1", "USD").abbreviated_value(max_decimals=-1)


# Helpers


def test_format_number_ignores_sign():
    assert format_number(Decimal("-1234567.891"), Currency.USD, 2, RoundingMode.ROUND_HALF_EVEN) == "1,234,567.89"


def test_decorate():
    assert decorate("1.00", True, "$", SymbolPosition.PREFIX) == "-$1.00"
    assert decorate("1.00", False, "kr", SymbolPosition.SUFFIX) == "1.00kr"
    assert decorate("1.00", True, None, SymbolPosition.SUFFIX) == "-1.00"


def test_abbreviate_ignores_sign():
    assert abbreviate(Decimal("-2500000"), 1, 2, RoundingMode.ROUND_HALF_EVEN) == "2.5M"
    assert abbreviate(Decimal("0"), 1, 2, RoundingMode.ROUND_HALF_EVEN) == "0"


def test_formatting_amount_with_thousands_of_digits():
    money = Money("1e5000", "USD")
    formatted = money.formatted_value_with_symbol()

    assert formatted.startswith("$1,000,000,")
    assert formatted.endswith(",000.00")
    # 5001 integer digits form 1667 groups of three
    assert formatted.count(",") == 1666
    assert str(money.allocate([1, 1])[0]).startswith("$5")
    assert money.to_dict()["prettyValue"] == formatted


def test_formatting_amount_with_thousands_of_digits_uses_custom_separators(custom_currencies):
    formatted = Money("-1e4500", "CFT").formatted_value()
    assert formatted.startswith("-1.000.")
    assert formatted.endswith(".000,00")


@pytest.mark.parametrize(
    "value, mode, expected",
    [
        ("-1250", RoundingMode.ROUND_FLOOR, "-1.3K"),
        ("-1250", RoundingMode.ROUND_CEIL, "-1.2K"),
        ("1250", RoundingMode.ROUND_FLOOR, "1.2K"),
        ("1250", RoundingMode.ROUND_CEIL, "1.3K"),
        ("-1250", RoundingMode.ROUND_HALF_CEIL, "-1.2K"),
        ("-1250", RoundingMode.ROUND_HALF_FLOOR, "-1.3K"),
        ("-12.34", RoundingMode.ROUND_FLOOR, "-12.4"),
        ("-999.96", RoundingMode.ROUND_FLOOR, "-1K"),
    ],
)
def test_abbreviated_value_rounds_signed_amount(value, mode, expected):
    assert Money(value, "USD", rounding_mode=mode).abbreviated_value() == expected
