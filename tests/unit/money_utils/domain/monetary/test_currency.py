from dataclasses import FrozenInstanceError

import pytest

from money_utils import Currency, CurrencyConfig, CurrencyType, SymbolPosition


@pytest.mark.parametrize(
    "config, code, symbol, decimals, minor_units",
    [
        (Currency.USD, "USD", "$", 2, 100),
        (Currency.EUR, "EUR", "€", 2, 100),
        (Currency.GBP, "GBP", "£", 2, 100),
        (Currency.JPY, "JPY", "¥", 2, 100),
        (Currency.BTC, "BTC", "₿", 8, 100_000_000),
        (Currency.ETH, "ETH", "Ξ", 18, 10**18),
    ],
)
def test_default_currencies(config, code, symbol, decimals, minor_units):
    assert config.code == code
    assert config.symbol == symbol
    assert config.decimals == decimals
    assert config.minor_units == minor_units
    assert config.symbol_position == SymbolPosition.PREFIX
    assert config.decimal_separator == "."
    assert config.thousands_separator == ","


def test_currency_types():
    assert Currency.USD.is_fiat
    assert not Currency.USD.is_crypto
    assert Currency.BTC.is_crypto
    assert Currency.ETH.currency_type == CurrencyType.CRYPTO
    assert CurrencyConfig("XAU", "Gold", "Au", currency_type=CurrencyType.COMMODITY).is_commodity


def test_minor_units_default_to_power_of_ten():
    assert CurrencyConfig("XTS", "Test", "T", decimals=3).minor_units == 1000
    assert CurrencyConfig("XTS", "Test", "T", decimals=0).minor_units == 1
    assert CurrencyConfig("XTS", "Test", "T", decimals=2, minor_units=5).minor_units == 5


@pytest.mark.parametrize(
    "options",
    [
        {"decimals": -1},
        {"decimals": 2.5},
        {"minor_units": 0},
        {"decimal_separator": ""},
        {"thousands_separator": ", "},
    ],
)
def test_invalid_config_is_rejected(options):
    with pytest.raises(ValueError):
        CurrencyConfig("XTS", "Test", "T", **options)


def test_enum_fields_are_type_checked():
    with pytest.raises(TypeError):
        CurrencyConfig("XTS", "Test", "T", symbol_position="prefix")
    with pytest.raises(TypeError):
        CurrencyConfig("XTS", "Test", "T", currency_type="FIAT")


def test_currency_config_is_immutable():
    with pytest.raises(FrozenInstanceError):
        Currency.USD.symbol = "US$"


def test_currency_config_str_is_code():
    assert str(Currency.GBP) == "GBP"
