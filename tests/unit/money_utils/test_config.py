import logging

import pytest

from money_utils import Money, MoneySettings, RoundingMode, configure, get_settings, reset_settings


def test_default_settings():
    settings = get_settings()
    assert settings == MoneySettings()
    assert settings.default_rounding_mode == RoundingMode.ROUND_HALF_EVEN
    assert settings.division_precision == 34
    assert settings.default_locale == "en_US"


def test_settings_are_loaded_from_environment(monkeypatch):
    monkeypatch.setenv("MONEY_UTILS_DEFAULT_ROUNDING_MODE", "HALF_UP")
    monkeypatch.setenv("MONEY_UTILS_DIVISION_PRECISION", "10")
    monkeypatch.setenv("MONEY_UTILS_DEFAULT_LOCALE", "de_DE")
    reset_settings()

    settings = get_settings()
    assert settings.default_rounding_mode == RoundingMode.ROUND_HALF_UP
    assert settings.division_precision == 10
    assert settings.default_locale == "de_DE"

    assert Money("0.125", "USD").round().value() == "0.13"
    assert Money("1", "USD").divide(3).value() == "0.3333333333"
    assert Money("1234.5", "USD").to_locale_string() == "1.234,50\xa0$"


def test_invalid_environment_value_is_rejected(monkeypatch):
    monkeypatch.setenv("MONEY_UTILS_DEFAULT_ROUNDING_MODE", "SOMETIMES")
    reset_settings()
    with pytest.raises(ValueError):
        get_settings()


def test_configure_overrides_selected_settings():
    settings = configure(default_rounding_mode=RoundingMode.ROUND_DOWN)
    assert settings.default_rounding_mode == RoundingMode.ROUND_DOWN
    assert settings.division_precision == 34
    assert get_settings() is settings
    assert Money("1.999", "USD").round().value() == "1.99"


def test_configure_logs_new_settings(caplog):
    with caplog.at_level(logging.INFO, logger="money_utils.config"):
        configure(default_locale="fr_FR")
    assert any("fr_FR" in record.getMessage() for record in caplog.records)


def test_configure_rejects_unknown_setting():
    with pytest.raises(TypeError, match="rounding"):
        configure(rounding="HALF_UP")


@pytest.mark.parametrize(
    "overrides, error",
    [
        ({"division_precision": 0}, ValueError),
        ({"division_precision": "34"}, ValueError),
        ({"default_locale": " "}, ValueError),
        ({"default_rounding_mode": "ROUND_UP"}, TypeError),
    ],
)
def test_configure_validates_values(overrides, error):
    with pytest.raises(error):
        configure(**overrides)
    assert get_settings() == MoneySettings()


def test_reset_settings_discards_overrides():
    configure(division_precision=5)
    reset_settings()
    assert get_settings().division_precision == 34
