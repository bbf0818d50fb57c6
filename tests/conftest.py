import pytest

from money_utils import Currency, reset_settings

SETTINGS_ENVIRONMENT_VARIABLES = (
    "MONEY_UTILS_DEFAULT_ROUNDING_MODE",
    "MONEY_UTILS_DIVISION_PRECISION",
    "MONEY_UTILS_DEFAULT_LOCALE",
)


@pytest.fixture(autouse=True)
def default_money_state(monkeypatch):
    """Every test starts and ends with the default currency set and default settings."""
    for name in SETTINGS_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)

    Currency.initialize()
    reset_settings()
    yield
    Currency.initialize()
    reset_settings()
