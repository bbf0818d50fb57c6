from __future__ import annotations

import re
from typing import Any

from money_utils.domain.monetary.currency import CurrencyConfig
from money_utils.domain.monetary.money import Money

_CURRENCY_CODE = re.compile(r"[A-Z]{3}")


def is_money(value: Any) -> bool:
    """True if $value is a `Money` instance."""
    return isinstance(value, Money)


def is_currency_config(value: Any) -> bool:
    """True if $value is a `CurrencyConfig` or a mapping carrying `code`, `symbol` and `name`.

    Only presence is checked; `CurrencyRegistry.register` still validates the content.
    """
    if isinstance(value, CurrencyConfig):
        return True
    return isinstance(value, dict) and all(key in value for key in ("code", "symbol", "name"))


def is_valid_currency_code(code: Any) -> bool:
    """True if $code is exactly three uppercase ASCII letters (e.g. "USD")."""
    return isinstance(code, str) and _CURRENCY_CODE.fullmatch(code) is not None
