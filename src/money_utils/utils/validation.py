from __future__ import annotations

from dataclasses import dataclass

from money_utils.errors import INVALID_AMOUNT_MESSAGE, InvalidAmountError
from money_utils.utils.numeric_tools import DecimalLike, as_decimal


@dataclass(frozen=True)
class MoneyValidationResult:
    """Outcome of `validate_money_input`; $error is set only when $is_valid is False."""

    is_valid: bool
    error: str | None = None


def validate_money_input(value: DecimalLike) -> MoneyValidationResult:
    """Check whether $value can be used as a `Money` amount, without raising.

    Examples:
        >>> validate_money_input("100.00")
        MoneyValidationResult(is_valid=True, error=None)
        >>> validate_money_input("12.34.56").error
        'Invalid amount provided'
    """
    try:
        as_decimal(value)
    except InvalidAmountError:
        return MoneyValidationResult(is_valid=False, error=INVALID_AMOUNT_MESSAGE)
    return MoneyValidationResult(is_valid=True)
