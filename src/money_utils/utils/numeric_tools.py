from __future__ import annotations

import re
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from typing import TypeAlias

from money_utils.errors import InvalidAmountError

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Context wide enough that add/sub/mul/quantize never round. Never divide with it.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_EVEN)

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to a finite `Decimal`.

    Ensures floats are converted via string to avoid precision noise. Strings must be
    plain decimal literals (optional sign, digits, optional fraction and exponent).

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        InvalidAmountError: If $value is not a finite decimal.
    """
    # Raise: bool is an int subclass but never a monetary amount
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise InvalidAmountError(f"Cannot convert $value ({value!r}) of type '{type(value).__name__}' to Decimal")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, str):
        text = value.strip()
        # Raise: only plain decimal literals are accepted
        if not _DECIMAL_LITERAL.fullmatch(text):
            raise InvalidAmountError(f"Cannot convert $value ('{value}') to Decimal because it is not a decimal literal")
        result = Decimal(text)
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise InvalidAmountError(f"Cannot convert $value ({value!r}) to Decimal") from e

    # Raise: NaN and infinities are not amounts
    if not result.is_finite():
        raise InvalidAmountError(f"Cannot use $value ({value!r}) because it is not finite")

    return result


def to_plain_string(value: Decimal) -> str:
    """Render $value positionally without exponent or trailing zeros.

    Zero is always rendered as "0", including negative zero.

    Examples:
        >>> to_plain_string(Decimal("100.50"))
        '100.5'
        >>> to_plain_string(Decimal("1E+3"))
        '1000'
    """
    if value.is_zero():
        return "0"
    return format(value.normalize(EXACT_CONTEXT), "f")
