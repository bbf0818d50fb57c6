from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, localcontext
from fractions import Fraction

from money_utils.errors import EmptyRatiosError, InvalidAmountError, InvalidRatiosError
from money_utils.utils.numeric_tools import EXACT_CONTEXT, DecimalLike, as_decimal


def _as_ratio(ratio: DecimalLike, index: int) -> Decimal:
    try:
        value = as_decimal(ratio)
    except InvalidAmountError as e:
        raise InvalidRatiosError(f"Cannot allocate because $ratios[{index}] ({ratio!r}) is not a finite number") from e

    # Raise: shares are proportional to ratios, so a negative ratio has no meaning
    if value < 0:
        raise InvalidRatiosError(f"Cannot allocate because $ratios[{index}] ({ratio!r}) is negative")
    return value


def allocate_amount(amount: Decimal, ratios: Sequence[DecimalLike], places: int) -> list[Decimal]:
    """Split $amount into shares proportional to $ratios, losing or gaining nothing.

    Largest remainder method, in units of `10 ** -places`:

    1. Each exact share `|amount| * ratio / total` is kept as an unrounded `Fraction`.
    2. Every share is truncated to whole units.
    3. The units still missing are handed out one at a time, largest truncated fraction
       first. Equal fractions are served in original index order.
    4. Digits of $amount finer than one unit go to the next share in that order.

    The sign of $amount is re-applied to every share, so the shares always sum to
    $amount exactly and each share differs from its exact value by less than one unit.

    Args:
        amount: Finite decimal to split.
        ratios: Non-negative weights, one per share.
        places: Decimal places of one allocation unit.

    Returns:
        One Decimal per ratio, in input order.

    Raises:
        EmptyRatiosError: If $ratios is empty.
        InvalidRatiosError: If a ratio is negative or not finite, or all ratios are zero.

    Examples:
        >>> allocate_amount(Decimal("100.01"), [1, 1, 1], 2)
        [Decimal('33.34'), Decimal('33.34'), Decimal('33.33')]
    """
    # Raise: at least one share is needed
    if len(ratios) == 0:
        raise EmptyRatiosError()

    weights = [_as_ratio(ratio, index) for index, ratio in enumerate(ratios)]
    with localcontext(EXACT_CONTEXT):
        total = sum(weights, Decimal(0))

    # Raise: proportional shares are undefined when every ratio is zero
    if total == 0:
        raise InvalidRatiosError(f"Cannot allocate because $ratios ({list(ratios)}) sum to zero")

    scale = 10**places
    magnitude = amount.copy_abs()
    exact_units = [Fraction(magnitude) * Fraction(weight) / Fraction(total) * scale for weight in weights]
    units = [int(exact) for exact in exact_units]  # truncation; all values are >= 0

    missing = Fraction(magnitude) * scale - sum(units)
    whole_missing = int(missing)

    # sorted() keeps index order for equal keys, also with reverse=True
    ranking = sorted(range(len(units)), key=lambda i: exact_units[i] - units[i], reverse=True)
    for index in ranking[:whole_missing]:
        units[index] += 1

    with localcontext(EXACT_CONTEXT):
        shares = [Decimal(unit).scaleb(-places) for unit in units]
        leftover = magnitude - sum(shares, Decimal(0))
        if leftover:
            target = ranking[whole_missing]
            shares[target] = shares[target] + leftover

        if amount.is_signed():
            shares = [-share for share in shares]

    return shares
