from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
)
from enum import Enum

from money_utils.utils.numeric_tools import EXACT_CONTEXT


class RoundingMode(Enum):
    """Rounding modes supported by `Money`.

    Values are independent of the `decimal` module constants, because two of the
    modes (half toward +inf, half toward -inf) have no direct `decimal` equivalent.
    """

    ROUND_UP = "ROUND_UP"  # away from zero
    ROUND_DOWN = "ROUND_DOWN"  # toward zero
    ROUND_CEIL = "ROUND_CEIL"  # toward +inf
    ROUND_FLOOR = "ROUND_FLOOR"  # toward -inf
    ROUND_HALF_UP = "ROUND_HALF_UP"  # ties away from zero
    ROUND_HALF_DOWN = "ROUND_HALF_DOWN"  # ties toward zero
    ROUND_HALF_EVEN = "ROUND_HALF_EVEN"  # ties to even neighbour
    ROUND_HALF_CEIL = "ROUND_HALF_CEIL"  # ties toward +inf
    ROUND_HALF_FLOOR = "ROUND_HALF_FLOOR"  # ties toward -inf

    @classmethod
    def from_str(cls, name: str) -> RoundingMode:
        """Look up a mode by name, accepting the short form without the `ROUND_` prefix.

        Raises:
            ValueError: If $name is not a known rounding mode.
        """
        key = name.strip().upper()
        if not key.startswith("ROUND_"):
            key = f"ROUND_{key}"
        try:
            return cls[key]
        except KeyError as e:
            raise ValueError(f"Unknown rounding mode $name '{name}'. Available modes: {[m.name for m in cls]}") from e


_DIRECT_MODES = {
    RoundingMode.ROUND_UP: ROUND_UP,
    RoundingMode.ROUND_DOWN: ROUND_DOWN,
    RoundingMode.ROUND_CEIL: ROUND_CEILING,
    RoundingMode.ROUND_FLOOR: ROUND_FLOOR,
    RoundingMode.ROUND_HALF_UP: ROUND_HALF_UP,
    RoundingMode.ROUND_HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.ROUND_HALF_EVEN: ROUND_HALF_EVEN,
}


def _decimal_rounding(value: Decimal, mode: RoundingMode) -> str:
    direct = _DIRECT_MODES.get(mode)
    if direct is not None:
        return direct

    # Half-toward-infinity modes are half-up or half-down depending on the sign
    if mode == RoundingMode.ROUND_HALF_CEIL:
        return ROUND_HALF_DOWN if value.is_signed() else ROUND_HALF_UP
    if mode == RoundingMode.ROUND_HALF_FLOOR:
        return ROUND_HALF_UP if value.is_signed() else ROUND_HALF_DOWN

    raise ValueError(f"Unsupported $mode: {mode}")


def round_decimal(value: Decimal, places: int, mode: RoundingMode) -> Decimal:
    """Round $value to exactly $places decimal places using $mode.

    The sign of zero is preserved (e.g. `-0.001` rounds to `-0.00`).

    Args:
        value: Finite decimal to round.
        places: Number of decimal places; must be >= 0.
        mode: Rounding mode to apply.

    Returns:
        Decimal with exponent `-places`.

    Raises:
        ValueError: If $places is negative or not an int.
    """
    # Raise: precision must be a non-negative whole number of places
    if isinstance(places, bool) or not isinstance(places, int) or places < 0:
        raise ValueError(f"$places must be a non-negative integer, but provided value is: {places!r}")

    quantum = Decimal(1).scaleb(-places)
    return value.quantize(quantum, rounding=_decimal_rounding(value, mode), context=EXACT_CONTEXT)
