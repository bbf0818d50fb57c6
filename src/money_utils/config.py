"""Library-wide defaults for `money_utils`.

Settings are loaded lazily from environment variables the first time they are needed
and can be overridden at runtime with `configure`. Values already constructed keep the
settings they were created with.

Environment variables:
    MONEY_UTILS_DEFAULT_ROUNDING_MODE: Name of a `RoundingMode` (e.g. "ROUND_HALF_UP" or "HALF_UP").
    MONEY_UTILS_DIVISION_PRECISION: Significant digits kept by `Money.divide`.
    MONEY_UTILS_DEFAULT_LOCALE: Locale used by `Money.to_locale_string` when none is given.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from threading import Lock

from money_utils.domain.monetary.rounding import RoundingMode

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PLACES = 2
DEFAULT_DECIMAL_SEPARATOR = "."
DEFAULT_THOUSANDS_SEPARATOR = ","
DEFAULT_MINOR_UNITS = 100


@dataclass(frozen=True)
class MoneySettings:
    """Process-wide defaults used when a `Money` is constructed."""

    default_rounding_mode: RoundingMode = RoundingMode.ROUND_HALF_EVEN
    division_precision: int = 34
    default_locale: str = "en_US"

    def __post_init__(self) -> None:
        # Raise: rounding mode must be a RoundingMode member
        if not isinstance(self.default_rounding_mode, RoundingMode):
            raise TypeError(f"$default_rounding_mode must be a RoundingMode, but provided value is: {self.default_rounding_mode!r}")

        # Raise: division needs at least one significant digit
        if isinstance(self.division_precision, bool) or not isinstance(self.division_precision, int) or self.division_precision < 1:
            raise ValueError(f"$division_precision must be a positive integer, but provided value is: {self.division_precision!r}")

        # Raise: locale must be a non-empty identifier
        if not isinstance(self.default_locale, str) or not self.default_locale.strip():
            raise ValueError(f"$default_locale must be a non-empty string, but provided value is: '{self.default_locale}'")

    @classmethod
    def from_environment(cls) -> MoneySettings:
        """Create settings from `MONEY_UTILS_*` environment variables, falling back to defaults."""
        defaults = cls()

        rounding_name = os.getenv("MONEY_UTILS_DEFAULT_ROUNDING_MODE")
        precision_text = os.getenv("MONEY_UTILS_DIVISION_PRECISION")

        return cls(
            default_rounding_mode=RoundingMode.from_str(rounding_name) if rounding_name else defaults.default_rounding_mode,
            division_precision=int(precision_text) if precision_text else defaults.division_precision,
            default_locale=os.getenv("MONEY_UTILS_DEFAULT_LOCALE", defaults.default_locale),
        )


_settings: MoneySettings | None = None
_settings_lock = Lock()


def get_settings() -> MoneySettings:
    """Return the process-wide settings, loading them from the environment on first use."""
    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = MoneySettings.from_environment()
        return _settings


def configure(**overrides) -> MoneySettings:
    """Override selected settings for the rest of the process.

    Args:
        **overrides: Field values of `MoneySettings` (e.g. `default_rounding_mode=RoundingMode.ROUND_HALF_UP`).

    Returns:
        The new settings.

    Raises:
        TypeError: If an override names an unknown setting.
    """
    known = {f.name for f in fields(MoneySettings)}
    unknown = set(overrides) - known
    # Raise: reject typos instead of silently ignoring them
    if unknown:
        raise TypeError(f"Cannot call `configure` because of unknown settings {sorted(unknown)}. Known settings: {sorted(known)}")

    global _settings
    current = get_settings()
    updated = replace(current, **overrides)
    with _settings_lock:
        _settings = updated
    logger.info(f"money_utils settings updated: {updated}")
    return updated


def reset_settings() -> None:
    """Forget runtime overrides; the next `get_settings` call reloads from the environment."""
    global _settings
    with _settings_lock:
        _settings = None
