from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import Lock, RLock
from typing import overload

from money_utils.domain.monetary import currency_registry
from money_utils.domain.monetary.currency import CurrencyConfig
from money_utils.errors import CurrencyNotFoundError, InvalidCurrencyConfigError

logger = logging.getLogger(__name__)


def _validate_currency_config(config: CurrencyConfig) -> None:
    # Raise: only CurrencyConfig instances can be registered
    if not isinstance(config, CurrencyConfig):
        raise InvalidCurrencyConfigError(f"Invalid currency configuration: expected CurrencyConfig, but provided value is: {config!r}")

    # Raise: $code, $symbol and $name identify and render the currency
    for field_name in ("code", "symbol", "name"):
        value = getattr(config, field_name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidCurrencyConfigError(f"Invalid currency configuration: ${field_name} must be a non-empty string, but provided value is: '{value}'")


class CurrencyRegistry:
    """Mapping from currency code to `CurrencyConfig`.

    A registry is seeded with the default currency set (USD, EUR, GBP, JPY, BTC, ETH)
    unless an explicit list is given. All operations take an internal re-entrant lock,
    so each call is atomic. Sequences of calls that must be consistent still need
    external coordination.

    Examples:
        >>> registry = CurrencyRegistry()
        >>> registry.get_currency("USD").symbol
        '$'
        >>> registry.get_currency("XYZ") is None
        True
    """

    def __init__(self, currencies: Iterable[CurrencyConfig] | None = None):
        """Initialize a registry.

        Args:
            currencies: Configs to seed with. If None, the default currency set is used.

        Raises:
            InvalidCurrencyConfigError: If a supplied config misses its code, symbol or name.
        """
        self._lock = RLock()
        self._currencies: dict[str, CurrencyConfig] = {}
        self.initialize(currencies)

    @overload
    def register(self, currency: CurrencyConfig) -> CurrencyConfig: ...

    @overload
    def register(self, currency: list[CurrencyConfig]) -> list[CurrencyConfig]: ...

    def register(self, currency):
        """Register one config or a list of configs, overwriting entries with the same code.

        Each config is validated right before it is stored; when a list contains an invalid
        config, configs before it stay registered.

        Args:
            currency: A config or a list of configs.

        Returns:
            The registered config(s), as passed in.

        Raises:
            InvalidCurrencyConfigError: If a config misses its code, symbol or name.
        """
        configs = currency if isinstance(currency, (list, tuple)) else [currency]
        with self._lock:
            for config in configs:
                _validate_currency_config(config)
                self._currencies[config.code] = config
                logger.debug(f"CurrencyRegistry registered currency with $code '{config.code}'")
        return currency

    def unregister(self, currency: CurrencyConfig | list[CurrencyConfig]) -> None:
        """Remove one config or a list of configs by code. Unknown codes are ignored."""
        configs = currency if isinstance(currency, (list, tuple)) else [currency]
        with self._lock:
            for config in configs:
                if self._currencies.pop(config.code, None) is not None:
                    logger.debug(f"CurrencyRegistry unregistered currency with $code '{config.code}'")

    def get_currency(self, code: str) -> CurrencyConfig | None:
        """Return the config registered under $code, or None. Never raises."""
        if not isinstance(code, str):
            return None
        with self._lock:
            return self._currencies.get(code)

    def require_currency(self, code: str) -> CurrencyConfig:
        """Return the config registered under $code.

        Raises:
            CurrencyNotFoundError: If $code is not registered.
        """
        config = self.get_currency(code)
        if config is None:
            raise CurrencyNotFoundError(code)
        return config

    @property
    def currencies(self) -> list[CurrencyConfig]:
        """All registered configs, in registration order."""
        with self._lock:
            return list(self._currencies.values())

    def initialize(self, currencies: Iterable[CurrencyConfig] | None = None) -> None:
        """Clear all entries, then register $currencies or the default currency set.

        Args:
            currencies: Configs to register after clearing. If None, the default set is used.

        Raises:
            InvalidCurrencyConfigError: If a config misses its code, symbol or name. The
                registry is left unchanged.
        """
        configs = list(currency_registry.DEFAULT_CURRENCIES if currencies is None else currencies)
        # Raise: every config is validated before the registry is cleared
        for config in configs:
            _validate_currency_config(config)

        with self._lock:
            self._currencies.clear()
            self.register(configs)
        logger.info(f"CurrencyRegistry initialized with {len(configs)} currencies: {[c.code for c in configs]}")

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._currencies

    def __len__(self) -> int:
        with self._lock:
            return len(self._currencies)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({[c.code for c in self.currencies]})"


_default_registry: CurrencyRegistry | None = None
_default_registry_lock = Lock()


def get_default_registry() -> CurrencyRegistry:
    """Return the process-wide registry, creating it with the default currency set on first use."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = CurrencyRegistry()
        return _default_registry


class Currency:
    """Class-level access to the process-wide `CurrencyRegistry`.

    The named accessors (`Currency.USD`, `Currency.EUR`, ...) are the default configs
    themselves, so they are valid before and after the registry is seeded.

    Examples:
        >>> Currency.get_currency("EUR").symbol
        '€'
        >>> Currency.BTC.is_crypto
        True
    """

    USD = currency_registry.USD
    EUR = currency_registry.EUR
    GBP = currency_registry.GBP
    JPY = currency_registry.JPY
    BTC = currency_registry.BTC
    ETH = currency_registry.ETH

    @classmethod
    def register(cls, currency):
        """Register config(s) in the process-wide registry. See `CurrencyRegistry.register`."""
        return get_default_registry().register(currency)

    @classmethod
    def unregister(cls, currency: CurrencyConfig | list[CurrencyConfig]) -> None:
        """Remove config(s) from the process-wide registry. See `CurrencyRegistry.unregister`."""
        get_default_registry().unregister(currency)

    @classmethod
    def get_currency(cls, code: str) -> CurrencyConfig | None:
        """Look up $code in the process-wide registry; None when absent."""
        return get_default_registry().get_currency(code)

    @classmethod
    def currencies(cls) -> list[CurrencyConfig]:
        """All configs in the process-wide registry."""
        return get_default_registry().currencies

    @classmethod
    def initialize(cls, currencies: Iterable[CurrencyConfig] | None = None) -> None:
        """Reset the process-wide registry to $currencies or the default set."""
        get_default_registry().initialize(currencies)

    @classmethod
    def from_str(cls, code: str) -> CurrencyConfig:
        """Get currency from the process-wide registry by code.

        Args:
            code (str): Currency code to look up; surrounding whitespace is ignored.

        Returns:
            CurrencyConfig: The registered config.

        Raises:
            TypeError: If $code is not a string.
            CurrencyNotFoundError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")
        return get_default_registry().require_currency(code.strip())
