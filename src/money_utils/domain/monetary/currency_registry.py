from money_utils.domain.monetary.currency import CurrencyConfig, CurrencyType, SymbolPosition


# Fiat currencies
USD = CurrencyConfig("USD", "United States Dollar", "$")
EUR = CurrencyConfig("EUR", "Euro", "€")
GBP = CurrencyConfig("GBP", "British Pound", "£")
JPY = CurrencyConfig("JPY", "Japanese Yen", "¥")

# Crypto currencies
BTC = CurrencyConfig("BTC", "Bitcoin", "₿", SymbolPosition.PREFIX, decimals=8, minor_units=100_000_000, currency_type=CurrencyType.CRYPTO)
ETH = CurrencyConfig("ETH", "Ethereum", "Ξ", SymbolPosition.PREFIX, decimals=18, minor_units=10**18, currency_type=CurrencyType.CRYPTO)

FIAT_CURRENCIES: tuple[CurrencyConfig, ...] = (USD, EUR, GBP, JPY)
CRYPTO_CURRENCIES: tuple[CurrencyConfig, ...] = (BTC, ETH)

# Seeded into every registry created without an explicit currency list
DEFAULT_CURRENCIES: tuple[CurrencyConfig, ...] = FIAT_CURRENCIES + CRYPTO_CURRENCIES
