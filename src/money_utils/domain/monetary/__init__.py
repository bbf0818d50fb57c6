"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including currency configs, the currency registry, and Money calculations
with exact decimal arithmetic.
"""
