"""Monetary domain package.

This package contains the currency descriptor and registry, the Money value type with
currency-safe arithmetic and allocation, exchange rates, and the errors they raise.
"""
