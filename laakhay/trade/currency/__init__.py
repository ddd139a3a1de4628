"""Embedded fiat and cryptocurrency reference data."""

from .provider import (
    Currencies,
    Currency,
    CurrencyProvider,
    Unit,
    Units,
    get_reference_data,
    load_reference_data,
)

__all__ = [
    "Currencies",
    "Currency",
    "CurrencyProvider",
    "Unit",
    "Units",
    "get_reference_data",
    "load_reference_data",
]
