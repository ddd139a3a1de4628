"""Core components."""

from .enums import AggressorSide, CurrencyKind, InstrumentType, SymbolType
from .exceptions import FormatError, ReferenceDataLoadError, TradeError

__all__ = [
    "AggressorSide",
    "CurrencyKind",
    "InstrumentType",
    "SymbolType",
    "TradeError",
    "FormatError",
    "ReferenceDataLoadError",
]
