"""Laakhay Trade - Exchange-agnostic market data model."""

from .core import (
    AggressorSide,
    CurrencyKind,
    FormatError,
    InstrumentType,
    ReferenceDataLoadError,
    SymbolType,
    TradeError,
)
from .currency import (
    Currencies,
    Currency,
    CurrencyProvider,
    Unit,
    Units,
    get_reference_data,
    load_reference_data,
)
from .decoding import UUID, DateTime, FieldKind, RecordDecoder, WireField
from .models import (
    AskBid,
    AskBidPrice,
    Candle,
    CandleDeltaLevels,
    DataFeedProvider,
    Exchange,
    Instrument,
    Market,
    Order,
    OrderBook,
    OrderBookEntry,
    PriceClusters,
    Sale,
    Symbol,
    Symbols,
    Temperatures,
    TimeAndSale,
)

__version__ = "0.1.0"

__all__ = [
    # Core enums
    "AggressorSide",
    "CurrencyKind",
    "InstrumentType",
    "SymbolType",
    # Models
    "AskBid",
    "AskBidPrice",
    "Candle",
    "CandleDeltaLevels",
    "DataFeedProvider",
    "Exchange",
    "Instrument",
    "Market",
    "Order",
    "OrderBook",
    "OrderBookEntry",
    "PriceClusters",
    "Sale",
    "Symbol",
    "Symbols",
    "Temperatures",
    "TimeAndSale",
    # Decoding
    "DateTime",
    "UUID",
    "FieldKind",
    "RecordDecoder",
    "WireField",
    # Reference data
    "Currencies",
    "Currency",
    "CurrencyProvider",
    "Unit",
    "Units",
    "get_reference_data",
    "load_reference_data",
    # Exceptions
    "TradeError",
    "FormatError",
    "ReferenceDataLoadError",
]
