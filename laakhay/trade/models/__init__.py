"""Data models for market data types.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    All models are immutable (frozen=True) and serialize with camelCase keys.

Model Categories:
    - Market Data: TimeAndSale, Sale, Candle, PriceClusters, OrderBook
    - Reference: Symbol, Symbols, Instrument, Market, Exchange, DataFeedProvider
    - Orders: Order
"""

from .candle import AskBid, AskBidPrice, Candle, CandleDeltaLevels, Temperatures
from .instrument import Instrument, Market
from .order import Order
from .price_clusters import PriceClusters
from .symbol import Symbol, Symbols
from .time_and_sale import DataFeedProvider, Exchange, OrderBook, OrderBookEntry, Sale, TimeAndSale

__all__ = [
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
]
