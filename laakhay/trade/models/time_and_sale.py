"""Time-and-sale and order book data models.

TimeAndSale is the atomic unit of market data: a single executed trade with
its price, volume, aggressor side and timing.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import ConfigDict, Field, RootModel

from ..core.enums import AggressorSide
from .base import CollectionMixin, WireModel


class Sale(WireModel):
    """Core trade data: price, direction and volume."""

    price: Decimal
    aggressor_side: AggressorSide = AggressorSide.NONE
    volume: int = Field(0, ge=0)  # Contracts/shares


class TimeAndSale(WireModel):
    """Single trade captured from an exchange."""

    internal_id: UUID | None = None
    id: str  # Exchange transaction/trade id
    exchange_id: int = 0
    data_feed_provider_id: int = 0

    trade_sequence: int = 0  # Orders trades sharing a timestamp
    trade_open_interest: int = 0

    ticker: str = Field(..., min_length=1)  # e.g. "BTCUSDT", "ES", "NQ"
    time: datetime
    sale: Sale

    @property
    def price(self) -> Decimal:
        return self.sale.price

    @property
    def aggressor_side(self) -> AggressorSide:
        return self.sale.aggressor_side

    @property
    def volume(self) -> int:
        return self.sale.volume

    @property
    def notional(self) -> Decimal:
        """Price times volume."""
        return self.sale.price * self.sale.volume


class DataFeedProvider(WireModel):
    """Data feed source."""

    id: int
    name: str
    urn: str


class Exchange(WireModel):
    """Trading venue."""

    id: int
    name: str


class OrderBookEntry(WireModel):
    """Top-of-book snapshot."""

    ticker: str
    exchange_id: int = 0
    time: datetime
    best_bid: Sale
    best_ask: Sale

    @property
    def spread(self) -> Decimal:
        """Best ask price minus best bid price."""
        return self.best_ask.price - self.best_bid.price

    @property
    def mid_price(self) -> Decimal:
        return (self.best_ask.price + self.best_bid.price) / 2


class OrderBook(CollectionMixin, RootModel[list[OrderBookEntry]]):
    """Sequence of order book snapshots."""

    root: list[OrderBookEntry] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def for_ticker(self, ticker: str) -> OrderBook:
        return OrderBook([e for e in self.root if e.ticker == ticker])

    @property
    def latest(self) -> OrderBookEntry | None:
        """Most recent snapshot by time."""
        if not self.root:
            return None
        return max(self.root, key=lambda e: e.time)
