"""Candle (OHLC) data model with market microstructure extensions.

Architecture:
    Candle extends plain OHLC with ask/bid quotes, per-price clusters,
    delta/volume level extremes and a price snake (sequence of traded prices).
    Derived metrics are read-only properties computed from the stored fields.

Design Decisions:
    - Decimal for prices: spread and range are exact differences
    - Empty-valued fields are omitted from JSON output
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from typing import ClassVar

from pydantic import Field

from .base import WireModel
from .price_clusters import PriceClusters


class AskBid(WireModel):
    """Ask and bid counts."""

    ask: int = 0
    bid: int = 0

    @property
    def total(self) -> int:
        return self.ask + self.bid


class AskBidPrice(WireModel):
    """Aggregated trade details at one price within a candle."""

    price: Decimal
    ask_bid: AskBid = Field(default_factory=AskBid)
    duration: timedelta = timedelta(0)  # Time delta between trades
    trades_count: int = Field(0, ge=0)


class Temperatures(WireModel):
    """Ask/bid counts with timing data."""

    ask_bid: AskBid = Field(default_factory=AskBid)
    time_duration_ms: int = 0
    trades_count: int = 0


class CandleDeltaLevels(WireModel):
    """Min/max delta values and their price levels within a candle."""

    omit_if_empty: ClassVar[frozenset[str]] = frozenset(
        {"min_delta_value", "min_delta_price", "max_delta_value", "max_delta_price"}
    )

    min_delta_value: Decimal = Decimal(0)
    min_delta_price: Decimal = Decimal(0)
    max_delta_value: Decimal = Decimal(0)
    max_delta_price: Decimal = Decimal(0)


class Candle(WireModel):
    """OHLC candlestick."""

    omit_if_empty: ClassVar[frozenset[str]] = frozenset(
        {
            "empty",
            "time_open",
            "time_close",
            "open",
            "high",
            "low",
            "close",
            "ask",
            "bid",
            "trades_count",
            "price_clusters",
            "delta_levels",
            "volume_levels",
            "price_snake",
        }
    )

    empty: bool = False

    time_open: datetime | None = None
    time_close: datetime | None = None

    open: Decimal = Decimal(0)
    high: Decimal = Decimal(0)
    low: Decimal = Decimal(0)
    close: Decimal = Decimal(0)
    ask: Decimal = Decimal(0)
    bid: Decimal = Decimal(0)

    trades_count: int = Field(0, ge=0)
    # Keyed by price level rendered as text
    price_clusters: dict[str, PriceClusters] = Field(default_factory=dict)

    delta_levels: CandleDeltaLevels | None = None
    volume_levels: CandleDeltaLevels | None = None

    price_snake: list[Decimal] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True if the candle carries no data."""
        return self.empty

    @property
    def spread(self) -> Decimal:
        """Ask minus bid."""
        return self.ask - self.bid

    @property
    def range(self) -> Decimal:
        """High minus low."""
        return self.high - self.low

    @property
    def duration(self) -> timedelta:
        """Time between open and close; zero when either bound is unset."""
        if self.time_open is None or self.time_close is None:
            return timedelta(0)
        return self.time_close - self.time_open

    @property
    def is_bullish(self) -> bool:
        return self.close > self.open

    @property
    def is_bearish(self) -> bool:
        return self.close < self.open

    @property
    def body(self) -> Decimal:
        """Absolute open-to-close move."""
        return abs(self.close - self.open)
