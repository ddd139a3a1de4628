"""Instrument and market pair data models."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from ..core.enums import InstrumentType
from .base import WireModel


class Instrument(WireModel):
    """Tradable instrument (e.g. BTCUSDT, ES futures, EUR/USD)."""

    omit_if_empty: ClassVar[frozenset[str]] = frozenset(
        {"description", "exchange_id", "data_feed_provider_id"}
    )

    id: int
    type: InstrumentType
    ticker: str = Field(..., min_length=1)
    name: str
    description: str | None = None
    exchange_id: int = 0
    data_feed_provider_id: int = 0


class Market(WireModel):
    """Trading pair of a base and a quote symbol."""

    omit_if_empty: ClassVar[frozenset[str]] = frozenset({"description"})

    id: int = 0
    from_symbol: str  # Base (e.g. BTC)
    to_symbol: str  # Quote (e.g. USDT)
    title: str = ""
    description: str | None = None

    def __str__(self) -> str:
        return f"{self.from_symbol}/{self.to_symbol}"
