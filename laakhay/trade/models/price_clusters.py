"""Price cluster data model."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from pydantic import Field

from .base import WireModel


class PriceClusters(WireModel):
    """Volume and time distribution at a single price level."""

    omit_if_empty: ClassVar[frozenset[str]] = frozenset({"ask", "bid", "duration", "trades"})

    ask: Decimal = Field(Decimal(0), ge=0)  # Volume at the ask
    bid: Decimal = Field(Decimal(0), ge=0)  # Volume at the bid
    duration: Decimal = Field(Decimal(0), ge=0, alias="durationMilli")  # Time at this level (ms)
    trades: int = Field(0, ge=0)

    @property
    def volume(self) -> Decimal:
        """Total volume traded at the level."""
        return self.ask + self.bid

    @property
    def delta(self) -> Decimal:
        """Ask volume minus bid volume."""
        return self.ask - self.bid
