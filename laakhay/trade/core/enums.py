"""Core enumerations shared by every record type.

Architecture:
    Symbol and trade side values are integer enums because they travel as
    integers on the wire. Instrument and currency classifications are string
    enums, matching the textual values found in reference data and exchange
    payloads.

Key Types:
    - SymbolType: Fiat vs crypto symbols
    - AggressorSide: Which party initiated a trade
    - InstrumentType: Spot, future, option, fx
    - CurrencyKind: Fiat vs crypto reference currencies
"""

from enum import Enum, IntEnum


class SymbolType(IntEnum):
    """Classifies a trading symbol as fiat or cryptocurrency."""

    FIAT = 0  # USD, EUR, GBP, ...
    CRYPTO = 1  # BTC, ETH, SOL, ...

    def __str__(self) -> str:
        """Human-readable label."""
        return self.name.lower()


class AggressorSide(IntEnum):
    """Indicates which side initiated a trade."""

    NONE = 0  # No side determined
    SELL = 1  # Seller initiated
    BUY = 2  # Buyer initiated
    UNKNOWN = 3  # Side could not be determined

    def __str__(self) -> str:
        """Human-readable label."""
        return self.name.lower()


class InstrumentType(str, Enum):
    """Tradable instrument classes."""

    SPOT = "spot"
    FUTURE = "future"
    OPTION = "option"
    FX = "fx"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class CurrencyKind(str, Enum):
    """Reference currency classification."""

    FIAT = "fiat"
    CRYPTO = "crypto"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value
