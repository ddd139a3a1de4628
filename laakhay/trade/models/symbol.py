"""Trading symbol data model.

Symbols form a tree through ``parent_id``, grouping derived assets under the
asset they track::

    USD  (id:1,  parent:0, fiat)
    ├── USDT  (id:2, parent:1, crypto)   stablecoin pegged to USD
    ├── USDC  (id:3, parent:1, crypto)   stablecoin pegged to USD
    ├── EUR   (id:4, parent:1, fiat)
    └── GBP   (id:5, parent:1, fiat)
    BTC  (id:14, parent:0, crypto)
    ├── BTCFT  (id:22, parent:14, crypto) BTC futures token
    └── BTCM24 (id:23, parent:14, crypto) BTC June 2024 future

The tree is never materialized. Symbols holds the flat table and answers
structural queries by scanning it, so records never reference each other.
Lookups return the first match in table order.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import ConfigDict, Field, RootModel

from ..core.enums import SymbolType
from .base import CollectionMixin, WireModel


class Symbol(WireModel):
    """Market symbol (e.g. BTC, USDT, EUR)."""

    omit_if_empty: ClassVar[frozenset[str]] = frozenset({"parent_id", "description", "website"})

    id: int = Field(..., ge=0)
    type: SymbolType
    parent_id: int = Field(0, ge=0)  # 0 = root
    code: str
    name: str
    description: str = ""
    website: str = ""

    @property
    def is_root(self) -> bool:
        """True when the symbol has no parent."""
        return self.parent_id == 0

    @property
    def is_fiat(self) -> bool:
        return self.type == SymbolType.FIAT

    @property
    def is_crypto(self) -> bool:
        return self.type == SymbolType.CRYPTO


class Symbols(CollectionMixin, RootModel[list[Symbol]]):
    """Ordered symbol table with hierarchy queries.

    All queries are linear scans that preserve table order. Duplicate codes
    or ids are not rejected; the first occurrence wins.
    """

    root: list[Symbol] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_by_code(self, code: str) -> Symbol | None:
        """First symbol whose code equals ``code`` (case-sensitive)."""
        for symbol in self.root:
            if symbol.code == code:
                return symbol
        return None

    def get_by_id(self, symbol_id: int) -> Symbol | None:
        """First symbol with the given id."""
        for symbol in self.root:
            if symbol.id == symbol_id:
                return symbol
        return None

    def children(self, parent_id: int) -> Symbols:
        """Symbols whose parent is ``parent_id``, in table order."""
        return Symbols([s for s in self.root if s.parent_id == parent_id])

    def roots(self) -> Symbols:
        """Top-level symbols."""
        return self.children(0)

    def fiats(self) -> Symbols:
        return Symbols([s for s in self.root if s.is_fiat])

    def cryptos(self) -> Symbols:
        return Symbols([s for s in self.root if s.is_crypto])

    @property
    def codes(self) -> list[str]:
        return [s.code for s in self.root]
