"""Fiat and cryptocurrency reference data.

Architecture:
    The reference table is a YAML document with two top-level sequences,
    ``currencies`` and ``units``. It is parsed with ``yaml.safe_load`` and
    validated into frozen models, so a loaded CurrencyProvider is read-only.

    The bundled table is partial: 44 fiat currencies, 22 cryptocurrencies
    and 12 units. Point ``LAAKHAY_TRADE_REFERENCE_DATA`` at a fuller file
    when more coverage is needed.

Design Decisions:
    - Load once: ``get_reference_data`` caches the bundled table for the
      process lifetime
    - All-or-nothing: any parse or validation failure raises
      ReferenceDataLoadError and no partial table is returned
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic import ValidationError as PydanticValidationError

from ..config import REFERENCE_DATA_FILE, get_reference_data_path
from ..core.enums import CurrencyKind
from ..core.exceptions import ReferenceDataLoadError
from ..models.base import CollectionMixin

logger = logging.getLogger(__name__)


class Currency(BaseModel):
    """Single fiat or cryptocurrency."""

    id: str
    code: str = Field(..., min_length=1)
    description: str
    kind: CurrencyKind
    country: str | None = None

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @property
    def is_fiat(self) -> bool:
        return self.kind == CurrencyKind.FIAT

    @property
    def is_crypto(self) -> bool:
        return self.kind == CurrencyKind.CRYPTO


class Unit(BaseModel):
    """Measurement unit (mass, volume, energy, ...)."""

    id: str
    name: str
    description: str
    type: str

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class Currencies(CollectionMixin, RootModel[list[Currency]]):
    """Currency list with lookup and filter helpers."""

    root: list[Currency] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get(self, code: str) -> Currency | None:
        """Currency with the given code (e.g. "BTC", "USD"), or None."""
        for currency in self.root:
            if currency.code == code:
                return currency
        return None

    def fiats(self) -> Currencies:
        return Currencies([c for c in self.root if c.is_fiat])

    def cryptos(self) -> Currencies:
        return Currencies([c for c in self.root if c.is_crypto])


class Units(CollectionMixin, RootModel[list[Unit]]):
    """Measurement unit list."""

    root: list[Unit] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def of_type(self, unit_type: str) -> Units:
        return Units([u for u in self.root if u.type == unit_type])


class CurrencyProvider(BaseModel):
    """Complete currency and unit reference data."""

    currencies: Currencies = Field(default_factory=Currencies)
    units: Units = Field(default_factory=Units)

    model_config = ConfigDict(frozen=True)


def _read_source(path: Path | None) -> tuple[str, str]:
    if path is not None:
        return path.read_text(encoding="utf-8"), str(path)
    resource = resources.files(__package__).joinpath(REFERENCE_DATA_FILE)
    return resource.read_text(encoding="utf-8"), f"{__package__}/{REFERENCE_DATA_FILE}"


def load_reference_data(path: str | Path | None = None) -> CurrencyProvider:
    """Load and validate a reference data document.

    Args:
        path: Optional YAML file; defaults to the ``LAAKHAY_TRADE_REFERENCE_DATA``
            override, then to the bundled table

    Returns:
        Fully populated CurrencyProvider

    Raises:
        ReferenceDataLoadError: If the file cannot be read, parsed or validated
    """
    source_path = Path(path) if path is not None else get_reference_data_path()
    source = str(source_path) if source_path is not None else REFERENCE_DATA_FILE
    try:
        text, source = _read_source(source_path)
        document = yaml.safe_load(text)
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ReferenceDataLoadError(
                f"Reference data must be a mapping, got {type(document).__name__}",
                source=source,
            )
        provider = CurrencyProvider.model_validate(
            {
                "currencies": document.get("currencies") or [],
                "units": document.get("units") or [],
            }
        )
    except ReferenceDataLoadError:
        logger.error("Reference data load failed", extra={"source": source})
        raise
    except (OSError, yaml.YAMLError, PydanticValidationError) as exc:
        logger.error(
            "Reference data load failed",
            extra={"source": source, "error": str(exc)},
        )
        raise ReferenceDataLoadError(
            f"Failed to load reference data from {source}: {exc}", source=source
        ) from exc

    logger.debug(
        "Reference data loaded",
        extra={
            "source": source,
            "currencies": len(provider.currencies),
            "units": len(provider.units),
        },
    )
    return provider


@lru_cache(maxsize=1)
def get_reference_data() -> CurrencyProvider:
    """Process-wide reference table, loaded on first use."""
    return load_reference_data()
