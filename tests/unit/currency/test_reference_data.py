"""Unit tests for currency reference data loading."""

import pytest

from laakhay.trade.config import REFERENCE_DATA_ENV
from laakhay.trade.core import CurrencyKind, ReferenceDataLoadError
from laakhay.trade.currency import (
    Currencies,
    Currency,
    get_reference_data,
    load_reference_data,
)


@pytest.fixture(autouse=True)
def _no_override(monkeypatch):
    monkeypatch.delenv(REFERENCE_DATA_ENV, raising=False)


def test_bundled_table_loads():
    """Test bundled currencies and units are present."""
    provider = load_reference_data()
    assert len(provider.currencies) > 0
    assert len(provider.units) > 0


def test_get_currency():
    """Test lookup by code."""
    currencies = load_reference_data().currencies
    btc = currencies.get("BTC")
    assert btc is not None
    assert btc.description == "Bitcoin"
    assert btc.is_crypto
    usd = currencies.get("USD")
    assert usd is not None
    assert usd.is_fiat
    assert usd.country == "United States"
    assert currencies.get("ZZZZZ") is None


def test_fiats_and_cryptos():
    """Test kind filters partition the table."""
    currencies = load_reference_data().currencies
    fiats = currencies.fiats()
    cryptos = currencies.cryptos()
    assert len(fiats) > 0 and len(cryptos) > 0
    assert all(c.kind is CurrencyKind.FIAT for c in fiats)
    assert all(c.kind is CurrencyKind.CRYPTO for c in cryptos)
    assert len(fiats) + len(cryptos) == len(currencies)


def test_units_filter():
    """Test unit type filter."""
    units = load_reference_data().units
    mass = units.of_type("mass")
    assert len(mass) > 0
    assert all(u.type == "mass" for u in mass)


def test_get_reference_data_is_cached():
    """Test the process-wide table is loaded once."""
    assert get_reference_data() is get_reference_data()


def test_load_from_path(tmp_path):
    """Test loading an explicit file."""
    path = tmp_path / "ref.yml"
    path.write_text(
        "currencies:\n"
        "  - {id: 1, code: XAU, description: Gold, kind: fiat}\n"
        "units:\n"
        "  - {id: u1, name: ozt, description: Troy ounce, type: mass}\n"
    )
    provider = load_reference_data(path)
    gold = provider.currencies.get("XAU")
    assert gold == Currency(id="1", code="XAU", description="Gold", kind=CurrencyKind.FIAT)
    assert gold.country is None
    assert provider.units[0].name == "ozt"


def test_load_from_environment(monkeypatch, tmp_path):
    """Test the environment override."""
    path = tmp_path / "env.yml"
    path.write_text("currencies: []\nunits: []\n")
    monkeypatch.setenv(REFERENCE_DATA_ENV, str(path))
    provider = load_reference_data()
    assert provider.currencies == Currencies()


@pytest.mark.parametrize(
    "content",
    [
        "currencies: [unclosed\n",
        "- just\n- a list\n",
        "currencies:\n  - {id: 1, code: ABC, description: x, kind: metal}\n",
        "currencies:\n  - {id: 1, description: missing code, kind: fiat}\n",
    ],
)
def test_malformed_document(tmp_path, content):
    """Test malformed documents raise ReferenceDataLoadError."""
    path = tmp_path / "bad.yml"
    path.write_text(content)
    with pytest.raises(ReferenceDataLoadError) as exc_info:
        load_reference_data(path)
    assert exc_info.value.source == str(path)


def test_missing_file(tmp_path):
    """Test unreadable file raises ReferenceDataLoadError."""
    with pytest.raises(ReferenceDataLoadError):
        load_reference_data(tmp_path / "absent.yml")


def test_bundled_table_row_counts():
    """Test the bundled table size documented in the provider module."""
    provider = load_reference_data()
    assert len(provider.currencies.fiats()) == 44
    assert len(provider.currencies.cryptos()) == 22
    assert len(provider.units) == 12
