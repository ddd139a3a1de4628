"""Unit tests for Instrument and Market."""

import json

from laakhay.trade.core import InstrumentType
from laakhay.trade.models import Instrument, Market


def test_market_str():
    """Test BASE/QUOTE rendering."""
    assert str(Market(from_symbol="BTC", to_symbol="USDT")) == "BTC/USDT"


def test_market_json_keys():
    """Test market wire keys."""
    market = Market(id=3, from_symbol="ETH", to_symbol="USD", title="Ether")
    assert json.loads(market.to_json()) == {
        "id": 3,
        "fromSymbol": "ETH",
        "toSymbol": "USD",
        "title": "Ether",
    }


def test_instrument_round_trip():
    """Test Instrument round trip omits unset references."""
    instrument = Instrument(id=1, type=InstrumentType.FUTURE, ticker="ES", name="E-mini S&P 500")
    data = json.loads(instrument.to_json())
    assert data == {"id": 1, "type": "future", "ticker": "ES", "name": "E-mini S&P 500"}
    assert Instrument.from_json(instrument.to_json()) == instrument


def test_instrument_accepts_wire_keys():
    """Test camelCase input."""
    instrument = Instrument.from_json(
        '{"id": 2, "type": "spot", "ticker": "BTCUSDT", "name": "Bitcoin/Tether", '
        '"exchangeId": 4, "dataFeedProviderId": 9}'
    )
    assert instrument.exchange_id == 4
    assert instrument.data_feed_provider_id == 9
    assert instrument.type is InstrumentType.SPOT
