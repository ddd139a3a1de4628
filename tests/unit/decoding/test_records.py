"""Unit tests for the declarative record decoder."""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import BaseModel

from laakhay.trade.core import FormatError
from laakhay.trade.decoding import FieldKind, RecordDecoder, WireField
from laakhay.trade.models.base import WireModel


class Fill(BaseModel):
    fill_id: UUID | None = None
    quantity: int = 0
    level: int = 0
    venue: str = ""
    filled_at: datetime | None = None


DECODER = RecordDecoder(
    Fill,
    [
        WireField("fill_id", "fill_id", FieldKind.UUID),
        WireField("qty", "quantity", FieldKind.INT64),
        WireField("book_level", "level", FieldKind.UINT8),
        WireField("exchange", "venue"),
        WireField("filled_at", "filled_at", FieldKind.DATETIME),
    ],
)


def test_decode_coerces_each_kind():
    """Test every coercion rule on a single payload."""
    fill = DECODER.decode(
        {
            "fill_id": "550e8400-e29b-41d4-a716-446655440000",
            "qty": "-12",
            "book_level": 3,
            "exchange": "CME",
            "filled_at": "2025-06-15 14:30:00",
        }
    )
    assert fill.fill_id == UUID("550e8400-e29b-41d4-a716-446655440000")
    assert fill.quantity == -12
    assert fill.level == 3
    assert fill.venue == "CME"
    assert fill.filled_at == datetime(2025, 6, 15, 14, 30, tzinfo=UTC)


def test_decode_ignores_unknown_keys():
    """Test keys without a wire field are dropped."""
    fill = DECODER.decode({"qty": "5", "extra": "ignored"})
    assert fill.quantity == 5


@pytest.mark.parametrize("raw", ["", " 5", "5.0", "1_000", "0x10", "9223372036854775808"])
def test_int64_rejects_non_decimal_text(raw):
    """Test strict base-10 parsing in the int64 range."""
    with pytest.raises(FormatError) as exc_info:
        DECODER.decode({"qty": raw})
    assert exc_info.value.field == "qty"
    assert exc_info.value.value == raw


def test_int64_bounds():
    """Test int64 extremes decode."""
    assert DECODER.decode({"qty": "9223372036854775807"}).quantity == 2**63 - 1
    assert DECODER.decode({"qty": "-9223372036854775808"}).quantity == -(2**63)
    assert DECODER.decode({"qty": "+7"}).quantity == 7


def test_uint8_widening():
    """Test numeric uint8 values widen to int."""
    assert DECODER.decode({"book_level": 255}).level == 255
    assert DECODER.decode({"book_level": 4.0}).level == 4


@pytest.mark.parametrize("raw", [256, -1, 2.5])
def test_uint8_out_of_range(raw):
    """Test uint8 range is enforced."""
    with pytest.raises(FormatError) as exc_info:
        DECODER.decode({"book_level": raw})
    assert exc_info.value.field == "book_level"


def test_empty_datetime_is_absent():
    """Test empty timestamp string decodes to None."""
    assert DECODER.decode({"filled_at": ""}).filled_at is None


def test_validation_failure_names_wire_key():
    """Test model validation errors are reported as FormatError."""
    with pytest.raises(FormatError) as exc_info:
        DECODER.decode({"exchange": ["not", "a", "string"]})
    assert exc_info.value.field == "exchange"
    assert exc_info.value.value == ["not", "a", "string"]


def test_decode_json_errors():
    """Test invalid documents."""
    with pytest.raises(FormatError):
        DECODER.decode_json("{not json")
    with pytest.raises(FormatError):
        DECODER.decode_json("[1, 2]")
    assert DECODER.decode_json('{"qty": "8"}').quantity == 8


def test_unknown_model_field_rejected():
    """Test decoder construction checks field names."""
    with pytest.raises(ValueError):
        RecordDecoder(Fill, [WireField("x", "missing")])


def test_fields_listing():
    """Test configured fields are exposed in order."""
    assert [f.key for f in DECODER.fields] == ["fill_id", "qty", "book_level", "exchange", "filled_at"]


class Quote(WireModel):
    best_price: Decimal
    venue_name: str = ""
    quoted_at: datetime | None = None


QUOTE_DECODER = RecordDecoder(
    Quote,
    [
        WireField("best_px", "best_price"),
        WireField("venue_name", "venue_name"),
        WireField("quote_time", "quoted_at", FieldKind.DATETIME),
    ],
)


def test_aliased_model_decodes():
    """Test camelCase-aliased models decode from snake_case wire keys."""
    quote = QUOTE_DECODER.decode({"best_px": "101.25", "venue_name": "CME"})
    assert quote.best_price == Decimal("101.25")
    assert quote.venue_name == "CME"


def test_aliased_model_missing_key_names_wire_key():
    """Test a missing required field is reported against its wire key, not the alias."""
    with pytest.raises(FormatError) as exc_info:
        QUOTE_DECODER.decode({"venue_name": "CME"})
    assert exc_info.value.field == "best_px"
    assert exc_info.value.value is None


@pytest.mark.parametrize(
    ("key", "raw"),
    [
        ("best_px", "cheap"),
        ("venue_name", ["CME"]),
        ("quote_time", "2025-06-15T14:30:00"),
    ],
)
def test_aliased_model_bad_value_names_wire_key(key, raw):
    """Test bad values on an aliased model carry the wire key and raw value."""
    with pytest.raises(FormatError) as exc_info:
        QUOTE_DECODER.decode({"best_px": "1", key: raw})
    assert exc_info.value.field == key
    assert exc_info.value.value == raw
