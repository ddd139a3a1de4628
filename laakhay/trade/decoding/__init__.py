"""Tolerant decoders for loosely typed exchange payloads."""

from .records import FieldKind, RecordDecoder, WireField
from .scalars import UUID, DateTime, parse_datetime, parse_uuid

__all__ = [
    "DateTime",
    "UUID",
    "FieldKind",
    "RecordDecoder",
    "WireField",
    "parse_datetime",
    "parse_uuid",
]
