"""Declarative decoding of exchange key-value payloads into typed records.

Architecture:
    A RecordDecoder is built from a model class and a table of WireField
    entries. Each entry maps a snake_case payload key to a model field and
    names the coercion rule applied to the raw value before the model is
    validated. Keys without an entry are ignored.

Coercion Rules:
    - INT64: strings are parsed as base-10 integers in the signed 64-bit range
    - UINT8: numeric values in 0..255 are widened to int
    - UUID: strings are parsed as UUIDs
    - DATETIME: empty strings mean no value, other strings use the fixed layout
    - PASSTHROUGH: the value is handed to the model unchanged

    Values whose source type does not match the rule (e.g. an integer for an
    INT64 field) pass through and are left to model validation.

Error Handling:
    The first failing field aborts the whole decode with a FormatError naming
    the field and raw value. No partially populated record is ever returned.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import FormatError
from .scalars import parse_datetime, parse_uuid

logger = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")

ModelT = TypeVar("ModelT", bound=BaseModel)


class FieldKind(str, Enum):
    """Coercion rule applied to a payload value."""

    PASSTHROUGH = "passthrough"
    INT64 = "int64"
    UINT8 = "uint8"
    UUID = "uuid"
    DATETIME = "datetime"


def _coerce_int64(field: str, raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    if not _DECIMAL_PATTERN.fullmatch(raw):
        raise FormatError(f"{field}: invalid integer {raw!r}", field=field, value=raw)
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise FormatError(f"{field}: integer out of range {raw!r}", field=field, value=raw)
    return value


def _coerce_uint8(field: str, raw: Any) -> Any:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return raw
    if isinstance(raw, float) and not raw.is_integer():
        raise FormatError(f"{field}: expected an integer, got {raw!r}", field=field, value=raw)
    if not 0 <= raw <= 255:
        raise FormatError(f"{field}: uint8 out of range {raw!r}", field=field, value=raw)
    return int(raw)


def _coerce_uuid(field: str, raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    return parse_uuid(raw, field)


def _coerce_datetime(field: str, raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    if raw == "":
        return None
    return parse_datetime(raw, field)


_COERCERS: dict[FieldKind, Callable[[str, Any], Any]] = {
    FieldKind.PASSTHROUGH: lambda field, raw: raw,
    FieldKind.INT64: _coerce_int64,
    FieldKind.UINT8: _coerce_uint8,
    FieldKind.UUID: _coerce_uuid,
    FieldKind.DATETIME: _coerce_datetime,
}


@dataclass(frozen=True)
class WireField:
    """Maps one payload key onto a model field."""

    key: str
    name: str
    kind: FieldKind = FieldKind.PASSTHROUGH


class RecordDecoder(Generic[ModelT]):
    """Decodes exchange payloads into a single record type."""

    def __init__(self, model: type[ModelT], fields: Sequence[WireField]) -> None:
        unknown = [f.name for f in fields if f.name not in model.model_fields]
        if unknown:
            raise ValueError(f"{model.__name__} has no fields {unknown}")
        self.model = model
        self._fields = {f.key: f for f in fields}
        self._keys_by_name = {f.name: f.key for f in fields}
        self._names_by_alias = {
            info.alias: name for name, info in model.model_fields.items() if info.alias
        }

    @property
    def fields(self) -> list[WireField]:
        return list(self._fields.values())

    def decode(self, payload: Mapping[str, Any]) -> ModelT:
        """Coerce payload values and build the record.

        Args:
            payload: Decoded JSON object with exchange field names

        Returns:
            Fully populated record

        Raises:
            FormatError: If any field fails coercion or model validation
        """
        values: dict[str, Any] = {}
        for key, raw in payload.items():
            wire = self._fields.get(key)
            if wire is None:
                continue
            try:
                values[wire.name] = _COERCERS[wire.kind](key, raw)
            except FormatError:
                logger.debug(
                    "Record decode failed",
                    extra={"record": self.model.__name__, "field": key},
                )
                raise

        try:
            return self.model.model_validate(values)
        except PydanticValidationError as exc:
            raise self._translate(exc, payload) from exc

    def decode_json(self, data: bytes | str) -> ModelT:
        """Decode a raw JSON object."""
        try:
            payload = json.loads(data)
        except ValueError as exc:
            raise FormatError(f"invalid JSON payload: {exc}", value=data) from exc
        if not isinstance(payload, dict):
            raise FormatError(
                f"expected a JSON object, got {type(payload).__name__}", value=payload
            )
        return self.decode(payload)

    def _translate(
        self, exc: PydanticValidationError, payload: Mapping[str, Any]
    ) -> FormatError:
        error = exc.errors()[0]
        loc = str(error["loc"][0]) if error["loc"] else ""
        name = self._names_by_alias.get(loc, loc)
        key = self._keys_by_name.get(name, name)
        value = payload.get(key)
        logger.debug(
            "Record validation failed",
            extra={"record": self.model.__name__, "field": key},
        )
        return FormatError(f"{key}: {error['msg']} (got {value!r})", field=key, value=value)
