"""Shared base classes for wire-serializable records.

Architecture:
    Records are frozen Pydantic v2 models. JSON keys are camelCase on the wire
    while Python code uses snake_case field names; both are accepted on input.
    Fields listed in ``omit_if_empty`` are dropped from serialized output when
    their value is empty (None, zero, empty string or empty collection).
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (BaseModel, datetime)):
        return False
    return not value


class WireModel(BaseModel):
    """Immutable record with camelCase JSON keys."""

    omit_if_empty: ClassVar[frozenset[str]] = frozenset()

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        for name in self.omit_if_empty:
            if not _is_empty(getattr(self, name)):
                continue
            data.pop(name, None)
            alias = fields[name].alias
            if alias:
                data.pop(alias, None)
        return data

    def to_json(self) -> str:
        """Serialize with wire (camelCase) keys."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """Parse a JSON document produced by ``to_json`` or an exchange."""
        return cls.model_validate_json(data)


class CollectionMixin:
    """Sequence behaviour for list-rooted models."""

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return type(self)(self.root[index])
        return self.root[index]

    def __bool__(self) -> bool:
        return bool(self.root)

    @property
    def is_empty(self) -> bool:
        return not self.root

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)  # type: ignore[attr-defined]

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        return cls.model_validate_json(data)  # type: ignore[attr-defined]
