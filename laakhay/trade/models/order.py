"""Exchange order data model.

Exchange order payloads use snake_case keys and encode integers, UUIDs and
timestamps as strings. ``Order.from_exchange`` runs them through the tolerant
record decoder; the model itself holds native types only.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar
from uuid import UUID

from pydantic import Field

from ..decoding import FieldKind, RecordDecoder, WireField
from .base import WireModel

NIL_UUID = UUID(int=0)


class Order(WireModel):
    """Trading order."""

    omit_if_empty: ClassVar[frozenset[str]] = frozenset(
        {
            "approved_at",
            "delivered_to_customer_at",
            "delivered_to_carrier_at",
            "delivery_estimated_at",
            "purchase_at",
        }
    )

    order_id: UUID = NIL_UUID
    customer_id: int = Field(0, ge=-(2**63), le=2**63 - 1)
    status: str = ""
    approved_at: datetime | None = None
    delivered_to_customer_at: datetime | None = None
    delivered_to_carrier_at: datetime | None = None
    delivery_estimated_at: datetime | None = None
    purchase_at: datetime | None = None

    @classmethod
    def from_exchange(cls, payload: dict[str, Any]) -> Order:
        """Build an order from a decoded exchange payload.

        Raises:
            FormatError: If any field cannot be coerced
        """
        return ORDER_DECODER.decode(payload)

    @classmethod
    def from_exchange_json(cls, data: str | bytes) -> Order:
        """Build an order from a raw exchange JSON document."""
        return ORDER_DECODER.decode_json(data)


ORDER_DECODER = RecordDecoder(
    Order,
    [
        WireField("order_id", "order_id", FieldKind.UUID),
        WireField("customer_id", "customer_id", FieldKind.INT64),
        WireField("order_status", "status"),
        WireField("order_approved_at", "approved_at", FieldKind.DATETIME),
        WireField("order_delivered_customer_date", "delivered_to_customer_at", FieldKind.DATETIME),
        WireField("order_delivered_carrier_date", "delivered_to_carrier_at", FieldKind.DATETIME),
        WireField("order_estimated_delivery_date", "delivery_estimated_at", FieldKind.DATETIME),
        WireField("order_purchase_timestamp", "purchase_at", FieldKind.DATETIME),
    ],
)
