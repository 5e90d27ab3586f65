"""
Payment models.

This module defines the payment record created by the auto-pay tool and
the provider result it is built from.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def format_iso_timestamp(value: datetime) -> str:
    """Format a datetime as a UTC ISO-8601 string with millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ProviderPayment:
    """Result of a successful payment provider call."""
    status: str
    provider: str
    external_id: str | None = None


class PaymentRecord(BaseModel):
    """Payment record for a completed auto-pay call."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    amount_cents: int = Field(..., gt=0, alias="amountCents")
    currency: str = Field(..., min_length=3, max_length=3)
    description: str
    status: str
    created_at: datetime = Field(..., alias="createdAtIso")
    provider: str
    external_id: str | None = Field(default=None, alias="externalId")
    customer_id: str | None = Field(default=None, alias="customerId")

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return format_iso_timestamp(value)

    @property
    def created_at_iso(self) -> str:
        return format_iso_timestamp(self.created_at)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with the camelCase field names used by the tools."""
        return self.model_dump(by_alias=True, mode="json")

    def __repr__(self) -> str:
        return f"<PaymentRecord(id={self.id}, amount_cents={self.amount_cents}, status='{self.status}')>"
