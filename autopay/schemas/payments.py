"""
Auto-pay tool schemas.

This module defines the Pydantic schemas for tool inputs and the
downstream resource server response shape.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AutoPayRequest(BaseModel):
    """Schema for an auto-pay request."""
    model_config = ConfigDict(populate_by_name=True)

    amount_cents: int = Field(..., gt=0, alias="amountCents", description="Amount in minor currency units")
    currency: str = Field(..., min_length=3, max_length=3, description="Three-letter currency code")
    description: str = Field(..., min_length=1, description="What the payment is for")
    customer_id: str | None = Field(None, alias="customerId", description="Optional customer reference")


class X402ServerResponse(BaseModel):
    """Schema for a call to the x402 resource server."""
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = Field(..., description="Whether the response status was 2xx")
    status_code: int = Field(..., alias="statusCode", description="HTTP status, 0 when unreachable")
    body: Any = Field(None, description="Parsed JSON body, or null when not JSON")

    def to_wire(self) -> dict[str, Any]:
        """Convert to the camelCase dictionary returned by the tools."""
        return {
            "ok": self.ok,
            "statusCode": self.status_code,
            "body": self.body,
        }
