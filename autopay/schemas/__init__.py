"""Pydantic schemas for tool inputs and downstream responses."""

from autopay.schemas.payments import AutoPayRequest, X402ServerResponse

__all__ = ["AutoPayRequest", "X402ServerResponse"]
