"""
Payment record service.

This service runs the auto-pay flow (provider call, then a single store
insert) and answers the listing and lookup tools.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from autopay.models.payments import PaymentRecord
from autopay.schemas.payments import AutoPayRequest
from autopay.services.payment_provider import PaymentProvider
from autopay.services.payment_store import PaymentStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_payment_id() -> str:
    return str(uuid4())


class PaymentRecordService:
    """Service for creating and reading payment records."""

    def __init__(
        self,
        store: PaymentStore,
        provider: PaymentProvider,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_payment_id,
    ):
        """
        Initialize the payment record service.

        Args:
            store: Where records are kept
            provider: Payment provider that performs the charge
            clock: Source of creation timestamps
            id_factory: Source of fresh record identifiers
        """
        self.store = store
        self.provider = provider
        self.clock = clock
        self.id_factory = id_factory

    async def auto_pay(self, request: AutoPayRequest) -> PaymentRecord:
        """
        Pay through the provider and record the result.

        Provider failures propagate and leave the store untouched.

        Args:
            request: Validated auto-pay request

        Returns:
            The newly stored PaymentRecord
        """
        logger.info(
            f"Starting auto-pay: {request.amount_cents} {request.currency.upper()} - {request.description}"
        )

        result = await self.provider.create_payment(request)

        record = PaymentRecord(
            id=self.id_factory(),
            amount_cents=request.amount_cents,
            currency=request.currency.upper(),
            description=request.description,
            status=result.status,
            created_at=self.clock(),
            provider=result.provider,
            external_id=result.external_id,
            customer_id=request.customer_id,
        )
        self.store.put(record)

        logger.info(f"Recorded payment {record.id} ({record.status} via {record.provider})")
        return record

    def list_payments(self) -> dict[str, Any]:
        """Get all payments, most recent first."""
        return {"payments": [record.to_wire() for record in self.store.list()]}

    def get_payment(self, payment_id: str) -> dict[str, Any]:
        """Get a payment by id; unknown ids map to a null payment."""
        record = self.store.get(payment_id)
        return {"payment": record.to_wire() if record else None}
