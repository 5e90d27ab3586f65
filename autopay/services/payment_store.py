"""
Payment record store.

Holds every payment record created during the process lifetime. The
in-memory store never evicts and is lost on restart; the abstract base
lets a persistent backend be swapped in.
"""

import logging
from abc import ABC, abstractmethod

from autopay.core.errors import DuplicateIdentifierError
from autopay.models.payments import PaymentRecord

logger = logging.getLogger(__name__)


class PaymentStore(ABC):
    """Interface for payment record storage."""

    @abstractmethod
    def put(self, record: PaymentRecord) -> None:
        """
        Insert a record under its id.

        Raises:
            DuplicateIdentifierError: If the id is already stored
        """

    @abstractmethod
    def get(self, payment_id: str) -> PaymentRecord | None:
        """Return the record for an id, or None if unknown."""

    @abstractmethod
    def list(self) -> list[PaymentRecord]:
        """Return all records, most recent first."""


class InMemoryPaymentStore(PaymentStore):
    """Process-lifetime payment store backed by a dict."""

    def __init__(self):
        self._records: dict[str, PaymentRecord] = {}

    def put(self, record: PaymentRecord) -> None:
        # No await between the check and the insert; safe on one event loop.
        if record.id in self._records:
            raise DuplicateIdentifierError(
                f"Payment {record.id} already exists",
                details={"payment_id": record.id},
            )
        self._records[record.id] = record
        logger.debug(f"Stored payment {record.id}")

    def get(self, payment_id: str) -> PaymentRecord | None:
        return self._records.get(payment_id)

    def list(self) -> list[PaymentRecord]:
        # Reverse insertion order first so equal timestamps list the newest insert first.
        return sorted(
            reversed(list(self._records.values())),
            key=lambda record: record.created_at,
            reverse=True,
        )

    def __len__(self) -> int:
        return len(self._records)
