"""
Services package.

This package contains the payment record store and service, the payment
provider clients, and the x402 resource server client.
"""

from autopay.services.payment_provider import (
    HttpPaymentProvider,
    MockPaymentProvider,
    PaymentProvider,
    get_payment_provider,
)
from autopay.services.payment_service import PaymentRecordService
from autopay.services.payment_store import InMemoryPaymentStore, PaymentStore
from autopay.services.x402_client import X402ServerClient

__all__ = [
    "HttpPaymentProvider",
    "InMemoryPaymentStore",
    "MockPaymentProvider",
    "PaymentProvider",
    "PaymentRecordService",
    "PaymentStore",
    "X402ServerClient",
    "get_payment_provider",
]
