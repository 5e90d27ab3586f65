"""
Models package.

This package contains the payment record model for the auto-pay tools.
"""

from autopay.models.payments import PaymentRecord, ProviderPayment, format_iso_timestamp

__all__ = [
    "PaymentRecord",
    "ProviderPayment",
    "format_iso_timestamp",
]
