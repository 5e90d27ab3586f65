"""
Payment provider clients.

The auto-pay tool delegates the actual charge to a payment provider.
HttpPaymentProvider talks to a remote provider API; MockPaymentProvider
is used in development when no provider URL is configured.
"""

import json
import logging
from abc import ABC, abstractmethod
from uuid import uuid4

import httpx

from autopay.core.config import Settings
from autopay.core.errors import PaymentProviderError
from autopay.models.payments import ProviderPayment
from autopay.schemas.payments import AutoPayRequest

logger = logging.getLogger(__name__)


class PaymentProvider(ABC):
    """Interface for a payment settlement backend."""

    @abstractmethod
    async def create_payment(self, request: AutoPayRequest) -> ProviderPayment:
        """
        Charge the payment described by the request.

        Args:
            request: Validated auto-pay request

        Returns:
            ProviderPayment with the provider-reported status

        Raises:
            PaymentProviderError: If the provider call fails
        """


class MockPaymentProvider(PaymentProvider):
    """Provider that accepts every payment without contacting anything."""

    name = "mock"

    async def create_payment(self, request: AutoPayRequest) -> ProviderPayment:
        logger.info(
            f"Mock provider accepting payment: {request.amount_cents} {request.currency.upper()}"
        )
        return ProviderPayment(
            status="succeeded",
            provider=self.name,
            external_id=f"mock_{uuid4().hex}",
        )


class HttpPaymentProvider(PaymentProvider):
    """Provider reached over HTTP at ``{base_url}/payments``."""

    def __init__(
        self,
        base_url: str,
        provider_name: str,
        timeout_ms: int,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the HTTP payment provider.

        Args:
            base_url: Provider API base URL
            provider_name: Name reported when the provider omits one
            timeout_ms: Request timeout in milliseconds
            client: Optional preconfigured HTTP client
        """
        self.base_url = base_url.rstrip("/")
        self.provider_name = provider_name
        self.client = client or httpx.AsyncClient(timeout=timeout_ms / 1000)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def create_payment(self, request: AutoPayRequest) -> ProviderPayment:
        payload = {
            "amountCents": request.amount_cents,
            "currency": request.currency.upper(),
            "description": request.description,
            "customerId": request.customer_id,
        }

        try:
            response = await self.client.post(
                f"{self.base_url}/payments",
                json=payload,
                headers={"Accept": "application/json"},
            )
        except httpx.TimeoutException as e:
            logger.error(f"Payment provider timeout: {e}")
            raise PaymentProviderError("Payment provider timed out", details={"detail": str(e)}) from e
        except httpx.RequestError as e:
            logger.error(f"Payment provider request error: {e}")
            raise PaymentProviderError("Payment provider unreachable", details={"detail": str(e)}) from e

        if not response.is_success:
            logger.error(f"Payment provider HTTP error: {response.status_code} - {response.text[:200]}")
            raise PaymentProviderError(
                f"Payment provider returned HTTP {response.status_code}",
                details={"status_code": response.status_code},
            )

        try:
            data = response.json()
        except json.JSONDecodeError as e:
            raise PaymentProviderError("Payment provider returned invalid JSON") from e

        if not isinstance(data, dict) or not data.get("status"):
            raise PaymentProviderError(
                "Payment provider response is missing a status",
                details={"body": data},
            )

        external_id = data.get("externalId") or data.get("id")
        return ProviderPayment(
            status=str(data["status"]),
            provider=str(data.get("provider") or self.provider_name),
            external_id=str(external_id) if external_id is not None else None,
        )


def get_payment_provider(settings: Settings) -> PaymentProvider:
    """
    Pick the payment provider for the given settings.

    Args:
        settings: Application settings

    Returns:
        HttpPaymentProvider when a provider URL is configured, otherwise MockPaymentProvider
    """
    if settings.payment_provider_url:
        return HttpPaymentProvider(
            base_url=settings.payment_provider_url,
            provider_name=settings.payment_provider_name,
            timeout_ms=settings.payment_provider_timeout_ms,
        )

    logger.info("No PAYMENT_PROVIDER_URL configured, using mock payment provider")
    return MockPaymentProvider()
