"""
Pytest configuration and shared fixtures.

This module provides settings factories, payment stores, providers and
a resource server client wired to an in-process HTTP transport.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import httpx
import pytest

from autopay.core.config import Settings
from autopay.core.errors import PaymentProviderError
from autopay.services.payment_provider import MockPaymentProvider, PaymentProvider
from autopay.services.payment_store import InMemoryPaymentStore
from autopay.services.x402_client import X402ServerClient

TEST_EVM_ADDRESS = "0x209693Bc6afc0C5328bA36FaF03C514EF312287C"
TEST_FACILITATOR_URL = "https://x402.org/facilitator"
TEST_X402_BASE_URL = "http://x402.test"


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings that ignore any local .env file."""
    def _make(**overrides) -> Settings:
        values = {"evm_address": None, "facilitator_url": None}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def configured_settings(make_settings) -> Settings:
    """Settings with a complete paywall configuration."""
    return make_settings(evm_address=TEST_EVM_ADDRESS, facilitator_url=TEST_FACILITATOR_URL)


@pytest.fixture
def store() -> InMemoryPaymentStore:
    """Create an empty payment store."""
    return InMemoryPaymentStore()


@pytest.fixture
def mock_provider() -> MockPaymentProvider:
    """Create a provider that accepts every payment."""
    return MockPaymentProvider()


@pytest.fixture
def failing_provider() -> PaymentProvider:
    """Create a provider whose every call fails."""
    provider = AsyncMock(spec=PaymentProvider)
    provider.create_payment.side_effect = PaymentProviderError("Payment provider returned HTTP 502")
    return provider


@pytest.fixture
def fixed_clock():
    """A clock that advances one second per call, starting at a fixed instant."""
    start = datetime(2026, 1, 15, 10, 30, 0, tzinfo=timezone.utc)
    calls = {"count": 0}

    def _now() -> datetime:
        value = start + timedelta(seconds=calls["count"])
        calls["count"] += 1
        return value

    return _now


@pytest.fixture
def x402_transport_handler():
    """Default resource server stub: healthy, and weather behind a 402."""
    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/health":
            return httpx.Response(200, json={"status": "ok", "missing": {"evmAddress": False, "facilitatorUrl": False}})
        if request.url.path == "/weather":
            return httpx.Response(402, json={"x402Version": 2, "error": "Payment required"})
        return httpx.Response(404, json={"detail": "Not Found"})

    return _handler


@pytest.fixture
def x402_client(x402_transport_handler) -> X402ServerClient:
    """Resource server client backed by an in-process transport."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(x402_transport_handler))
    return X402ServerClient(TEST_X402_BASE_URL, timeout_ms=1000, client=http_client)


@pytest.fixture
def sample_auto_pay_args():
    """Sample auto_pay tool arguments."""
    return {
        "amountCents": 1250,
        "currency": "usd",
        "description": "Weather API credits",
        "customerId": "cus_123",
    }
