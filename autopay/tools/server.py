"""
MCP tool server.

Registers the agent-facing tools on a FastMCP instance. Each tool is a
thin wrapper: it validates input, calls a service, and returns the
result both as JSON text and as structured content.

Tools:
    - open_x402_dashboard: Open the payment dashboard, returns a session id
    - x402_get_health / x402_get_weather: Call the x402 resource server
    - auto_pay: Pay through the payment provider and record the payment
    - list_payments / get_payment: Read recorded payments
"""

import json
import logging
from typing import Annotated, Any
from uuid import uuid4

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field, ValidationError

from autopay.core.config import Settings, get_settings
from autopay.core.errors import AutoPayError
from autopay.schemas.payments import AutoPayRequest
from autopay.services.payment_provider import PaymentProvider, get_payment_provider
from autopay.services.payment_service import PaymentRecordService
from autopay.services.payment_store import InMemoryPaymentStore, PaymentStore
from autopay.services.x402_client import X402ServerClient

logger = logging.getLogger(__name__)

SERVER_NAME = "x402-auto-pay-app"
DASHBOARD_RESOURCE_URI = "ui://x402/payment-dashboard"


def _log_request(tool_name: str, **params: Any) -> None:
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{tool_name} called with: {param_str}")


def _json_result(tool_name: str, payload: dict[str, Any]) -> ToolResult:
    """Return a payload as both JSON text and structured content."""
    text = json.dumps(payload, separators=(",", ":"))
    logger.info(f"{tool_name} response: {text}")
    return ToolResult(
        content=[TextContent(type="text", text=text)],
        structured_content=payload,
    )


def create_mcp_server(
    settings: Settings | None = None,
    store: PaymentStore | None = None,
    provider: PaymentProvider | None = None,
    x402_client: X402ServerClient | None = None,
) -> FastMCP:
    """
    Build the MCP server with all tools registered.

    Args:
        settings: Application settings (cached settings when omitted)
        store: Payment store (fresh in-memory store when omitted)
        provider: Payment provider (chosen from settings when omitted)
        x402_client: Resource server client (built from settings when omitted)

    Returns:
        Configured FastMCP server
    """
    settings = settings or get_settings()
    payment_service = PaymentRecordService(
        store=store if store is not None else InMemoryPaymentStore(),
        provider=provider or get_payment_provider(settings),
    )
    x402_client = x402_client or X402ServerClient.from_settings(settings)

    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(
        name="open_x402_dashboard",
        description="Open the dashboard showing x402 server status and weather.",
        annotations={"title": "Open x402 Payment Dashboard"},
        meta={
            "ui": {
                "resourceUri": DASHBOARD_RESOURCE_URI,
                "csp": {
                    "default-src": ["'self'"],
                    "script-src": ["'self'", "https://esm.sh"],
                    "style-src": ["'self'", "'unsafe-inline'"],
                },
            },
        },
    )
    async def open_x402_dashboard(sessionId: str | None = None) -> ToolResult:  # noqa: N803
        _log_request("open_x402_dashboard", sessionId=sessionId)
        payload = {"sessionId": sessionId or str(uuid4())}
        return ToolResult(
            content=[TextContent(type="text", text="x402 dashboard opened")],
            structured_content=payload,
        )

    @mcp.tool(
        name="x402_get_health",
        description="Get the health status of the x402 resource server.",
        annotations={"title": "x402 Get Health", "readOnlyHint": True},
    )
    async def x402_get_health() -> ToolResult:
        _log_request("x402_get_health")
        response = await x402_client.get_health()
        return _json_result("x402_get_health", response.to_wire())

    @mcp.tool(
        name="x402_get_weather",
        description="Get the weather report from the x402 resource server.",
        annotations={"title": "x402 Get Weather", "readOnlyHint": True},
    )
    async def x402_get_weather() -> ToolResult:
        _log_request("x402_get_weather")
        response = await x402_client.get_weather()
        return _json_result("x402_get_weather", response.to_wire())

    @mcp.tool(
        name="auto_pay",
        description=(
            "Pay an amount through the payment provider and record it. "
            "Every call creates a new payment record."
        ),
        annotations={"title": "Auto Pay", "idempotentHint": False},
    )
    async def auto_pay(
        amountCents: Annotated[int, Field(gt=0, description="Amount in minor currency units")],  # noqa: N803
        currency: Annotated[str, Field(min_length=3, max_length=3, description="Three-letter currency code")],
        description: Annotated[str, Field(min_length=1, description="What the payment is for")],
        customerId: Annotated[str | None, Field(description="Optional customer reference")] = None,  # noqa: N803
    ) -> ToolResult:
        _log_request(
            "auto_pay",
            amountCents=amountCents,
            currency=currency,
            description=description,
            customerId=customerId,
        )
        try:
            request = AutoPayRequest(
                amount_cents=amountCents,
                currency=currency,
                description=description,
                customer_id=customerId,
            )
        except ValidationError as e:
            raise ToolError(f"Invalid auto_pay input: {e}") from e

        try:
            record = await payment_service.auto_pay(request)
        except AutoPayError as e:
            logger.error(f"auto_pay failed: {e.message}")
            raise ToolError(e.message) from e

        return _json_result("auto_pay", {"payment": record.to_wire()})

    @mcp.tool(
        name="list_payments",
        description="List recorded payments, most recent first.",
        annotations={"title": "List Payments", "readOnlyHint": True},
    )
    async def list_payments() -> ToolResult:
        _log_request("list_payments")
        return _json_result("list_payments", payment_service.list_payments())

    @mcp.tool(
        name="get_payment",
        description="Get a recorded payment by id. Returns a null payment when unknown.",
        annotations={"title": "Get Payment", "readOnlyHint": True},
    )
    async def get_payment(
        paymentId: Annotated[str, Field(description="Payment id returned by auto_pay")],  # noqa: N803
    ) -> ToolResult:
        _log_request("get_payment", paymentId=paymentId)
        return _json_result("get_payment", payment_service.get_payment(paymentId))

    return mcp
