"""
x402 Auto-Pay App - MCP tool server entry point.

FastAPI application serving the MCP tools over streamable HTTP at /mcp,
plus a service banner at /.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException

from autopay.core.config import Settings, settings
from autopay.core.errors import general_exception_handler, http_exception_handler
from autopay.services.payment_provider import PaymentProvider, get_payment_provider
from autopay.services.payment_store import PaymentStore
from autopay.services.x402_client import X402ServerClient
from autopay.tools.server import SERVER_NAME, create_mcp_server

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format=settings.log_format,
)
logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    store: PaymentStore | None = None,
    provider: PaymentProvider | None = None,
    x402_client: X402ServerClient | None = None,
) -> FastAPI:
    """
    Create the tool server application.

    Args:
        app_settings: Settings to use (module settings when omitted)
        store: Optional payment store to share with the tools
        provider: Optional payment provider
        x402_client: Optional resource server client

    Returns:
        FastAPI app with the MCP endpoint mounted
    """
    app_settings = app_settings or settings
    provider = provider or get_payment_provider(app_settings)
    x402_client = x402_client or X402ServerClient.from_settings(app_settings)
    mcp = create_mcp_server(
        settings=app_settings,
        store=store,
        provider=provider,
        x402_client=x402_client,
    )
    mcp_app = mcp.http_app(path="/mcp")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler for startup and shutdown events.
        """
        logger.info(f"Starting {SERVER_NAME} tool server v{app_settings.app_version}")
        logger.info(f"x402 server: {app_settings.x402_server_base_url} "
                    f"(timeout {app_settings.x402_server_timeout_ms}ms)")

        async with mcp_app.lifespan(app):
            yield

        logger.info("Shutting down...")
        await x402_client.close()
        close_provider = getattr(provider, "close", None)
        if close_provider is not None:
            await close_provider()

    app = FastAPI(
        title=SERVER_NAME,
        description="MCP tool server for the x402 payment dashboard and auto-pay records.",
        version=app_settings.app_version,
        lifespan=lifespan,
    )

    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)

    @app.get("/", tags=["Root"], summary="Service banner")
    async def root() -> dict[str, Any]:
        return {"status": "ok", "service": SERVER_NAME}

    # Mounted last so "/" above wins; the MCP app serves /mcp.
    app.mount("/", mcp_app)

    app.state.mcp = mcp
    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(
        "autopay.tool_server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
