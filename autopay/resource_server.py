"""
x402 weather resource server entry point.

FastAPI application serving a fixed weather report behind the x402
paywall. Missing paywall configuration does not stop the server: /health
reports it and /weather answers 503 until it is fixed.
"""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse

from autopay.core.config import Settings, settings
from autopay.core.errors import general_exception_handler, http_exception_handler
from autopay.x402.paywall import install_paywall

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format=settings.log_format,
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "x402-weather-server"

WEATHER_REPORT = {
    "weather": "sunny",
    "temperature": 70,
}


def create_app(
    app_settings: Settings | None = None,
    paywall: Callable[[FastAPI, Settings], None] = install_paywall,
) -> FastAPI:
    """
    Create the resource server application.

    Args:
        app_settings: Settings to use (module settings when omitted)
        paywall: Installs the payment middleware when configuration is complete

    Returns:
        FastAPI application
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=SERVICE_NAME,
        description="Weather data paid per request with x402.",
        version=app_settings.app_version,
    )

    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)

    if app_settings.paywall_configured:
        paywall(app, app_settings)
    else:
        logger.warning(
            f"x402 paywall disabled, missing configuration: {app_settings.missing_payment_config}"
        )

    @app.get("/", tags=["Root"], summary="Service banner")
    async def root() -> dict[str, Any]:
        return {"status": "ok", "service": SERVICE_NAME}

    @app.get("/health", tags=["Health"], summary="Health check")
    async def health_check() -> dict[str, Any]:
        """
        Check service health.

        Reports which paywall settings are missing.
        """
        return {"status": "ok", "missing": app_settings.missing_payment_config}

    @app.get("/weather", tags=["Weather"], summary="Paid weather report")
    async def get_weather() -> Any:
        """Return the weather report. Payment is enforced by the x402 middleware."""
        if not app_settings.paywall_configured:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={
                    "status": "error",
                    "message": "x402 payment is not configured: set EVM_ADDRESS and FACILITATOR_URL",
                    "missing": app_settings.missing_payment_config,
                },
            )
        return {"report": dict(WEATHER_REPORT)}

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(
        "autopay.resource_server:app",
        host=settings.host,
        port=settings.resource_server_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
